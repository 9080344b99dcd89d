"""Named registries for schemas and constraints.

Both registries are plain insertion-ordered mappings. They are meant to be
filled during setup and only read while validating; nothing is ever removed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

from object_validator.exceptions import (
    DuplicateSchemaError,
    UnknownConstraintError,
    UnknownSchemaError,
)
from object_validator.logging_config import get_logger

Constraint = Callable[..., bool]


class SchemaRegistry:
    """Registry mapping identifiers to schemas.

    A schema is either an object field mapping (for ``validate_object``) or a
    single schema node (for ``validate_array``). Schemas are stored by
    reference and never modified by validation.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._schemas: dict[str, Any] = {}
        self._logger = logger or get_logger(__name__)

    def register(self, identifier: str, schema: Any) -> None:
        """Register a schema under an identifier.

        Args:
            identifier: Unique schema identifier (e.g., "user").
            schema: Field mapping or schema node.

        Raises:
            DuplicateSchemaError: If identifier is already registered.
        """
        if identifier in self._schemas:
            raise DuplicateSchemaError(identifier)
        self._schemas[identifier] = schema
        self._logger.debug("Registered schema %s", identifier)

    def get(self, identifier: str) -> Any:
        """Return the schema registered under identifier.

        Raises:
            UnknownSchemaError: If identifier is not registered.
        """
        try:
            return self._schemas[identifier]
        except KeyError:
            raise UnknownSchemaError(identifier, available=self.list_schemas()) from None

    def resolve(self, identifier_or_schema: Any) -> Any:
        """Look up string identifiers; return anything else unchanged."""
        if isinstance(identifier_or_schema, str):
            return self.get(identifier_or_schema)
        return identifier_or_schema

    def list_schemas(self) -> list[str]:
        """Return registered schema identifiers in registration order."""
        return list(self._schemas.keys())

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)

    def __iter__(self) -> Iterator[str]:
        return iter(self._schemas)


class ConstraintRegistry:
    """Registry mapping identifiers to constraint callables.

    Re-registering an identifier replaces the previous constraint; a warning
    is logged when ``warn_on_override`` is set.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        *,
        warn_on_override: bool = True,
    ) -> None:
        self._constraints: dict[str, Constraint] = {}
        self._logger = logger or get_logger(__name__)
        self._warn_on_override = warn_on_override

    def register(self, identifier: str, constraint: Constraint) -> None:
        """Register (or replace) a constraint."""
        if identifier in self._constraints and self._warn_on_override:
            self._logger.warning(
                "Constraint with identifier %s will be overridden by new constraint",
                identifier,
            )
        self._constraints[identifier] = constraint
        self._logger.debug("Registered constraint %s", identifier)

    def get(self, identifier: str) -> Constraint:
        """Return the constraint registered under identifier.

        Raises:
            UnknownConstraintError: If identifier is not registered.
        """
        try:
            return self._constraints[identifier]
        except KeyError:
            raise UnknownConstraintError(identifier, available=self.list_constraints()) from None

    def list_constraints(self) -> list[str]:
        """Return registered constraint identifiers in registration order."""
        return list(self._constraints.keys())

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._constraints

    def __len__(self) -> int:
        return len(self._constraints)

    def __iter__(self) -> Iterator[str]:
        return iter(self._constraints)
