"""Core recursive validator.

Provides the Validator, which owns a schema registry and a constraint
registry and walks a value alongside its schema, producing a result tree
that mirrors the value.

Usage::

    from object_validator import Validator

    validator = Validator()
    validator.add_constraint("string", lambda value, options=None: isinstance(value, str))
    validator.add_schema("user", {
        "username": {"type": "scalar", "constraints": [["string"]]},
        "tags": {"type": "array", "ref": {"type": "scalar", "constraints": [["string"]]}},
    })

    validator.validate_object({"username": "tim", "tags": ["a", 1]}, "user")
    # {"username": {"string": True}, "tags": [{"string": True}, {"string": False}]}
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from object_validator.exceptions import InvalidSchemaError
from object_validator.logging_config import get_logger
from object_validator.registry import Constraint, ConstraintRegistry, SchemaRegistry
from object_validator.results import Index, PathSegment, ResultTree, format_path
from object_validator.schema.nodes import (
    ArrayNode,
    ObjectNode,
    ScalarNode,
    coerce_constraints,
    coerce_node,
)
from object_validator.settings import Settings, get_settings
from object_validator.values import ValueKind, classify

Path = tuple[PathSegment, ...]
ElementValidator = Callable[[Any, Path], ResultTree]


class Validator:
    """Validates objects, arrays and scalars against registered or inline schemas.

    Structural mismatches are reported as ``False`` inside the result tree.
    Configuration problems (unknown identifiers, invalid node types) raise
    and abort the call.

    Args:
        logger: Logger for registry diagnostics (defaults to the module logger).
        settings: Settings instance (defaults to ``get_settings()``).
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        *,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._logger = logger or get_logger(__name__)
        self.schemas = SchemaRegistry(self._logger)
        self.constraints = ConstraintRegistry(
            self._logger,
            warn_on_override=settings.warn_on_constraint_override,
        )

    # ------------------------------------------------------------------
    # Registry operations
    # ------------------------------------------------------------------

    def add_constraint(self, identifier: str, constraint: Constraint) -> None:
        """Register a constraint, replacing any previous one with the same identifier."""
        self.constraints.register(identifier, constraint)

    def add_constraints(self, constraints: Mapping[str, Constraint]) -> None:
        """Register several constraints at once."""
        for identifier, constraint in constraints.items():
            self.add_constraint(identifier, constraint)

    def add_schema(self, identifier: str, schema: Any) -> None:
        """Register a schema.

        Raises:
            DuplicateSchemaError: If identifier is already registered.
        """
        self.schemas.register(identifier, schema)

    def add_schemas(self, schemas: Mapping[str, Any]) -> None:
        """Register several schemas at once, stopping at the first duplicate."""
        for identifier, schema in schemas.items():
            self.add_schema(identifier, schema)

    def get_schema(self, identifier: str) -> Any:
        """Return a registered schema or raise UnknownSchemaError."""
        return self.schemas.get(identifier)

    def resolve_schema(self, identifier_or_schema: Any) -> Any:
        """Look up string identifiers; return inline schemas unchanged."""
        return self.schemas.resolve(identifier_or_schema)

    def resolve_constraint(self, identifier: str) -> Constraint:
        """Return a registered constraint or raise UnknownConstraintError."""
        return self.constraints.get(identifier)

    def has_schema(self, identifier: str) -> bool:
        return identifier in self.schemas

    def has_constraint(self, identifier: str) -> bool:
        return identifier in self.constraints

    def list_schemas(self) -> list[str]:
        return self.schemas.list_schemas()

    def list_constraints(self) -> list[str]:
        return self.constraints.list_constraints()

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def validate_object(self, value: Any, schema: Any) -> dict[str, Any] | bool:
        """Validate a mapping against an object schema.

        Args:
            value: Value to validate.
            schema: Schema identifier, inline field mapping, or ObjectNode.

        Returns:
            One entry per key of ``value`` plus ``False`` for every declared
            key missing from it, or ``False`` if value is not a mapping.
        """
        return self._validate_object(value, schema, ())

    def validate_array(self, value: Any, schema: Any) -> list[Any] | bool:
        """Validate every element of a sequence against one element schema.

        Args:
            value: Value to validate.
            schema: Schema identifier or element schema node.

        Returns:
            Per-element results in input order, or ``False`` if value is not a sequence.
        """
        return self._validate_array(value, schema, ())

    def validate_scalar(self, value: Any, constraints: Any = None) -> dict[str, bool] | bool:
        """Run constraints against a scalar in declaration order.

        Args:
            value: Value to validate.
            constraints: Sequence of ``[identifier, options?]`` pairs.

        Returns:
            ``{identifier: passed}``, ``True`` when there are no constraints,
            or ``False`` if value is a mapping, sequence or other structured object.
        """
        return self._validate_scalar(value, constraints, ())

    # ------------------------------------------------------------------
    # Recursion
    # ------------------------------------------------------------------

    def _validate_object(self, value: Any, schema: Any, path: Path) -> dict[str, Any] | bool:
        if classify(value) is not ValueKind.RECORD:
            return False

        fields = self._resolve_fields(schema, path)

        result: dict[str, Any] = {}
        consumed: set[Any] = set()
        for key, item in value.items():
            if key not in fields:
                # Unknown field
                result[key] = False
                continue
            item_path = (*path, key)
            validate = self._select(self._resolve_node(fields[key], item_path), item_path)
            result[key] = validate(item, item_path)
            consumed.add(key)

        # Declared but missing fields
        for key in fields:
            if key not in consumed:
                result[key] = False

        return result

    def _validate_array(self, value: Any, schema: Any, path: Path) -> list[Any] | bool:
        if classify(value) is not ValueKind.SEQUENCE:
            return False

        # Chosen once, so an invalid element schema fails even for empty arrays
        validate = self._select(self._resolve_node(schema, path), path)
        return [validate(element, (*path, Index(index))) for index, element in enumerate(value)]

    def _validate_scalar(self, value: Any, constraints: Any, path: Path) -> dict[str, bool] | bool:
        if classify(value).is_structured:
            return False

        specs = coerce_constraints(constraints, _location(path))
        if not specs:
            return True

        result: dict[str, bool] = {}
        for spec in specs:
            constraint = self.constraints.get(spec.identifier)
            result[spec.identifier] = bool(constraint(value, spec.options))
        return result

    # ------------------------------------------------------------------
    # Schema helpers
    # ------------------------------------------------------------------

    def _resolve_fields(self, schema: Any, path: Path) -> Mapping[Any, Any]:
        """Resolve an object schema down to its field mapping, unwrapping ObjectNodes."""
        fields = self.schemas.resolve(schema)
        seen: set[int] = set()
        while isinstance(fields, ObjectNode):
            if id(fields) in seen:
                raise InvalidSchemaError(_location(path), "object reference cycle")
            seen.add(id(fields))
            fields = self.schemas.resolve(fields.ref)
        if not isinstance(fields, Mapping):
            raise InvalidSchemaError(
                _location(path),
                f"object schema must be a mapping of fields, got {type(fields).__name__}",
            )
        return fields

    def _resolve_node(self, schema: Any, path: Path) -> ObjectNode | ArrayNode | ScalarNode:
        return coerce_node(self.schemas.resolve(schema), _location(path))

    def _select(self, node: ObjectNode | ArrayNode | ScalarNode, path: Path) -> ElementValidator:
        """Pick the validator for a node's kind."""
        if isinstance(node, ObjectNode):
            return lambda item, item_path: self._validate_object(item, node.ref, item_path)
        if isinstance(node, ArrayNode):
            return lambda item, item_path: self._validate_array(item, node.ref, item_path)
        if isinstance(node, ScalarNode):
            return lambda item, item_path: self._validate_scalar(item, node.constraints, item_path)
        raise InvalidSchemaError(_location(path), f"unsupported node {type(node).__name__}")


def _location(path: Path) -> str:
    return format_path(path) or "<root>"
