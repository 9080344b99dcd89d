"""Object validator exception hierarchy.

Structural mismatches in validated data are never raised; they show up as
``False`` in the result tree. The exceptions here signal a misconfigured
validator or a malformed schema and abort the whole validation call.

Usage:
    from object_validator.exceptions import ConfigurationError, UnknownSchemaError

    try:
        validator.validate_object(payload, "user")
    except UnknownSchemaError as e:
        logger.error("Schema missing: %s", e.identifier)
"""

from typing import Any


class ObjectValidatorError(Exception):
    """Base exception for all object validator errors."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        self.context = context or {}
        super().__init__(message)


class ConfigurationError(ObjectValidatorError):
    """Errors from validator setup (registries, schemas, constraints)."""

    pass


class SchemaError(ConfigurationError):
    """Errors about registered or inline schemas."""

    pass


class ConstraintError(ConfigurationError):
    """Errors about registered constraints."""

    pass


class DuplicateSchemaError(SchemaError):
    """Raised when a schema identifier is registered twice."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(
            f"Schema {identifier} has already been added.",
            context={"identifier": identifier},
        )


class UnknownSchemaError(SchemaError):
    """Raised when a schema identifier has not been registered."""

    def __init__(self, identifier: str, *, available: list[str] | None = None):
        self.identifier = identifier
        super().__init__(
            f"Schema {identifier} does not exist.",
            context={"identifier": identifier, "available": available or []},
        )


class UnknownConstraintError(ConstraintError):
    """Raised when a constraint identifier has not been registered."""

    def __init__(self, identifier: str, *, available: list[str] | None = None):
        self.identifier = identifier
        super().__init__(
            f"Constraint {identifier} does not exist.",
            context={"identifier": identifier, "available": available or []},
        )


class InvalidSchemaError(SchemaError):
    """Raised when a schema position does not have the expected shape.

    Args:
        location: JSONPath-style position of the offending schema node.
        reason: What is wrong with it.
    """

    def __init__(
        self,
        location: str,
        reason: str,
        *,
        message: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        self.location = location
        self.reason = reason
        super().__init__(
            message or f"Schema at '{location}' is invalid: {reason}",
            context={"location": location, **(context or {})},
        )


class InvalidSchemaTypeError(InvalidSchemaError):
    """Raised when a schema node has a missing or unrecognized ``type`` tag."""

    def __init__(self, location: str, type_tag: Any):
        self.type_tag = type_tag
        super().__init__(
            location,
            "invalid type",
            message=f"Schema at '{location}' has invalid type {type_tag!r}",
            context={"type": type_tag},
        )
