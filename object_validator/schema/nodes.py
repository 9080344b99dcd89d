"""Typed schema nodes.

A schema position is one of three node kinds, tagged by ``type``:

    {"type": "object", "ref": "address"}                  # fields by identifier
    {"type": "object", "ref": {"street": {...}}}          # inline fields
    {"type": "array", "ref": {"type": "scalar", ...}}     # uniform element schema
    {"type": "scalar", "constraints": [["string"], ["max_length", {"max": 5}]]}

Schemas usually arrive as untyped data (Python literals, parsed JSON/YAML).
``coerce_node`` turns such a mapping into the matching pydantic model at the
point of use, so an unrecognized tag is reported where it is actually hit.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal, NamedTuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from object_validator.exceptions import InvalidSchemaError, InvalidSchemaTypeError

# =============================================================================
# MODELS
# =============================================================================


class ConstraintSpec(NamedTuple):
    """One constraint application: registered identifier plus optional options."""

    identifier: str
    options: Any = None


class ObjectNode(BaseModel):
    """Object position.

    Attributes:
        ref: Schema identifier, inline field mapping (any hashable keys), or
            another ObjectNode.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: Literal["object"] = "object"
    ref: Any

    @field_validator("ref")
    @classmethod
    def _check_ref(cls, value: Any) -> Any:
        if isinstance(value, (str, Mapping, ObjectNode)):
            return value
        raise ValueError(f"object ref must be an identifier or a field mapping, got {type(value).__name__}")


class ArrayNode(BaseModel):
    """Array position. ``ref`` is the schema every element is validated against.

    Attributes:
        ref: Schema identifier, untyped node mapping, or node model.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: Literal["array"] = "array"
    ref: Any

    @field_validator("ref")
    @classmethod
    def _check_ref(cls, value: Any) -> Any:
        if isinstance(value, (str, Mapping, ObjectNode, ArrayNode, ScalarNode)):
            return value
        raise ValueError(f"array ref must be an identifier or a schema node, got {type(value).__name__}")


class ScalarNode(BaseModel):
    """Scalar position with an ordered list of constraints."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: Literal["scalar"] = "scalar"
    constraints: list[ConstraintSpec] = Field(default_factory=list)

    @field_validator("constraints", mode="before")
    @classmethod
    def _none_means_empty(cls, value: Any) -> Any:
        return [] if value is None else value


SchemaNode = Annotated[Union[ObjectNode, ArrayNode, ScalarNode], Field(discriminator="type")]

NODE_MODELS: dict[str, type[BaseModel]] = {
    "object": ObjectNode,
    "array": ArrayNode,
    "scalar": ScalarNode,
}

_constraint_list_adapter = TypeAdapter(list[ConstraintSpec])


# =============================================================================
# COERCION
# =============================================================================


def coerce_node(raw: Any, location: str) -> ObjectNode | ArrayNode | ScalarNode:
    """Turn an untyped schema node into its typed model.

    Args:
        raw: Node model or mapping with a ``type`` tag.
        location: Position of the node, used in error messages.

    Returns:
        The typed node (model instances are returned unchanged).

    Raises:
        InvalidSchemaTypeError: If the ``type`` tag is missing or unrecognized.
        InvalidSchemaError: If the tag is valid but the rest of the node is not.
    """
    if isinstance(raw, (ObjectNode, ArrayNode, ScalarNode)):
        return raw

    if not isinstance(raw, Mapping):
        raise InvalidSchemaTypeError(location, None)

    tag = raw.get("type")
    model = NODE_MODELS.get(tag) if isinstance(tag, str) else None
    if model is None:
        raise InvalidSchemaTypeError(location, tag)

    try:
        return model.model_validate(dict(raw))  # type: ignore[return-value]
    except PydanticValidationError as exc:
        raise InvalidSchemaError(location, _describe(exc)) from exc


def coerce_constraints(raw: Any, location: str) -> list[ConstraintSpec]:
    """Normalize a constraint list such as ``[["string", {}], ["dummy"]]``.

    Raises:
        InvalidSchemaError: If the list is not a sequence of ``[identifier, options?]``.
    """
    if raw is None:
        return []
    if isinstance(raw, list) and all(isinstance(spec, ConstraintSpec) for spec in raw):
        return raw
    if isinstance(raw, (str, bytes, Mapping)):
        raise InvalidSchemaError(location, f"constraints must be a list, got {type(raw).__name__}")

    try:
        return _constraint_list_adapter.validate_python(list(raw))
    except (TypeError, PydanticValidationError) as exc:
        raise InvalidSchemaError(location, f"malformed constraints: {exc}") from exc


def _describe(exc: PydanticValidationError) -> str:
    """Collapse pydantic errors into one line: ``ref: Field required; ...``."""
    parts = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error["loc"])
        parts.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return "; ".join(parts)
