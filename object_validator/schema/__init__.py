"""Schema node models and coercion from untyped schema data."""

from object_validator.schema.nodes import (
    NODE_MODELS,
    ArrayNode,
    ConstraintSpec,
    ObjectNode,
    ScalarNode,
    SchemaNode,
    coerce_constraints,
    coerce_node,
)

__all__ = [
    "NODE_MODELS",
    "ArrayNode",
    "ConstraintSpec",
    "ObjectNode",
    "ScalarNode",
    "SchemaNode",
    "coerce_constraints",
    "coerce_node",
]
