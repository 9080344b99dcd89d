"""Recursive, schema-driven validator for tree-shaped data.

Validation returns a result tree mirroring the input instead of a single
verdict: per-constraint booleans at scalar leaves, ``False`` where a shape
does not match or a key is unknown or missing.

Usage::

    from object_validator import Validator, collect_failures, is_valid

    validator = Validator()
    validator.add_constraint("string", lambda value, options=None: isinstance(value, str))
    validator.add_schema("user", {"name": {"type": "scalar", "constraints": [["string"]]}})

    result = validator.validate_object({"name": 42}, "user")
    if not is_valid(result):
        print(collect_failures(result))  # ["name.string"]
"""

from object_validator.core import Validator
from object_validator.exceptions import (
    ConfigurationError,
    ConstraintError,
    DuplicateSchemaError,
    InvalidSchemaError,
    InvalidSchemaTypeError,
    ObjectValidatorError,
    SchemaError,
    UnknownConstraintError,
    UnknownSchemaError,
)
from object_validator.registry import ConstraintRegistry, SchemaRegistry
from object_validator.results import Index, ResultTree, collect_failures, format_path, is_valid
from object_validator.schema import (
    ArrayNode,
    ConstraintSpec,
    ObjectNode,
    ScalarNode,
    SchemaNode,
    coerce_constraints,
    coerce_node,
)
from object_validator.values import ValueKind, classify

__version__ = "0.1.0"

__all__ = [
    "ArrayNode",
    "ConfigurationError",
    "ConstraintError",
    "ConstraintRegistry",
    "ConstraintSpec",
    "DuplicateSchemaError",
    "Index",
    "InvalidSchemaError",
    "InvalidSchemaTypeError",
    "ObjectNode",
    "ObjectValidatorError",
    "ResultTree",
    "ScalarNode",
    "SchemaError",
    "SchemaNode",
    "SchemaRegistry",
    "UnknownConstraintError",
    "UnknownSchemaError",
    "Validator",
    "ValueKind",
    "classify",
    "coerce_constraints",
    "coerce_node",
    "collect_failures",
    "format_path",
    "is_valid",
]
