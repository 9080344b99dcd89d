"""Classification of input values.

Every value is tagged once with a ``ValueKind`` and the validator dispatches
on that tag instead of probing the value's shape repeatedly.
"""

from __future__ import annotations

import datetime
import numbers
import uuid
from collections.abc import Collection, Mapping
from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    """Shape category of a value being validated."""

    RECORD = "record"
    SEQUENCE = "sequence"
    SCALAR = "scalar"
    NULL = "null"
    # Instances of arbitrary classes (dataclasses, models, ...)
    OBJECT = "object"

    @property
    def is_structured(self) -> bool:
        """Records, sequences and objects hold other values; scalars and null do not."""
        return self in (ValueKind.RECORD, ValueKind.SEQUENCE, ValueKind.OBJECT)


# Atomic values: these never hold other values
_SCALAR_TYPES = (
    str,
    bytes,
    bytearray,
    numbers.Number,
    Enum,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    uuid.UUID,
)


def classify(value: Any) -> ValueKind:
    """Classify a value into a ``ValueKind``.

    Only mappings are records and only non-string collections are
    sequences. Any other instance that is not an atomic scalar (a dataclass,
    a pydantic model, a plain object) is an ``OBJECT``. It fails object,
    array and scalar validation alike.

    Examples:
        {"a": 1} -> RECORD
        [1, 2], (1, 2) -> SEQUENCE
        "text", 3, True, Decimal("1.5"), date(2024, 1, 1) -> SCALAR
        None -> NULL
        Point(x=1) -> OBJECT
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, Mapping):
        return ValueKind.RECORD
    if isinstance(value, _SCALAR_TYPES):
        return ValueKind.SCALAR
    if isinstance(value, Collection):
        return ValueKind.SEQUENCE
    return ValueKind.OBJECT
