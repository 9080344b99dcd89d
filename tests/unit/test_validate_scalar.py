"""Unit tests for Validator.validate_scalar."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any
from unittest.mock import MagicMock

import pytest

from object_validator import ConstraintSpec, InvalidSchemaError, UnknownConstraintError, Validator

CONSTRAINT_CONFIG = [
    ["string", {}],
    ["dummy"],
]


@dataclass
class Point:
    x: int


class TestValidateScalar:
    """Scalar validation runs constraints in declaration order."""

    @pytest.mark.parametrize("value", [{}, {"a": 1}, [], [1], (1,), {1, 2}, Point(1), object()])
    def test_structured_value_is_false(
        self, validator: Validator, constraint_spies: dict, value: Any
    ) -> None:
        assert validator.validate_scalar(value, CONSTRAINT_CONFIG) is False
        assert constraint_spies["string"].call_count == 0
        assert constraint_spies["dummy"].call_count == 0

    @pytest.mark.parametrize(
        "value", [1, 0, "", "text", 2.5, False, None, Decimal("1.5"), date(2024, 1, 1)]
    )
    def test_no_constraints_is_true(self, validator: Validator, value: Any) -> None:
        assert validator.validate_scalar(value) is True
        assert validator.validate_scalar(value, []) is True

    def test_no_constraints_calls_nothing(self, validator: Validator, constraint_spies: dict) -> None:
        validator.validate_scalar(1)

        assert constraint_spies["string"].call_count == 0
        assert constraint_spies["dummy"].call_count == 0

    def test_with_constraints(self, validator: Validator) -> None:
        assert validator.validate_scalar(1, CONSTRAINT_CONFIG) == {"string": False, "dummy": True}

    def test_options_are_passed(self, validator: Validator, constraint_spies: dict) -> None:
        validator.validate_scalar("abc", [["max_length", {"max": 2}], ["dummy"]])

        constraint_spies["max_length"].assert_called_once_with("abc", {"max": 2})
        constraint_spies["dummy"].assert_called_once_with("abc", None)

    def test_null_is_a_scalar(self, validator: Validator) -> None:
        assert validator.validate_scalar(None, CONSTRAINT_CONFIG) == {"string": False, "dummy": True}

    def test_declaration_order(self, validator: Validator) -> None:
        calls: list[str] = []
        validator.add_constraint("first", lambda value, options=None: calls.append("first") or True)
        validator.add_constraint("second", lambda value, options=None: calls.append("second") or True)

        validator.validate_scalar(1, [["second"], ["first"], ["second"]])

        assert calls == ["second", "first", "second"]

    def test_repeated_identifier_keeps_last_result(self, validator: Validator) -> None:
        validator.add_constraint("at_most", lambda value, options=None: value <= options)

        result = validator.validate_scalar(5, [["at_most", 10], ["at_most", 1]])

        assert result == {"at_most": False}

    def test_results_are_booleans(self, validator: Validator) -> None:
        validator.add_constraint("truthy", lambda value, options=None: value)

        assert validator.validate_scalar("x", [["truthy"]]) == {"truthy": True}
        assert validator.validate_scalar("", [["truthy"]])["truthy"] is False

    def test_constraint_spec_instances(self, validator: Validator) -> None:
        specs = [ConstraintSpec("string"), ConstraintSpec("max_length", {"max": 1})]

        assert validator.validate_scalar("ab", specs) == {"string": True, "max_length": False}

    def test_tuple_specs(self, validator: Validator) -> None:
        assert validator.validate_scalar("a", (("string", None),)) == {"string": True}


class TestConfigurationErrors:
    """Unknown constraints and malformed lists raise."""

    def test_unknown_constraint(self, validator: Validator) -> None:
        with pytest.raises(UnknownConstraintError) as exc_info:
            validator.validate_scalar(1, [["dummy"], ["hasNotBeenAddedYet"]])

        assert exc_info.value.identifier == "hasNotBeenAddedYet"
        assert str(exc_info.value) == "Constraint hasNotBeenAddedYet does not exist."

    def test_unknown_constraint_after_earlier_calls(self, validator: Validator) -> None:
        spy = MagicMock(return_value=True)
        validator.add_constraint("spy", spy)

        with pytest.raises(UnknownConstraintError):
            validator.validate_scalar(1, [["spy"], ["missing"]])

        assert spy.call_count == 1

    @pytest.mark.parametrize("constraints", ["string", {"string": {}}, [[1]], [[]], 5])
    def test_malformed_constraints(self, validator: Validator, constraints: Any) -> None:
        with pytest.raises(InvalidSchemaError):
            validator.validate_scalar("a", constraints)
