"""Shared test fixtures for the object validator.

Schemas are stored as YAML under tests/fixtures/schemas and loaded fresh for
every test, so a test that edits a schema never leaks into another one.
"""

from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
import yaml

from object_validator import Validator
from object_validator.settings import Settings
from tests.helpers.constraints import CONSTRAINTS

SCHEMA_DIR = Path(__file__).parent / "fixtures" / "schemas"


def load_schema(name: str) -> Any:
    """Load a fixture schema by file stem."""
    with (SCHEMA_DIR / f"{name}.yaml").open(encoding="utf-8") as fh:
        return yaml.safe_load(fh)


# =============================================================================
# SETTINGS
# =============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Provide test settings with safe defaults."""
    return Settings(_env_file=None, log_level="DEBUG")


# =============================================================================
# SCHEMAS & CONSTRAINTS
# =============================================================================


@pytest.fixture
def schemas() -> dict[str, Any]:
    """Fresh copies of the fixture schemas."""
    return {name: load_schema(name) for name in ("user", "address", "tags")}


@pytest.fixture
def constraint_spies() -> dict[str, MagicMock]:
    """Constraint callables wrapped in mocks so calls can be counted."""
    return {name: MagicMock(wraps=fn) for name, fn in CONSTRAINTS.items()}


@pytest.fixture
def validator(test_settings: Settings, constraint_spies: dict[str, MagicMock]) -> Validator:
    """Validator with the spy constraints registered and no schemas."""
    v = Validator(settings=test_settings)
    v.add_constraints(constraint_spies)
    return v


@pytest.fixture
def user_validator(validator: Validator, schemas: dict[str, Any]) -> Validator:
    """Validator with the user and address schemas registered."""
    validator.add_schema("user", schemas["user"])
    validator.add_schema("address", schemas["address"])
    return validator
