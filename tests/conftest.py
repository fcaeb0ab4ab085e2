"""Shared fixtures for Steam Ladder tests."""

import json
from pathlib import Path
from typing import Any, cast

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict[str, Any]:
    """Load a JSON fixture file."""
    with (FIXTURES_DIR / name).open(encoding="utf-8") as f:
        return cast(dict[str, Any], json.load(f))


@pytest.fixture
def profile_response() -> dict[str, Any]:
    """Load Steam Ladder profile response fixture."""
    return load_fixture("steamladder_profile_response.json")


@pytest.fixture
def region_ladder_response() -> dict[str, Any]:
    """Load regional ladder response fixture (country_code is null)."""
    return load_fixture("steamladder_ladder_region_response.json")


@pytest.fixture
def country_ladder_response() -> dict[str, Any]:
    """Load country ladder response fixture."""
    return load_fixture("steamladder_ladder_country_response.json")
