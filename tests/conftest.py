"""Fixtures and configuration for pytest."""

import pytest

from shaderperm.dsl import parse_options

SCENARIO = (
    'boolOptA, boolOptB (boolOptA && enumOpt == "a"), '
    "enumOpt a | b | c (intOpt == 2), intOpt 1..4"
)


@pytest.fixture
def scenario_text():
    """Fixture providing the reference option list with cross-option conditions."""
    return SCENARIO


@pytest.fixture
def scenario_options():
    """Fixture providing the parsed reference option list."""
    return parse_options(SCENARIO)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep SHADERPERM_* variables of the host out of the tests."""
    for name in (
        "SHADERPERM_LOG_LEVEL",
        "SHADERPERM_MAX_CANDIDATES",
        "SHADERPERM_FLAG_PREFIX",
    ):
        monkeypatch.delenv(name, raising=False)
