"""pytest global fixtures — environment isolation and shared test data."""

import pytest

from schengen_tracker.domain.membership import SchengenMembership

SCHENGEN_TEST_COUNTRIES = [
    "Austria", "Belgium", "Czech Republic", "Denmark", "Estonia", "Finland",
    "France", "Germany", "Greece", "Hungary", "Iceland", "Italy", "Latvia",
    "Lithuania", "Luxembourg", "Malta", "Netherlands", "Norway", "Poland",
    "Portugal", "Slovakia", "Slovenia", "Spain", "Sweden", "Switzerland",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Settings must come from each test, never from the developer's shell."""
    for name in (
        "SCHENGEN_COUNTRIES",
        "SCHENGEN_COUNTRIES_FILE",
        "KNOWN_COUNTRIES",
        "SAFE_SEARCH_HORIZON_DAYS",
        "ENABLE_DOCS",
        "CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def membership() -> SchengenMembership:
    return SchengenMembership(SCHENGEN_TEST_COUNTRIES)
