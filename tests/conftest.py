"""Shared test fixtures."""

from pathlib import Path

import pytest

from gomark.parser import Package, parse_listing

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_listing() -> str:
    """Listing printed by 'go doc -all' for a small example package."""
    return (FIXTURES / "experimenting.txt").read_text(encoding="utf-8")


@pytest.fixture
def sample_package(sample_listing: str) -> Package:
    return parse_listing(sample_listing)
