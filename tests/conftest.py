"""Shared fixtures for the mailreply test suite."""

from collections.abc import Callable
from pathlib import Path

import pytest

from mailreply import Email, read

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixture_text() -> Callable[[str], str]:
    """Load a plain-text email body from tests/fixtures by name."""

    def _load(name: str) -> str:
        return (FIXTURES_PATH / f"{name}.txt").read_text(encoding="utf-8")

    return _load


@pytest.fixture
def email_fixture(fixture_text: Callable[[str], str]) -> Callable[..., Email]:
    """Parse a fixture email with the default parser."""

    def _read(name: str, from_address: str = "") -> Email:
        return read(fixture_text(name), from_address)

    return _read
