"""Shared test fixtures for Viewguard."""

from __future__ import annotations

import pytest

from viewguard.config import DemoConfig
from viewguard.core.person import PersonBuilder
from viewguard.core.readonly_view import ReadOnlyList, wrap


@pytest.fixture
def backing() -> list[str]:
    """Provide the canonical two-word backing list."""
    return ["Java", "is"]


@pytest.fixture
def view(backing: list[str]) -> ReadOnlyList:
    """Provide a read-only view over the backing list."""
    return wrap(backing)


@pytest.fixture
def builder() -> PersonBuilder:
    """Provide a PersonBuilder loaded with the canonical person."""
    return (
        PersonBuilder()
        .set_name("Albert Attard")
        .add_friend("John White")
        .add_friend("Mary Vella")
    )


@pytest.fixture
def demo_config(monkeypatch: pytest.MonkeyPatch) -> DemoConfig:
    """Provide a DemoConfig unaffected by VIEWGUARD_* variables in the shell."""
    for name in (
        "VIEWGUARD_LOG_LEVEL",
        "VIEWGUARD_INITIAL_WORDS",
        "VIEWGUARD_APPENDED_WORDS",
        "VIEWGUARD_PERSON_NAME",
        "VIEWGUARD_FRIENDS",
        "VIEWGUARD_LATE_FRIEND",
    ):
        monkeypatch.delenv(name, raising=False)
    return DemoConfig(_env_file=None)
