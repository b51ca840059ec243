"""
Shared pytest fixtures and configuration for realm-clone tests.

This module provides:
- A realistic Keycloak realm export fixture
- Deterministic identifier factories
- Settings and logging isolation between tests
"""

import copy
import itertools
import json
import os
from pathlib import Path
from typing import Any, Callable, Generator

import pytest

from realm_clone.config import reset_settings
from realm_clone.core.logging import clear_context, configure_logging
from tests._support.realm_data import REALM_EXPORT

# Configure logging before any logger is used so test output stays on stderr
configure_logging(level="WARNING", format="console", force=True)


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)

        # CLI tests run the whole command against real files
        if test_path.parts[0] == "cli" or "integration" in str(test_path):
            item.add_marker(pytest.mark.integration)

        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings_fixture(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop cached settings and REALM_CLONE_* variables around each test."""
    for key in list(os.environ):
        if key.startswith("REALM_CLONE_"):
            monkeypatch.delenv(key)
    reset_settings()
    yield
    reset_settings()
    clear_context()
    configure_logging(level="WARNING", format="console", force=True)


# =============================================================================
# Identifier and Realm Export Fixtures
# =============================================================================


@pytest.fixture
def sequential_ids() -> Callable[[], str]:
    """Identifier factory yielding 00000000-0000-4000-8000-000000000001, ..."""
    counter = itertools.count(1)
    return lambda: f"00000000-0000-4000-8000-{next(counter):012d}"


@pytest.fixture
def realm_export() -> dict[str, Any]:
    """Fresh copy of a realistic realm export named ``ajax``."""
    return copy.deepcopy(REALM_EXPORT)


@pytest.fixture
def realm_export_file(tmp_path: Path, realm_export: dict[str, Any]) -> Path:
    """The realm export written to ``tmp_path/realm-export.json``."""
    path = tmp_path / "realm-export.json"
    path.write_text(json.dumps(realm_export, indent=2), encoding="utf-8")
    return path
