"""Pytest configuration and fixtures."""

import json
import sys
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from spec_command.config import SpecCommandSettings, set_settings  # noqa: E402


API_REFERENCE_DOCUMENT = {
    "constants": {"PI": {"signature": "PI", "description": "circle constant"}},
    "variables": {"A": {"signature": "A[]", "description": "motor positions"}},
    "functions": {
        "date": {
            "signature": "date()",
            "description": "current date",
            "overloads": [{"signature": "date(fmt)", "description": "formatted date"}],
        }
    },
    "macros": {
        "wa": {
            "signature": "wa",
            "description": "where all",
            "location": {
                "start": {"offset": 0, "line": 3, "column": 5},
                "end": {"offset": 10, "line": 3, "column": 15},
            },
        }
    },
    "keywords": {"if": {"signature": "if (condition) statement"}},
}


@pytest.fixture(autouse=True)
def reset_settings():
    """Reset the global settings before and after each test."""
    set_settings(None)
    yield
    set_settings(None)


@pytest.fixture
def api_reference_document():
    """A small, well-formed API reference document."""
    return json.loads(json.dumps(API_REFERENCE_DOCUMENT))


@pytest.fixture
def api_reference_file(tmp_path, api_reference_document):
    """The API reference document written to a temporary file."""
    path = tmp_path / "api_reference.json"
    path.write_text(json.dumps(api_reference_document))
    return path


@pytest.fixture
def settings(api_reference_file):
    """Settings pointing at the temporary database, no mnemonics."""
    return SpecCommandSettings(
        api_reference_path=api_reference_file,
        reference_wait_attempts=3,
        reference_wait_interval_seconds=0.01,
    )


class MockEditorWindow:
    """Mock EditorWindow for testing."""

    def __init__(self, pick_key=None):
        self.pick_key = pick_key
        self.offered_items = []
        self.show_quick_pick = AsyncMock(side_effect=self._pick)
        self.show_text_document = AsyncMock()
        self.execute_command = AsyncMock()
        self.show_error_message = MagicMock()

    async def _pick(self, items):
        self.offered_items = list(items)
        for item in items:
            if item.key == self.pick_key:
                return item
        return None


@pytest.fixture
def window():
    """Editor window that picks 'all' in quick picks."""
    return MockEditorWindow(pick_key="all")


@pytest.fixture
def make_window():
    """Factory for editor windows picking a given key."""
    return MockEditorWindow


@pytest.fixture
def make_token():
    """Factory for cancellation token stand-ins."""

    def _make(cancelled=False):
        return SimpleNamespace(is_cancellation_requested=cancelled)

    return _make
