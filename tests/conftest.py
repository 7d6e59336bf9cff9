import sys
import pathlib
import datetime

import pytest

# Add project root to sys.path so imports from repo root work when running tests
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent.parent))

from lending_catalog import Catalog, preload_books

FIXED_NOW = datetime.datetime(2026, 3, 1, 12, 0, tzinfo=datetime.timezone.utc)


@pytest.fixture
def lib():
    """Empty catalog whose clock is pinned to FIXED_NOW."""
    return Catalog(clock=lambda: FIXED_NOW)


@pytest.fixture
def seeded(lib):
    """Catalog holding the ten preset books (ids 1..10)."""
    preload_books(lib)
    return lib


@pytest.fixture
def typed(monkeypatch):
    """
    Feed scripted lines to input(); EOFError once they run out.

    Usage: typed("2", "5") before driving a menu loop.
    """
    def feed(*lines):
        pending = list(lines)

        def fake_input(prompt=""):
            print(prompt, end="")
            if not pending:
                raise EOFError
            return pending.pop(0)

        monkeypatch.setattr("builtins.input", fake_input)
    return feed
