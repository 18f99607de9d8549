"""Pytest configuration and shared fixtures for naija-nuban tests."""
from __future__ import annotations

import json

import pytest

from nuban.banks import BankDirectory, reset_default_directory


@pytest.fixture(autouse=True)
def fresh_default_directory(monkeypatch):
    """Rebuild the shared directory for every test, ignoring the caller's env."""
    monkeypatch.delenv("NUBAN_BANKS_FILE", raising=False)
    reset_default_directory()
    yield
    reset_default_directory()


@pytest.fixture
def small_directory():
    """A two-bank directory independent of the built-in table."""
    return BankDirectory({"058": "Guaranty Trust Bank", "033": "United Bank For Africa"})


@pytest.fixture
def banks_file(tmp_path):
    """JSON file with one new bank and one renamed bank."""
    path = tmp_path / "banks.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump({"999": "Test Microfinance Bank", "070": "Fidelity Bank"}, f)
    return path
