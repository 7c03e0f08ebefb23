"""
Shared test fixtures for the genuine test suite.
"""

import os

import pytest


@pytest.fixture
def clean_env(monkeypatch):
    """Remove GENUINE_* variables so config loads from defaults."""
    for key in list(os.environ):
        if key.startswith("GENUINE_"):
            monkeypatch.delenv(key)
