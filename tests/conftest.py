"""
Shared fixtures for the converter test suite.
"""
import pytest

import config


@pytest.fixture(autouse=True)
def no_log_file(monkeypatch):
    """Keep test runs from writing converter.log into the working directory."""
    monkeypatch.setattr(config, "LOG_FILE", "")


@pytest.fixture
def sample_users():
    return {
        "users": [
            {"id": 1, "name": "Alice", "role": "admin"},
            {"id": 2, "name": "Bob", "role": "user"},
        ]
    }
