"""Pytest configuration and fixtures."""

import os

import pytest

ENV_KEYS = ["PATHSTR_OUTPUT_FORMAT", "PATHSTR_FAIL_FAST", "NO_COLOR"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep pathstr settings from the outer environment (or a loaded .env) out of tests."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    for key in ENV_KEYS:
        os.environ.pop(key, None)


@pytest.fixture
def invalid_bytes():
    """A byte sequence with no valid utf-8 interpretation (truncated 4-byte sequence)."""
    return bytes([0xF0, 0x90, 0x80])


@pytest.fixture
def invalid_native(invalid_bytes):
    """The same bytes in Python's native str form for paths."""
    return os.fsdecode(invalid_bytes)
