"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Modules live at the repository root
root = Path(__file__).resolve().parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from config import Settings  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    return Settings(api_url="https://fr24.example.test", api_key="test-key", timeout=5.0)
