"""Shared fixtures for headshot provider tests."""

import logging
import sys
from pathlib import Path

import pytest

# Add project root to path so we can import modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import Config


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to captured streams and any level set by a test."""
    yield
    logger = logging.getLogger("headshot_provider")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_manifest():
    """Sample Filetree.json document for testing."""
    return {
        "Content": {
            "actors": {
                "John Doe.jpg": "johndoe.jpg?t=999",
                "Mary Major.png": "mary_major.png",
            },
            "actresses": {
                "Jane Roe.jpg": "janeroe.jpg?t=1",
            },
        }
    }


@pytest.fixture
def sample_config():
    """Pre-configured Config instance using the default endpoints."""
    return Config(
        base_url="http://127.0.0.1",
        manifest_path="/Filetree.json",
        content_path="/Content/",
        cache_duration_minutes=30,
        enable_detailed_logging=False,
    )


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def config_toml_content():
    """Sample config.toml content."""
    return """
base_url = "http://media.local:8080/"
manifest_path = "/tree/Filetree.json"
content_path = "/images/"
cache_duration_minutes = 10
enable_detailed_logging = true
"""
