"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (domain, application, auth)
    └── integration/
        ├── persistence/   # Repository contract (in-memory and SQLite)
        └── api/           # HTTP tests through the FastAPI TestClient
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from portal_link_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")

# Settings() refuses to load without a signing secret
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")


@pytest.fixture(autouse=True)
def fresh_settings():
    """Never share cached settings between tests."""
    clear_settings_cache()
    yield
    clear_settings_cache()
