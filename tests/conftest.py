"""
Pytest configuration for appconfig tests: shared environment fixtures and
marker registration.
"""

import pytest

from appconfig.config.loader import FIELD_SOURCES

_RUNTIME_VARIABLES = ("APP_LOG_LEVEL", "APP_LOG_FORMAT", "APP_HOST", "APP_ENV_FILE")


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's real environment out of every test."""
    for variable in (*FIELD_SOURCES.values(), *_RUNTIME_VARIABLES):
        monkeypatch.delenv(variable, raising=False)


@pytest.fixture
def valid_environ() -> dict[str, str]:
    """A raw environment mapping that satisfies the schema."""
    return {
        "APP_ENV": "development",
        "PORT": "3000",
        "DATABASE_HOST": "localhost",
        "DATABASE_PORT": "5432",
        "DATABASE_USERNAME": "postgres",
        "DATABASE_PASSWORD": "postgres",
        "DATABASE_NAME": "postgres",
    }


@pytest.fixture
def env_file(tmp_path, valid_environ):
    """A dotenv file containing the valid environment."""
    path = tmp_path / ".env"
    path.write_text("".join(f"{k}={v}\n" for k, v in valid_environ.items()))
    return path


@pytest.fixture
def set_environ(monkeypatch):
    """Populate the process environment from a mapping."""
    def _set(mapping: dict[str, str]) -> None:
        for key, value in mapping.items():
            monkeypatch.setenv(key, value)
    return _set


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Fast unit tests with no external dependencies"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests running the installed CLI"
    )
