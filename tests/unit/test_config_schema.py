"""Tests for appconfig.config.schema: Pydantic configuration models"""

import pytest
from pydantic import ValidationError

from appconfig.config.schema import AppConfig, DatabaseConfig, Environment


def _database(**overrides):
    values = {
        "host": "localhost",
        "port": 5432,
        "username": "postgres",
        "password": "postgres",
        "database": "postgres",
    }
    values.update(overrides)
    return DatabaseConfig(**values)


class TestEnvironment:
    def test_values(self):
        assert {e.value for e in Environment} == {"development", "production"}

    def test_compares_as_string(self):
        assert Environment.PRODUCTION == "production"


class TestDatabaseConfig:
    def test_basic(self):
        cfg = _database()
        assert cfg.host == "localhost"
        assert cfg.port == 5432

    def test_port_coerced_from_string(self):
        assert _database(port="5433").port == 5433

    def test_port_must_be_positive(self):
        with pytest.raises(ValidationError, match="greater than 0"):
            _database(port=0)

    def test_empty_host_rejected(self):
        with pytest.raises(ValidationError, match="at least 1 character"):
            _database(host="")

    def test_extra_keys_rejected(self):
        with pytest.raises(ValidationError):
            _database(sslmode="require")


class TestAppConfig:
    def test_nested(self):
        cfg = AppConfig(env="production", port="80", database=_database())
        assert cfg.env is Environment.PRODUCTION
        assert cfg.port == 80

    def test_structural_equality(self):
        a = AppConfig(env="development", port=3000, database=_database())
        b = AppConfig(env="development", port="3000", database=_database(port="5432"))
        assert a == b

    def test_frozen(self):
        cfg = AppConfig(env="development", port=3000, database=_database())
        with pytest.raises(ValidationError):
            cfg.env = Environment.PRODUCTION
