"""Tests for Settings.from_environment."""

import pytest

from meetup_api.app.core.config import Settings, parse_socket_addr
from meetup_api.app.core.errors import ConfigurationError

REQUIRED = {"SOCKET_ADDR": "0.0.0.0:3000", "DATABASE_URL": "sqlite:///meetups.db"}


def test_required_values():
    settings = Settings.from_environment(REQUIRED)
    assert settings.host == "0.0.0.0"
    assert settings.port == 3000
    assert settings.database_url == "sqlite:///meetups.db"
    assert settings.socket_addr == "0.0.0.0:3000"


def test_defaults():
    settings = Settings.from_environment(REQUIRED)
    assert settings.max_connections == 50
    assert settings.log_level == "INFO"
    assert settings.log_file is None
    assert settings.project_name == "Meetup API"


def test_optional_overrides():
    env = dict(REQUIRED, DB_MAX_CONNECTIONS="5", LOG_LEVEL="debug", PROJECT_NAME="Rust Club")
    settings = Settings.from_environment(env)
    assert settings.max_connections == 5
    assert settings.log_level == "DEBUG"
    assert settings.project_name == "Rust Club"


@pytest.mark.parametrize("missing", ["SOCKET_ADDR", "DATABASE_URL"])
def test_missing_required_value(missing):
    env = {k: v for k, v in REQUIRED.items() if k != missing}
    with pytest.raises(ConfigurationError, match=missing):
        Settings.from_environment(env)


@pytest.mark.parametrize("value", ["3000", ":3000", "localhost", "localhost:http", "localhost:70000"])
def test_bad_socket_addr(value):
    with pytest.raises(ConfigurationError, match="Failed to parse socket address"):
        parse_socket_addr(value)


@pytest.mark.parametrize("value", ["zero", "0"])
def test_bad_max_connections(value):
    with pytest.raises(ConfigurationError, match="DB_MAX_CONNECTIONS"):
        Settings.from_environment(dict(REQUIRED, DB_MAX_CONNECTIONS=value))
