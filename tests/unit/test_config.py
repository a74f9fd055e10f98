"""Unit tests for environment-driven configuration."""

from pathlib import Path

import pytest

from shortkit import config

# pylint: disable=magic-value-comparison, unused-argument


def test_db_url_missing(clean_env):
    """A missing database URL raises a dedicated error."""
    with pytest.raises(config.DatabaseUrlNotSetError):
        config.get_db_url()


def test_db_url_set(clean_env):
    """The database URL is read verbatim."""
    clean_env.setenv("SHORTKIT_DB_URL", "sqlite:///x.db")
    assert config.get_db_url() == "sqlite:///x.db"


@pytest.mark.parametrize(
    ("raw", "expected"), [(None, 5), ("", 5), ("8", 8), ("4", 4), ("2", 4)]
)
def test_default_short_code_length(clean_env, raw, expected):
    """The configured length is used, never below the minimum."""
    if raw is not None:
        clean_env.setenv("SHORTKIT_SHORT_CODE_LENGTH", raw)
    assert config.get_default_short_code_length() == expected


def test_default_short_code_length_not_an_integer(clean_env):
    """Garbage lengths are reported with the variable name."""
    clean_env.setenv("SHORTKIT_SHORT_CODE_LENGTH", "five")
    with pytest.raises(config.InvalidSettingError, match="SHORTKIT_SHORT_CODE_LENGTH"):
        config.get_default_short_code_length()


def test_default_domain(clean_env):
    """Unset or empty default domain means None."""
    assert config.get_default_domain() is None
    clean_env.setenv("SHORTKIT_DEFAULT_DOMAIN", "")
    assert config.get_default_domain() is None
    clean_env.setenv("SHORTKIT_DEFAULT_DOMAIN", "doma.in")
    assert config.get_default_domain() == "doma.in"


def test_build_alembic_config_points_at_packaged_scripts():
    """The Alembic config carries the URL and a real script location."""
    cfg = config.build_alembic_config("sqlite:///x.db")
    assert cfg.get_main_option("sqlalchemy.url") == "sqlite:///x.db"
    script_location = Path(cfg.get_main_option("script_location"))
    assert (script_location / "env.py").is_file()
    assert (script_location / "versions").is_dir()


def test_build_alembic_config_without_url():
    """The URL is optional for offline commands."""
    cfg = config.build_alembic_config()
    assert cfg.get_main_option("sqlalchemy.url") is None


def test_build_alembic_config_keeps_percent_encoded_urls():
    """Percent-encoded passwords survive configparser interpolation."""
    url = "postgresql+psycopg://app:p%40ss@db/shortkit"
    cfg = config.build_alembic_config(url)
    assert cfg.get_main_option("sqlalchemy.url") == url
