##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
Tests for the `configfile.py` module.
"""

import os

import pytest
import yaml

from surrealorm.config import ORMOptions
from surrealorm.config.configfile import find_config_file, get_options, load_config, load_options_from_env
from surrealorm.exceptions import ConfigurationError


ENV_VARS = [f"SURREALORM_{name}" for name in ("URL", "NAMESPACE", "DATABASE", "USERNAME", "PASSWORD", "CLIENT")]


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """
    Clear the SurrealORM environment variables and point the search
    locations at empty temporary directories.

    Args:
        monkeypatch: PyTest monkeypatch fixture.
        tmp_path: A temporary directory unique to the test.
    """
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.setattr("surrealorm.config.configfile.SURREALORM_HOME", str(home))
    monkeypatch.chdir(workdir)


def write_config(directory, contents) -> str:
    """Write `contents` as `surrealorm.yaml` in `directory` and return its path."""
    filepath = os.path.join(str(directory), "surrealorm.yaml")
    with open(filepath, "w") as config_file:
        yaml.dump(contents, config_file)
    return filepath


class TestLoadConfig:
    """
    Tests for `load_config`.
    """

    def test_missing_file(self, tmp_path):
        """
        Test that a missing file returns None.

        Args:
            tmp_path: A temporary directory unique to the test.
        """
        assert load_config(str(tmp_path / "nope.yaml")) is None

    def test_surrealorm_section(self, tmp_path):
        """
        Test that options under a `surrealorm` key are read.

        Args:
            tmp_path: A temporary directory unique to the test.
        """
        filepath = write_config(tmp_path, {"surrealorm": {"url": "ws://db:8000/rpc", "namespace": "ns"}, "other": 1})
        assert load_config(filepath) == {"url": "ws://db:8000/rpc", "namespace": "ns"}

    def test_top_level_options(self, tmp_path):
        """
        Test that options at the top level of the file are read.

        Args:
            tmp_path: A temporary directory unique to the test.
        """
        filepath = write_config(tmp_path, {"url": "ws://db:8000/rpc", "database": "db"})
        assert load_config(filepath) == {"url": "ws://db:8000/rpc", "database": "db"}

    def test_env_vars_expanded(self, tmp_path, monkeypatch: pytest.MonkeyPatch):
        """
        Test that environment variables in string values are expanded.

        Args:
            tmp_path: A temporary directory unique to the test.
            monkeypatch: PyTest monkeypatch fixture.
        """
        monkeypatch.setenv("APP_DB_PASSWORD", "s3cret")
        filepath = write_config(tmp_path, {"surrealorm": {"password": "${APP_DB_PASSWORD}", "port": 8000}})
        assert load_config(filepath) == {"password": "s3cret", "port": 8000}

    def test_empty_file(self, tmp_path):
        """
        Test that an empty file yields no options.

        Args:
            tmp_path: A temporary directory unique to the test.
        """
        filepath = tmp_path / "surrealorm.yaml"
        filepath.write_text("")
        assert load_config(str(filepath)) == {}


class TestFindConfigFile:
    """
    Tests for `find_config_file`.
    """

    def test_not_found(self):
        """
        Test that None is returned when no location holds a config file.
        """
        assert find_config_file() is None

    def test_cwd_wins_over_home(self, tmp_path):
        """
        Test that the current directory is searched before the SurrealORM home.

        Args:
            tmp_path: A temporary directory unique to the test.
        """
        home_file = write_config(tmp_path / "home", {"url": "home"})
        assert find_config_file() == home_file
        cwd_file = write_config(os.getcwd(), {"url": "cwd"})
        assert find_config_file() == cwd_file

    def test_explicit_directory(self, tmp_path):
        """
        Test that only the given directory is searched when one is passed.

        Args:
            tmp_path: A temporary directory unique to the test.
        """
        write_config(os.getcwd(), {"url": "cwd"})
        other = tmp_path / "other"
        other.mkdir()
        assert find_config_file(str(other)) is None
        assert find_config_file(str(tmp_path / "work")) == os.path.join(str(tmp_path / "work"), "surrealorm.yaml")


class TestOptionsFromEnvironment:
    """
    Tests for `load_options_from_env` and `get_options`.
    """

    def test_load_options_from_env(self, monkeypatch: pytest.MonkeyPatch):
        """
        Test that only the options that are set are returned.

        Args:
            monkeypatch: PyTest monkeypatch fixture.
        """
        monkeypatch.setenv("SURREALORM_URL", "ws://db:8000/rpc")
        monkeypatch.setenv("SURREALORM_PASSWORD", "pw")
        monkeypatch.setenv("SURREALORM_DATABASE", "")
        assert load_options_from_env() == {"url": "ws://db:8000/rpc", "password": "pw"}

    def test_custom_prefix(self, monkeypatch: pytest.MonkeyPatch):
        """
        Test that a custom prefix is honored.

        Args:
            monkeypatch: PyTest monkeypatch fixture.
        """
        monkeypatch.setenv("APP_DB_NAMESPACE", "ns")
        assert load_options_from_env(prefix="APP_DB_") == {"namespace": "ns"}

    def test_get_options_env_overrides_file(self, tmp_path, monkeypatch: pytest.MonkeyPatch):
        """
        Test that environment variables take precedence over the file.

        Args:
            tmp_path: A temporary directory unique to the test.
            monkeypatch: PyTest monkeypatch fixture.
        """
        filepath = write_config(
            tmp_path, {"surrealorm": {"url": "ws://file:8000/rpc", "namespace": "ns", "database": "db"}}
        )
        monkeypatch.setenv("SURREALORM_DATABASE", "env_db")
        assert get_options(filepath) == ORMOptions(url="ws://file:8000/rpc", namespace="ns", database="env_db")

    def test_get_options_searches_default_locations(self):
        """
        Test that the config file in the current directory is used by default.
        """
        write_config(os.getcwd(), {"url": "ws://cwd:8000/rpc", "namespace": "ns", "database": "db", "username": "app"})
        options = get_options()
        assert options.url == "ws://cwd:8000/rpc"
        assert options.username == "app"

    def test_get_options_from_env_only(self, monkeypatch: pytest.MonkeyPatch):
        """
        Test that options can come entirely from the environment.

        Args:
            monkeypatch: PyTest monkeypatch fixture.
        """
        monkeypatch.setenv("SURREALORM_URL", "ws://env:8000/rpc")
        monkeypatch.setenv("SURREALORM_NAMESPACE", "ns")
        monkeypatch.setenv("SURREALORM_DATABASE", "db")
        assert get_options() == ORMOptions(url="ws://env:8000/rpc", namespace="ns", database="db")

    def test_get_options_missing_required(self, monkeypatch: pytest.MonkeyPatch):
        """
        Test that missing required options raise `ConfigurationError` naming them.

        Args:
            monkeypatch: PyTest monkeypatch fixture.
        """
        monkeypatch.setenv("SURREALORM_URL", "ws://env:8000/rpc")
        with pytest.raises(ConfigurationError, match="namespace, database"):
            get_options()
