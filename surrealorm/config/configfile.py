##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
This module provides functionality for locating and loading SurrealORM
connection options from a YAML configuration file and from environment
variables.

A configuration file holds the options either at its top level or under a
`surrealorm` key:

    surrealorm:
      url: ws://localhost:8000/rpc
      namespace: app
      database: app
      username: app_user
      password: ${APP_DB_PASSWORD}

Environment variables (`SURREALORM_URL`, `SURREALORM_NAMESPACE`, ...) take
precedence over values read from the file.
"""
import logging
import os
from typing import Dict, Optional

from surrealorm.config import ORMOptions
from surrealorm.config.config_filepaths import CONFIG_FILENAME, SURREALORM_HOME
from surrealorm.exceptions import ConfigurationError
from surrealorm.utils import expandvars2, get_yaml_var, load_yaml


LOG: logging.Logger = logging.getLogger(__name__)

ENV_PREFIX: str = "SURREALORM_"
OPTION_NAMES = ("url", "namespace", "database", "username", "password", "client")
REQUIRED_OPTIONS = ("url", "namespace", "database")


def load_config(filepath: str) -> Optional[Dict]:
    """
    Reads a SurrealORM YAML configuration file and returns its options.

    String values have environment variables and `~` expanded.

    Args:
        filepath: The path to the YAML configuration file.

    Returns:
        A dictionary of options, or None if the file doesn't exist.
    """
    if not os.path.isfile(filepath):
        LOG.info(f"No SurrealORM config file at {filepath}")
        return None
    LOG.info(f"Reading SurrealORM config from file {filepath}")

    contents = load_yaml(filepath) or {}
    section = get_yaml_var(contents, "surrealorm", contents) or {}
    return {key: expandvars2(value) if isinstance(value, str) else value for key, value in section.items()}


def find_config_file(path: Optional[str] = None) -> Optional[str]:
    """
    Locate the SurrealORM configuration file (`surrealorm.yaml`).

    If a `path` is given only that directory is checked. Otherwise the current
    working directory is checked first, then `~/.surrealorm`.

    Args:
        path: A specific directory to look for `surrealorm.yaml`.

    Returns:
        The full path to the configuration file if found, otherwise None.
    """
    if path is None:
        for directory in (os.getcwd(), SURREALORM_HOME):
            candidate = os.path.join(directory, CONFIG_FILENAME)
            if os.path.isfile(candidate):
                return candidate
        return None

    candidate = os.path.join(path, CONFIG_FILENAME)
    if os.path.isfile(candidate):
        return candidate

    return None


def load_options_from_env(prefix: str = ENV_PREFIX) -> Dict[str, str]:
    """
    Read connection options from environment variables.

    Args:
        prefix: The prefix of the variable names (e.g. `SURREALORM_URL`).

    Returns:
        A dictionary holding only the options that are set.
    """
    options = {}
    for name in OPTION_NAMES:
        value = os.environ.get(f"{prefix}{name.upper()}")
        if value:
            options[name] = value
    return options


def get_options(path: Optional[str] = None, prefix: str = ENV_PREFIX) -> ORMOptions:
    """
    Build connection options from the configuration file and the environment.

    Args:
        path: A configuration file, or a directory to search for one. If None,
            the default search locations are used.
        prefix: The prefix of the environment variables.

    Returns:
        The merged options.

    Raises:
        ConfigurationError: If a required option is missing from both sources.
    """
    if path is not None and os.path.isfile(path):
        filepath = path
    else:
        filepath = find_config_file(path)

    options = {}
    if filepath is not None:
        options.update(load_config(filepath) or {})
    options.update(load_options_from_env(prefix))

    missing = [name for name in REQUIRED_OPTIONS if not options.get(name)]
    if missing:
        raise ConfigurationError(
            f"Missing SurrealORM connection option(s): {', '.join(missing)}. Set them in {CONFIG_FILENAME} "
            f"or through the {prefix}<OPTION> environment variables."
        )

    return ORMOptions.from_dict(options)
