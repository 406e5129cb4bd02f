##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
Utility functions shared across SurrealORM.
"""

import logging
import os
from typing import Any, Dict

import yaml


LOG = logging.getLogger(__name__)


def load_yaml(filepath: str) -> Dict:
    """
    Safely read a YAML file and return its contents.

    Args:
        filepath: The file path to the YAML file to be read.

    Returns:
        A dict representing the contents of the YAML file.
    """
    with open(filepath, "r") as _file:
        return yaml.safe_load(_file)


def get_yaml_var(entry: Dict[str, Any], var: str, default: Any) -> Any:
    """
    Retrieve the value associated with a specified key from a YAML dictionary.

    Args:
        entry: A dictionary representing the contents of a YAML file.
        var: The key to retrieve from the entry.
        default: The default value to return if the key is not found.

    Returns:
        The value associated with `var` in the entry, or `default` if not found.
    """
    try:
        return entry[var]
    except (TypeError, KeyError):
        return default


def expandvars2(path: str) -> str:
    """
    Replace shell strings from the current environment variables.

    Args:
        path: The string containing shell variables to be replaced.

    Returns:
        The string with shell variables replaced by their values.
    """
    return os.path.expandvars(os.path.expanduser(path))
