##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
Used to store the connection configuration.

The `config` package provides the `ORMOptions` class that `SurrealORM` is
constructed from, along with helpers for loading those options from a YAML
file and from environment variables.

Modules:
    configfile.py: Handles locating and loading configuration files and
        environment variables.
"""
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict


DEFAULT_USERNAME = "root"
DEFAULT_PASSWORD = "root"
DEFAULT_CLIENT = "surrealdb"


@dataclass
class ORMOptions:
    """
    Connection options for a `SurrealORM` instance.

    The default username and password are the development credentials of a
    fresh SurrealDB server and should be overridden anywhere else.

    Attributes:
        url: The URL of the SurrealDB instance (e.g. `ws://localhost:8000/rpc`).
        namespace: The namespace to use.
        database: The database to use within the namespace.
        username: Username to sign in with.
        password: Password to sign in with.
        client: Name of the database client to create through the client factory.
    """

    url: str
    namespace: str
    database: str
    username: str = DEFAULT_USERNAME
    password: str = DEFAULT_PASSWORD
    client: str = DEFAULT_CLIENT

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ORMOptions":
        """
        Create options from a dictionary. Unknown keys are ignored and keys
        with a `None` value fall back to their defaults.

        Args:
            data: A dictionary of option values.

        Returns:
            An `ORMOptions` instance.
        """
        known = {field.name for field in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known and value is not None})

    def to_dict(self, include_password: bool = True) -> Dict[str, Any]:
        """
        Convert the options to a dictionary.

        Args:
            include_password: If False, the password is masked.

        Returns:
            The options as a dictionary.
        """
        data = asdict(self)
        if not include_password:
            data["password"] = "******"
        return data

    def __str__(self) -> str:
        return f"ORMOptions({', '.join(f'{key}={value}' for key, value in self.to_dict(include_password=False).items())})"
