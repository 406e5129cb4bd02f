##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
Process-wide storage for the metadata attached to entity classes.

Metadata is addressed by a kind (e.g. `ENTITY_METADATA_KEY`), the class it
belongs to, and optionally a property name on that class. Entries are keyed by
the class object itself so two classes that share a name never collide.

Lookups come in two flavors:

- `get` walks the class's MRO and returns the closest declaration, so a
  subclass sees what its parents declared unless it declared its own.
- `get_own` only looks at the exact class.
"""

import logging
from typing import Any, Dict, Hashable, Optional, Tuple


LOG = logging.getLogger(__name__)

ENTITY_METADATA_KEY = "surrealorm:entity"
PROPERTY_METADATA_KEY = "surrealorm:property"

_MetadataKey = Tuple[Hashable, type, Optional[str]]


class MetadataStore:
    """
    Associative storage mapping `(kind, class[, property])` to a value.

    Attributes:
        _entries (Dict[_MetadataKey, Any]): The stored metadata values.

    Methods:
        define: Store a metadata value.
        get: Retrieve a value, falling back to the classes in the MRO.
        get_own: Retrieve a value declared on the exact class only.
        has: Check whether a value is reachable from a class.
        delete: Remove a value declared on the exact class.
        clear: Remove every stored value.
    """

    def __init__(self):
        self._entries: Dict[_MetadataKey, Any] = {}

    @staticmethod
    def _key(kind: Hashable, target: type, property_key: Optional[str]) -> _MetadataKey:
        if not isinstance(target, type):
            target = type(target)
        return (kind, target, property_key)

    def define(self, kind: Hashable, target: type, value: Any, property_key: Optional[str] = None):
        """
        Store `value` for `kind` on `target` (and `property_key`, if given).
        An existing value for the same key is replaced.

        Args:
            kind: The metadata kind.
            target: The class the metadata belongs to. Instances are resolved to their class.
            value: The metadata value.
            property_key: Optional property name to scope the metadata to.
        """
        key = self._key(kind, target, property_key)
        LOG.debug(f"Defining metadata '{kind}' on {key[1].__name__}{f'.{property_key}' if property_key else ''}.")
        self._entries[key] = value

    def get_own(self, kind: Hashable, target: type, property_key: Optional[str] = None) -> Optional[Any]:
        """
        Retrieve the metadata declared on `target` itself.

        Args:
            kind: The metadata kind.
            target: The class to look on.
            property_key: Optional property name.

        Returns:
            The stored value, or None if `target` never declared one.
        """
        return self._entries.get(self._key(kind, target, property_key))

    def get(self, kind: Hashable, target: type, property_key: Optional[str] = None) -> Optional[Any]:
        """
        Retrieve the closest metadata value for `target`, walking its MRO.

        Args:
            kind: The metadata kind.
            target: The class to start the lookup from.
            property_key: Optional property name.

        Returns:
            The stored value, or None if no class in the MRO declared one.
        """
        _, cls, _ = self._key(kind, target, property_key)
        for klass in cls.__mro__:
            value = self._entries.get((kind, klass, property_key))
            if value is not None:
                return value
        return None

    def has(self, kind: Hashable, target: type, property_key: Optional[str] = None) -> bool:
        """
        Check whether a metadata value is reachable from `target`.

        Returns:
            True if `get` would return a value, False otherwise.
        """
        return self.get(kind, target, property_key) is not None

    def delete(self, kind: Hashable, target: type, property_key: Optional[str] = None) -> bool:
        """
        Remove the metadata declared on `target` itself.

        Returns:
            True if something was removed, False otherwise.
        """
        return self._entries.pop(self._key(kind, target, property_key), None) is not None

    def clear(self):
        """Remove every stored metadata value."""
        self._entries.clear()


METADATA_STORE = MetadataStore()


def define_metadata(kind: Hashable, value: Any, target: type, property_key: Optional[str] = None):
    """
    Define metadata on the process-wide store.

    Args:
        kind: The metadata kind.
        value: The metadata value.
        target: The class the metadata belongs to.
        property_key: Optional property name.
    """
    METADATA_STORE.define(kind, target, value, property_key=property_key)


def get_metadata(kind: Hashable, target: type, property_key: Optional[str] = None) -> Optional[Any]:
    """Get metadata from the process-wide store, including inherited declarations."""
    return METADATA_STORE.get(kind, target, property_key=property_key)


def get_own_metadata(kind: Hashable, target: type, property_key: Optional[str] = None) -> Optional[Any]:
    """Get metadata declared on `target` itself from the process-wide store."""
    return METADATA_STORE.get_own(kind, target, property_key=property_key)


def delete_metadata(kind: Hashable, target: type, property_key: Optional[str] = None) -> bool:
    """Delete metadata declared on `target` itself from the process-wide store."""
    return METADATA_STORE.delete(kind, target, property_key=property_key)
