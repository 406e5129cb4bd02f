##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
This module houses `BaseEntity`, the class every declared entity extends.
"""

import json
import logging
from typing import Any, Dict

from surrealorm.exceptions import DeclarationError
from surrealorm.metadata import ENTITY_METADATA_KEY, PROPERTY_METADATA_KEY, get_metadata, get_own_metadata


LOG = logging.getLogger(__name__)

ID_FIELD = "id"


class BaseEntity:
    """
    Base class for all entities managed by SurrealORM.

    Subclasses declare their table with the `entity` decorator and their
    fields with `Property` attributes. Entities must be constructible without
    arguments since query results are hydrated into fresh instances.

    Attributes:
        id: The record reference of the entity, or None until it's been created.

    Methods:
        get_table_name (classmethod):
            Get the table name declared for this exact class.

        get_properties (classmethod):
            Get the property metadata declared for this class.

        serialize:
            Convert the entity into the payload written to the database.

        to_dict:
            Convert the entity into a dictionary that includes its id.

        to_json:
            Serialize the entity's payload to a JSON string.
    """

    id: Any = None

    @classmethod
    def get_table_name(cls) -> str:
        """
        Get the table name for this entity class.

        Only metadata declared on this exact class counts; a subclass of a
        declared entity must be declared itself.

        Returns:
            The table name given to the `entity` decorator.

        Raises:
            DeclarationError: If this class was never declared with `entity`.
        """
        metadata = get_own_metadata(ENTITY_METADATA_KEY, cls)
        if not metadata:
            raise DeclarationError(f"Entity {cls.__name__} is not decorated with @entity")
        return metadata["table"]

    @classmethod
    def get_properties(cls) -> Dict[str, Dict[str, Any]]:
        """
        Get the property metadata for this entity class.

        Returns:
            A copy of the mapping of field name to field metadata; empty if
            no properties were declared.
        """
        properties = get_metadata(PROPERTY_METADATA_KEY, cls) or {}
        return {name: dict(meta) for name, meta in properties.items()}

    def serialize(self) -> Dict[str, Any]:
        """
        Convert the entity to the payload sent on create and update.

        Returns:
            Every field set on this instance except `id` and private attributes.
        """
        return {
            key: value for key, value in vars(self).items() if key != ID_FIELD and not key.startswith("_")
        }

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the entity to a dictionary, including its id.

        Returns:
            The serialized payload plus the `id` key.
        """
        return {ID_FIELD: self.id, **self.serialize()}

    def to_json(self) -> str:
        """
        Serialize the entity's payload to a JSON string. Values JSON can't
        represent (datetimes, record ids) are rendered with `str`.

        Returns:
            The payload as a JSON string.
        """
        return json.dumps(self.serialize(), default=str)

    def __repr__(self) -> str:
        fields = ", ".join(f"{key}={value!r}" for key, value in self.to_dict().items())
        return f"{type(self).__name__}({fields})"
