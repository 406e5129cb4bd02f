##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
The `delete` operation.
"""

import logging

from surrealorm.clients.base import DatabaseClient
from surrealorm.entity import BaseEntity
from surrealorm.exceptions import MissingIdentifierError
from surrealorm.query import to_record_id


LOG = logging.getLogger(__name__)


async def delete(client: DatabaseClient, entity: BaseEntity):
    """
    Delete the entity's record. The in-memory entity is left untouched.

    Args:
        client: The database client.
        entity: The entity whose record should be removed.

    Raises:
        MissingIdentifierError: If the entity has no id.
    """
    if not entity.id:
        raise MissingIdentifierError("delete", type(entity).__name__)

    record_id = to_record_id(type(entity).get_table_name(), entity.id)
    await client.delete(record_id)
    LOG.debug(f"Deleted record '{record_id}'.")
