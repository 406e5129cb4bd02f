##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
The `update` operation.
"""

import logging

from surrealorm.clients.base import DatabaseClient
from surrealorm.exceptions import MissingIdentifierError
from surrealorm.query import E, merge_record, to_record_id


LOG = logging.getLogger(__name__)


async def update(client: DatabaseClient, entity: E) -> E:
    """
    Replace the content of the entity's record with its current fields.

    Args:
        client: The database client.
        entity: The entity to update. Its `id` may be a `RecordID`, a
            `"table:key"` string, or a bare key.

    Returns:
        The same entity with the stored record merged onto it.

    Raises:
        MissingIdentifierError: If the entity has no id. The client is never
            called in that case.
    """
    if not entity.id:
        raise MissingIdentifierError("update", type(entity).__name__)

    table = type(entity).get_table_name()
    record_id = to_record_id(table, entity.id)
    payload = entity.serialize()
    LOG.debug(f"Updating record '{record_id}' with payload: {payload}")

    result = await client.update(record_id, payload)
    if isinstance(result, list):
        result = result[0] if result else None
    if result:
        merge_record(entity, result)
    return entity
