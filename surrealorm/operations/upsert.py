##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
The `upsert` operation.

The lookup and the following write are two separate requests, so two
concurrent upserts on the same key can both decide to create. Declare the key
with `Property(unique=True)` and call `SurrealORM.ensure_indexes` to have the
database reject the second row.
"""

import logging

from surrealorm.clients.base import DatabaseClient
from surrealorm.operations.create import create
from surrealorm.operations.update import update
from surrealorm.query import E, build_select_query, first_statement_rows


LOG = logging.getLogger(__name__)


async def upsert(client: DatabaseClient, entity: E, *unique_fields: str) -> E:
    """
    Update the record matching `entity` on `unique_fields`, or create it.

    The named fields are not checked against the `unique` flag of the
    entity's properties; the caller chooses the key.

    Args:
        client: The database client.
        entity: The entity to store.
        unique_fields: The fields identifying an existing record.

    Returns:
        The same entity after the update or create.

    Raises:
        ValueError: If no field is named, or a named field is unset or None
            on the entity. The client is never called in that case.
    """
    if not unique_fields:
        raise ValueError("upsert requires at least one field to match existing records on")

    values = vars(entity)
    missing = [field for field in unique_fields if values.get(field) is None]
    if missing:
        raise ValueError(
            f"Cannot upsert {type(entity).__name__} entity without a value for its key field(s): {', '.join(missing)}"
        )

    table = type(entity).get_table_name()
    where = {field: values[field] for field in unique_fields}
    query, params = build_select_query(table, where, limit=1)
    LOG.debug(f"Upsert lookup query: {query}")
    LOG.debug(f"Upsert lookup params: {params}")

    rows = first_statement_rows(await client.query(query, params))
    if rows:
        previous_id = entity.id
        entity.id = rows[0]["id"]
        LOG.debug(f"Found existing {table} record '{entity.id}', updating it.")
        try:
            return await update(client, entity)
        except Exception:
            entity.id = previous_id
            raise

    LOG.debug(f"No existing {table} record matched {list(unique_fields)}, creating one.")
    return await create(client, entity)
