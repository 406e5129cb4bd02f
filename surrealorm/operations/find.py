##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
Read operations: `find_unique`, `find_many`, and `find_all`.
"""

import logging
from typing import Any, List, Mapping, Optional, Type

from surrealorm.clients.base import DatabaseClient
from surrealorm.query import E, build_select_query, first_statement_rows, hydrate, validate_unique_fields


LOG = logging.getLogger(__name__)


async def _select(
    client: DatabaseClient, entity_class: Type[E], where: Optional[Mapping[str, Any]], limit: Optional[int]
) -> List[E]:
    """
    Run a `SELECT` against the entity's table and hydrate the first statement's rows.
    """
    table = entity_class.get_table_name()
    query, params = build_select_query(table, where, limit=limit)
    LOG.debug(f"{entity_class.__name__} query: {query}")
    LOG.debug(f"{entity_class.__name__} params: {params}")

    response = await client.query(query, params)
    entities = [hydrate(entity_class, record) for record in first_statement_rows(response)]
    LOG.debug(f"Retrieved {len(entities)} {table} record(s).")
    return entities


async def find_unique(client: DatabaseClient, entity_class: Type[E], where: Mapping[str, Any]) -> Optional[E]:
    """
    Find a single record by unique field values.

    Args:
        client: The database client.
        entity_class: The entity class to find.
        where: Mapping of unique field (or `id`) to value.

    Returns:
        The hydrated entity, or None if nothing matched.

    Raises:
        ValueError: If `where` names no field. The client is never called
            in that case.
        NotUniqueFieldError: If a field of `where` isn't declared unique. The
            client is never called in that case.
    """
    if not where:
        raise ValueError(f"find_unique requires at least one unique field of {entity_class.__name__} to look up by")
    validate_unique_fields(entity_class, where)
    entities = await _select(client, entity_class, where, limit=1)
    return entities[0] if entities else None


async def find_many(client: DatabaseClient, entity_class: Type[E], where: Mapping[str, Any]) -> List[E]:
    """
    Find every record matching all the given field values.

    Returns:
        A list of hydrated entities; empty if nothing matched.
    """
    return await _select(client, entity_class, where, limit=None)


async def find_all(client: DatabaseClient, entity_class: Type[E]) -> List[E]:
    """
    Find every record of an entity's table.

    Returns:
        A list of hydrated entities; empty if the table is empty.
    """
    return await _select(client, entity_class, None, limit=None)
