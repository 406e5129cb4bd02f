##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
The `raw` operation.
"""

import logging
from typing import Any, Dict, Optional

from surrealorm.clients.base import DatabaseClient
from surrealorm.query import first_statement


LOG = logging.getLogger(__name__)


async def raw(client: DatabaseClient, query: str, params: Optional[Dict[str, Any]] = None) -> Any:
    """
    Execute a SurrealQL query as-is.

    Errors raised by the client are not caught or rewrapped.

    Args:
        client: The database client.
        query: The SurrealQL text.
        params: Optional query parameters.

    Returns:
        The payload of the first statement, unwrapped from its
        `{"result": ...}` envelope if it has one.
    """
    LOG.debug(f"Raw query: {query}")
    LOG.debug(f"Raw params: {params}")
    return first_statement(await client.query(query, params))
