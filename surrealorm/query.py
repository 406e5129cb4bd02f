##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
Query construction and result hydration for SurrealORM.

This module turns a where specification (a mapping of field name to value)
into a parameterized SurrealQL query, and turns the raw rows returned by the
database back into entity instances.

Field names are interpolated into the query text as-is and only values are
bound as parameters. Where specifications must therefore only ever use field
names from the entity's declared fields, never names taken from user input.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, TypeVar

from surrealdb import RecordID

from surrealorm.entity import ID_FIELD, BaseEntity
from surrealorm.exceptions import NotUniqueFieldError


LOG = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseEntity)


def normalize_identifier(value: Any) -> Any:
    """
    Get the value bound for the `id` condition of a where clause.

    Args:
        value: A `RecordID` or a plain key.

    Returns:
        The local key of a `RecordID`, or `value` unchanged.
    """
    if isinstance(value, RecordID):
        return value.id
    return value


def build_where_clause(where: Mapping[str, Any]) -> Tuple[str, Dict[str, Any]]:
    """
    Build an AND-joined equality clause and its parameters.

    Conditions follow the key order of `where`. The `id` field addresses the
    record through `type::thing($table, $id)`, so callers must also bind
    `table`; every other field `f` becomes `f = $f`.

    Args:
        where: Mapping of field name to the value it must equal.

    Returns:
        A tuple of (clause, params).
    """
    conditions = []
    params = {}

    for field, value in where.items():
        if field == ID_FIELD:
            conditions.append(f"{ID_FIELD} = type::thing($table, ${ID_FIELD})")
            params[ID_FIELD] = normalize_identifier(value)
        else:
            conditions.append(f"{field} = ${field}")
            params[field] = value

    return " AND ".join(conditions), params


def build_select_query(
    table: str, where: Optional[Mapping[str, Any]] = None, limit: Optional[int] = None
) -> Tuple[str, Dict[str, Any]]:
    """
    Build a `SELECT` query for `table`.

    Args:
        table: The table to select from.
        where: Optional where specification; no WHERE clause when empty.
        limit: Optional maximum number of rows.

    Returns:
        A tuple of (query, params). `params` binds `table` ahead of the
        field parameters whenever there is a where clause.
    """
    query = f"SELECT * FROM {table}"
    params: Dict[str, Any] = {}

    if where:
        clause, field_params = build_where_clause(where)
        query += f" WHERE {clause}"
        params = {"table": table, **field_params}

    if limit is not None:
        query += f" LIMIT {int(limit)}"

    return query, params


def validate_unique_fields(entity_class: Type[BaseEntity], where: Mapping[str, Any]):
    """
    Ensure every field of `where` other than `id` is declared unique.

    Args:
        entity_class: The entity class being queried.
        where: The where specification.

    Raises:
        NotUniqueFieldError: For the first field not declared with `unique=True`.
    """
    properties = entity_class.get_properties()
    for field in where:
        if field == ID_FIELD:
            continue
        if not properties.get(field, {}).get("unique"):
            raise NotUniqueFieldError(field, entity_class.__name__)


def first_statement(response: Any) -> Any:
    """
    Get the payload of the first statement of a query response.

    Accepts a list of `{"result": ...}` envelopes or a list of bare
    statement results.

    Args:
        response: What the client returned for the query.

    Returns:
        The first statement's payload; `response` itself when it isn't a
        non-empty list.
    """
    if isinstance(response, (list, tuple)) and response:
        first = response[0]
        if isinstance(first, dict) and "result" in first:
            return first["result"]
        return first
    return response


def first_statement_rows(response: Any) -> List[Dict[str, Any]]:
    """
    Get the rows of the first statement of a query response.

    Returns:
        The rows as a list; empty when the statement returned nothing.
    """
    payload = first_statement(response)
    if not payload:
        return []
    if isinstance(payload, dict):
        return [payload]
    return list(payload)


def merge_record(entity: E, record: Mapping[str, Any]) -> E:
    """
    Overwrite the fields of `entity` with every key of `record`.

    Returns:
        The same entity.
    """
    for key, value in record.items():
        setattr(entity, key, value)
    return entity


def hydrate(entity_class: Type[E], record: Mapping[str, Any]) -> E:
    """
    Create a new instance of `entity_class` filled from a raw record.

    Args:
        entity_class: The entity class; must be constructible without arguments.
        record: The raw row, including its `id`.

    Returns:
        The hydrated entity.
    """
    return merge_record(entity_class(), record)


def to_record_id(table: str, identifier: Any) -> RecordID:
    """
    Resolve an entity id to a fully-qualified record reference.

    Args:
        table: The entity's table.
        identifier: A `RecordID`, a `"table:key"` string, or a bare key.

    Returns:
        A `RecordID` addressing the record.
    """
    if isinstance(identifier, RecordID):
        return identifier
    if isinstance(identifier, str) and identifier.startswith(f"{table}:"):
        identifier = identifier[len(table) + 1 :]
    return RecordID(table, identifier)


def build_index_statements(entity_class: Type[BaseEntity]) -> List[str]:
    """
    Build `DEFINE INDEX` statements for the fields declared with `unique` or `index`.

    A unique index makes the database reject the duplicate row that two
    racing upserts on the same key could otherwise both create.

    Args:
        entity_class: The entity class.

    Returns:
        One statement per indexed field.
    """
    table = entity_class.get_table_name()
    statements = []
    for field, meta in entity_class.get_properties().items():
        if not (meta.get("unique") or meta.get("index")):
            continue
        statement = f"DEFINE INDEX IF NOT EXISTS {table}_{field}_idx ON TABLE {table} FIELDS {field}"
        if meta.get("unique"):
            statement += " UNIQUE"
        statements.append(statement)
    return statements
