##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
Tests for the `operations/find.py` module.
"""

from unittest.mock import MagicMock

import pytest
from surrealdb import RecordID

from surrealorm.exceptions import NotUniqueFieldError
from surrealorm.operations import create, find_all, find_many, find_unique
from tests.entities import User
from tests.fixture_types import FixtureClient


async def seed(client: FixtureClient, *rows):
    """Create a `User` for every row of fields."""
    users = []
    for fields in rows:
        user = User()
        for key, value in fields.items():
            setattr(user, key, value)
        users.append(await create(client, user))
    return users


class TestFindUnique:
    """
    Tests for `find_unique`.
    """

    @pytest.mark.asyncio
    async def test_found(self, connected_client: FixtureClient):
        """
        Test that a record matching a unique field is hydrated.

        Args:
            connected_client: The connected in-memory client.
        """
        await seed(connected_client, {"email": "a@x.com", "name": "Ada"}, {"email": "b@x.com", "name": "Bob"})
        user = await find_unique(connected_client, User, {"email": "b@x.com"})
        assert isinstance(user, User)
        assert user.name == "Bob"
        assert user.id == RecordID("users", "k2")

    @pytest.mark.asyncio
    async def test_query_shape(self, connected_client: FixtureClient):
        """
        Test the query and parameters sent to the client.

        Args:
            connected_client: The connected in-memory client.
        """
        await find_unique(connected_client, User, {"email": "a@x.com"})
        assert connected_client.called("query") == [
            ("SELECT * FROM users WHERE email = $email LIMIT 1", {"table": "users", "email": "a@x.com"})
        ]

    @pytest.mark.asyncio
    async def test_not_found(self, connected_client: FixtureClient):
        """
        Test that no match returns None.

        Args:
            connected_client: The connected in-memory client.
        """
        assert await find_unique(connected_client, User, {"email": "nobody@x.com"}) is None

    @pytest.mark.asyncio
    async def test_by_id(self, connected_client: FixtureClient):
        """
        Test that `id` is accepted as a lookup field.

        Args:
            connected_client: The connected in-memory client.
        """
        (created,) = await seed(connected_client, {"email": "a@x.com"})
        user = await find_unique(connected_client, User, {"id": created.id})
        assert user.email == "a@x.com"

    @pytest.mark.asyncio
    async def test_non_unique_field(self, mock_client: MagicMock):
        """
        Test that a non-unique field raises before any query is sent.

        Args:
            mock_client: A mocked database client.
        """
        with pytest.raises(NotUniqueFieldError):
            await find_unique(mock_client, User, {"name": "Ada"})
        mock_client.query.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_where(self, connected_client: FixtureClient):
        """
        Test that a lookup naming no field raises instead of returning an arbitrary record.

        Args:
            connected_client: The connected in-memory client.
        """
        await seed(connected_client, {"email": "a@x.com", "name": "A"})
        calls_before = list(connected_client.calls)

        with pytest.raises(ValueError, match="find_unique requires at least one unique field of User"):
            await find_unique(connected_client, User, {})
        assert connected_client.calls == calls_before

    @pytest.mark.asyncio
    async def test_bare_statement_response(self, mock_client: MagicMock):
        """
        Test that a response without `{"result": ...}` envelopes is understood.

        Args:
            mock_client: A mocked database client.
        """
        mock_client.query.return_value = [[{"id": RecordID("users", "x"), "email": "a@x.com"}]]
        user = await find_unique(mock_client, User, {"email": "a@x.com"})
        assert user.id == RecordID("users", "x")


class TestFindMany:
    """
    Tests for `find_many` and `find_all`.
    """

    @pytest.mark.asyncio
    async def test_matches_all_conditions(self, connected_client: FixtureClient):
        """
        Test that every condition must match.

        Args:
            connected_client: The connected in-memory client.
        """
        await seed(
            connected_client,
            {"email": "a@x.com", "name": "Ada", "age": 36},
            {"email": "b@x.com", "name": "Ada", "age": 20},
            {"email": "c@x.com", "name": "Bob", "age": 36},
        )
        users = await find_many(connected_client, User, {"name": "Ada", "age": 36})
        assert [user.email for user in users] == ["a@x.com"]

    @pytest.mark.asyncio
    async def test_non_unique_fields_allowed(self, connected_client: FixtureClient):
        """
        Test that `find_many` doesn't require unique fields.

        Args:
            connected_client: The connected in-memory client.
        """
        await seed(connected_client, {"email": "a@x.com", "name": "Ada"}, {"email": "b@x.com", "name": "Ada"})
        users = await find_many(connected_client, User, {"name": "Ada"})
        assert len(users) == 2
        assert connected_client.called("query")[-1][0] == "SELECT * FROM users WHERE name = $name"

    @pytest.mark.asyncio
    async def test_no_match(self, connected_client: FixtureClient):
        """
        Test that no match returns an empty list rather than None.

        Args:
            connected_client: The connected in-memory client.
        """
        assert await find_many(connected_client, User, {"name": "Nobody"}) == []

    @pytest.mark.asyncio
    async def test_empty_where_selects_everything(self, connected_client: FixtureClient):
        """
        Test that an empty where behaves like `find_all`.

        Args:
            connected_client: The connected in-memory client.
        """
        await seed(connected_client, {"email": "a@x.com"}, {"email": "b@x.com"})
        assert len(await find_many(connected_client, User, {})) == 2
        assert connected_client.called("query")[-1] == ("SELECT * FROM users", {})

    @pytest.mark.asyncio
    async def test_find_all(self, connected_client: FixtureClient):
        """
        Test that `find_all` returns every record of the table.

        Args:
            connected_client: The connected in-memory client.
        """
        assert await find_all(connected_client, User) == []
        await seed(connected_client, {"email": "a@x.com"}, {"email": "b@x.com"})
        users = await find_all(connected_client, User)
        assert sorted(user.email for user in users) == ["a@x.com", "b@x.com"]
        assert all(isinstance(user, User) for user in users)
