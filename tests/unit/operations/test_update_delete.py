##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
Tests for the `operations/update.py` and `operations/delete.py` modules.
"""

from unittest.mock import MagicMock

import pytest
from surrealdb import RecordID

from surrealorm.exceptions import MissingIdentifierError
from surrealorm.operations import create, delete, find_all, find_unique, update
from tests.entities import User
from tests.fixture_types import FixtureClient


async def created_user(client: FixtureClient, **fields) -> User:
    """Create and return a `User` with the given fields."""
    user = User()
    for key, value in fields.items():
        setattr(user, key, value)
    return await create(client, user)


class TestUpdate:
    """
    Tests for `update`.
    """

    @pytest.mark.asyncio
    async def test_update_persists_fields(self, connected_client: FixtureClient):
        """
        Test that the entity's current fields replace the stored record.

        Args:
            connected_client: The connected in-memory client.
        """
        user = await created_user(connected_client, email="a@x.com", name="Ada")
        user.name = "Ada Lovelace"
        result = await update(connected_client, user)

        assert result is user
        stored = await find_unique(connected_client, User, {"email": "a@x.com"})
        assert stored.name == "Ada Lovelace"
        assert connected_client.called("update") == [
            (RecordID("users", "k1"), {"email": "a@x.com", "name": "Ada Lovelace"})
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("identifier", ["users:k1", "k1"])
    async def test_string_identifiers(self, connected_client: FixtureClient, identifier: str):
        """
        Test that prefixed and bare string ids address the same record.

        Args:
            connected_client: The connected in-memory client.
            identifier: The id given to the entity.
        """
        await created_user(connected_client, email="a@x.com", name="Ada")
        user = User()
        user.id = identifier
        user.email = "a@x.com"
        user.name = "Changed"
        await update(connected_client, user)
        record_id = connected_client.called("update")[0][0]
        assert (record_id.table_name, record_id.id) == ("users", "k1")
        assert connected_client.tables["users"]["k1"]["name"] == "Changed"

    @pytest.mark.asyncio
    async def test_list_response_is_merged(self, mock_client: MagicMock):
        """
        Test that a list response merges its first record onto the entity.

        Args:
            mock_client: A mocked database client.
        """
        mock_client.update.return_value = [{"id": RecordID("users", "x"), "name": "Stored", "updated": True}]
        user = User()
        user.id = RecordID("users", "x")
        user.name = "Local"
        await update(mock_client, user)
        assert user.name == "Stored"
        assert user.updated is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("response", [None, []])
    async def test_empty_response_leaves_entity(self, mock_client: MagicMock, response):
        """
        Test that an empty response leaves the entity as it was.

        Args:
            mock_client: A mocked database client.
            response: The empty update response.
        """
        mock_client.update.return_value = response
        user = User()
        user.id = RecordID("users", "x")
        user.name = "Local"
        assert await update(mock_client, user) is user
        assert user.name == "Local"

    @pytest.mark.asyncio
    async def test_update_without_id(self, mock_client: MagicMock):
        """
        Test that updating an entity without id raises before calling the client.

        Args:
            mock_client: A mocked database client.
        """
        with pytest.raises(MissingIdentifierError, match="Cannot update User entity without id"):
            await update(mock_client, User())
        mock_client.update.assert_not_called()


class TestDelete:
    """
    Tests for `delete`.
    """

    @pytest.mark.asyncio
    async def test_delete_removes_record(self, connected_client: FixtureClient):
        """
        Test that the record is removed and the entity keeps its fields.

        Args:
            connected_client: The connected in-memory client.
        """
        user = await created_user(connected_client, email="a@x.com", name="Ada")
        await created_user(connected_client, email="b@x.com", name="Bob")
        await delete(connected_client, user)

        remaining = await find_all(connected_client, User)
        assert [u.email for u in remaining] == ["b@x.com"]
        assert user.id == RecordID("users", "k1")
        assert user.name == "Ada"

    @pytest.mark.asyncio
    async def test_delete_without_id(self, mock_client: MagicMock):
        """
        Test that deleting an entity without id raises before calling the client.

        Args:
            mock_client: A mocked database client.
        """
        with pytest.raises(MissingIdentifierError, match="Cannot delete User entity without id"):
            await delete(mock_client, User())
        mock_client.delete.assert_not_called()
