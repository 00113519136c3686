"""
End-to-end directory tests over SQLite.

Wires DirectoryService to SqlRecordStore and checks the assembled graphs.

System role: Verification of directory queries against real storage
"""

import pytest

from userdir.application.services.directory_service import DirectoryService
from userdir.boundary.db.record_store import SqlRecordStore
from userdir.core.exceptions import RecordNotFoundError
from userdir.models.user import SearchKey


@pytest.fixture
def directory(test_async_db) -> DirectoryService:
    """Provide DirectoryService on the test session."""
    return DirectoryService(store=SqlRecordStore(test_async_db))


class TestDirectorySearchFlow:
    """Test suite for search over storage."""

    @pytest.mark.asyncio
    async def test_search_should_return_single_user_with_all_children(
        self, directory, seed_user
    ) -> None:
        user_id = await seed_user("Jhon", "Victor", ("Home", "Office"), ("Home", "Office"))

        users = await directory.search(SearchKey(first_name="Jhon", last_name="Victor"))

        assert len(users) == 1
        assert users[0].id == user_id
        assert sorted(a.type for a in users[0].addresses) == ["Home", "Office"]
        assert sorted(p.type for p in users[0].phones) == ["Home", "Office"]

    @pytest.mark.asyncio
    async def test_search_should_keep_namesakes_apart(self, directory, seed_user) -> None:
        first = await seed_user("Jhon", "Victor", ("Home",), ("Home", "Office"))
        second = await seed_user("Jhon", "Victor", ("Office", "Home", "Other"))

        users = await directory.search(SearchKey(first_name="Jhon", last_name="Victor"))

        by_id = {u.id: u for u in users}
        assert set(by_id) == {first, second}
        assert len(by_id[first].addresses) == 1
        assert len(by_id[first].phones) == 2
        assert len(by_id[second].addresses) == 3
        assert by_id[second].phones == []

    @pytest.mark.asyncio
    async def test_search_should_skip_user_without_addresses(self, directory, seed_user) -> None:
        await seed_user("Jhon", "Victor", (), ("Home",))

        users = await directory.search(SearchKey(first_name="Jhon", last_name="Victor"))

        assert users == []

    @pytest.mark.asyncio
    async def test_search_should_return_empty_for_unknown_name(self, directory, seed_user) -> None:
        await seed_user("Jhon", "Victor", ("Home",))

        users = await directory.search(SearchKey(first_name="Nobody", last_name="Here"))

        assert users == []


class TestDirectoryGetByIdFlow:
    """Test suite for get_by_id over storage."""

    @pytest.mark.asyncio
    async def test_get_by_id_should_return_same_graph_twice(self, directory, seed_user) -> None:
        user_id = await seed_user("Jhon", "Victor", ("Home", "Office"), ("Home",))

        first = await directory.get_by_id(str(user_id))
        second = await directory.get_by_id(str(user_id))

        assert first == second
        assert len(first.addresses) == 2
        assert len(first.phones) == 1

    @pytest.mark.asyncio
    async def test_get_by_id_should_return_user_without_children(
        self, directory, seed_user
    ) -> None:
        user_id = await seed_user("Solo", "User")

        user = await directory.get_by_id(user_id)

        assert user.addresses == []
        assert user.phones == []

    @pytest.mark.asyncio
    async def test_get_by_id_should_raise_for_malformed_id(self, directory) -> None:
        with pytest.raises(RecordNotFoundError):
            await directory.get_by_id("missing-id")
