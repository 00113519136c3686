"""
Test suite for GraphAssembler.

Tests the keyed rejoin of independently fetched address and phone rows:
one entry per owner, per-owner partitioning, first-seen ordering, and the
address-anchored search asymmetry.

System role: Verification of entity-graph assembly
"""

import pytest

from userdir.core.graph_assembler import GraphAssembler


@pytest.fixture
def assembler() -> GraphAssembler:
    """Provide GraphAssembler instance for testing."""
    return GraphAssembler()


class TestGraphAssemblerDeduplication:
    """Test suite for duplicate parent elimination."""

    def test_assemble_should_return_one_user_for_two_by_two_children(
        self, assembler, user_factory, address_factory, phone_factory
    ) -> None:
        """Two addresses and two phones yield one user, not four."""
        # Arrange
        user = user_factory("Jhon", "Victor")
        home_a, office_a = address_factory(user, "Home"), address_factory(user, "Office")
        home_p, office_p = phone_factory(user, "Home"), phone_factory(user, "Office")

        # Act
        result = assembler.assemble(
            [(user, home_a), (user, office_a)],
            [(user, home_p), (user, office_p)],
        )

        # Assert
        assert len(result) == 1
        assert result[0].id == user.id
        assert [a.type for a in result[0].addresses] == ["Home", "Office"]
        assert [p.type for p in result[0].phones] == ["Home", "Office"]

    def test_assemble_should_keep_parent_scalars(
        self, assembler, user_factory, address_factory
    ) -> None:
        """Shell is built from the embedded parent attributes."""
        user = user_factory("Ada", "Lovelace", gender="F")

        result = assembler.assemble([(user, address_factory(user))], [])

        assert result[0].first_name == "Ada"
        assert result[0].last_name == "Lovelace"
        assert result[0].gender == "F"
        assert result[0].created_at == user.created_at


class TestGraphAssemblerPartitioning:
    """Test suite for per-parent partitioning."""

    def test_assemble_should_not_mix_children_across_parents(
        self, assembler, user_factory, address_factory, phone_factory
    ) -> None:
        """Each user's collections contain only its own items."""
        first = user_factory("Jhon", "Victor")
        second = user_factory("Jhon", "Victor")
        a1, a2, a3 = address_factory(first), address_factory(second), address_factory(first, "Office")
        p1, p2 = phone_factory(second), phone_factory(first)

        result = assembler.assemble(
            [(first, a1), (second, a2), (first, a3)],
            [(second, p1), (first, p2)],
        )

        assert [u.id for u in result] == [first.id, second.id]
        by_id = {u.id: u for u in result}
        assert {a.id for a in by_id[first.id].addresses} == {a1.id, a3.id}
        assert {a.id for a in by_id[second.id].addresses} == {a2.id}
        assert [p.id for p in by_id[first.id].phones] == [p2.id]
        assert [p.id for p in by_id[second.id].phones] == [p1.id]
        for user in result:
            assert all(a.user_id == user.id for a in user.addresses)
            assert all(p.user_id == user.id for p in user.phones)

    @pytest.mark.parametrize("address_count,phone_count", [(1, 0), (1, 3), (3, 1), (4, 4)])
    def test_assemble_should_keep_every_child_exactly_once(
        self, assembler, user_factory, address_factory, phone_factory, address_count, phone_count
    ) -> None:
        """Collection sizes equal the number of fetched rows per owner."""
        user = user_factory()
        addresses = [address_factory(user) for _ in range(address_count)]
        phones = [phone_factory(user) for _ in range(phone_count)]

        result = assembler.assemble(
            [(user, a) for a in addresses],
            [(user, p) for p in phones],
        )

        assert len(result) == 1
        assert result[0].addresses == addresses
        assert result[0].phones == phones

    def test_assemble_should_preserve_first_seen_order(
        self, assembler, user_factory, address_factory
    ) -> None:
        """Users are emitted in the order they first appear in address rows."""
        users = [user_factory(last_name=f"Victor{i}") for i in range(3)]
        rows = [
            (users[2], address_factory(users[2])),
            (users[0], address_factory(users[0])),
            (users[2], address_factory(users[2])),
            (users[1], address_factory(users[1])),
        ]

        result = assembler.assemble(rows, [])

        assert [u.id for u in result] == [users[2].id, users[0].id, users[1].id]


class TestGraphAssemblerEdgeCases:
    """Test suite for empty inputs, asymmetry and anomalies."""

    def test_assemble_should_return_empty_for_no_rows(self, assembler) -> None:
        assert assembler.assemble([], []) == []

    def test_assemble_should_ignore_phone_only_parents(
        self, assembler, user_factory, phone_factory
    ) -> None:
        """Phones alone never create a user: search is anchored on addresses."""
        user = user_factory()

        result = assembler.assemble([], [(user, phone_factory(user))])

        assert result == []

    def test_assemble_should_attach_empty_phones_when_none_fetched(
        self, assembler, user_factory, address_factory
    ) -> None:
        user = user_factory()

        result = assembler.assemble([(user, address_factory(user))], [])

        assert result[0].phones == []

    def test_assemble_should_drop_child_owned_by_another_parent(
        self, assembler, user_factory, address_factory, phone_factory
    ) -> None:
        """Rows whose child points at a different owner are dropped, not raised."""
        owner = user_factory()
        stranger = user_factory()
        good = address_factory(owner)

        result = assembler.assemble(
            [(owner, good), (owner, address_factory(stranger))],
            [(owner, phone_factory(stranger))],
        )

        assert len(result) == 1
        assert result[0].addresses == [good]
        assert result[0].phones == []

    def test_assemble_should_not_mutate_input_users(
        self, assembler, user_factory, address_factory
    ) -> None:
        user = user_factory()

        assembler.assemble([(user, address_factory(user))], [])

        assert user.addresses == []
