"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory async database, row seeding helpers, domain model factories
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from datetime import date, datetime, timezone

import pytest

from userdir.models.user import Address, Phone, User


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from userdir.boundary.db.base import Base
    import userdir.boundary.db.models  # noqa: F401  (registers tables)

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def seed_user(test_async_db):
    """
    Insert a user with addresses and phones.

    Returns:
        Callable: async (first_name, last_name, address_types, phone_types, **user_fields) -> user id
    """
    from userdir.boundary.db.models import AddressModel, PhoneModel, UserModel

    async def _seed(
        first_name: str,
        last_name: str,
        address_types: tuple[str, ...] = (),
        phone_types: tuple[str, ...] = (),
        **user_fields,
    ) -> uuid.UUID:
        user = UserModel(first_name=first_name, last_name=last_name, **user_fields)
        test_async_db.add(user)
        await test_async_db.flush()
        for index, kind in enumerate(address_types):
            test_async_db.add(
                AddressModel(user_id=user.id, type=kind, line1=f"{index + 1} Main St", city="Springfield")
            )
        for index, kind in enumerate(phone_types):
            test_async_db.add(
                PhoneModel(user_id=user.id, type=kind, number=f"555-010{index}")
            )
        await test_async_db.flush()
        return user.id

    return _seed


def make_user(first_name: str = "Jhon", last_name: str = "Victor", **fields) -> User:
    """Build a childless User for pure unit tests."""
    now = datetime.now(timezone.utc)
    values = {
        "id": uuid.uuid4(),
        "first_name": first_name,
        "last_name": last_name,
        "date_of_birth": date(1990, 1, 1),
        "gender": "M",
        "created_at": now,
        "updated_at": now,
    }
    values.update(fields)
    return User(**values)


def make_address(user: User, kind: str = "Home") -> Address:
    """Build an Address owned by user."""
    now = datetime.now(timezone.utc)
    return Address(
        id=uuid.uuid4(),
        user_id=user.id,
        type=kind,
        line1="1 Main St",
        city="Springfield",
        created_at=now,
        updated_at=now,
    )


def make_phone(user: User, kind: str = "Home") -> Phone:
    """Build a Phone owned by user."""
    now = datetime.now(timezone.utc)
    return Phone(
        id=uuid.uuid4(),
        user_id=user.id,
        type=kind,
        number="555-0100",
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def user_factory():
    """Factory for childless users."""
    return make_user


@pytest.fixture
def address_factory():
    """Factory for addresses."""
    return make_address


@pytest.fixture
def phone_factory():
    """Factory for phones."""
    return make_phone
