"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from domain.entities.profile import AccountType, Profile


class FakeUnitOfWork:
    """Fake Unit of Work with all 7 repository mocks for unit testing."""

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.photos = AsyncMock()
        self.swipes = AsyncMock()
        self.matches = AsyncMock()
        self.messages = AsyncMock()
        self.blocks = AsyncMock()
        self.reports = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


def make_profile(**overrides: Any) -> Profile:
    """A complete, visible profile with sensible defaults."""
    values: dict[str, Any] = {
        "user_id": uuid4(),
        "display_name": "Member",
        "age": 30,
        "account_type": AccountType.SINGLE,
        "is_profile_complete": True,
    }
    values.update(overrides)
    return Profile(**values)


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def user_id() -> UUID:
    """A random auth user ID."""
    return uuid4()


@pytest.fixture
def me(uow: FakeUnitOfWork, user_id: UUID) -> Profile:
    """The caller's profile, resolvable from user_id."""
    profile = make_profile(user_id=user_id, display_name="Me")
    uow.profiles.get_by_user_id.return_value = profile
    return profile
