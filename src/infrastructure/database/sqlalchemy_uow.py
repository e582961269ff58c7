"""SQLAlchemy Unit of Work implementation."""

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from infrastructure.database.repositories.sqlalchemy_match_repo import SQLAlchemyMatchRepository
from infrastructure.database.repositories.sqlalchemy_message_repo import SQLAlchemyMessageRepository
from infrastructure.database.repositories.sqlalchemy_profile_repo import (
    SQLAlchemyProfilePhotoRepository,
    SQLAlchemyProfileRepository,
)
from infrastructure.database.repositories.sqlalchemy_safety_repo import (
    SQLAlchemyBlockRepository,
    SQLAlchemyReportRepository,
)
from infrastructure.database.repositories.sqlalchemy_swipe_repo import SQLAlchemySwipeRepository


class SQLAlchemyUnitOfWork:
    """Unit of Work implementation using SQLAlchemy.

    All repositories handed out by one unit share a single session, so
    everything done inside ``async with`` commits or rolls back together.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

    def _require_session(self) -> AsyncSession:
        if not self._session:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return self._session

    @property
    def profiles(self) -> SQLAlchemyProfileRepository:
        """Get profile repository."""
        return SQLAlchemyProfileRepository(self._require_session())

    @property
    def photos(self) -> SQLAlchemyProfilePhotoRepository:
        """Get profile photo repository."""
        return SQLAlchemyProfilePhotoRepository(self._require_session())

    @property
    def swipes(self) -> SQLAlchemySwipeRepository:
        """Get swipe repository."""
        return SQLAlchemySwipeRepository(self._require_session())

    @property
    def matches(self) -> SQLAlchemyMatchRepository:
        """Get match repository."""
        return SQLAlchemyMatchRepository(self._require_session())

    @property
    def messages(self) -> SQLAlchemyMessageRepository:
        """Get message repository."""
        return SQLAlchemyMessageRepository(self._require_session())

    @property
    def blocks(self) -> SQLAlchemyBlockRepository:
        """Get block repository."""
        return SQLAlchemyBlockRepository(self._require_session())

    @property
    def reports(self) -> SQLAlchemyReportRepository:
        """Get report repository."""
        return SQLAlchemyReportRepository(self._require_session())

    async def commit(self) -> None:
        """Commit the current transaction."""
        if self._session:
            await self._session.commit()

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session:
            await self._session.rollback()

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        """Enter the context manager and create session."""
        self._session = self._session_factory()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[Exception],
        exc_tb: Any,
    ) -> None:
        """Exit the context manager and cleanup."""
        if self._session:
            if exc_type:
                await self.rollback()
            await self._session.close()
            self._session = None
