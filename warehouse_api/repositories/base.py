"""Base async repository: session holder and storage-error wrapping."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from warehouse_api.core.exceptions import StorageError

logger = logging.getLogger(__name__)


class BaseRepository:
    """Shared plumbing for repositories.

    Every query runs inside :meth:`_operation`, which rolls the session back
    and re-raises any SQLAlchemy / driver error as :class:`StorageError`
    tagged with the operation name. Nothing is retried.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    @asynccontextmanager
    async def _operation(self, name: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            try:
                await self._session.rollback()
            except SQLAlchemyError:
                logger.warning("Rollback after failed %s also failed", name, exc_info=True)
            raise StorageError(name, exc) from exc
