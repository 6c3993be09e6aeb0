"""Receipt writes."""

from sqlalchemy import insert

from warehouse_api.domain import Receipt
from warehouse_api.repositories.base import BaseRepository
from warehouse_api.schemas.receipt import ReceiptCreate


class ReceiptRepository(BaseRepository):

    async def create(self, data: ReceiptCreate) -> int:
        """Insert one receipt and return the ``receipt_id`` assigned by the database.

        The row is committed on its own; a foreign-key or NOT NULL violation
        leaves nothing behind.
        """
        stmt = (
            insert(Receipt)
            .values(**data.model_dump())
            .returning(Receipt.receipt_id)
        )
        async with self._operation("create receipt"):
            receipt_id = (await self._session.execute(stmt)).scalar_one()
            await self._session.commit()
        return receipt_id
