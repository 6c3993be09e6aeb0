"""Supplier queries: suppliers by material and supplier counts."""

import logging

from sqlalchemy import distinct, func, select

from warehouse_api.domain import Receipt, Supplier
from warehouse_api.repositories.base import BaseRepository
from warehouse_api.repositories.filters import EqualityFilter
from warehouse_api.schemas.supplier import SupplierCountFilter

logger = logging.getLogger(__name__)


class SupplierRepository(BaseRepository):

    async def list_by_material(self, material_id: int) -> list[Supplier]:
        """Suppliers with at least one receipt for the material, each listed once."""
        q = (
            select(Supplier)
            .join(Receipt, Supplier.supplier_id == Receipt.supplier_id)
            .where(Receipt.material_id == material_id)
            .group_by(Supplier.supplier_id)
            .order_by(Supplier.supplier_id)
        )
        async with self._operation("list suppliers by material"):
            result = await self._session.execute(q)
            return list(result.scalars().all())

    async def count_by_material(self, material_id: int) -> int:
        q = select(func.count(distinct(Receipt.supplier_id))).where(
            Receipt.material_id == material_id
        )
        async with self._operation("count suppliers by material"):
            return (await self._session.execute(q)).scalar_one()

    async def count_by_bank_address(self, params: SupplierCountFilter) -> int:
        """Count suppliers matching every provided bank-address field.

        Fields are applied in a fixed order: city, street address, zip code.
        With no fields provided, every supplier is counted.
        """
        flt = (
            EqualityFilter()
            .add(Supplier.bank_city, params.bank_city)
            .add(Supplier.bank_street_address, params.bank_street_address)
            .add(Supplier.bank_zip_code, params.bank_zip_code)
        )
        clause = flt.render()
        logger.debug("Counting suppliers by bank address on %s", flt.columns or "no columns")

        q = select(func.count()).select_from(Supplier).where(clause)
        async with self._operation("count suppliers by bank address"):
            return (await self._session.execute(q)).scalar_one()
