"""Supplier count by bank address."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from warehouse_api.db.base import get_db
from warehouse_api.repositories.supplier import SupplierRepository
from warehouse_api.schemas.common import CountResponse, ErrorResponse
from warehouse_api.schemas.supplier import SupplierCountFilter

router = APIRouter(
    prefix="/suppliers",
    tags=["Suppliers"],
    responses={500: {"model": ErrorResponse}},
)


@router.get("/count", response_model=CountResponse)
async def count_suppliers(
    params: SupplierCountFilter = Depends(SupplierCountFilter.as_query),
    session: AsyncSession = Depends(get_db),
):
    """Count suppliers by exact bank city / street address / zip code.

    Omitted parameters are not filtered on; with none given, all suppliers
    are counted.
    """
    count = await SupplierRepository(session).count_by_bank_address(params)
    return CountResponse(count=count, filter=params.present())
