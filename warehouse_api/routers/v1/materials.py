"""Material-scoped supplier endpoints.

Pattern:
  1. Inject the request-scoped DB session via Depends
  2. Instantiate the repository with the session
  3. Call the repository and shape the response

Storage failures propagate as StorageError and are turned into a generic
500 by the exception handlers in warehouse_api.core.exceptions.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from warehouse_api.db.base import get_db
from warehouse_api.repositories.supplier import SupplierRepository
from warehouse_api.schemas.common import CountResponse, ErrorResponse
from warehouse_api.schemas.supplier import SupplierOut

router = APIRouter(
    prefix="/materials",
    tags=["Materials"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)

MaterialId = Annotated[int, Path(gt=0, description="Material identifier")]


@router.get("/{material_id}/suppliers", response_model=list[SupplierOut])
async def list_suppliers_by_material(
    material_id: MaterialId,
    session: AsyncSession = Depends(get_db),
):
    """Suppliers that delivered the material; empty list when there are none."""
    suppliers = await SupplierRepository(session).list_by_material(material_id)
    return [SupplierOut.model_validate(s) for s in suppliers]


@router.get("/{material_id}/suppliers/count", response_model=CountResponse)
async def count_suppliers_by_material(
    material_id: MaterialId,
    session: AsyncSession = Depends(get_db),
):
    count = await SupplierRepository(session).count_by_material(material_id)
    return CountResponse(count=count, filter={"material_id": material_id})
