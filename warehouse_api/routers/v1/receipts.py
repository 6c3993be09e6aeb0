"""Goods-in receipt endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from warehouse_api.db.base import get_db
from warehouse_api.repositories.receipt import ReceiptRepository
from warehouse_api.schemas.common import ErrorResponse
from warehouse_api.schemas.receipt import ReceiptCreate, ReceiptOut

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/receipts",
    tags=["Receipts"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.post("", response_model=ReceiptOut, status_code=status.HTTP_201_CREATED)
async def create_receipt(
    body: ReceiptCreate,
    session: AsyncSession = Depends(get_db),
):
    """Record a goods-in receipt and echo it back with its new ``receipt_id``."""
    receipt_id = await ReceiptRepository(session).create(body)
    logger.info(
        "Created receipt %s (supplier %s, material %s)",
        receipt_id, body.supplier_id, body.material_id,
    )
    return ReceiptOut(receipt_id=receipt_id, **body.model_dump())
