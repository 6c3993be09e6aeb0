"""SQLAlchemy ORM model for warehouse receipts (goods-in records)."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import BigInteger, Date, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from warehouse_api.db.base import Base
from warehouse_api.domain.supplier import IdType


class Receipt(Base):
    # Created unquoted as ``WarehouseReceipts``; PostgreSQL folds it to lower case.
    __tablename__ = "warehousereceipts"

    receipt_id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    order_number: Mapped[str] = mapped_column(String(50), nullable=False)
    receipt_date: Mapped[date] = mapped_column(Date, nullable=False)

    supplier_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("suppliers.supplier_id"), nullable=False, index=True
    )
    # Materials, units and document types live in tables outside this service;
    # their foreign keys are enforced by the database schema.
    material_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    unit_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    doc_type_id: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)
    document_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    balance_account: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    material_account: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    quantity: Mapped[Decimal] = mapped_column(Numeric(14, 3), nullable=False)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
