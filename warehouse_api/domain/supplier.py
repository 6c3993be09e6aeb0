"""SQLAlchemy ORM model for Suppliers."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from warehouse_api.db.base import Base

# BIGSERIAL on PostgreSQL, INTEGER PRIMARY KEY (rowid alias) on SQLite
IdType = BigInteger().with_variant(Integer, "sqlite")


class Supplier(Base):
    # Created unquoted as ``Suppliers``; PostgreSQL folds it to lower case.
    __tablename__ = "suppliers"

    supplier_id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    inn: Mapped[Optional[str]] = mapped_column(String(12), nullable=True)

    legal_zip_code: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    legal_city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    legal_street_address: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    bank_zip_code: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    bank_city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    bank_street_address: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    bank_account: Mapped[Optional[str]] = mapped_column(String(34), nullable=True)
