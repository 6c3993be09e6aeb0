"""Pytest configuration and fixtures.

Tests run against a throw-away SQLite file per test. The schema and fixture
rows are written with a plain synchronous engine; the application reads the
same file through ``sqlite+aiosqlite``.
"""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from warehouse_api.core.config import Settings
from warehouse_api.db.base import Base, Database
from warehouse_api.domain import Receipt, Supplier

SUPPLIERS = [
    {
        "supplier_id": 1, "name": "Alpha", "inn": "7701000001",
        "legal_zip_code": "101000", "legal_city": "Moscow", "legal_street_address": "Tverskaya 1",
        "bank_zip_code": "69001", "bank_city": "Lyon", "bank_street_address": "Rue A",
        "bank_account": "40702810000000000001",
    },
    {
        "supplier_id": 2, "name": "Beta", "inn": "7701000002",
        "legal_zip_code": "101000", "legal_city": "Moscow", "legal_street_address": "Arbat 2",
        "bank_zip_code": "69002", "bank_city": "Lyon", "bank_street_address": "Rue X",
        "bank_account": "40702810000000000002",
    },
    {
        "supplier_id": 3, "name": "Gamma", "inn": "7701000003",
        "legal_zip_code": "190000", "legal_city": "Saint Petersburg", "legal_street_address": "Nevsky 3",
        "bank_zip_code": "75001", "bank_city": "Paris", "bank_street_address": "Rue X",
        "bank_account": "40702810000000000003",
    },
]

MATERIAL_WITH_TWO_SUPPLIERS = 10
MATERIAL_WITH_ONE_SUPPLIER = 20
MATERIAL_WITHOUT_RECEIPTS = 99


def _receipt(receipt_id: int, supplier_id: int, material_id: int) -> dict:
    return {
        "receipt_id": receipt_id,
        "order_number": f"ORD-{receipt_id:04d}",
        "receipt_date": date(2024, 1, receipt_id),
        "supplier_id": supplier_id,
        "balance_account": "10.01",
        "doc_type_id": 1,
        "document_number": f"DOC-{receipt_id}",
        "material_id": material_id,
        "material_account": "10.01.1",
        "unit_id": 1,
        "quantity": Decimal("5"),
        "unit_price": Decimal("12.50"),
    }


RECEIPTS = [
    # supplier 1 delivered material 10 twice; listing must still show it once
    _receipt(1, 1, MATERIAL_WITH_TWO_SUPPLIERS),
    _receipt(2, 1, MATERIAL_WITH_TWO_SUPPLIERS),
    _receipt(3, 2, MATERIAL_WITH_TWO_SUPPLIERS),
    _receipt(4, 3, MATERIAL_WITH_ONE_SUPPLIER),
]


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "warehouse.db"


@pytest.fixture
def sync_engine(db_path):
    """Synchronous engine on the test database, schema created and seeded."""
    engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        session.add_all(Supplier(**row) for row in SUPPLIERS)
        session.flush()
        session.add_all(Receipt(**row) for row in RECEIPTS)
        session.commit()
    yield engine
    engine.dispose()


@pytest.fixture
def settings(db_path, sync_engine):
    return Settings(
        _env_file=None,
        database_url_override=f"sqlite+aiosqlite:///{db_path}",
        app_env="test",
    )


@pytest.fixture
async def database(settings):
    db = Database(settings)
    await db.connect()
    yield db
    await db.close()


@pytest.fixture
async def session(database):
    async with database.session() as s:
        yield s
