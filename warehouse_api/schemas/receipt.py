"""Receipt Pydantic schemas (request DTO and response model)."""


from datetime import date

from warehouse_api.schemas.common import Amount, ApiModel


class ReceiptCreate(ApiModel):
    # Only types are checked here; lengths and references are the database's call.
    order_number: str
    receipt_date: date
    supplier_id: int
    balance_account: str | None = None
    doc_type_id: int | None = None
    document_number: str | None = None
    material_id: int
    material_account: str | None = None
    unit_id: int
    quantity: Amount
    unit_price: Amount


class ReceiptOut(ReceiptCreate):
    receipt_id: int
