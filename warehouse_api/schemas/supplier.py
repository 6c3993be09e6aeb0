"""Supplier Pydantic schemas (query filters and response models)."""


from fastapi import Query

from warehouse_api.schemas.common import ApiModel


class SupplierOut(ApiModel):
    supplier_id: int
    name: str | None = None
    inn: str | None = None
    legal_zip_code: str | None = None
    legal_city: str | None = None
    legal_street_address: str | None = None
    bank_zip_code: str | None = None
    bank_city: str | None = None
    bank_street_address: str | None = None
    bank_account: str | None = None


class SupplierCountFilter(ApiModel):
    """Optional bank-address equality filters. ``None`` means "don't filter"."""

    bank_city: str | None = None
    bank_street_address: str | None = None
    bank_zip_code: str | None = None

    @classmethod
    def as_query(
        cls,
        bank_city: str | None = Query(default=None, description="Exact bank city"),
        bank_street_address: str | None = Query(
            default=None, description="Exact bank street address"
        ),
        bank_zip_code: str | None = Query(default=None, description="Exact bank zip code"),
    ) -> "SupplierCountFilter":
        """FastAPI dependency for ``?bank_city=&bank_street_address=&bank_zip_code=``."""
        return cls(
            bank_city=bank_city,
            bank_street_address=bank_street_address,
            bank_zip_code=bank_zip_code,
        )

    def present(self) -> dict[str, str]:
        return self.model_dump(exclude_none=True)
