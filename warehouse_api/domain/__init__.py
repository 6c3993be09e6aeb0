"""Domain package — all ORM models are imported here so ``Base.metadata`` sees them.

Folder intent:
  supplier.py  — Suppliers (read-only from this service)
  receipt.py   — WarehouseReceipts (goods-in records, insert-only)
"""

from warehouse_api.domain.receipt import Receipt
from warehouse_api.domain.supplier import Supplier

__all__ = [
    "Receipt",
    "Supplier",
]
