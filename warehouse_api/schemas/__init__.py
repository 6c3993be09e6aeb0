"""Pydantic schemas package.

Folder intent:
  common.py    — ApiModel base, CountResponse / ErrorResponse envelopes, HealthResponse
  supplier.py  — SupplierOut + SupplierCountFilter (bank-address query parameters)
  receipt.py   — ReceiptCreate request body and ReceiptOut response
"""
