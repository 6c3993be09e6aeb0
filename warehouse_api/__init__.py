"""Warehouse API: suppliers, materials and goods-in receipts over PostgreSQL."""

__version__ = "1.0.0"
