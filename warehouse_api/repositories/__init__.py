"""Repositories package — the only place that builds and runs SQL.

Files:
  base.py      — BaseRepository (session holder, StorageError wrapping)
  filters.py   — EqualityFilter for optional-parameter predicates
  supplier.py  — supplier listing and counts
  receipt.py   — receipt inserts
"""
