"""Tests for the optional-parameter equality filter."""

import itertools

import pytest
from sqlalchemy import func, select
from sqlalchemy.dialects import postgresql, sqlite

from warehouse_api.domain import Supplier
from warehouse_api.repositories.filters import EqualityFilter


def _bank_filter(city=None, street=None, zip_code=None) -> EqualityFilter:
    return (
        EqualityFilter()
        .add(Supplier.bank_city, city)
        .add(Supplier.bank_street_address, street)
        .add(Supplier.bank_zip_code, zip_code)
    )


def _compile(flt: EqualityFilter, dialect):
    stmt = select(func.count()).select_from(Supplier).where(flt.render())
    return stmt.compile(dialect=dialect)


def _bound_values(compiled) -> list:
    """Values in the order the driver receives them."""
    return [compiled.params[name] for name in compiled.positiontup]


class TestEqualityFilter:

    @pytest.mark.parametrize(
        "present", list(itertools.product([True, False], repeat=3))
    )
    def test_one_condition_per_present_value(self, present):
        values = [v if p else None for v, p in zip(("Lyon", "Rue X", "69002"), present)]
        flt = _bank_filter(*values)
        compiled = _compile(flt, sqlite.dialect())

        expected = [v for v in values if v is not None]
        assert len(flt) == len(expected)
        assert str(compiled).count("?") == len(expected)
        assert _bound_values(compiled) == expected

    def test_columns_keep_fixed_order(self):
        flt = _bank_filter(city="Lyon", street="Rue X", zip_code="69002")
        assert flt.columns == ["bank_city", "bank_street_address", "bank_zip_code"]

    def test_skipped_value_does_not_shift_positions(self):
        flt = _bank_filter(city="Lyon", zip_code="69002")
        compiled = _compile(flt, postgresql.asyncpg.dialect())
        sql = str(compiled)

        assert "bank_city = $1" in sql
        assert "bank_zip_code = $2" in sql
        assert "bank_street_address" not in sql
        assert _bound_values(compiled) == ["Lyon", "69002"]

    def test_no_values_renders_no_conditions(self):
        flt = _bank_filter()
        compiled = _compile(flt, sqlite.dialect())
        sql = str(compiled)

        assert flt.columns == []
        assert _bound_values(compiled) == []
        assert "?" not in sql
        assert "bank_" not in sql

    def test_empty_string_is_a_value(self):
        compiled = _compile(_bank_filter(city=""), sqlite.dialect())
        assert _bound_values(compiled) == [""]

    @pytest.mark.parametrize("value", ["O'Brien", "100%", "x; DROP TABLE suppliers; --"])
    def test_metacharacters_are_bound_not_inlined(self, value):
        compiled = _compile(_bank_filter(city=value, street=value), sqlite.dialect())
        sql = str(compiled)

        assert value not in sql
        assert sql.count("?") == 2
        assert _bound_values(compiled) == [value, value]
