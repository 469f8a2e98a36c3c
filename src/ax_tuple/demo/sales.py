"""Sales-table builders used by the comparison demos.

The same records are stored three ways:

1. **Nested** — ``region -> year -> product -> sales``.
2. **Positional** — flat dict keyed by ``PositionalTuple(region, year, product)``.
3. **Named** — flat dict keyed by ``NamedTuple({"Region", "Year", "Product"})``.

Each layout has a builder and an iterator that flattens it back into
:class:`SalesRecord` values, so the three can be compared directly.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from ax_tuple.core.named import NamedTuple
from ax_tuple.core.positional import PositionalTuple

NestedSales = dict[str, dict[int, dict[str, float]]]


@dataclass(frozen=True, slots=True)
class SalesRecord:
    """One sales figure for a region, year and product."""

    region: str
    year: int
    product: str
    sales: float


SAMPLE_SALES: tuple[SalesRecord, ...] = (
    SalesRecord("North", 2023, "Widget A", 1500.0),
    SalesRecord("North", 2023, "Widget B", 2000.0),
    SalesRecord("South", 2023, "Widget A", 1200.0),
    SalesRecord("North", 2024, "Widget A", 1800.0),
)


def format_record(record: SalesRecord) -> str:
    """Render a record as a single report line."""
    return (
        f"Region: {record.region}, Year: {record.year}, "
        f"Product: {record.product} -> Sales: ${record.sales:.2f}"
    )


# ---------------------------------------------------------------------------
# 1. Nested dictionaries
# ---------------------------------------------------------------------------

def build_nested(records: Iterable[SalesRecord]) -> NestedSales:
    """Store *records* as three levels of dictionaries.

    Every level has to be created on demand before the leaf can be set.
    """
    nested: NestedSales = {}
    for rec in records:
        nested.setdefault(rec.region, {}).setdefault(rec.year, {})[rec.product] = rec.sales
    return nested


def iter_nested(nested: NestedSales) -> Iterator[SalesRecord]:
    """Flatten a nested table back into records (three loops deep)."""
    for region, years in nested.items():
        for year, products in years.items():
            for product, sales in products.items():
                yield SalesRecord(region, year, product, sales)


# ---------------------------------------------------------------------------
# 2. Positional tuple keys
# ---------------------------------------------------------------------------

def positional_key(region: str, year: int, product: str) -> PositionalTuple:
    return PositionalTuple.of(region, year, product)


def build_positional(records: Iterable[SalesRecord]) -> dict[PositionalTuple, float]:
    """Store *records* in one flat dict keyed by positional tuples."""
    return {positional_key(rec.region, rec.year, rec.product): rec.sales for rec in records}


def iter_positional(table: dict[PositionalTuple, float]) -> Iterator[SalesRecord]:
    """Flatten a positional-keyed table back into records (single loop)."""
    for key, sales in table.items():
        yield SalesRecord(
            region=key.get(0, str),
            year=key.get(1, int),
            product=key.get(2, str),
            sales=sales,
        )


# ---------------------------------------------------------------------------
# 3. Named tuple keys
# ---------------------------------------------------------------------------

def named_key(region: str, year: int, product: str) -> NamedTuple:
    return NamedTuple.of({"Region": region, "Year": year, "Product": product})


def build_named(records: Iterable[SalesRecord]) -> dict[NamedTuple, float]:
    """Store *records* in one flat dict keyed by named tuples."""
    return {named_key(rec.region, rec.year, rec.product): rec.sales for rec in records}


def iter_named(table: dict[NamedTuple, float]) -> Iterator[SalesRecord]:
    """Flatten a named-keyed table back into records, reading fields by name."""
    for key, sales in table.items():
        yield SalesRecord(
            region=key.get("Region", str),
            year=key.get("Year", int),
            product=key.get("Product", str),
            sales=sales,
        )
