"""
Query engine
============

Pure functions over a sequence of `Record` objects. None of them modifies its
input; every call returns a new list.

1) Filters  -> by month, year, country (case-insensitive), temperature range
2) Ordering -> stable merge sort by the Record total order
3) Shaping  -> dedup by country, windowing, grouped min/max per country

Filters raise `NotFound` when nothing matches, and `filter_by_month` raises
`RangeError` for a month outside 1..12 before any lookup happens.
"""

from __future__ import annotations
from typing import List, Sequence
from .dsa import first_by_key, merge_sort
from .errors import NotFound, RangeError
from .indices import build_country_index, country_key
from .models import Record, month_name

# ---------------- Filters ----------------
def month_code(month: int) -> str:
    """Map 1..12 to Jan..Dec, rejecting anything else."""
    if month < 1 or month > 12:
        raise RangeError(f"Input for month, '{month}' is outside of the range 1-12")
    return month_name(month)

def filter_by_month(records: Sequence[Record], month: int) -> List[Record]:
    code = month_code(month)
    out = [r for r in records if r.month == code]
    if not out:
        raise NotFound(f"No temperature for the month '{code}' was found")
    return out

def filter_by_year(records: Sequence[Record], year: int) -> List[Record]:
    out = [r for r in records if r.year == year]
    if not out:
        raise NotFound(f"No temperature in the year '{year}' was found")
    return out

def filter_by_country(records: Sequence[Record], name: str) -> List[Record]:
    """Case-insensitive exact match on the country name."""
    key = country_key(name)
    out = [r for r in records if country_key(r.country) == key]
    if not out:
        raise NotFound(f"No temperature for the country '{name}' was found")
    return out

def filter_by_range(records: Sequence[Record], low: float, high: float) -> List[Record]:
    """Inclusive range on Celsius. `low > high` simply matches nothing."""
    out = [r for r in records if low <= r.temperature_celsius <= high]
    if not out:
        raise NotFound(f"No temperature within the range {low} - {high} was found")
    return out

# ---------------- Ordering / shaping ----------------
def sort_ascending(records: Sequence[Record]) -> List[Record]:
    return merge_sort(list(records))

def dedup_by_country(records: Sequence[Record], keep_lowest: bool = True) -> List[Record]:
    """Keep the first record seen for each country, then re-sort ascending.

    `records` must be sorted ascending. With `keep_lowest` the scan runs
    ascending and keeps each country's lowest record; otherwise it runs over
    the reversed list and keeps each country's highest.
    """
    scan = records if keep_lowest else list(records)[::-1]
    return sort_ascending(first_by_key(scan, key=lambda r: r.country))

def window_slice(records: Sequence[Record], start: int, end: int) -> List[Record]:
    """Return records[start:end].

    Out-of-range bounds (start < 0, end past the end) and an empty input all
    fall back to returning the input unchanged.
    """
    if not records or end > len(records) or start < 0:
        return list(records)
    return list(records[start:end])

def group_min_max_by_country(records: Sequence[Record]) -> List[Record]:
    """Minimum and maximum record of every country, sorted ascending.

    A country with a single distinct record contributes it once.
    """
    out: List[Record] = []
    for group in build_country_index(records).values():
        lo, hi = min(group), max(group)
        out.append(lo)
        if hi != lo:
            out.append(hi)
    return sort_ascending(out)
