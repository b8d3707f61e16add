"""
Indices (precomputed lookup tables)
===================================

CLIMA groups records by country with a simple index (map from a normalized
country name -> list of records). Country matching is case-insensitive
everywhere, so the key is the casefolded name.

Example:
- `index["usa"]` gives every record whose country is "USA", "usa", ...

The grouped min/max step and the year-over-year join both use this instead
of re-filtering the whole list once per record.
"""

from __future__ import annotations
from typing import Dict, Iterable, List
from .models import Record

CountryIndex = Dict[str, List[Record]]

def country_key(country: str) -> str:
    """Normalized key used for case-insensitive country matching."""
    return country.casefold()

def build_country_index(records: Iterable[Record]) -> CountryIndex:
    """Group records by country.

    Insertion order of both the keys and each record list follows the input,
    so an ascending input yields ascending per-country lists.
    """
    by_country: CountryIndex = {}
    for r in records:
        by_country.setdefault(country_key(r.country), []).append(r)
    return by_country
