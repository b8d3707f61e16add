"""
Delta computer
==============

Builds the synthetic record used for year-over-year comparison: the absolute
difference between two observations of the same country, month and country
code.
"""

from __future__ import annotations
from .errors import ContractViolation
from .models import Record

def _same(x: str, y: str) -> bool:
    return x.casefold() == y.casefold()

def compute_delta(a: Record, b: Record) -> Record:
    """Return |a - b| as a Record that remembers (a, b).

    temperature = |a.celsius - b.celsius|, year = |a.year - b.year|; country,
    month and code come from `a`. The result's Fahrenheit value is taken
    from the two source records (see `Record.fahrenheit`).

    Raises:
        ContractViolation: if country, month or code differ (ignoring case).
    """
    if not (_same(a.country, b.country) and _same(a.month, b.month)
            and _same(a.country_code, b.country_code)):
        raise ContractViolation(
            f"Cannot compute a delta between {a.country}/{a.month}/{a.country_code} "
            f"and {b.country}/{b.month}/{b.country_code}"
        )
    return Record(
        temperature_celsius=abs(a.temperature_celsius - b.temperature_celsius),
        country=a.country,
        year=abs(a.year - b.year),
        month=a.month,
        country_code=a.country_code,
        source_pair=(a, b),
    )
