"""
Data model (Record)
===================

Each row of the temperature CSV is converted into a `Record` object.
We keep it immutable (`frozen=True`) so that:
- records cannot be accidentally modified after loading, and
- filters/sorts always build new lists instead of editing data.

The field order is the sort order: temperature first, then country, year,
month code and country code. `order=True` turns that into the total order
used for every sort, dedup and equality test.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple
import math

# Indexed by `n % 12`: 1 -> Jan ... 11 -> Nov, 12 (and 0) -> Dec
MONTHS = ("Dec", "Jan", "Feb", "Mar", "Apr", "May",
          "Jun", "Jul", "Aug", "Sep", "Oct", "Nov")


def month_name(n: int) -> str:
    """Return the three-letter code for a month number (wraps modulo 12)."""
    return MONTHS[n % 12]


def to_fahrenheit(celsius: float) -> float:
    return celsius * 9.0 / 5.0 + 32.0


@dataclass(frozen=True, order=True)
class Record:
    """One monthly temperature observation for a country.

    A record built by the delta computer carries `source_pair`, the two
    observations it was derived from. `source_pair` takes no part in
    ordering or equality.
    """
    temperature_celsius: float
    country: str
    year: int
    month: str
    country_code: str
    source_pair: Optional[Tuple["Record", "Record"]] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.month not in MONTHS:
            raise ValueError(f"Unknown month code {self.month!r}; expected one of {sorted(MONTHS)}")
        if not math.isfinite(self.temperature_celsius):
            raise ValueError(f"Temperature must be a finite number, got {self.temperature_celsius!r}")
        if not self.country:
            raise ValueError("Country must be non-empty")
        if not self.country_code:
            raise ValueError("Country code must be non-empty")

    @property
    def is_delta(self) -> bool:
        return self.source_pair is not None

    @property
    def fahrenheit(self) -> float:
        """Temperature in Fahrenheit, derived on demand.

        For a delta record this is the difference of the two source
        Fahrenheit values, not the Celsius delta run through the conversion.
        """
        if self.source_pair is not None:
            a, b = self.source_pair
            return abs(a.fahrenheit - b.fahrenheit)
        return to_fahrenheit(self.temperature_celsius)

    def __str__(self) -> str:
        return (f"{self.temperature_celsius:.2f}(C) {self.fahrenheit:.2f}(F), "
                f"{self.year}, {self.month}, {self.country}, {self.country_code}")
