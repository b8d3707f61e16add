"""
Report assembler (ClimateAnalyzer)
==================================

This is the heart of the project. The analyzer holds the base dataset
(loaded once, never modified) and composes the query engine primitives into
the eight named analyses:

    A1  lowest / highest temperature of a country in a month
    A2  lowest / highest temperature of a country in a year
    A3  temperatures of a country within a range
    A4  lowest / highest temperature of a country overall
    B1  top 10 countries with the lowest / highest temperature in a month
    B2  top 10 countries with the lowest / highest temperature overall
    B3  every temperature within a range
    C1  top 10 countries with the greatest change in a month between 2 years

`TASKS` describes each analysis (output file stem, column header, caption),
so the CLI and the writer share one catalogue.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional
import logging
from .delta import compute_delta
from .engine import (
    dedup_by_country, filter_by_country, filter_by_month, filter_by_range,
    filter_by_year, group_min_max_by_country, month_code, sort_ascending,
    window_slice,
)
from .errors import IngestError
from .indices import build_country_index, country_key
from .models import Record

logger = logging.getLogger(__name__)

TOP_N = 10
LOWEST = "Lowest"
HIGHEST = "Highest"

RECORD_HEADER = "Temperature,Year,Month,Country,Country_Code"
DELTA_HEADER = "Temperature Delta,Year Delta,Month,Country,Country_Code"

@dataclass(frozen=True)
class Task:
    """One entry of the analysis catalogue."""
    task_id: str
    title: str
    caption: str
    params: tuple
    variants: tuple = (LOWEST, HIGHEST)
    header: str = RECORD_HEADER

    @property
    def stem(self) -> str:
        return f"task{self.task_id}"

TASKS: Dict[str, Task] = {t.task_id: t for t in (
    Task("A1", "{variant} Temperature in a given Country and Month",
         "Task A1 : {variant} Temperature for {COUNTRY} in {month_name}",
         ("country", "month")),
    Task("A2", "{variant} Temperature in a given Country and Year",
         "Task A2 : {variant} Temperature for {COUNTRY} in {year}",
         ("country", "year")),
    Task("A3", "Temperatures in a given Country and Temperature Range",
         "Task A3 : Temperatures for {COUNTRY} between {low} - {high}",
         ("country", "low", "high"), variants=()),
    Task("A4", "Year with the {variant} Temperature in a given Country",
         "Task A4 : The Year with The {variant} Temperature for {COUNTRY}",
         ("country",)),
    Task("B1", "Top 10 Countries with the {variant} Temperatures in a given Month",
         "Task B1 : Top 10 Countries with the {variant} Temperatures in {month_name}",
         ("month",)),
    Task("B2", "Top 10 Countries with the {variant} Temperatures",
         "Task B2 : Top 10 Countries with the {variant} Temperatures",
         ()),
    Task("B3", "All Temperatures within a given Temperature Range",
         "Task B3 : all Temperatures Between {low} - {high}",
         ("low", "high"), variants=()),
    Task("C1", "Top 10 Countries with the Greatest Change in Temperatures between 2 Years",
         "Task C1 : Top 10 Countries with the Greatest Temperature Differences in "
         "{month_name} from {year1}-{year2}",
         ("month", "year1", "year2"), variants=(), header=DELTA_HEADER),
)}

@dataclass
class TaskResult:
    """Records produced by one analysis plus the caption describing it."""
    task: Task
    caption: str
    records: List[Record]

@dataclass
class ClimateAnalyzer:
    """Runs the fixed catalogue of analyses over an immutable base dataset.

    An analyzer without data cannot exist: an empty base raises
    `IngestError`, since no query is possible.
    """
    records: List[Record]
    dataset_path: Optional[str] = None
    # Stores CLI commands (for reproducibility in reports)
    command_log: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.records:
            raise IngestError("No data available: the dataset is empty")
        self.records = list(self.records)

    @classmethod
    def from_csv(cls, path: str) -> "ClimateAnalyzer":
        from .loader import load_records
        return cls(records=load_records(path), dataset_path=path)

    # ---------------- A: single country ----------------
    def _country_month(self, country: str, month: int) -> List[Record]:
        data = filter_by_country(self.records, country)
        return sort_ascending(filter_by_month(data, month))

    def lowest_by_month(self, country: str, month: int) -> Record:
        return self._country_month(country, month)[0]

    def highest_by_month(self, country: str, month: int) -> Record:
        return self._country_month(country, month)[-1]

    def _country_year(self, country: str, year: int) -> List[Record]:
        data = filter_by_country(self.records, country)
        return sort_ascending(filter_by_year(data, year))

    def lowest_by_year(self, country: str, year: int) -> Record:
        return self._country_year(country, year)[0]

    def highest_by_year(self, country: str, year: int) -> Record:
        return self._country_year(country, year)[-1]

    def within_range_for_country(self, country: str, low: float, high: float) -> List[Record]:
        data = filter_by_country(self.records, country)
        return sort_ascending(filter_by_range(data, low, high))

    def lowest_for_country(self, country: str) -> Record:
        return sort_ascending(filter_by_country(self.records, country))[0]

    def highest_for_country(self, country: str) -> Record:
        return sort_ascending(filter_by_country(self.records, country))[-1]

    # ---------------- B: all countries ----------------
    def _top_lowest(self, data: List[Record]) -> List[Record]:
        unique = dedup_by_country(sort_ascending(data))
        return window_slice(unique, 0, TOP_N)

    def _top_highest(self, data: List[Record]) -> List[Record]:
        # dedup re-sorts ascending, so the highest values end up at the tail
        unique = dedup_by_country(sort_ascending(data), keep_lowest=False)
        return window_slice(unique, len(unique) - TOP_N, len(unique))

    def top10_lowest_by_month(self, month: int) -> List[Record]:
        return self._top_lowest(filter_by_month(self.records, month))

    def top10_highest_by_month(self, month: int) -> List[Record]:
        return self._top_highest(filter_by_month(self.records, month))

    def top10_lowest(self) -> List[Record]:
        return self._top_lowest(self.records)

    def top10_highest(self) -> List[Record]:
        return self._top_highest(self.records)

    def all_within_range(self, low: float, high: float) -> List[Record]:
        return sort_ascending(filter_by_range(self.records, low, high))

    # ---------------- C: year over year ----------------
    def _min_max_for(self, month: int, year: int) -> List[Record]:
        data = filter_by_year(filter_by_month(self.records, month), year)
        return group_min_max_by_country(sort_ascending(data))

    def top10_delta(self, month: int, year1: int, year2: int) -> List[Record]:
        """Top 10 countries by temperature change in `month` between two years.

        Every min/max record of year1 is paired with every min/max record of
        the same country in year2. Per country the lowest delta survives the
        dedup scan; the re-sorted tail holds the 10 largest.
        """
        first = self._min_max_for(month, year1)
        second = build_country_index(self._min_max_for(month, year2))
        deltas: List[Record] = []
        for t in first:
            for x in second.get(country_key(t.country), []):
                deltas.append(compute_delta(t, x))
        logger.debug("C1 %s %s-%s: %d delta pairs", month, year1, year2, len(deltas))
        unique = dedup_by_country(sort_ascending(deltas))
        return window_slice(unique, len(unique) - TOP_N, len(unique))

    # ---------------- Catalogue dispatch ----------------
    def run_task(self, task_id: str, variant: Optional[str] = None, **params: Any) -> TaskResult:
        """Run one catalogue entry by id, e.g. run_task("A1", "Lowest", country="USA", month=1)."""
        task = TASKS[task_id.upper()]
        if task.variants:
            variant = (variant or "").capitalize()
            if variant not in task.variants:
                raise ValueError(f"{task.task_id} variant must be one of: {', '.join(task.variants)}")
        missing = [p for p in task.params if p not in params]
        if missing:
            raise ValueError(f"{task.task_id} is missing parameters: {', '.join(missing)}")

        runners: Dict[str, Callable[[], Any]] = {
            "A1": lambda: [(self.lowest_by_month if variant == LOWEST else self.highest_by_month)(
                params["country"], params["month"])],
            "A2": lambda: [(self.lowest_by_year if variant == LOWEST else self.highest_by_year)(
                params["country"], params["year"])],
            "A3": lambda: self.within_range_for_country(params["country"], params["low"], params["high"]),
            "A4": lambda: [(self.lowest_for_country if variant == LOWEST else self.highest_for_country)(
                params["country"])],
            "B1": lambda: (self.top10_lowest_by_month if variant == LOWEST else self.top10_highest_by_month)(
                params["month"]),
            "B2": lambda: (self.top10_lowest if variant == LOWEST else self.top10_highest)(),
            "B3": lambda: self.all_within_range(params["low"], params["high"]),
            "C1": lambda: self.top10_delta(params["month"], params["year1"], params["year2"]),
        }
        records = runners[task.task_id]()
        logger.debug("%s %s -> %d records", task.task_id, variant or "", len(records))

        fmt: Dict[str, Any] = dict(params, variant=variant or "")
        if "country" in params:
            fmt["COUNTRY"] = str(params["country"]).upper()
        if "month" in params:
            fmt["month_name"] = month_code(params["month"])
        return TaskResult(task=task, caption=task.caption.format(**fmt), records=records)
