"""
Record writer and exports
=========================

Task files
----------
Each analysis appends to its own text file, keyed by task:

    data/taskA1_climate_info.csv

A write appends three parts: the caption line, the column header line and one
formatted line per record:

    Task B2 : Top 10 Countries with the Lowest Temperatures
    Temperature,Year,Month,Country,Country_Code
    -24.56(C) -12.21(F), 2003, Jan, Greenland, GRL

Exports
-------
`export_csv` / `export_json` write a result in a structured form for
spreadsheets and programs.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence
import csv
import json
import logging
import os
from .analyzer import TaskResult
from .models import Record

logger = logging.getLogger(__name__)

@dataclass
class WriterConfig:
    """Where task files go and how they are named."""
    out_dir: str = "data"
    suffix: str = "_climate_info.csv"

    def path_for(self, stem: str) -> str:
        return os.path.join(self.out_dir, stem + self.suffix)

def format_record(record: Record) -> str:
    """`<C 2dp>(C) <F 2dp>(F), <year>, <month>, <country>, <code>`"""
    return str(record)

def write_task(path: str, caption: str, header: str, records: Sequence[Record]) -> str:
    """Append caption, header and record lines to `path` (created if missing)."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(caption + "\n")
        f.write(header + "\n")
        for r in records:
            f.write(format_record(r) + "\n")
    logger.info("Wrote %d records to %s", len(records), path)
    return path

def write_result(result: TaskResult, config: WriterConfig) -> str:
    """Append a task result to the task file it belongs to."""
    return write_task(config.path_for(result.task.stem), result.caption, result.task.header, result.records)

# ---------------- Structured exports ----------------
FIELDS = ["temperature_celsius", "temperature_fahrenheit", "year", "month",
          "country", "country_code", "is_delta"]

def _as_dict(r: Record) -> dict:
    return {
        "temperature_celsius": r.temperature_celsius,
        "temperature_fahrenheit": r.fahrenheit,
        "year": r.year,
        "month": r.month,
        "country": r.country,
        "country_code": r.country_code,
        "is_delta": r.is_delta,
    }

def export_csv(records: Sequence[Record], path: str) -> None:
    rows: List[dict] = [_as_dict(r) for r in records]
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        w.writerows(rows)
    logger.info("Exported %d records to %s", len(rows), path)

def export_json(records: Sequence[Record], path: str) -> None:
    """Export records to a JSON file.

    CSV is great for spreadsheets; JSON is great for programs and preserves field names.
    """
    payload = [_as_dict(r) for r in records]
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
    logger.info("Exported %d records to %s", len(payload), path)
