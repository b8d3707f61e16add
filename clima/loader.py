"""
Dataset loader (CSV -> Record list)
===================================

This module reads the temperature CSV and converts each row into a `Record`.

Expected layout: one header line, then rows of

    temperature,year,month,country,country_code

Key ideas:
- Columns are taken by position; the header text is not interpreted.
- Everything is read as text and converted explicitly, so a malformed number
  is reported instead of silently becoming NaN.
- Loading is atomic: one bad row fails the whole file with `IngestError`.
"""

from __future__ import annotations
from typing import IO, List, Union
import logging
import pandas as pd
from .errors import IngestError
from .models import Record

logger = logging.getLogger(__name__)

N_COLUMNS = 5

def _to_str(x) -> str:
    if pd.isna(x): return ""
    return str(x).strip()

def _row_to_record(row) -> Record:
    temperature, year, month, country, code = (_to_str(v) for v in row[:N_COLUMNS])
    return Record(
        temperature_celsius=float(temperature),
        country=country,
        year=int(year),
        month=month,
        country_code=code,
    )

def load_records(source: Union[str, IO[str]]) -> List[Record]:
    """Load every row of a temperature CSV.

    Args:
        source: a path or an open text stream.

    Raises:
        IngestError: the source is unreadable, a row has fewer than five
            fields, a number is malformed or a row breaks a Record invariant.
    """
    name = source if isinstance(source, str) else getattr(source, "name", "<stream>")
    try:
        df = pd.read_csv(source, dtype=str, keep_default_na=False, index_col=False, encoding="utf-8")
    except pd.errors.EmptyDataError:
        logger.error("Dataset %s is empty", name)
        raise IngestError(f"Dataset {name} is empty (no header line)")
    except (OSError, UnicodeDecodeError, pd.errors.ParserError) as e:
        logger.error("Cannot read dataset %s: %s", name, e)
        raise IngestError(f"Cannot read dataset {name}: {e}") from e

    if len(df.columns) < N_COLUMNS:
        raise IngestError(
            f"Invalid file format: expected {N_COLUMNS} columns, found {len(df.columns)} in {name}"
        )

    records: List[Record] = []
    # row numbers are 1-based and count the header line
    for line_no, row in enumerate(df.itertuples(index=False, name=None), start=2):
        if any(_to_str(v) == "" for v in row[:N_COLUMNS]):
            logger.error("Row %d of %s has missing fields", line_no, name)
            raise IngestError(f"Invalid file format: row {line_no} has missing fields")
        try:
            records.append(_row_to_record(row))
        except ValueError as e:
            logger.error("Row %d of %s is malformed: %s", line_no, name, e)
            raise IngestError(f"Invalid file format at row {line_no}: {e}") from e

    logger.info("Loaded %d records from %s", len(records), name)
    return records
