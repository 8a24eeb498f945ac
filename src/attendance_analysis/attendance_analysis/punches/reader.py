from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import IO, Any, List, Union

import pandas as pd

from ..common.datetime_utils import format_timestamp
from ..core.exceptions import IngestionError
from .model import COL_NAME, COL_TIMESTAMP, REQUIRED_COLUMNS, PunchRecord

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".xlsx", ".xls", ".csv")

_EXCEL_ENGINES = {".xlsx": "openpyxl", ".xls": "xlrd"}

Source = Union[str, Path, IO[bytes]]


def _load_frame(source: Source, extension: str) -> pd.DataFrame:
    if extension in _EXCEL_ENGINES:
        return pd.read_excel(source, sheet_name=0, dtype=object, engine=_EXCEL_ENGINES[extension])
    return pd.read_csv(source, dtype=str, keep_default_na=False)


def _normalize_timestamp(value: Any) -> Any:
    # Excel cells typed as dates come back as Timestamps; text cells stay
    # untouched so malformed values still fail during analysis.
    if isinstance(value, datetime):
        return format_timestamp(value)
    return value


def read_punches(source: Source, filename: str) -> List[PunchRecord]:
    """Read the first sheet of a time-clock export into punch records."""
    extension = Path(filename).suffix.lower()
    if extension not in SUPPORTED_EXTENSIONS:
        raise IngestionError(f"Unsupported file type {extension or filename!r}; use .xlsx, .xls or .csv")

    df = _load_frame(source, extension)
    df.columns = [str(c).strip() for c in df.columns]

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise IngestionError(f"Missing required column(s): {', '.join(missing)}")

    df = df.astype(object).where(pd.notna(df), None)

    records: List[PunchRecord] = []
    for row in df.to_dict(orient="records"):
        if row.get(COL_NAME) in (None, "") and row.get(COL_TIMESTAMP) in (None, ""):
            continue
        row[COL_TIMESTAMP] = _normalize_timestamp(row[COL_TIMESTAMP])
        records.append(PunchRecord.from_row(row))

    logger.info("Read %d punch record(s) from %s", len(records), filename)
    return records
