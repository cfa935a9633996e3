"""Spreadsheet loading utilities for uploaded schedules.

Reads a CSV or Excel export into the plain list-of-dicts table the import
engine works on. PDF uploads are not parsed here; they are handed back as an
opaque placeholder for server-side processing.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Union

import numpy as np
import pandas as pd

from setup_sheet.domain.models import RawTable

EXCEL_SUFFIXES = (".xlsx", ".xls")
CSV_SUFFIXES = (".csv",)
PDF_SUFFIXES = (".pdf",)


@dataclass(frozen=True)
class PdfPassthrough:
    """An uploaded PDF, ready for server processing. Never parsed locally."""

    path: Path

    @property
    def message(self) -> str:
        return f"{self.path.name} is ready for server processing."


def _normalize_headers(df: pd.DataFrame) -> List[str]:
    """Strip header whitespace, rejecting headers that collide afterwards."""
    headers: List[str] = []
    for column in df.columns:
        header = str(column).strip()
        if header in headers:
            raise ValueError(f"Duplicate column detected when normalizing headers: '{column}'")
        headers.append(header)
    return headers


def _clean_cell(value: Any) -> Any:
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        return value
    if isinstance(value, np.generic):
        return value.item()
    return value


def dataframe_to_table(df: pd.DataFrame) -> RawTable:
    """Convert a DataFrame into table rows, dropping rows that are entirely blank."""
    df = df.copy()
    df.columns = _normalize_headers(df)

    rows: List[Dict[str, Any]] = []
    for _, series in df.iterrows():
        row = {column: _clean_cell(series[column]) for column in df.columns}
        if all(value is None or (isinstance(value, str) and not value.strip()) for value in row.values()):
            continue
        rows.append(row)
    return rows


def read_dataframe(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix in EXCEL_SUFFIXES:
        # First sheet only; dtype=object keeps time cells as datetime.time
        return pd.read_excel(path, sheet_name=0, dtype=object)
    if suffix in CSV_SUFFIXES:
        return pd.read_csv(path, dtype=object, keep_default_na=False)
    raise ValueError(f"Unsupported file type '{path.suffix}'. Upload an .xlsx, .xls or .csv schedule export.")


def load_schedule_table(path: Path) -> Union[RawTable, PdfPassthrough]:
    """Load an uploaded schedule export.

    Args:
        path: Location of the uploaded ``.xlsx``, ``.xls``, ``.csv`` or ``.pdf`` file.

    Returns:
        Table rows for spreadsheets, or a ``PdfPassthrough`` for PDFs.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: For unsupported file types or duplicate headers.
    """
    if not path.exists():
        raise FileNotFoundError(f"Schedule file not found: {path}")
    if path.suffix.lower() in PDF_SUFFIXES:
        return PdfPassthrough(path=path)
    return dataframe_to_table(read_dataframe(path))
