"""
pandas bridge for flat-file records.

Flat-file parsing yields a list of ``dict[str, str]`` records; these
helpers turn such records into a DataFrame (columns in header order)
and back, so converted tables can go straight into pandas tooling or
be written as Parquet by the exporter.
"""

from __future__ import annotations

from typing import Any

import pandas as pd

from formatbridge.emitters import check_flat_records
from formatbridge.parsers.flat_file import parse_flat_file


def records_to_frame(records: list[dict[str, Any]]) -> pd.DataFrame:
    """Build a DataFrame from flat records.

    Column order follows the first record's keys.

    Raises:
        JsonShapeError: If *records* is not a list of flat objects.
    """
    header = check_flat_records(records)
    if not records:
        return pd.DataFrame()
    return pd.DataFrame.from_records(records, columns=header)


def frame_to_records(df: pd.DataFrame) -> list[dict[str, Any]]:
    """Convert a DataFrame to flat records, with missing cells as None."""
    cleaned = df.astype(object).where(df.notna(), None)
    return cleaned.to_dict(orient="records")


def flat_file_to_frame(text: str, separator: str = ",") -> pd.DataFrame:
    """Parse a delimited table straight into a string-valued DataFrame."""
    return records_to_frame(parse_flat_file(text, separator))
