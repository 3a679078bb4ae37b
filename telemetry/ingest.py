"""
CSV ingestion for HWiNFO sensor logs.

Turns a CSV export into an ordered list of ``Record`` objects. Every value
that is missing or not numeric becomes ``None``; only failing to open the
file is treated as an error.
"""
import io
import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

import pandas as pd

from config import DEFAULT_COLUMNS, FALLBACK_ENCODING, Settings
from telemetry.model import TELEMETRY_FIELDS, Record

logger = logging.getLogger(__name__)

Source = Union[str, Path, io.IOBase]


def normalize_column(name) -> str:
    """
    Reduce a column name to lowercase ASCII letters and digits.

    "CPU Package [°C]", "CPU Package [�C]" and "CPU Package [Â°C]" all
    normalize to "cpupackagec", so a log written in another encoding still
    matches.
    """
    return re.sub(r"[^a-z0-9]", "", str(name).lower())


def resolve_column(columns: Iterable, wanted: str) -> Optional[str]:
    """
    Find the column holding ``wanted``.

    Exact name wins; otherwise the first column whose normalized name matches.
    Returns None when nothing matches.
    """
    columns = list(columns)
    if wanted in columns:
        return wanted

    key = normalize_column(wanted)
    if not key:
        return None
    for column in columns:
        if normalize_column(column) == key:
            return column
    return None


def decode_bytes(raw: bytes, encoding: str) -> str:
    """Decode with ``encoding``, falling back to cp1252 which HWiNFO uses on Windows."""
    try:
        return raw.decode(encoding)
    except LookupError:
        logger.warning(f"Unknown encoding '{encoding}', reading as {FALLBACK_ENCODING}")
    except UnicodeDecodeError:
        logger.info(f"CSV is not valid {encoding}, retrying as {FALLBACK_ENCODING}")
    return raw.decode(FALLBACK_ENCODING, errors="replace")


def _to_text(value) -> Optional[str]:
    if pd.isna(value):
        return None
    return str(value)


def _to_number(value) -> Optional[float]:
    if pd.isna(value):
        return None
    return float(value)


def records_from_frame(frame: pd.DataFrame, settings: Optional[Settings] = None) -> List[Record]:
    """
    Project a DataFrame onto ``Record`` objects, one per row, in row order.

    Args:
        frame: Parsed CSV with header-derived column names
        settings: Column names to look for (defaults from the environment)

    Returns:
        List of records. Fields whose column is absent are None on every row.
    """
    settings = settings or Settings.from_env()
    row_count = len(frame.index)

    values: Dict[str, list] = {}
    for name in ("time",) + TELEMETRY_FIELDS:
        wanted = settings.columns.get(name, DEFAULT_COLUMNS[name])
        column = resolve_column(frame.columns, wanted)
        if column is None:
            logger.warning(f"Column '{wanted}' not found, '{name}' will be empty")
            values[name] = [None] * row_count
            continue

        series = frame[column]
        if isinstance(series, pd.DataFrame):
            # Frames built by hand can repeat a column name
            series = series.iloc[:, 0]

        if name in TELEMETRY_FIELDS:
            numeric = pd.to_numeric(series, errors="coerce")
            values[name] = [_to_number(v) for v in numeric.tolist()]
        else:
            values[name] = [_to_text(v) for v in series.tolist()]

    return [Record(**{name: column[i] for name, column in values.items()}) for i in range(row_count)]


def read_frame(source: Source, settings: Optional[Settings] = None) -> Optional[pd.DataFrame]:
    """
    Read a CSV file or binary/text buffer into a DataFrame of strings.

    Returns None when the content is empty or cannot be parsed.
    Raises OSError if a path cannot be opened.
    """
    settings = settings or Settings.from_env()

    if isinstance(source, (str, Path)):
        raw = Path(source).read_bytes()
    else:
        raw = source.read()

    text = raw if isinstance(raw, str) else decode_bytes(raw, settings.encoding)
    if not text.strip():
        logger.warning("CSV is empty")
        return None

    try:
        width = len(pd.read_csv(io.StringIO(text), nrows=0).columns)
        # Rows wider than the header keep their first `width` fields; short
        # rows are padded with NaN. No row is dropped, so positions stay put.
        return pd.read_csv(
            io.StringIO(text),
            dtype=str,
            skip_blank_lines=True,
            engine="python",
            index_col=False,
            usecols=list(range(width)),
        )
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        logger.warning(f"Could not parse CSV: {e}")
        return None


def load_records(source: Source, settings: Optional[Settings] = None) -> List[Record]:
    """
    Load a HWiNFO CSV export.

    Args:
        source: Path to a .csv file, or an open buffer
        settings: Encoding and column names (defaults from the environment)

    Returns:
        Records in file row order; empty when the file holds no usable rows
    """
    settings = settings or Settings.from_env()
    frame = read_frame(source, settings)
    if frame is None:
        return []

    records = records_from_frame(frame, settings)
    logger.info(f"Loaded {len(records)} rows from {getattr(source, 'name', source)}")
    return records
