"""
FARS Record Transforms (Functional Core)

Pure functions only. No I/O, no side effects.
Input/output is DataFrames and plain scalars.

Package Location: src/fars/analysis/records.py

Argument Parsing:
    Years and state codes arrive from callers as ints, floats or strings.
    They are parsed explicitly rather than blindly cast: a value is accepted
    only when it denotes a whole number (``2014``, ``2014.0``, ``"2014"``).
    Fractional values, booleans and non-numeric text raise
    ``InvalidYearError`` / ``InvalidStateError`` instead of being truncated
    into a plausible-looking integer.

Sentinel Rule:
    FARS encodes an unknown position as ``LATITUDE`` 99.x / ``LONGITUD``
    999.x.  Any latitude above 90 or longitude above 900 is converted to
    ``NaN`` by ``sanitize_coordinates()``; nothing downstream compares
    against the sentinel thresholds again.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Tuple, Union

import numpy as np
import pandas as pd

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

FILENAME_TEMPLATE: str = "accident_%d.csv.bz2"

LATITUDE_SENTINEL: float = 90.0
LONGITUDE_SENTINEL: float = 900.0

_YEAR_MIN: int = 1000
_YEAR_MAX: int = 9999


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class FarsError(Exception):
    """Base class for all FARS errors."""
    pass


class InvalidYearError(FarsError, ValueError):
    """Raised when a year cannot be parsed as a 4-digit whole number."""
    pass


class InvalidStateError(FarsError, ValueError):
    """
    Raised when a state code is not a whole number, or is absent from the
    ``STATE`` column of the loaded year.
    """
    pass


class FarsFileNotFoundError(FarsError, FileNotFoundError):
    """Raised when the data file for a requested year does not exist."""
    pass


class AggregationError(FarsError):
    """
    Per-year failure marker returned (not raised) by the batch loader.

    Attributes:
        year:  The year value exactly as the caller supplied it.
        cause: The underlying exception (missing file, parse error, …).
    """

    def __init__(self, year: Any, cause: Optional[BaseException] = None):
        super().__init__(f"invalid year: {year}")
        self.year = year
        self.cause = cause


# ---------------------------------------------------------------------------
# Public API – argument parsing
# ---------------------------------------------------------------------------

def parse_year(year: Any) -> int:
    """
    Normalize *year* to an ``int`` in YYYY form.

    Args:
        year: ``int``, integral ``float`` or numeric string.

    Returns:
        The year as a Python ``int``.

    Raises:
        InvalidYearError: If *year* is not a whole number or is not a
            4-digit positive value.
    """
    value = _parse_whole_number(year)
    if value is None:
        raise InvalidYearError(f"invalid year: {year!r}")
    if not _YEAR_MIN <= value <= _YEAR_MAX:
        raise InvalidYearError(f"year must be in YYYY form, got {year!r}")
    return value


def parse_state(state_num: Any) -> int:
    """
    Normalize a FARS state code to an ``int``.

    Raises:
        InvalidStateError: If *state_num* is not a whole number.
    """
    value = _parse_whole_number(state_num)
    if value is None:
        raise InvalidStateError(f"invalid STATE number: {state_num!r}")
    return value


def make_filename(year: Any) -> str:
    """
    Build the FARS data-file name for *year*.

    Example::

        >>> make_filename(2014)
        'accident_2014.csv.bz2'

    Raises:
        InvalidYearError: See ``parse_year``.
    """
    return FILENAME_TEMPLATE % parse_year(year)


# ---------------------------------------------------------------------------
# Public API – year aggregation
# ---------------------------------------------------------------------------

def select_month_year(df: pd.DataFrame, year: int) -> pd.DataFrame:
    """
    Project one year's accident table down to ``[MONTH, year]``.

    Args:
        df: Raw accident DataFrame for a single year.
        year: Literal year value stored in every row of the ``year`` column.

    Returns:
        New DataFrame with exactly the columns ``MONTH`` and ``year``.

    Raises:
        ValueError: If ``MONTH`` is missing from *df*.
    """
    _validate_columns(df, required=['MONTH'])
    out = df[['MONTH']].copy()
    out['year'] = year
    return out


def summarize_month_counts(
    tables: Iterable[Union[pd.DataFrame, AggregationError, None]],
) -> pd.DataFrame:
    """
    Count accidents per month, one column per year.

    Failed entries (``AggregationError`` markers) are skipped.  The
    remaining ``[MONTH, year]`` tables are concatenated, counted per
    ``(year, MONTH)`` and pivoted so each year becomes a column.

    A month with no accidents in a given year holds ``<NA>`` in that
    year's column; only months observed in at least one year get a row.

    Args:
        tables: Output of the batch loader (``fars_read_years``).

    Returns:
        DataFrame with a leading ``MONTH`` column followed by one nullable
        ``Int64`` count column per year (column label = the ``int`` year),
        sorted ascending by month and by year.  With no usable tables the
        result is an empty frame with only the ``MONTH`` column.
    """
    frames: List[pd.DataFrame] = [
        t for t in tables if isinstance(t, pd.DataFrame)
    ]
    if not frames:
        return pd.DataFrame(columns=['MONTH'])

    combined = pd.concat(frames, ignore_index=True)
    if combined.empty:
        return pd.DataFrame(columns=['MONTH'])

    counts = combined.groupby(['year', 'MONTH']).size()
    summary = (
        counts.unstack('year')
        .sort_index(axis=0)
        .sort_index(axis=1)
        .astype('Int64')
    )
    summary.columns.name = None
    return summary.reset_index()


# ---------------------------------------------------------------------------
# Public API – state mapping
# ---------------------------------------------------------------------------

def filter_state(df: pd.DataFrame, state_num: int) -> pd.DataFrame:
    """
    Return the rows of *df* whose ``STATE`` equals *state_num*.

    Raises:
        ValueError: If ``STATE`` is missing from *df*.
        InvalidStateError: If *state_num* does not occur in ``STATE``.
    """
    _validate_columns(df, required=['STATE'])
    states = pd.to_numeric(df['STATE'], errors='coerce')
    if state_num not in set(states.dropna().astype(int).unique().tolist()):
        raise InvalidStateError(f"invalid STATE number: {state_num}")
    return df[states == state_num].copy()


def sanitize_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with ``NaN``.

    ``LATITUDE > 90`` and ``LONGITUD > 900`` are FARS "unknown" codes, not
    positions.  Each coordinate is sanitized independently, so a row with a
    valid latitude and an unknown longitude keeps its latitude.

    Args:
        df: DataFrame with ``LATITUDE`` and ``LONGITUD`` columns.

    Returns:
        A copy of *df* with both columns as float and sentinels as ``NaN``.
    """
    _validate_columns(df, required=['LATITUDE', 'LONGITUD'])
    out = df.copy()
    lat = pd.to_numeric(out['LATITUDE'], errors='coerce').astype(float)
    lon = pd.to_numeric(out['LONGITUD'], errors='coerce').astype(float)
    out['LATITUDE'] = lat.where(lat <= LATITUDE_SENTINEL, np.nan)
    out['LONGITUD'] = lon.where(lon <= LONGITUDE_SENTINEL, np.nan)
    return out


def coordinate_ranges(
    df: pd.DataFrame,
) -> Tuple[Optional[Tuple[float, float]], Optional[Tuple[float, float]]]:
    """
    Min/max of latitude and longitude over non-missing values.

    Expects a frame already passed through ``sanitize_coordinates``.

    Returns:
        ``((lat_min, lat_max), (lon_min, lon_max))``.  A range is ``None``
        when every value of that coordinate is missing.
    """
    return _value_range(df['LATITUDE']), _value_range(df['LONGITUD'])


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _parse_whole_number(value: Any) -> Optional[int]:
    """Return *value* as an ``int`` when it denotes a whole number, else None."""
    if isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)):
        if np.isfinite(value) and float(value).is_integer():
            return int(value)
        return None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _value_range(series: pd.Series) -> Optional[Tuple[float, float]]:
    values = series.dropna()
    if values.empty:
        return None
    return float(values.min()), float(values.max())


def _validate_columns(df: pd.DataFrame, required: List[str]) -> None:
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(
            f"DataFrame is missing required columns: {missing}. "
            f"Got: {list(df.columns)}"
        )
