"""
FARS Data Reader (Imperative Shell)

Locates and loads the per-year FARS accident files and hands the resulting
DataFrames to the functional core (``fars.analysis.records``).

Package Location: src/fars/data/reader.py

File Convention:
    One file per year named ``accident_<YYYY>.csv.bz2``.  Files are looked
    up in *data_dir* when given, otherwise in the current working directory.
    Compression is inferred from the extension, so an uncompressed or
    gzip'd copy passed to ``fars_read`` directly also loads.

Batch Failure Policy:
    ``fars_read_years`` never raises for a single bad year.  A missing file,
    unparseable or truncated file, malformed year or a file without a
    ``MONTH`` column is logged as a warning and recorded as an
    ``AggregationError`` in that year's slot, so the returned list always
    has one element per requested year.  ``fars_read`` on its own is strict
    and raises.
"""

from __future__ import annotations

import logging
import warnings
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

import numpy as np
import pandas as pd

from ..analysis.records import (
    AggregationError,
    FarsFileNotFoundError,
    make_filename,
    parse_year,
    select_month_year,
)

logger = logging.getLogger(__name__)

# Loader diagnostics that are informational, not errors
_QUIET_WARNINGS = (pd.errors.DtypeWarning, pd.errors.ParserWarning)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def resolve_path(year: Any, data_dir: Optional[Union[str, Path]] = None) -> Path:
    """
    Return the expected path of the data file for *year*.

    Args:
        year: Year in YYYY form (see ``parse_year``).
        data_dir: Directory holding the FARS files.  Defaults to the
            current working directory.

    Raises:
        InvalidYearError: If *year* cannot be parsed.
    """
    filename = make_filename(year)
    if data_dir is None:
        return Path(filename)
    return Path(data_dir) / filename


def fars_read(filename: Union[str, Path]) -> pd.DataFrame:
    """
    Load one FARS CSV file into a DataFrame.

    All columns and the original row order are preserved.  Dtype-inference
    and parser notices are suppressed.

    Args:
        filename: Path to a ``.csv`` / ``.csv.bz2`` (or other pandas-
            inferable compression) file with a header row.

    Returns:
        Raw accident DataFrame.

    Raises:
        FarsFileNotFoundError: If *filename* does not exist.
        pandas.errors.ParserError, pandas.errors.EmptyDataError, OSError,
        EOFError:
            If the file cannot be decompressed or parsed (``EOFError``
            for a truncated compressed stream).
    """
    path = Path(filename)
    if not path.is_file():
        raise FarsFileNotFoundError(f"file '{filename}' does not exist")

    with warnings.catch_warnings():
        for category in _QUIET_WARNINGS:
            warnings.simplefilter('ignore', category=category)
        df = pd.read_csv(path, low_memory=False)

    logger.debug(
        f"Loaded {len(df)} rows from {path}",
        extra={"path": str(path), "rows": len(df)},
    )
    return df


def fars_read_years(
    years: Union[Any, Iterable[Any]],
    data_dir: Optional[Union[str, Path]] = None,
) -> List[Union[pd.DataFrame, AggregationError]]:
    """
    Load several years and reduce each to ``[MONTH, year]``.

    Args:
        years: A single year or an iterable of years (YYYY).
        data_dir: Directory holding the FARS files (default: cwd).

    Returns:
        List with one element per requested year, in input order.  Each
        element is either a ``[MONTH, year]`` DataFrame or an
        ``AggregationError`` describing why that year was skipped.
    """
    results: List[Union[pd.DataFrame, AggregationError]] = []
    for year in _as_year_list(years):
        try:
            path = resolve_path(year, data_dir)
            dat = fars_read(path)
            results.append(select_month_year(dat, parse_year(year)))
        except (OSError, EOFError, ValueError) as exc:
            logger.warning(
                f"invalid year: {year}",
                extra={"year": str(year), "error": str(exc)},
            )
            results.append(AggregationError(year, cause=exc))
    return results


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _as_year_list(years: Union[Any, Iterable[Any]]) -> List[Any]:
    """Wrap a scalar year in a list; leave iterables as lists."""
    if isinstance(years, (str, bytes, int, float, np.integer, np.floating)):
        return [years]
    return list(years)
