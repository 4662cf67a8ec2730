"""Shared fixtures: synthetic FARS accident files written to a temp dir."""

from pathlib import Path

import pandas as pd
import pytest

# (MONTH, STATE, LATITUDE, LONGITUD) per accident
_YEARS = {
    2013: [
        (1, 1, 32.40, -86.20),
        (1, 1, 33.10, -87.50),
        (2, 6, 36.70, -119.80),
        (3, 6, 34.05, -118.25),
    ],
    2014: [
        (1, 1, 33.50, -86.80),
        (2, 1, 34.00, -87.00),
        (2, 1, 99.99, -86.50),    # unknown latitude
        (2, 1, 33.00, 999.99),    # unknown longitude
        (12, 6, 99.99, 999.99),   # position entirely unknown
    ],
    2015: [
        (3, 1, 31.20, -85.40),
        (3, 4, 33.45, -112.07),
        (12, 4, 32.22, -110.97),
        (12, 1, 30.70, -88.04),
    ],
}


def write_year(directory: Path, year: int, rows) -> Path:
    """Write ``accident_<year>.csv.bz2`` with a few pass-through columns."""
    df = pd.DataFrame(rows, columns=['MONTH', 'STATE', 'LATITUDE', 'LONGITUD'])
    df.insert(0, 'ST_CASE', range(10001, 10001 + len(df)))
    df['FATALS'] = 1
    path = directory / f"accident_{year}.csv.bz2"
    df.to_csv(path, index=False)
    return path


@pytest.fixture
def fars_dir(tmp_path):
    """Directory holding accident files for 2013, 2014 and 2015."""
    for year, rows in _YEARS.items():
        write_year(tmp_path, year, rows)
    return tmp_path
