import numpy as np
import pandas as pd
import pytest

from fars.analysis.records import (
    AggregationError,
    InvalidStateError,
    InvalidYearError,
    coordinate_ranges,
    filter_state,
    make_filename,
    parse_state,
    parse_year,
    sanitize_coordinates,
    select_month_year,
    summarize_month_counts,
)


# ---------------------------------------------------------------------------
# parse_year / make_filename
# ---------------------------------------------------------------------------

def test_make_filename():
    assert make_filename(2014) == "accident_2014.csv.bz2"


@pytest.mark.parametrize("year", [2014, 2014.0, "2014", " 2014 ", np.int64(2014)])
def test_make_filename_accepts_whole_numbers(year):
    assert make_filename(year) == "accident_2014.csv.bz2"


@pytest.mark.parametrize("year", [2014.9, "abc", "2014.5", None, True, float("nan"), [2014]])
def test_make_filename_rejects_non_integers(year):
    with pytest.raises(InvalidYearError):
        make_filename(year)


@pytest.mark.parametrize("year", [14, 0, -2014, 20140])
def test_parse_year_requires_four_digits(year):
    with pytest.raises(InvalidYearError):
        parse_year(year)


def test_invalid_year_is_value_error():
    with pytest.raises(ValueError):
        parse_year("abc")


def test_parse_state():
    assert parse_state("6") == 6
    assert parse_state(1.0) == 1
    with pytest.raises(InvalidStateError):
        parse_state(1.5)
    with pytest.raises(InvalidStateError):
        parse_state("AL")


# ---------------------------------------------------------------------------
# select_month_year / summarize_month_counts
# ---------------------------------------------------------------------------

def test_select_month_year_projects_and_tags():
    df = pd.DataFrame({'ST_CASE': [1, 2, 3], 'MONTH': [5, 1, 5], 'STATE': [1, 1, 2]})
    out = select_month_year(df, 2013)
    assert list(out.columns) == ['MONTH', 'year']
    assert out['MONTH'].tolist() == [5, 1, 5]
    assert out['year'].tolist() == [2013, 2013, 2013]
    assert 'year' not in df.columns


def test_select_month_year_requires_month():
    with pytest.raises(ValueError, match="MONTH"):
        select_month_year(pd.DataFrame({'STATE': [1]}), 2013)


def test_summarize_month_counts_pivots_years_to_columns():
    tables = [
        pd.DataFrame({'MONTH': [2, 1, 1], 'year': 2014}),
        AggregationError(2099),
        pd.DataFrame({'MONTH': [1, 3], 'year': 2013}),
    ]
    summary = summarize_month_counts(tables)

    assert list(summary.columns) == ['MONTH', 2013, 2014]
    assert summary['MONTH'].tolist() == [1, 2, 3]
    assert summary[2013].tolist()[0] == 1
    assert pd.isna(summary[2013].iloc[1])
    assert summary[2013].iloc[2] == 1
    assert summary[2014].iloc[0] == 2
    assert summary[2014].iloc[1] == 1
    assert pd.isna(summary[2014].iloc[2])


def test_summarize_month_counts_without_tables():
    summary = summarize_month_counts([AggregationError(2013), None])
    assert summary.empty
    assert list(summary.columns) == ['MONTH']


# ---------------------------------------------------------------------------
# filter_state / sanitize_coordinates / coordinate_ranges
# ---------------------------------------------------------------------------

def test_filter_state():
    df = pd.DataFrame({'STATE': [1, 6, 1], 'MONTH': [1, 2, 3]})
    out = filter_state(df, 1)
    assert out['MONTH'].tolist() == [1, 3]


def test_filter_state_unknown_code():
    df = pd.DataFrame({'STATE': [1, 6]})
    with pytest.raises(InvalidStateError, match="invalid STATE number: 99"):
        filter_state(df, 99)


def test_sanitize_coordinates_replaces_sentinels():
    df = pd.DataFrame({
        'LATITUDE': [95.0, 45.0, 45.0],
        'LONGITUD': [-100.0, 905.0, -100.0],
    })
    out = sanitize_coordinates(df)

    assert np.isnan(out.loc[0, 'LATITUDE'])
    assert out.loc[0, 'LONGITUD'] == -100.0
    assert out.loc[1, 'LATITUDE'] == 45.0
    assert np.isnan(out.loc[1, 'LONGITUD'])
    assert out.loc[2, 'LATITUDE'] == 45.0
    assert out.loc[2, 'LONGITUD'] == -100.0
    # input untouched
    assert df.loc[0, 'LATITUDE'] == 95.0


def test_sanitize_keeps_boundary_values():
    df = pd.DataFrame({'LATITUDE': [90.0], 'LONGITUD': [900.0]})
    out = sanitize_coordinates(df)
    assert out.loc[0, 'LATITUDE'] == 90.0
    assert out.loc[0, 'LONGITUD'] == 900.0


def test_coordinate_ranges_ignore_missing():
    df = sanitize_coordinates(pd.DataFrame({
        'LATITUDE': [95.0, 45.0, 40.0],
        'LONGITUD': [-100.0, 905.0, -90.0],
    }))
    lat_range, lon_range = coordinate_ranges(df)
    assert lat_range == (40.0, 45.0)
    assert lon_range == (-100.0, -90.0)


def test_coordinate_ranges_all_missing():
    df = sanitize_coordinates(pd.DataFrame({'LATITUDE': [99.99], 'LONGITUD': [999.99]}))
    assert coordinate_ranges(df) == (None, None)
