import math

import pandas as pd
import pytest

from fars.plotting import plot_monthly_summary, plot_state_map


def test_state_map_points_and_window():
    df = pd.DataFrame({
        'STATE': [27, 27, 27, 27],
        'LATITUDE': [95.0, 45.0, 45.0, 40.0],
        'LONGITUD': [-100.0, 905.0, -100.0, -90.0],
    })
    fig = plot_state_map(df, state_num=27, year=2014)

    assert len(fig.data) == 1
    trace = fig.data[0]
    assert trace.type == 'scattergeo'
    assert list(zip(trace.lat, trace.lon)) == [(45.0, -100.0), (40.0, -90.0)]
    assert trace.marker.size == 3
    assert list(fig.layout.geo.lataxis.range) == [39.5, 45.5]
    assert list(fig.layout.geo.lonaxis.range) == [-100.5, -89.5]
    assert fig.layout.geo.showsubunits is True
    assert 'State 27' in fig.layout.title.text
    assert '2014' in fig.layout.title.text


def test_state_map_requires_coordinates():
    with pytest.raises(ValueError, match="LONGITUD"):
        plot_state_map(pd.DataFrame({'LATITUDE': [40.0]}), state_num=1, year=2014)


def test_monthly_summary_one_trace_per_year():
    summary = pd.DataFrame({
        'MONTH': [1, 2, 12],
        2013: pd.array([5, 3, None], dtype='Int64'),
        2014: pd.array([4, None, 7], dtype='Int64'),
    })
    fig = plot_monthly_summary(summary)

    assert [t.name for t in fig.data] == ['2013', '2014']
    assert list(fig.data[0].x) == [1, 2, 12]
    assert list(fig.data[0].y[:2]) == [5.0, 3.0]
    assert math.isnan(fig.data[0].y[2])
    assert math.isnan(fig.data[1].y[1])
    assert list(fig.layout.xaxis.tickvals) == list(range(1, 13))


def test_monthly_summary_requires_month():
    with pytest.raises(ValueError, match="MONTH"):
        plot_monthly_summary(pd.DataFrame({2013: [1]}))
