"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: one state's accident rows for one year.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Coordinate Rule:
    Sentinel coordinates (``LATITUDE > 90``, ``LONGITUD > 900``) are turned
    into ``NaN`` before anything else.  The map's latitude/longitude window
    is computed per coordinate over non-missing values only, so a row with
    an unknown longitude still contributes its latitude to the window.
    Points are drawn only for rows where both coordinates are known.

Base Map:
    A North America Mercator map with state outlines (``showsubunits``),
    zoomed to the accident window plus a small margin.  The ``usa`` scope is
    not used because its Albers projection ignores axis ranges.
"""

from __future__ import annotations

from typing import Tuple

import pandas as pd
import plotly.graph_objects as go

from ..analysis.records import coordinate_ranges, sanitize_coordinates

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Degrees added on each side of the accident window
_RANGE_PAD: float = 0.5

_MARKER_STYLE = dict(size=3, color='black', symbol='circle')


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_map(
    df_state: pd.DataFrame,
    state_num: int,
    year: int,
) -> go.Figure:
    """
    Build a scatter map of accident locations for one state and year.

    Args:
        df_state: Accident rows for a single state, with columns::

            LATITUDE : float, degrees (sentinel > 90 means unknown)
            LONGITUD : float, degrees (sentinel > 900 means unknown)

        state_num: FARS state code (used in the title only).
        year: Data year (used in the title only).

    Returns:
        ``plotly.graph_objects.Figure`` with one ``Scattergeo`` trace.

    Raises:
        ValueError: If ``LATITUDE`` or ``LONGITUD`` is missing.
    """
    df = sanitize_coordinates(df_state)
    lat_range, lon_range = coordinate_ranges(df)
    points = df.dropna(subset=['LATITUDE', 'LONGITUD'])

    fig = go.Figure()
    fig.add_trace(go.Scattergeo(
        lon=points['LONGITUD'],
        lat=points['LATITUDE'],
        mode='markers',
        marker=_MARKER_STYLE,
        name='Accident',
        showlegend=False,
        hovertemplate=(
            "Lat: %{lat:.4f}<br>"
            "Lon: %{lon:.4f}<extra></extra>"
        ),
    ))

    fig.update_geos(
        scope='north america',
        projection_type='mercator',
        showsubunits=True,
        subunitcolor='gray',
        showcountries=True,
        showland=True,
        landcolor='white',
    )
    if lat_range is not None:
        fig.update_geos(lataxis_range=_padded(lat_range))
    if lon_range is not None:
        fig.update_geos(lonaxis_range=_padded(lon_range))
    fig.update_layout(
        title=f'State {state_num} – {year} Accidents ({len(points)} located)',
        margin=dict(r=10, t=50, l=10, b=10),
        template='plotly_white',
    )
    return fig


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _padded(bounds: Tuple[float, float]) -> list:
    lo, hi = bounds
    return [lo - _RANGE_PAD, hi + _RANGE_PAD]
