"""
FARS Monthly Summary Chart (Functional Core)

Pure function – no file I/O, no side effects.
Input: MonthlySummary DataFrame from ``summarize_month_counts``.
Output: plotly.graph_objects.Figure with one line per year.

Package Location: src/fars/plotting/monthly.py
"""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

_MONTH_LABELS = [
    'Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
    'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec',
]


def plot_monthly_summary(summary: pd.DataFrame) -> go.Figure:
    """
    Line chart of accident counts per month, one trace per year.

    Months missing for a year are left as gaps rather than drawn as zero.

    Args:
        summary: DataFrame with a ``MONTH`` column and one count column per
            year.

    Returns:
        ``plotly.graph_objects.Figure``.

    Raises:
        ValueError: If ``MONTH`` is missing from *summary*.
    """
    if 'MONTH' not in summary.columns:
        raise ValueError(
            f"summary is missing required columns: ['MONTH']. "
            f"Got: {list(summary.columns)}"
        )

    months = summary['MONTH'].astype(int)
    year_cols = [c for c in summary.columns if c != 'MONTH']

    fig = go.Figure()
    for year in year_cols:
        fig.add_trace(go.Scatter(
            x=months,
            y=summary[year].astype(float),
            mode='lines+markers',
            name=str(year),
            connectgaps=False,
            hovertemplate=(
                f"<b>{year}</b><br>"
                "Month: %{x}<br>"
                "Accidents: %{y}<extra></extra>"
            ),
        ))

    fig.update_layout(
        title='Fatal Accidents by Month',
        xaxis=dict(
            title='Month',
            tickmode='array',
            tickvals=list(range(1, 13)),
            ticktext=_MONTH_LABELS,
            range=[0.5, 12.5],
        ),
        yaxis=dict(title='Accidents', rangemode='tozero'),
        legend=dict(title='Year'),
        hovermode='x unified',
        template='plotly_white',
    )
    return fig
