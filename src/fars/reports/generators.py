"""
FARS Report Generator (Imperative Shell)

Thin orchestration layer: resolves years → files, calls data/reader.py to
load DataFrames, calls the functional core to summarize / filter, calls the
plotting functions to build figures, and shows or writes the results.

No parsing or aggregation logic lives here.

Package Location: src/fars/reports/generators.py

Usage::

    from fars.reports.generators import (
        ReportGenerator, fars_map_state, fars_summarize_years,
    )

    fars_summarize_years([2013, 2014, 2015], data_dir="data")
    fars_map_state(1, 2013, data_dir="data")       # opens the figure

    gen = ReportGenerator(data_dir="data", output_dir="reports")
    gen.generate_summary([2013, 2014, 2015])
    # Writes:
    #   reports/monthly_summary.csv
    #   reports/Monthly_Summary.html
    gen.generate_state_map(1, 2013)
    # Writes:
    #   reports/State_1_2013.html
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

import pandas as pd
import plotly.graph_objects as go

from ..analysis.records import (
    FarsError,
    filter_state,
    parse_state,
    parse_year,
    sanitize_coordinates,
    summarize_month_counts,
)
from ..data.reader import fars_read, fars_read_years, resolve_path
from ..plotting.monthly import plot_monthly_summary
from ..plotting.state_map import plot_state_map

logger = logging.getLogger(__name__)

_SUMMARY_CSV = 'monthly_summary.csv'
_SUMMARY_HTML = 'Monthly_Summary.html'
_STATE_MAP_HTML = 'State_{state}_{year}.html'


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def fars_summarize_years(
    years: Union[Any, Iterable[Any]],
    data_dir: Optional[Union[str, Path]] = None,
) -> pd.DataFrame:
    """
    Monthly accident counts with one column per year.

    Years that fail to load are skipped (a warning is logged by the
    reader); see ``summarize_month_counts`` for the output layout.

    Example output for ``[2013, 2014, 2015]``::

           MONTH  2013  2014  2015
        0      1  2230  2168  2368
        1      2  1952  1893  1968
        ...
        11    12  2457  2604  2781

    Args:
        years: A single year or an iterable of years (YYYY).
        data_dir: Directory holding the FARS files (default: cwd).

    Returns:
        MonthlySummary DataFrame.
    """
    return summarize_month_counts(fars_read_years(years, data_dir=data_dir))


def fars_map_state(
    state_num: Any,
    year: Any,
    data_dir: Optional[Union[str, Path]] = None,
    show: bool = True,
    output_path: Optional[Union[str, Path]] = None,
) -> Optional[go.Figure]:
    """
    Plot the accident locations of one state for one year.

    Args:
        state_num: FARS state code.
        year: Data year (YYYY).
        data_dir: Directory holding the FARS files (default: cwd).
        show: When ``True`` (default) render the figure with ``fig.show()``.
        output_path: Optional HTML file to write the figure to.

    Returns:
        The figure, or ``None`` when there is nothing to plot.

    Raises:
        InvalidYearError: If *year* cannot be parsed.
        InvalidStateError: If *state_num* is malformed or absent from the
            year's ``STATE`` column.
        FarsFileNotFoundError: If the year's data file does not exist.
    """
    year = parse_year(year)
    state_num = parse_state(state_num)
    data = fars_read(resolve_path(year, data_dir))

    data_sub = filter_state(data, state_num)
    # Rows missing either coordinate cannot be drawn.
    located = sanitize_coordinates(data_sub).dropna(
        subset=['LATITUDE', 'LONGITUD']
    )
    if located.empty:
        logger.info(
            "no accidents to plot",
            extra={"state": state_num, "year": year},
        )
        return None

    fig = plot_state_map(data_sub, state_num=state_num, year=year)

    if output_path is not None:
        fig.write_html(str(output_path))
        logger.info(
            f"State {state_num} / {year} map saved → {output_path}",
            extra={"state": state_num, "year": year, "path": str(output_path)},
        )
    if show:
        fig.show()
    return fig


class ReportGenerator:
    """
    Generates and saves standard FARS reports for a data directory.

    Responsibilities
    ----------------
    - Delegate all file loading to ``data/reader.py``.
    - Call pure aggregation and plotting functions from the functional core.
    - Write CSV tables and Plotly HTML figures into *output_dir*.

    Args:
        data_dir: Directory holding the ``accident_<YYYY>.csv.bz2`` files.
        output_dir: Directory for report output; created on first write.
    """

    def __init__(self, data_dir: Union[str, Path], output_dir: Union[str, Path]) -> None:
        self.data_dir = Path(data_dir)
        self.output_dir = Path(output_dir)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def generate_summary(self, years: Union[Any, Iterable[Any]]) -> pd.DataFrame:
        """
        Write the monthly summary as CSV and as an HTML line chart.

        Args:
            years: Years to include.

        Returns:
            The MonthlySummary DataFrame that was written.
        """
        summary = fars_summarize_years(years, data_dir=self.data_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        csv_path = self.output_dir / _SUMMARY_CSV
        summary.to_csv(csv_path, index=False)

        html_path = self.output_dir / _SUMMARY_HTML
        plot_monthly_summary(summary).write_html(str(html_path))

        logger.info(f"Monthly summary saved → {csv_path}, {html_path}")
        return summary

    def generate_state_map(self, state_num: Any, year: Any) -> Optional[Path]:
        """
        Write the accident map of one state/year as HTML.

        Returns:
            Path of the written file, or ``None`` when there was nothing
            to plot.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        out_path = self.output_dir / _STATE_MAP_HTML.format(
            state=parse_state(state_num), year=parse_year(year)
        )
        fig = fars_map_state(
            state_num,
            year,
            data_dir=self.data_dir,
            show=False,
            output_path=out_path,
        )
        return out_path if fig is not None else None


# ---------------------------------------------------------------------------
# Convenience entry-point
# ---------------------------------------------------------------------------

def generate_reports(
    data_dir: Union[str, Path],
    output_dir: Union[str, Path],
    years: Iterable[Any],
    state_nums: Iterable[Any] = (),
) -> pd.DataFrame:
    """
    Convenience function: monthly summary plus one map per state and year.

    A failure in one state map is logged and does not prevent the others
    from being written.

    Args:
        data_dir: Directory holding the FARS files.
        output_dir: Root output directory.
        years: Years to summarize and map.
        state_nums: FARS state codes to map for each year.

    Returns:
        The MonthlySummary DataFrame.

    Example::

        from fars.reports.generators import generate_reports

        generate_reports("data", "reports", [2013, 2014], state_nums=[1, 6])
    """
    years = list(years)
    gen = ReportGenerator(data_dir=data_dir, output_dir=output_dir)
    summary = gen.generate_summary(years)

    for state_num in state_nums:
        for year in years:
            try:
                gen.generate_state_map(state_num, year)
            except (FarsError, OSError, EOFError, ValueError) as exc:
                logger.warning(
                    f"State {state_num} / {year} map FAILED: {exc}",
                    extra={"state": str(state_num), "year": str(year)},
                )
    return summary
