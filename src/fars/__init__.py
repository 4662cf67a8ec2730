"""
FARS - Fatality Analysis Reporting System accident tools

Loads yearly FARS accident files, summarizes accident counts by month and
year, and maps accident locations for one state using the Functional Core,
Imperative Shell architecture.

Structure:
- analysis/ : Functional Core (parsing, errors, pure DataFrame transforms)
- data/     : Imperative Shell (file resolution and loading)
- plotting/ : (plotting functions)
- reports/  : (summaries, maps, HTML/CSV output)
- utils/    : logging setup
"""

from .analysis import (
    AggregationError,
    FarsError,
    FarsFileNotFoundError,
    InvalidStateError,
    InvalidYearError,
    make_filename,
)
from .data import fars_read, fars_read_years
from .reports import fars_map_state, fars_summarize_years
from .utils import JsonFormatter, configure_logging

__version__ = "0.1.0"

__all__ = [
    'AggregationError',
    'FarsError',
    'FarsFileNotFoundError',
    'InvalidStateError',
    'InvalidYearError',
    'make_filename',
    'fars_read',
    'fars_read_years',
    'fars_summarize_years',
    'fars_map_state',
    'JsonFormatter',
    'configure_logging',
]
