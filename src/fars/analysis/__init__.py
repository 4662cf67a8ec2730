"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept data structures (DataFrames, scalars) and
return transformed data.

Modules:
- records: Year/state parsing, file naming, month/year counts,
           state filtering and coordinate sanitization
"""

from .records import (
    FarsError,
    InvalidYearError,
    InvalidStateError,
    FarsFileNotFoundError,
    AggregationError,
    parse_year,
    parse_state,
    make_filename,
    select_month_year,
    summarize_month_counts,
    filter_state,
    sanitize_coordinates,
    coordinate_ranges,
)

__all__ = [
    # Errors
    'FarsError',
    'InvalidYearError',
    'InvalidStateError',
    'FarsFileNotFoundError',
    'AggregationError',
    # Parsing
    'parse_year',
    'parse_state',
    'make_filename',
    # Aggregation
    'select_month_year',
    'summarize_month_counts',
    # State mapping
    'filter_state',
    'sanitize_coordinates',
    'coordinate_ranges',
]
