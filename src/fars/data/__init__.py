"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS system.

Modules:
- reader: Data-file resolution, CSV loading and multi-year batch loading
"""

from .reader import (
    resolve_path,
    fars_read,
    fars_read_years,
)

__all__ = [
    'resolve_path',
    'fars_read',
    'fars_read_years',
]
