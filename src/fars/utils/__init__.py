"""
FARS Utilities Package

Modules:
- logging: JSON log formatter and ``fars`` logger setup
"""

from .logging import JsonFormatter, configure_logging

__all__ = [
    'JsonFormatter',
    'configure_logging',
]
