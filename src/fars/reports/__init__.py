"""
FARS Reports Package (Imperative Shell)

Orchestrates data loading, aggregation, plot generation and output.
No analysis logic lives here — this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
reader (src/fars/data/reader.py).

Modules:
    generators: fars_summarize_years / fars_map_state, the
                ReportGenerator class and the generate_reports()
                convenience function.
"""

from .generators import (
    fars_summarize_years,
    fars_map_state,
    ReportGenerator,
    generate_reports,
)

__all__ = [
    'fars_summarize_years',
    'fars_map_state',
    'ReportGenerator',
    'generate_reports',
]
