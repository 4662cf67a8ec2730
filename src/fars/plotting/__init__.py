"""
FARS Plotting Package (Functional Core)

Pure plotting functions only – no file I/O, no side effects.
Every public function accepts DataFrames and returns a
``plotly.graph_objects.Figure``.

Modules:
    state_map: Accident locations for one state/year over a state-outline
               base map.
    monthly:   Monthly accident counts, one line per year.
"""

from .state_map import plot_state_map
from .monthly import plot_monthly_summary

__all__ = [
    'plot_state_map',
    'plot_monthly_summary',
]
