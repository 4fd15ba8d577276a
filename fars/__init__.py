"""
FARS package
============

Small offline analysis helpers for yearly FARS accident exports
(`accident_<year>.csv`).

- Loading single files is in `fars/loader.py`.
- Multi-year aggregation and the monthly summary are in `fars/engine.py`.
- State maps are in `fars/mapping.py`.
- The CLI entry point is in `fars/cli.py`.
"""

from .loader import fars_read, make_filename
from .engine import fars_read_years, fars_summarize_years
from .mapping import fars_map_state
from .errors import InvalidStateError, FarsWarning

__version__ = '0.1.0'

__all__ = [
    "fars_read",
    "make_filename",
    "fars_read_years",
    "fars_summarize_years",
    "fars_map_state",
    "InvalidStateError",
    "FarsWarning",
]
