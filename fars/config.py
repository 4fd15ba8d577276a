"""
Configuration
=============

`FarsConfig` holds the values that used to be implicit: where the yearly
CSV files live, how many worker threads to use for multi-year loads and an
optional state-boundary file and tile base map for maps. The CLI builds one from its
arguments; library functions accept the same values as keyword arguments.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

DEFAULT_DATA_DIR = "data"


@dataclass
class FarsConfig:
    """High-level knobs shared by the CLI commands."""
    data_dir: str = DEFAULT_DATA_DIR

    # None or 1 -> load years one after another
    max_workers: Optional[int] = None

    # GeoJSON/shapefile with state outlines (needs geopandas)
    boundaries_path: Optional[str] = None

    # contextily tiles under state maps (needs network access)
    basemap: bool = True
