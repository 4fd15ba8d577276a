"""
Data model (accident tables)
============================

FARS rows stay in pandas DataFrames; this module only names the columns the
package relies on and holds the small record types passed between steps.

Coordinate sentinels: the raw exports use LATITUDE values above 90 and
LONGITUD values above 900 for "unknown". `mask_coordinate_sentinels` turns
them into NaN so nothing downstream has to know the magic numbers.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import numpy as np
import pandas as pd

MONTH = "MONTH"
STATE = "STATE"
LATITUDE = "LATITUDE"
LONGITUD = "LONGITUD"
YEAR = "year"

# values strictly above these mean "unknown"
LATITUDE_SENTINEL = 90
LONGITUD_SENTINEL = 900


def to_int(x) -> int:
    """Coerce a year or state code to int.

    Accepts ints, floats (truncated) and numeric strings such as "2013" or
    "2013.0". Raises ValueError / TypeError otherwise.
    """
    if isinstance(x, str):
        x = x.strip()
        try:
            return int(x)
        except ValueError:
            return int(float(x))
    return int(x)


def mask_coordinate_sentinels(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy of `df` with sentinel coordinates replaced by NaN."""
    out = df.copy()
    lon = pd.to_numeric(out[LONGITUD], errors="coerce")
    lat = pd.to_numeric(out[LATITUDE], errors="coerce")
    out[LONGITUD] = lon.where(lon <= LONGITUD_SENTINEL, np.nan)
    out[LATITUDE] = lat.where(lat <= LATITUDE_SENTINEL, np.nan)
    return out


@dataclass(frozen=True)
class YearResult:
    """Outcome of loading one requested year.

    `data` holds the MONTH/year projection on success; on failure it is None
    and `error` carries the exception that was raised.
    """
    year: int
    data: Optional[pd.DataFrame] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.data is not None
