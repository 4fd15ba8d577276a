"""
Dataset loader (CSV -> DataFrame)
=================================

Reads one yearly FARS export into a pandas DataFrame.

Key ideas:
- File names follow `accident_<year>.csv`; `make_filename` builds them.
- Files are resolved against an explicit data directory.
- No schema is enforced here; callers pick the columns they need.
"""

from __future__ import annotations
import logging
import os
import warnings
import pandas as pd

from .config import DEFAULT_DATA_DIR
from .models import to_int

logger = logging.getLogger(__name__)


def make_filename(year) -> str:
    """Return the accident file name for `year` (e.g. "accident_2013.csv")."""
    return "accident_%d.csv" % to_int(year)


def fars_read(filename: str, data_dir: str = DEFAULT_DATA_DIR) -> pd.DataFrame:
    """Read `filename` from `data_dir` into a DataFrame.

    Raises FileNotFoundError if the file does not exist. Parser warnings
    (mixed dtypes and the like) are suppressed.
    """
    path = os.path.join(data_dir, filename)
    if not os.path.isfile(path):
        raise FileNotFoundError(f"file '{filename}' does not exist")

    logger.debug("Reading %s", path)
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        df = pd.read_csv(path)
    logger.debug("Read %d rows from %s", len(df), filename)
    return df
