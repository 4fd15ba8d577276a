"""
Core engine (multi-year aggregation)
====================================

1) For each requested year, build its file name and load it
2) Keep only MONTH and tag every row with the requested year
3) Capture per-year failures as `YearResult` objects instead of aborting
4) Count accidents per (year, MONTH) and pivot into a month x year table

A missing or broken year never stops the others: its failure is reported
with a `FarsWarning` and the year is left out of the summary.
"""

from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional
import logging
import warnings
import pandas as pd

from .config import DEFAULT_DATA_DIR
from .errors import FarsWarning
from .loader import fars_read, make_filename
from .models import MONTH, YEAR, YearResult, to_int

logger = logging.getLogger(__name__)


def _load_year(year: int, data_dir: str) -> YearResult:
    """Load one year; any error is captured in the result."""
    try:
        df = fars_read(make_filename(year), data_dir=data_dir)
        data = df[[MONTH]].assign(**{YEAR: year})
    except Exception as e:
        logger.debug("Loading year %s failed: %r", year, e)
        return YearResult(year=year, error=e)
    return YearResult(year=year, data=data)


def _as_list(years) -> list:
    """Treat a single year (int, float or str) as a one-element batch."""
    if isinstance(years, (str, bytes)) or not isinstance(years, Iterable):
        return [years]
    return list(years)


def fars_read_years(
    years: Iterable,
    data_dir: str = DEFAULT_DATA_DIR,
    *,
    max_workers: Optional[int] = None,
) -> List[YearResult]:
    """Read MONTH/year data for every year in `years`.

    Returns one `YearResult` per year, in input order. Years that cannot be
    loaded come back with `data=None` and trigger a `FarsWarning`.
    Years that are not integers raise straight away.
    """
    ys = [to_int(y) for y in _as_list(years)]

    if max_workers and max_workers > 1 and len(ys) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(lambda y: _load_year(y, data_dir), ys))
    else:
        results = [_load_year(y, data_dir) for y in ys]

    # warn from the calling thread so warning filters/catchers see them
    for r in results:
        if not r.ok:
            warnings.warn(f"invalid year: {r.year}", FarsWarning, stacklevel=2)

    logger.info("Loaded %d of %d years", sum(r.ok for r in results), len(results))
    return results


def fars_summarize_years(
    years: Iterable,
    data_dir: str = DEFAULT_DATA_DIR,
    *,
    max_workers: Optional[int] = None,
) -> pd.DataFrame:
    """Number of accidents per month (rows) and year (columns).

    Months missing from a year that has other data are filled with 0.
    Years without data contribute no column.
    """
    results = fars_read_years(years, data_dir=data_dir, max_workers=max_workers)
    frames = [r.data for r in results if r.ok and not r.data.empty]
    if not frames:
        return pd.DataFrame(columns=[MONTH])

    dat = pd.concat(frames, ignore_index=True)

    counts = dat.groupby([YEAR, MONTH]).size()
    table = (
        counts.unstack(YEAR, fill_value=0)
        .sort_index(axis=0)
        .sort_index(axis=1)
        .astype("int64")
    )
    table.columns.name = None
    return table.reset_index()
