"""
State accident maps
===================

`fars_map_state` loads one year, keeps the rows for one state and hands the
accident coordinates to a renderer. The renderer is anything with a
`draw(region, xlim, ylim, longitudes, latitudes)` method; the default one
draws contextily map tiles under a matplotlib scatter, plus state outlines
via geopandas when a boundary file is given.
"""

from __future__ import annotations
from typing import Optional, Protocol, Sequence, Tuple
import logging
import pandas as pd

from .config import DEFAULT_DATA_DIR
from .errors import InvalidStateError
from .loader import fars_read, make_filename
from .models import LATITUDE, LONGITUD, STATE, mask_coordinate_sentinels, to_int

logger = logging.getLogger(__name__)


class MapRenderer(Protocol):
    def draw(
        self,
        region: str,
        xlim: Tuple[float, float],
        ylim: Tuple[float, float],
        longitudes: Sequence[float],
        latitudes: Sequence[float],
    ): ...


class MatplotlibStateRenderer:
    """Scatter accident points over a tile base map.

    boundaries_path: any file geopandas can read (GeoJSON, shapefile, ...).
        Its outlines are drawn on top of the tiles.
    out_path: save the figure there (PNG etc.) and close it.
    basemap: fetch map tiles with contextily. Turn off when offline.
    """

    def __init__(
        self,
        boundaries_path: Optional[str] = None,
        out_path: Optional[str] = None,
        basemap: bool = True,
    ):
        self.boundaries_path = boundaries_path
        self.out_path = out_path
        self.basemap = basemap

    def draw(self, region, xlim, ylim, longitudes, latitudes):
        try:
            import matplotlib.pyplot as plt
        except ImportError as e:
            raise ImportError(
                "Missing dependency: matplotlib.\n"
                "Install it with: python -m pip install matplotlib"
            ) from e

        fig, ax = plt.subplots(figsize=(8, 6))
        ax.set_xlim(*_pad(xlim))
        ax.set_ylim(*_pad(ylim))

        # tiles are fetched for the current axes extent, so limits go first
        if self.basemap:
            try:
                import contextily as ctx
            except ImportError as e:
                raise ImportError(
                    "Missing dependency: contextily (needed for the base map).\n"
                    "Install it with: python -m pip install contextily"
                ) from e
            ctx.add_basemap(ax, crs="EPSG:4326", source=ctx.providers.OpenStreetMap.Mapnik)

        if self.boundaries_path:
            try:
                import geopandas as gpd
            except ImportError as e:
                raise ImportError(
                    "Missing dependency: geopandas (needed for state outlines).\n"
                    "Install it with: python -m pip install geopandas"
                ) from e
            gpd.read_file(self.boundaries_path).boundary.plot(ax=ax, color="grey", linewidth=0.6)
            ax.set_xlim(*_pad(xlim))
            ax.set_ylim(*_pad(ylim))

        # NaN coordinates are skipped by matplotlib
        ax.scatter(longitudes, latitudes, s=4, marker=".", color="darkred", zorder=3)
        ax.set_title(region)
        ax.set_xlabel("Longitude")
        ax.set_ylabel("Latitude")

        if self.out_path:
            fig.tight_layout()
            fig.savefig(self.out_path, dpi=200)
            plt.close(fig)
            logger.info("Map written to %s", self.out_path)
        return fig


def _pad(lim: Tuple[float, float], margin: float = 0.05) -> Tuple[float, float]:
    """Widen a single-point extent so the map has a visible area."""
    lo, hi = lim
    if lo == hi:
        return lo - margin, hi + margin
    return lo, hi


def filter_state(data: pd.DataFrame, state: int) -> pd.DataFrame:
    """Rows of `data` whose STATE equals `state`."""
    return data[data[STATE] == state]


def _range(values: pd.Series) -> Tuple[float, float]:
    return float(values.min()), float(values.max())


def fars_map_state(
    state_num,
    year,
    data_dir: str = DEFAULT_DATA_DIR,
    *,
    renderer: Optional[MapRenderer] = None,
):
    """Plot the accidents of one state in one year.

    Raises InvalidStateError if `state_num` does not occur in that year's
    STATE column. If no rows are left to plot, logs a message and returns
    None without drawing anything.
    """
    filename = make_filename(year)
    data = fars_read(filename, data_dir=data_dir)
    state = to_int(state_num)

    if state not in set(data[STATE].unique()):
        raise InvalidStateError(f"invalid STATE number: {state}")

    sub = filter_state(data, state)
    if len(sub) == 0:
        logger.info("no accidents to plot")
        return None

    sub = mask_coordinate_sentinels(sub)
    lon, lat = sub[LONGITUD], sub[LATITUDE]
    if sub[[LONGITUD, LATITUDE]].dropna().empty:
        logger.info("no coordinates to plot")
        return None

    renderer = renderer or MatplotlibStateRenderer()
    logger.info("Plotting %d accidents for state %d in %s", len(sub), state, filename)
    return renderer.draw(
        "state",
        _range(lon),
        _range(lat),
        lon.tolist(),
        lat.tolist(),
    )
