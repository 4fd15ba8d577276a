import matplotlib

matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest

ACCIDENTS_2013 = pd.DataFrame({
    "ST_CASE": [10001, 10002, 10003, 60001, 60002, 60003],
    "STATE": [1, 1, 1, 6, 6, 6],
    "MONTH": [1, 1, 2, 3, 3, 3],
    "LATITUDE": [32.5, 99.9999, 33.0, 36.1, 37.2, 35.0],
    "LONGITUD": [-86.5, -87.0, 999.9999, -119.0, -120.5, -118.2],
})

ACCIDENTS_2014 = pd.DataFrame({
    "ST_CASE": [10001, 10002, 60001, 60002],
    "STATE": [1, 1, 6, 6],
    "MONTH": [1, 2, 2, 5],
    "LATITUDE": [31.9, 34.1, 38.0, 36.6],
    "LONGITUD": [-85.7, -86.9, -121.3, -119.9],
})


class RecordingRenderer:
    """Stands in for the map renderer and remembers every draw call."""

    def __init__(self):
        self.calls = []

    def draw(self, region, xlim, ylim, longitudes, latitudes):
        self.calls.append(dict(region=region, xlim=xlim, ylim=ylim,
                               longitudes=list(longitudes), latitudes=list(latitudes)))
        return "drawn"


@pytest.fixture(autouse=True)
def basemap_calls(monkeypatch):
    """Replace contextily tile fetching with a local image covering the axes."""
    import contextily

    calls = []

    def add_basemap(ax, crs=None, source=None, **kwargs):
        calls.append(crs)
        x0, x1 = ax.get_xlim()
        y0, y1 = ax.get_ylim()
        ax.imshow(np.zeros((2, 2, 3)), extent=(x0, x1, y0, y1), zorder=0)
        ax.set_xlim(x0, x1)
        ax.set_ylim(y0, y1)

    monkeypatch.setattr(contextily, "add_basemap", add_basemap)
    return calls


@pytest.fixture
def data_dir(tmp_path):
    ACCIDENTS_2013.to_csv(tmp_path / "accident_2013.csv", index=False)
    ACCIDENTS_2014.to_csv(tmp_path / "accident_2014.csv", index=False)
    return str(tmp_path)


@pytest.fixture
def renderer():
    return RecordingRenderer()
