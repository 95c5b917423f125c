"""Geographic distance matrices from site coordinates."""
from __future__ import annotations
import math

import numpy as np
import pandas as pd

from .config import EARTH_RADIUS_KM, LAT_COL, LON_COL
from .labeled_matrix import LabeledMatrix
from .validators import assert_coordinates


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres between two points given in degrees."""
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2 +
        math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.asin(math.sqrt(min(1.0, a)))
    return EARTH_RADIUS_KM * c


def haversine_matrix(coords: pd.DataFrame, lat_col: str = LAT_COL, lon_col: str = LON_COL) -> LabeledMatrix:
    """
    Pairwise great-circle distances (km) between sites.

    Args:
        coords: DataFrame indexed by site label with latitude/longitude columns in degrees
        lat_col: Name of the latitude column
        lon_col: Name of the longitude column

    Returns:
        LabeledMatrix labelled by ``coords.index``, zero on the diagonal
    """
    coords = assert_coordinates(coords, lat_col, lon_col)
    lat = np.radians(coords[lat_col].to_numpy(dtype=float))
    lon = np.radians(coords[lon_col].to_numpy(dtype=float))

    dlat = lat[:, None] - lat[None, :]
    dlon = lon[:, None] - lon[None, :]
    a = np.sin(dlat / 2) ** 2 + np.cos(lat)[:, None] * np.cos(lat)[None, :] * np.sin(dlon / 2) ** 2
    dist = 2 * EARTH_RADIUS_KM * np.arcsin(np.sqrt(np.clip(a, 0.0, 1.0)))
    np.fill_diagonal(dist, 0.0)
    return LabeledMatrix(dist, list(coords.index), name="geographical_matrix")
