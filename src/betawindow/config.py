from __future__ import annotations
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
DATA = ROOT / "data"
RAW = DATA / "raw"
PROC = DATA / "processed"

# raw matrix filenames (adjust to yours)
RAW_DISSIMILARITY_CSV = RAW / "floristic_distance.csv"
RAW_GEOGRAPHIC_CSV = RAW / "geographic_distance.csv"
RAW_COORDS_CSV = RAW / "site_coordinates.csv"

# keys
LABEL_COL = "site_id"
LAT_COL = "latitude"
LON_COL = "longitude"

EARTH_RADIUS_KM = 6371.0

# windows used when the pipeline is run without arguments
DEFAULT_K = (4,)
DEFAULT_RADII = (40.0,)

RESULT_NAME = "moving_window_beta.csv"
