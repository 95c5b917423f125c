from __future__ import annotations
import logging
from pathlib import Path

import pandas as pd

from .cleaning import drop_duplicates_on_keys, harmonize_ids, normalize_matrix_labels
from .config import LABEL_COL, RAW_COORDS_CSV, RAW_DISSIMILARITY_CSV, RAW_GEOGRAPHIC_CSV
from .exceptions import InvalidCoordinates
from .labeled_matrix import LabeledMatrix

logger = logging.getLogger(__name__)

_EXCEL_SUFFIXES = {".xlsx", ".xlsm", ".xls"}


def _read_table(path: Path, **kwargs) -> pd.DataFrame:
    if path.suffix.lower() in _EXCEL_SUFFIXES:
        return pd.read_excel(path, engine="openpyxl", **kwargs)
    return pd.read_csv(path, **kwargs)


def read_matrix(path: str | Path, name: str | None = None) -> LabeledMatrix:
    """Read a square matrix whose first column holds the row labels and header the column labels."""
    path = Path(path)
    # labels stay strings: "001" must not become 1
    df = _read_table(path, index_col=0, converters={0: str})
    df = normalize_matrix_labels(df)
    logger.info("Read %s: %d x %d", path.name, *df.shape)
    return LabeledMatrix.from_frame(df, name=name or path.stem)


def read_coordinates(path: str | Path, id_col: str = LABEL_COL) -> pd.DataFrame:
    """Read a site table with an id column plus latitude/longitude; indexed by site id."""
    path = Path(path)
    df = _read_table(path, dtype={id_col: str})
    if id_col not in df.columns:
        raise InvalidCoordinates(f"Id column {id_col!r} not found in {path.name}. Available: {list(df.columns)[:20]}")
    df = harmonize_ids(df, id_col=id_col)
    n_before = len(df)
    df = drop_duplicates_on_keys(df, [id_col])
    if len(df) != n_before:
        logger.warning("Dropped %d duplicate rows from %s", n_before - len(df), path.name)
    return df.set_index(id_col, drop=True)


def read_dissimilarity_raw(path: str | Path | None = None) -> LabeledMatrix:
    return read_matrix(path or RAW_DISSIMILARITY_CSV, name="distance_matrix")


def read_geographic_raw(path: str | Path | None = None) -> LabeledMatrix:
    return read_matrix(path or RAW_GEOGRAPHIC_CSV, name="geographical_matrix")


def read_coords_raw(path: str | Path | None = None) -> pd.DataFrame:
    return read_coordinates(path or RAW_COORDS_CSV)
