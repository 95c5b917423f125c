from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable

import pandas as pd

from .config import DEFAULT_K, DEFAULT_RADII, RESULT_NAME
from .data_io import save_processed
from .exceptions import InvalidPolicy
from .geography import haversine_matrix
from .ingest import read_coords_raw, read_dissimilarity_raw, read_geographic_raw
from .moving_window import moving_window_table
from .policy import FixedCount, Radius
from .transform import example_matrices

logger = logging.getLogger(__name__)


def build_policies(ks: Iterable[int] = (), radii: Iterable[float] = ()) -> dict:
    """Column name -> policy; repeated windows are kept once."""
    policies = {}
    for p in [FixedCount(k) for k in ks] + [Radius(r) for r in radii]:
        existing = policies.get(p.label)
        if existing is None:
            policies[p.label] = p
        elif existing != p:
            raise InvalidPolicy(f"Windows {existing} and {p} share the column name {p.label!r}.")
    return policies


def run_moving_window(
    dissimilarity_path: str | Path | None = None,
    geographic_path: str | Path | None = None,
    *,
    coords_path: str | Path | None = None,
    ks: Iterable[int] = DEFAULT_K,
    radii: Iterable[float] = DEFAULT_RADII,
    output_name: str | None = RESULT_NAME,
    output_dir: Path | None = None,
) -> pd.DataFrame:
    """
    Read D and G (G from a matrix file, or from site coordinates via haversine),
    compute one moving-window column per k / radius and save the table.
    Pass output_name=None to skip saving.
    """
    D = read_dissimilarity_raw(dissimilarity_path)
    if coords_path is not None:
        if geographic_path is not None:
            raise ValueError("Give either a geographic matrix or a coordinates file, not both.")
        G = haversine_matrix(read_coords_raw(coords_path))
    else:
        G = read_geographic_raw(geographic_path)

    table = moving_window_table(D, G, build_policies(ks, radii))
    logger.info("Moving-window table: %d sites x %d windows", *table.shape)
    if output_name:
        path = save_processed(table, output_name, directory=output_dir)
        logger.info("Saved %s", path)
    return table


def run_demo() -> pd.DataFrame:
    """Ten-site demonstration: four nearest neighbours and a 40-unit radius."""
    D, G = example_matrices(10)
    return moving_window_table(D, G, {
        "neighbours_beta": FixedCount(4),
        "window_beta": Radius(40),
    })
