from __future__ import annotations
import numpy as np
import pandas as pd
from sklearn.metrics import pairwise_distances

from .labeled_matrix import LabeledMatrix

def hellinger_transform(df: pd.DataFrame) -> pd.DataFrame:
    """
    Hellinger transform for nonnegative composition/count-like data.
    Returns a DataFrame with the same index/columns and values in [0, 1].
    """
    X = df.to_numpy(dtype=float, copy=True)
    if np.any(X < 0):
        raise ValueError("hellinger_transform requires nonnegative inputs.")
    row_sums = X.sum(axis=1, keepdims=True)
    row_sums[row_sums == 0] = 1.0  # empty sites stay at zero
    H = np.sqrt(X / row_sums)
    return pd.DataFrame(H, index=df.index, columns=df.columns)

def floristic_dissimilarity(abundance: pd.DataFrame,
                            metric: str = "braycurtis",
                            hellinger: bool = False) -> LabeledMatrix:
    """
    Pairwise dissimilarity between sites from a site x species table.

    Parameters:
    - abundance: pd.DataFrame, sites as rows (index = site labels), species as columns.
    - metric: str, any metric accepted by sklearn's pairwise_distances (default 'braycurtis').
    - hellinger: bool, apply the Hellinger transform first.

    Returns:
    - LabeledMatrix labelled by the abundance index.
    """
    X = abundance.to_numpy(dtype=float, copy=True)
    if np.any(X < 0):
        raise ValueError("floristic_dissimilarity requires nonnegative abundances.")
    if metric == "braycurtis":
        empty = abundance.index[X.sum(axis=1) == 0]
        if len(empty) > 0:
            raise ValueError(
                f"Bray-Curtis is undefined for sites without any record: {list(empty)[:10]}"
            )
    if hellinger:
        X = hellinger_transform(abundance).to_numpy()
    dist = pairwise_distances(X, metric=metric)
    np.fill_diagonal(dist, 0.0)
    return LabeledMatrix(dist, list(abundance.index), name="distance_matrix")

def example_matrices(n: int = 10) -> tuple[LabeledMatrix, LabeledMatrix]:
    """
    Demonstration pair: D[i, j] = |i - j| * 0.1 and G[i, j] = |i - j| * 10,
    labelled n1..nN.
    """
    if n < 2:
        raise ValueError(f"n must be >= 2, got {n}")
    idx = np.arange(1, n + 1)
    steps = np.abs(idx[:, None] - idx[None, :]).astype(float)
    labels = [f"n{i}" for i in idx]
    D = LabeledMatrix(steps * 0.1, labels, name="distance_matrix")
    G = LabeledMatrix(steps * 10, labels, name="geographical_matrix")
    return D, G
