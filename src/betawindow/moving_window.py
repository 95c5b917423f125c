"""
Moving-window average of a dissimilarity matrix over geographic neighbourhoods.

For every site i, the neighbourhood is chosen from the geographic distance
matrix G (never including i itself) and the result is the unweighted mean of
the dissimilarity matrix D over that neighbourhood:

    avg[i] = mean(D[i, j] for j in neighbours(i))

Neighbours are picked either by rank (``FixedCount``: the k nearest, ties
broken by ascending label) or by distance (``Radius``: all j with
G[i, j] <= threshold). A radius window can be empty; such sites get NaN and
are reported instead of failing the whole call.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Mapping, Sequence, Union

import numpy as np
import pandas as pd

from .exceptions import DimensionMismatch, InvalidPolicy
from .labeled_matrix import LabeledMatrix, as_labeled_matrix, assert_same_labels
from .policy import FixedCount, Policy, Radius

logger = logging.getLogger(__name__)

MatrixLike = Union[LabeledMatrix, pd.DataFrame]


@dataclass(frozen=True, eq=False)
class NeighborhoodAverage:
    """Per-site neighbourhood averages for one (D, G, policy) triple.

    Attributes
    ----------
    values : pd.Series
        Mean dissimilarity to the neighbourhood, indexed by site label.
        NaN where the neighbourhood is empty.
    neighbor_counts : pd.Series
        Number of neighbours averaged for each site.
    empty : tuple of str
        Labels of sites with an empty neighbourhood (radius mode only).
    policy : FixedCount or Radius
    """
    values: pd.Series
    neighbor_counts: pd.Series
    empty: tuple
    policy: Policy

    def to_dict(self) -> dict:
        return {lab: float(v) for lab, v in self.values.items()}

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"average": self.values, "n_neighbors": self.neighbor_counts})

    def __len__(self) -> int:
        return len(self.values)


def _check_policy(policy) -> Policy:
    if not isinstance(policy, (FixedCount, Radius)):
        raise InvalidPolicy(
            f"policy must be FixedCount or Radius, got {type(policy).__name__}."
        )
    return policy


def _prepare(D: MatrixLike, G: MatrixLike) -> tuple[LabeledMatrix, LabeledMatrix]:
    D = as_labeled_matrix(D, name="distance_matrix")
    G = as_labeled_matrix(G, name="geographical_matrix")
    assert_same_labels(D, G)
    if D.n < 2:
        raise DimensionMismatch(f"At least 2 sites are needed, got {D.n}.")
    return D, G


def _label_order(labels: Sequence[str]) -> np.ndarray:
    """Positions of ``labels`` sorted by ascending label."""
    return np.array(sorted(range(len(labels)), key=lambda p: labels[p]), dtype=int)


def _pick(g_row: np.ndarray, i: int, policy: Policy) -> np.ndarray:
    """Neighbour positions of row ``i`` in a label-sorted matrix, returned ascending.

    Positions follow label order, so a stable sort on distance breaks ties
    by label and ascending positions give label-sorted summation.
    """
    others = np.flatnonzero(np.arange(g_row.shape[0]) != i)
    dist = g_row[others]
    if isinstance(policy, FixedCount):
        picked = others[np.argsort(dist, kind="stable")[: policy.k]]
        return np.sort(picked)
    return others[dist <= policy.threshold]


def select_neighbors(G: MatrixLike, label, policy: Policy) -> list[str]:
    """Neighbour labels of ``label`` under ``policy``, in ascending label order."""
    policy = _check_policy(policy)
    G = as_labeled_matrix(G, name="geographical_matrix")
    policy.validate(G.n)
    order = _label_order(G.labels)
    Gs = G.values[np.ix_(order, order)]
    i = int(np.flatnonzero(order == G.position(label))[0])
    return [G.labels[order[j]] for j in _pick(Gs[i], i, policy)]


def _averages(D: LabeledMatrix, G: LabeledMatrix, policy: Policy) -> NeighborhoodAverage:
    n = D.n
    order = _label_order(D.labels)
    Ds = D.values[np.ix_(order, order)]
    Gs = G.values[np.ix_(order, order)]

    avg = np.full(n, np.nan)
    counts = np.zeros(n, dtype=int)
    for i in range(n):
        picked = _pick(Gs[i], i, policy)
        counts[i] = picked.size
        if picked.size:
            avg[i] = math.fsum(Ds[i, picked]) / picked.size

    # back to the caller's label order
    out_avg = np.empty(n)
    out_counts = np.empty(n, dtype=int)
    out_avg[order] = avg
    out_counts[order] = counts

    labels = list(D.labels)
    values = pd.Series(out_avg, index=labels, name=policy.label)
    neighbor_counts = pd.Series(out_counts, index=labels, name="n_neighbors")
    empty = tuple(lab for lab, c in zip(labels, out_counts) if c == 0)
    if empty:
        logger.warning(
            "%d of %d sites have no neighbour within radius %g; their average is NaN: %s",
            len(empty), n, policy.threshold, list(empty),
        )
    logger.debug("Computed %s window averages for %d sites", policy.label, n)
    return NeighborhoodAverage(values=values, neighbor_counts=neighbor_counts,
                               empty=empty, policy=policy)


def compute_neighborhood_average(D: MatrixLike, G: MatrixLike, policy: Policy) -> NeighborhoodAverage:
    """
    Average dissimilarity from each site to its geographic neighbourhood.

    Parameters
    ----------
    D : LabeledMatrix or pd.DataFrame
        n x n dissimilarity matrix (e.g. floristic Bray-Curtis).
    G : LabeledMatrix or pd.DataFrame
        n x n geographic distance matrix with the same labels in the same order.
    policy : FixedCount or Radius
        How to choose each site's neighbours.

    Returns
    -------
    NeighborhoodAverage

    Raises
    ------
    DimensionMismatch, LabelMismatch, InvalidPolicy, InvalidParameter
        Before any row is processed.
    """
    policy = _check_policy(policy)
    D, G = _prepare(D, G)
    policy.validate(D.n)
    return _averages(D, G, policy)


def moving_window_table(
    D: MatrixLike,
    G: MatrixLike,
    policies: Union[Mapping[str, Policy], Sequence[Policy]],
) -> pd.DataFrame:
    """
    One column of neighbourhood averages per policy, indexed by site label.

    ``policies`` is either a mapping of column name -> policy or a sequence of
    policies, in which case columns are named by ``policy.label``.
    """
    if isinstance(policies, Mapping):
        named = list(policies.items())
    else:
        named = [(p.label, p) for p in policies]
    if not named:
        raise InvalidPolicy("At least one policy is required.")
    names = [name for name, _ in named]
    if len(set(names)) != len(names):
        raise InvalidPolicy(f"Duplicate column names for policies: {names}")

    D, G = _prepare(D, G)
    checked = []
    for name, policy in named:
        policy = _check_policy(policy)
        policy.validate(D.n)
        checked.append((name, policy))

    out = pd.DataFrame(index=pd.Index(list(D.labels), name="site_id"))
    for name, policy in checked:
        out[name] = _averages(D, G, policy).values.to_numpy()
    return out
