"""
Labelled square matrices for pairwise site comparisons.

A ``LabeledMatrix`` holds an n x n table of non-negative values whose rows and
columns carry the same site labels in the same order. All structural checks
happen at construction time, so code that receives a ``LabeledMatrix`` can
index it by position without re-checking.
"""
from __future__ import annotations
from typing import Iterable, Optional, Sequence

import numpy as np
import pandas as pd

from .exceptions import DimensionMismatch, LabelMismatch
from .validators import assert_matrix_values


class LabeledMatrix:
    """Square, uniquely labelled, read-only matrix of non-negative values.

    Parameters
    ----------
    values : array-like of shape (n, n)
        Pairwise values. Copied; the stored array is read-only.
    labels : sequence of str
        Site labels, used for both rows and columns. Cast to ``str``.
    name : str, default "matrix"
        Used in error messages only.
    """

    def __init__(self, values, labels: Sequence, name: str = "matrix"):
        X = np.array(values, dtype=float, copy=True)
        if X.ndim != 2 or X.shape[0] != X.shape[1]:
            raise DimensionMismatch(f"{name} must be square, got shape {X.shape}.")
        if X.shape[0] == 0:
            raise DimensionMismatch(f"{name} must contain at least one site.")
        labels = [str(lab) for lab in labels]
        if len(labels) != X.shape[0]:
            raise DimensionMismatch(
                f"{name} has {X.shape[0]} rows but {len(labels)} labels."
            )
        _assert_unique(labels, name)

        frame = pd.DataFrame(X, index=labels, columns=labels)
        X = assert_matrix_values(frame, name=name).to_numpy(dtype=float, copy=True)
        X.setflags(write=False)

        self._values = X
        self._labels = tuple(labels)
        self._index = {lab: i for i, lab in enumerate(labels)}
        self.name = name

    @classmethod
    def from_frame(cls, df: pd.DataFrame, name: Optional[str] = None) -> "LabeledMatrix":
        """Build from a DataFrame whose index and columns hold the same labels in the same order."""
        name = name or "matrix"
        if df.shape[0] != df.shape[1]:
            raise DimensionMismatch(f"{name} must be square, got shape {df.shape}.")
        rows = [str(x) for x in df.index]
        cols = [str(x) for x in df.columns]
        if rows != cols:
            diff = [(r, c) for r, c in zip(rows, cols) if r != c]
            raise LabelMismatch(
                f"{name}: row and column labels differ (first 5 pairs): {diff[:5]}"
            )
        return cls(df.to_numpy(dtype=float), rows, name=name)

    @property
    def n(self) -> int:
        return len(self._labels)

    @property
    def shape(self) -> tuple[int, int]:
        return self._values.shape

    @property
    def labels(self) -> tuple[str, ...]:
        return self._labels

    @property
    def values(self) -> np.ndarray:
        return self._values

    def position(self, label) -> int:
        try:
            return self._index[str(label)]
        except KeyError:
            raise KeyError(f"Label {label!r} not found in {self.name}.") from None

    def row(self, label) -> pd.Series:
        """Values from ``label`` to every site (self included)."""
        i = self.position(label)
        return pd.Series(self._values[i], index=list(self._labels), name=str(label))

    def with_diagonal(self, value: float) -> "LabeledMatrix":
        X = self._values.copy()
        np.fill_diagonal(X, value)
        return LabeledMatrix(X, self._labels, name=self.name)

    def to_frame(self) -> pd.DataFrame:
        labels = list(self._labels)
        return pd.DataFrame(self._values.copy(), index=labels, columns=labels)

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"LabeledMatrix(name={self.name!r}, n={self.n})"


def as_labeled_matrix(obj, name: str) -> LabeledMatrix:
    """Accept a LabeledMatrix or a square labelled DataFrame."""
    if isinstance(obj, LabeledMatrix):
        return obj
    if isinstance(obj, pd.DataFrame):
        return LabeledMatrix.from_frame(obj, name=name)
    raise TypeError(
        f"{name} must be a LabeledMatrix or a pandas DataFrame, got {type(obj).__name__}."
    )


def assert_same_labels(a: LabeledMatrix, b: LabeledMatrix) -> None:
    """Fail unless ``a`` and ``b`` have the same size and the same labels in the same order."""
    if a.shape != b.shape:
        raise DimensionMismatch(
            f"The dimensions of {a.name} {a.shape} and {b.name} {b.shape} must be the same."
        )
    if a.labels == b.labels:
        return
    only_a = sorted(set(a.labels) - set(b.labels))
    only_b = sorted(set(b.labels) - set(a.labels))
    if only_a or only_b:
        raise LabelMismatch(
            f"{a.name} and {b.name} cover different sites. "
            f"Only in {a.name} (first 10): {only_a[:10]}; only in {b.name} (first 10): {only_b[:10]}"
        )
    misplaced = [(i, x, y) for i, (x, y) in enumerate(zip(a.labels, b.labels)) if x != y]
    raise LabelMismatch(
        f"{a.name} and {b.name} hold the same sites in a different order "
        f"(position, {a.name}, {b.name}; first 5): {misplaced[:5]}"
    )


def _assert_unique(labels: Iterable[str], name: str) -> None:
    seen = set()
    dups = []
    for lab in labels:
        if lab in seen and lab not in dups:
            dups.append(lab)
        seen.add(lab)
    if dups:
        raise LabelMismatch(f"{name} has duplicate labels (first 10): {dups[:10]}")
