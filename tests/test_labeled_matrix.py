import numpy as np
import pandas as pd
import pytest

from betawindow.exceptions import DimensionMismatch, InvalidMatrix, LabelMismatch
from betawindow.labeled_matrix import LabeledMatrix, assert_same_labels


def test_rejects_non_square():
    with pytest.raises(DimensionMismatch):
        LabeledMatrix(np.zeros((2, 3)), ["a", "b"])


def test_rejects_label_count():
    with pytest.raises(DimensionMismatch):
        LabeledMatrix(np.zeros((3, 3)), ["a", "b"])


def test_rejects_duplicate_labels():
    with pytest.raises(LabelMismatch):
        LabeledMatrix(np.zeros((3, 3)), ["a", "b", "a"])


@pytest.mark.parametrize("bad", [-1.0, np.nan, np.inf])
def test_rejects_bad_values(bad):
    X = np.ones((3, 3))
    X[0, 2] = bad
    with pytest.raises(InvalidMatrix):
        LabeledMatrix(X, ["a", "b", "c"])


def test_values_are_a_read_only_copy():
    X = np.ones((2, 2))
    M = LabeledMatrix(X, ["a", "b"])
    X[0, 1] = 5.0
    assert M.values[0, 1] == 1.0
    with pytest.raises(ValueError):
        M.values[0, 1] = 3.0


def test_from_frame_requires_matching_axes():
    df = pd.DataFrame(np.zeros((2, 2)), index=["a", "b"], columns=["b", "a"])
    with pytest.raises(LabelMismatch):
        LabeledMatrix.from_frame(df)
    ok = pd.DataFrame([[0, 1], [1, 0]], index=["a", "b"], columns=["a", "b"])
    M = LabeledMatrix.from_frame(ok)
    assert M.labels == ("a", "b")
    assert M.row("b")["a"] == 1.0
    pd.testing.assert_frame_equal(M.to_frame(), ok.astype(float))


def test_assert_same_labels():
    a = LabeledMatrix(np.zeros((2, 2)), ["a", "b"], name="D")
    assert_same_labels(a, LabeledMatrix(np.ones((2, 2)), ["a", "b"], name="G"))
    with pytest.raises(DimensionMismatch):
        assert_same_labels(a, LabeledMatrix(np.zeros((3, 3)), ["a", "b", "c"]))
    with pytest.raises(LabelMismatch, match="different order"):
        assert_same_labels(a, LabeledMatrix(np.zeros((2, 2)), ["b", "a"]))
    with pytest.raises(LabelMismatch, match="different sites"):
        assert_same_labels(a, LabeledMatrix(np.zeros((2, 2)), ["a", "z"]))


def test_unknown_label():
    M = LabeledMatrix(np.zeros((2, 2)), ["a", "b"])
    with pytest.raises(KeyError):
        M.position("zz")
