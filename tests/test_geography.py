import numpy as np
import pandas as pd
import pytest

from betawindow.exceptions import InvalidCoordinates
from betawindow.geography import haversine_distance, haversine_matrix
from betawindow.moving_window import compute_neighborhood_average
from betawindow.policy import Radius


def test_same_point_distance_zero():
    assert abs(haversine_distance(55.95, -3.19, 55.95, -3.19)) < 1e-9


def test_one_degree_of_latitude():
    # ~111.19 km on a 6371 km sphere
    assert haversine_distance(0, 0, 1, 0) == pytest.approx(111.19, abs=0.01)


def test_matrix_matches_pairwise_function():
    coords = pd.DataFrame(
        {"latitude": [55.95, 51.5, 48.86], "longitude": [-3.19, -0.13, 2.35]},
        index=["EDI", "LON", "PAR"],
    )
    G = haversine_matrix(coords)
    assert G.labels == ("EDI", "LON", "PAR")
    assert np.allclose(np.diag(G.values), 0.0)
    assert np.allclose(G.values, G.values.T)
    assert G.values[0, 1] == pytest.approx(haversine_distance(55.95, -3.19, 51.5, -0.13))


def test_rejects_out_of_range_coordinates():
    coords = pd.DataFrame({"latitude": [95.0, 0.0], "longitude": [0.0, 0.0]}, index=["a", "b"])
    with pytest.raises(InvalidCoordinates):
        haversine_matrix(coords)


def test_feeds_moving_window():
    coords = pd.DataFrame(
        {"latitude": [0.0, 0.0, 0.0], "longitude": [0.0, 0.5, 5.0]},
        index=["a", "b", "c"],
    )
    G = haversine_matrix(coords)
    D = pd.DataFrame([[0, 0.2, 0.6], [0.2, 0, 0.5], [0.6, 0.5, 0]],
                     index=["a", "b", "c"], columns=["a", "b", "c"])
    res = compute_neighborhood_average(D, G, Radius(100))
    assert res.values["a"] == pytest.approx(0.2)
    assert res.empty == ("c",)
