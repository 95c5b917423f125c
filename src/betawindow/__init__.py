"""
betawindow - moving-window averages of ecological dissimilarity matrices.

Given a site x site dissimilarity matrix (floristic, functional, ...) and a
site x site geographic distance matrix, compute for every site the mean
dissimilarity to its geographic neighbourhood, chosen either as the k nearest
sites or as all sites within a radius.
"""

from .exceptions import (
    BetaWindowError, DimensionMismatch, LabelMismatch, InvalidPolicy,
    InvalidParameter, InvalidMatrix, InvalidCoordinates,
)
from .labeled_matrix import LabeledMatrix, assert_same_labels
from .policy import FixedCount, Radius, policy_from_args
from .moving_window import (
    NeighborhoodAverage, compute_neighborhood_average, moving_window_table,
    select_neighbors,
)
from .geography import haversine_distance, haversine_matrix
from .transform import hellinger_transform, floristic_dissimilarity, example_matrices

__all__ = [
    # Errors
    "BetaWindowError", "DimensionMismatch", "LabelMismatch", "InvalidPolicy",
    "InvalidParameter", "InvalidMatrix", "InvalidCoordinates",

    # Matrices and policies
    "LabeledMatrix", "assert_same_labels",
    "FixedCount", "Radius", "policy_from_args",

    # Moving window
    "NeighborhoodAverage", "compute_neighborhood_average",
    "moving_window_table", "select_neighbors",

    # Input builders
    "haversine_distance", "haversine_matrix",
    "hellinger_transform", "floristic_dissimilarity", "example_matrices",
]

__version__ = "0.1.0"
