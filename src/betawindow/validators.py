from __future__ import annotations
import numpy as np
import pandas as pd
import pandera as pa
from pandera import Column, DataFrameSchema, Check

from .exceptions import InvalidCoordinates, InvalidMatrix

# Every column of a pairwise matrix: finite, non-negative floats.
schema_matrix = DataFrameSchema(
    {
        ".*": Column(
            float,
            checks=[Check.ge(0), Check(np.isfinite, element_wise=False, error="finite")],
            nullable=False,
            regex=True,
            coerce=True,
        )
    }
)


def schema_coordinates(lat_col: str = "latitude", lon_col: str = "longitude") -> DataFrameSchema:
    return DataFrameSchema(
        {
            lat_col: Column(float, Check.in_range(-90, 90), nullable=False, coerce=True),
            lon_col: Column(float, Check.in_range(-180, 180), nullable=False, coerce=True),
        }
    )


def _failed_columns(err: pa.errors.SchemaErrors, limit: int = 10) -> list[str]:
    cases = err.failure_cases
    if "column" not in cases:
        return []
    return sorted({str(c) for c in cases["column"].dropna()})[:limit]


def assert_matrix_values(df: pd.DataFrame, name: str = "matrix") -> pd.DataFrame:
    """Validate a square matrix frame; return it coerced to float."""
    try:
        return schema_matrix.validate(df, lazy=True)
    except pa.errors.SchemaErrors as err:
        cols = _failed_columns(err)
        raise InvalidMatrix(
            f"{name} must contain finite, non-negative values; "
            f"offending columns (first 10): {cols}"
        ) from err


def assert_coordinates(df: pd.DataFrame, lat_col: str = "latitude", lon_col: str = "longitude") -> pd.DataFrame:
    try:
        return schema_coordinates(lat_col, lon_col).validate(df, lazy=True)
    except pa.errors.SchemaErrors as err:
        raise InvalidCoordinates(
            f"Invalid coordinates in columns {_failed_columns(err)}: "
            f"latitude must lie in [-90, 90] and longitude in [-180, 180]."
        ) from err
