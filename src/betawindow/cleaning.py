from __future__ import annotations
import pandas as pd

def normalize_labels(labels) -> pd.Index:
    """
    Standardize site labels by casting to strings and stripping whitespace.
    Case is kept: 'n1' and 'N1' are different sites.

    Args:
        labels: Iterable of labels (Index, list, ...)

    Returns:
        pd.Index of cleaned string labels
    """
    return pd.Index([str(x).strip() for x in labels])

def normalize_matrix_labels(df: pd.DataFrame) -> pd.DataFrame:
    """
    Apply normalize_labels to both the index and the columns of a matrix frame.

    Args:
        df: Input DataFrame with site labels on both axes

    Returns:
        DataFrame with normalized labels
    """
    df = df.copy()
    df.index = normalize_labels(df.index)
    df.columns = normalize_labels(df.columns)
    return df

def harmonize_ids(df: pd.DataFrame, id_col="site_id") -> pd.DataFrame:
    """
    Standardize ID column values by converting to strings and stripping whitespace.

    Args:
        df: Input DataFrame
        id_col: Name of the ID column to harmonize (default: "site_id")

    Returns:
        DataFrame with standardized ID column
    """
    df = df.copy()
    if id_col in df.columns:
        df[id_col] = df[id_col].astype(str).str.strip()
    return df

def drop_duplicates_on_keys(df: pd.DataFrame, keys: list[str]) -> pd.DataFrame:
    """
    Remove duplicate rows based on specified key columns.

    Args:
        df: Input DataFrame
        keys: List of column names to use for duplicate detection

    Returns:
        DataFrame with duplicates removed
    """
    return df.drop_duplicates(subset=keys[0] if len(keys) == 1 else keys)
