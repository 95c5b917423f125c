from __future__ import annotations
from pathlib import Path
import pandas as pd
from .config import PROC

OUTPUT_SUFFIXES = (".csv", ".parquet", ".xlsx")

def _suffix(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in OUTPUT_SUFFIXES:
        raise ValueError(f"Unsupported table format {path.suffix!r} for {path.name}; use one of {OUTPUT_SUFFIXES}")
    return suffix

def save_processed(df: pd.DataFrame, name: str, directory: Path | None = None) -> Path:
    """
    Save a result table to the processed data directory, keeping the index.
    The format follows the suffix of ``name``: .csv, .parquet or .xlsx.

    Args:
        df: The DataFrame to save
        name: The filename (without path) for the saved file
        directory: Target directory (default: config.PROC)

    Returns:
        Path: The full path to the saved file

    Raises:
        ValueError: If the suffix is not one of OUTPUT_SUFFIXES
    """
    directory = Path(directory) if directory is not None else PROC
    path = directory / name
    suffix = _suffix(path)
    directory.mkdir(parents=True, exist_ok=True)
    if suffix == ".parquet":
        df.to_parquet(path, index=True)
    elif suffix == ".xlsx":
        df.to_excel(path, index=True, engine="openpyxl")
    else:
        df.to_csv(path, index=True)
    return path

def load_processed(name: str, directory: Path | None = None) -> pd.DataFrame:
    """
    Load a result table saved by save_processed.

    Args:
        name: The filename (without path) to load
        directory: Source directory (default: config.PROC)

    Returns:
        pd.DataFrame: The loaded DataFrame, indexed by site label
    """
    path = (Path(directory) if directory is not None else PROC) / name
    suffix = _suffix(path)
    if suffix == ".parquet":
        return pd.read_parquet(path)
    if suffix == ".xlsx":
        return pd.read_excel(path, index_col=0, converters={0: str}, engine="openpyxl")
    return pd.read_csv(path, index_col=0, converters={0: str})
