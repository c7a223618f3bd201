"""
Loading precomputed first-digit tables.

A digit table is a CSV with a `digit` column (1-9, each exactly once) and
either a `frequency` column (proportions) or a `count` column (occurrences).
Counts are normalised to proportions; their total is the sample size.
"""

from pathlib import Path
from typing import Optional, Tuple, Union

import polars as pl
import pandas as pd

from .config import (
    DIGITS, DIGIT_TABLE_COLUMN, FREQUENCY_COLUMN, COUNT_COLUMN,
)
from .detectors.statistical import InvalidArgumentError


# === Schema definitions for Polars ===
DIGIT_TABLE_SCHEMA = {
    DIGIT_TABLE_COLUMN: pl.Int64,
    FREQUENCY_COLUMN: pl.Float64,
    COUNT_COLUMN: pl.Float64,
}


def load_digit_table(
    path: Union[str, Path],
    verbose: bool = False,
    return_polars: bool = False,
) -> Union[pl.DataFrame, pd.DataFrame]:
    """
    Load and validate a digit table.

    Args:
        path: CSV file with `digit` and `frequency` or `count` columns
        verbose: Print a one-line summary after loading
        return_polars: If True, return Polars DataFrame. Default False (Pandas).

    Returns:
        DataFrame sorted by digit, with the value columns present in the file

    Examples:
        >>> df = load_digit_table("data/invoices_first_digit.csv")
    """
    path = Path(path)
    if not path.exists():
        raise ValueError(f"Digit table not found: {path}")

    try:
        header = pl.read_csv(path, n_rows=0).columns
        table = pl.read_csv(
            path,
            schema_overrides={k: v for k, v in DIGIT_TABLE_SCHEMA.items() if k in header},
        )
    except pl.exceptions.PolarsError as e:
        raise ValueError(f"{path}: could not parse digit table ({e})") from e

    if DIGIT_TABLE_COLUMN not in table.columns:
        raise ValueError(f"{path}: missing '{DIGIT_TABLE_COLUMN}' column")
    value_cols = [c for c in (FREQUENCY_COLUMN, COUNT_COLUMN) if c in table.columns]
    if not value_cols:
        raise ValueError(
            f"{path}: expected a '{FREQUENCY_COLUMN}' or '{COUNT_COLUMN}' column"
        )

    empty = [c for c in [DIGIT_TABLE_COLUMN] + value_cols if table[c].null_count()]
    if empty:
        raise InvalidArgumentError(f"{path}: empty cells in column(s) {empty}")

    digits = table[DIGIT_TABLE_COLUMN].to_list()
    if sorted(digits) != list(DIGITS):
        raise InvalidArgumentError(
            f"{path}: digits 1-9 must each appear exactly once, got {digits}"
        )

    table = table.select([DIGIT_TABLE_COLUMN] + value_cols).sort(DIGIT_TABLE_COLUMN)

    if verbose:
        print(f"Loaded {len(table)} digits from {path.name} ({', '.join(value_cols)})")

    if return_polars:
        return table
    return table.to_pandas()


def frequencies_from_counts(counts: pl.Series) -> Tuple[pl.Series, float]:
    """Normalise digit counts to proportions. Returns (proportions, total)."""
    total = counts.sum()
    if total is None or total <= 0:
        raise InvalidArgumentError(f"Digit counts must sum to a positive total, got {total}")
    return (counts / total).alias(FREQUENCY_COLUMN), float(total)


def load_frequencies(
    path: Union[str, Path],
    verbose: bool = False,
) -> Tuple[pd.Series, Optional[float]]:
    """
    Load observed first-digit proportions.

    When the file has a `frequency` column it is used as is and no sample
    size is known. Otherwise `count` is normalised and its total returned.

    Returns:
        (Series indexed by digit 1..9, sample size or None)
    """
    table = load_digit_table(path, verbose=verbose, return_polars=True)

    if FREQUENCY_COLUMN in table.columns:
        values, sample_size = table[FREQUENCY_COLUMN], None
    else:
        values, sample_size = frequencies_from_counts(table[COUNT_COLUMN])

    frequencies = pd.Series(
        values.to_list(),
        index=table[DIGIT_TABLE_COLUMN].to_list(),
        name=FREQUENCY_COLUMN,
        dtype=float,
    )
    return frequencies, sample_size
