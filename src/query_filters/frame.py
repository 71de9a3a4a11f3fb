"""Apply filter values to a pandas DataFrame."""

from collections.abc import Set as AbstractSet
from typing import Any, Mapping, Optional

import pandas as pd

from .kinds import UNDEFINED


def filter_frame(
    df: pd.DataFrame,
    applied: Mapping[str, Any],
    columns: Optional[Mapping[str, str]] = None,
) -> pd.DataFrame:
    """
    Narrow a DataFrame to the rows matching the applied filters.

    Empty values (None, UNDEFINED, "", empty set) mean "no restriction".

    Args:
        df: Rows to filter.
        applied: Filter key -> value, usually QuerySync.applied_filters.
        columns: Optional filter key -> column name mapping. Keys default to
            a column of the same name; keys with no column are ignored.

    Returns:
        Filtered DataFrame (the original index is kept).
    """
    columns = columns or {}
    mask = pd.Series(True, index=df.index)

    for key, value in applied.items():
        column = columns.get(key, key)
        if column not in df.columns:
            continue
        if value is None or value is UNDEFINED:
            continue

        if isinstance(value, AbstractSet):
            if value:
                mask &= df[column].isin(list(value))
        elif isinstance(value, str):
            if value:
                mask &= (
                    df[column].astype(str).str.contains(value, case=False, regex=False)
                )
        else:
            mask &= df[column] == value

    return df[mask]
