"""
DataFrame conversion for decoded list results.

    page = decode(PositionInfoPage, result)
    df = to_dataframe(page, time_columns=("created_time", "updated_time"))
"""

from decimal import Decimal
from enum import Enum
from typing import Iterable, Sequence, Union

import pandas as pd
from pydantic import BaseModel


def _scalar(value):
    if isinstance(value, Enum):
        return value.value
    return value


def _as_float(value):
    if value is None:
        return float("nan")
    return float(value)


def to_dataframe(
    rows: Union[BaseModel, Iterable[BaseModel]],
    time_columns: Sequence[str] = (),
    as_float: bool = True,
) -> pd.DataFrame:
    """
    Build a DataFrame with one row per record, columns named by field.

    Args:
        rows: A ListEnvelope (its items are used) or an iterable of models
        time_columns: Epoch-millisecond columns converted to UTC datetimes (None -> NaT)
        as_float: Convert Decimal columns to float (keep Decimal when False)

    Returns:
        DataFrame in the order the records were received (empty if none)
    """
    items = getattr(rows, "items", rows)
    records = [
        {name: _scalar(value) for name, value in item}
        for item in items
    ]
    if not records:
        return pd.DataFrame()

    # object columns keep None for blank wire values instead of NaN
    df = pd.DataFrame(records, dtype=object)

    for col in df.columns:
        values = df[col]
        if as_float and any(isinstance(v, Decimal) for v in values):
            df[col] = values.map(_as_float).astype("float64")
        elif all(isinstance(v, bool) for v in values):
            df[col] = values.astype("bool")
        elif all(isinstance(v, int) and not isinstance(v, bool) for v in values):
            df[col] = values.astype("int64")

    for col in time_columns:
        # blank timestamps (None) become NaT
        millis = pd.to_numeric(df[col], errors="coerce").astype("Int64")
        df[col] = pd.to_datetime(millis, unit="ms", utc=True)

    return df
