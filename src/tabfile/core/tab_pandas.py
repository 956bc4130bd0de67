#!/usr/bin/env python
# encoding: utf-8

from typing import Any, Iterable, Optional, Union

import numpy as np
import pandas as pd

from .tab_file import TabFile, TabFileReadError
from .tab_record import TabRecord


def to_pandas(source: Union[TabFile, Iterable[Any]],
    columns: Optional[list[str]] = None,
    dtype: Optional[dict[Any, Any]] = None) -> pd.DataFrame:
    """Load all records into a Pandas dataframe. Please note, Pandas
    does still need a lot of memory.

    'source' is a TabFile, a TabRowIterator or any iterable of records.
    Short rows are padded with NaN. The first read error will be raised.
    """

    if isinstance(source, TabFile):
        source = source.iter()

    rows = []
    width = 0
    for item in source:
        if isinstance(item, TabFileReadError):
            raise item

        assert isinstance(item, TabRecord), f"Expected a TabRecord: {type(item)}"
        rows.append(item.fields())
        width = max(width, len(item))

    # Surplus fields get their index as column name
    columns = list(columns or [])
    width = max(width, len(columns))
    columns += list(range(len(columns), width))

    data = [row + [np.nan] * (width - len(row)) for row in rows]
    df_rtn = pd.DataFrame.from_records(data, columns=columns, index=None)

    if dtype:
        for field, ftype in dtype.items():
            if ftype:
                df_rtn[field] = df_rtn[field].astype(ftype)

    return df_rtn
