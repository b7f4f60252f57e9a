from __future__ import annotations

from typing import Any, Dict, List, TYPE_CHECKING

import pandas as pd

if TYPE_CHECKING:
    from tableview.core.table_view import TableView


def records_from_frame(df: pd.DataFrame, include_index: bool = False) -> List[Dict[str, Any]]:
    """
    Convert a DataFrame into records a TableView accepts.

    :param df: source frame, one record per row
    :param include_index: if True, the index becomes a regular column
        (named after the index, or "index" when unnamed)
    """
    if include_index:
        df = df.reset_index()
    return df.to_dict("records")


def rendered_frame(view: TableView) -> pd.DataFrame:
    """
    Current rendered page of a view as a DataFrame.

    Columns follow the dataset's field order and are kept even when the
    page is empty.
    """
    return pd.DataFrame(view.rendered_data, columns=view.columns)
