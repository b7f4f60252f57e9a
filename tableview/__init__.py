"""
Top-level package for tableview.

In-memory tabular view engine: filter, sort and paginate a homogeneous
list of records for a presentation layer. Most code only needs:
    from tableview import TableView
"""

from tableview.core import TableView, ViewState
from tableview.core.exceptions import (
    ConfigError,
    InvalidSortOrderError,
    RangeError,
    TableViewError,
    UnknownSortKeyError,
)
from tableview.validation.errors import SchemaError

__all__ = [
    "TableView",
    "ViewState",
    "TableViewError",
    "SchemaError",
    "RangeError",
    "InvalidSortOrderError",
    "UnknownSortKeyError",
    "ConfigError",
]
