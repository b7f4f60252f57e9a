"""
Core layer: view state, pipeline stages and the TableView itself
"""

from .exceptions import TableViewError
from .state import PageConfig, SortOrder, SortSpec, ViewState
from .table_view import TableView

__all__ = ["TableViewError", "PageConfig", "SortOrder", "SortSpec", "ViewState", "TableView"]
