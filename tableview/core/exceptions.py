class TableViewError(Exception):
    """Base exception for all tableview errors"""
    pass

class ConfigError(TableViewError):
    """Invalid or inconsistent view config file"""
    pass

class RangeError(TableViewError, ValueError):
    """
    page_size / current_page outside their allowed range.
    The view keeps its previous value when this is raised.
    """
    pass

class InvalidSortOrderError(TableViewError, ValueError):
    """Sort order token other than 'asc' or 'desc'"""
    pass

class UnknownSortKeyError(TableViewError, KeyError):
    """Sort key missing from at least one record of the dataset"""

    def __str__(self) -> str:
        # KeyError repr()s its argument, keep the plain message
        return str(self.args[0]) if self.args else ""
