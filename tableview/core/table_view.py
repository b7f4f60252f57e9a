from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any, List, Optional, Sequence, TYPE_CHECKING

from tableview.core.exceptions import (
    InvalidSortOrderError,
    RangeError,
    UnknownSortKeyError,
)
from tableview.core.pipeline import (
    Record,
    filter_records,
    max_pages,
    paginate,
    sort_records,
)
from tableview.core.state import PageConfig, SortOrder, SortSpec, ViewState
from tableview.core.values import as_whole_number, normalise_term
from tableview.validation.schema_validation import validate_records

if TYPE_CHECKING:
    from tableview.config.model import ViewConfig

logger = logging.getLogger(__name__)


class Stage(IntEnum):
    """Pipeline stages in execution order. Recomputing one recomputes all later ones."""
    FILTER = 1
    SORT = 2
    PAGINATE = 3


def _parse_sort_order(order: Any) -> SortOrder:
    try:
        return SortOrder(order)
    except ValueError:
        raise InvalidSortOrderError(
            'Invalid sorting order. Use "asc" for ascending or "desc" for descending.'
        ) from None


class TableView:
    """
    In-memory tabular view: filter -> sort -> paginate over one owned dataset.

    Every mutator validates its input, stores it, and then runs _recompute()
    from the first stage its input affects:

    - dataset replacement / filter change: filter, sort, paginate
    - sort change:                          sort, paginate
    - page size / current page change:      paginate

    Derived lists are cached between calls; rendered_data hands out copies.
    """

    # -------------------------------------------------------------------------
    # Constructor
    # -------------------------------------------------------------------------
    def __init__(self, records: Sequence[Record], page_size: int = 0) -> None:
        self._data: List[Record] = validate_records(records)
        self._filter: str = ""
        self._sort = SortSpec()
        self._page = PageConfig(page_size=self._checked_page_size(page_size))

        # Stage caches, filled by _recompute
        self._filtered: List[Record] = []
        self._ordered: List[Record] = []
        self._rendered: List[Record] = []

        self._recompute(Stage.FILTER)

        logger.debug(
            "TableView created",
            extra={"records": len(self._data), "page_size": self._page.page_size},
        )

    @classmethod
    def from_config(cls, records: Sequence[Record], config: ViewConfig) -> TableView:
        """
        Build a view and apply the initial controls from a ViewConfig.
        """
        view = cls(records, page_size=config.page_size)
        if config.filter != "":
            view.filter = config.filter
        if config.sort_key:
            view.sort_data(config.sort_key, config.sort_order)
        return view

    # -------------------------------------------------------------------------
    # Internal: recompute pipeline
    # -------------------------------------------------------------------------
    def _recompute(self, stage: Stage) -> None:
        if stage <= Stage.FILTER:
            self._filtered = filter_records(self._data, self._filter)
        if stage <= Stage.SORT:
            self._ordered = sort_records(self._filtered, self._sort)
        self._rendered = paginate(self._ordered, self._page)

        logger.debug(
            "Recomputed view",
            extra={
                "stage": stage.name,
                "filtered": len(self._filtered),
                "rendered": len(self._rendered),
            },
        )

    @staticmethod
    def _checked_page_size(value: Any) -> int:
        size = as_whole_number(value)
        if size is None or size < 0:
            raise RangeError("pageSize must be a number greater or equal 0")
        return size

    @staticmethod
    def _checked_current_page(value: Any) -> int:
        page = as_whole_number(value)
        if page is None or page <= 0:
            raise RangeError("currentPage must be a positive number")
        return page

    def _check_sort_key(self, key: Any) -> None:
        if not all(key in record for record in self._data):
            raise UnknownSortKeyError(f'Key "{key}" does not exist in the data objects.')

    # -------------------------------------------------------------------------
    # Dataset
    # -------------------------------------------------------------------------
    @property
    def data(self) -> List[Record]:
        """Snapshot of the full, unfiltered dataset."""
        return [dict(record) for record in self._data]

    @data.setter
    def data(self, records: Sequence[Record]) -> None:
        """
        Replace the dataset.

        The filter term and sort are kept and re-applied to the new records;
        the current page goes back to 1. A sort key the new records don't
        have is dropped.
        """
        self._data = validate_records(records)

        if self._sort.active and not all(self._sort.key in r for r in self._data):
            logger.warning(
                "Sort key missing from new dataset, clearing sort",
                extra={"sort_key": self._sort.key},
            )
            self._sort = SortSpec()

        self._page = PageConfig(page_size=self._page.page_size, current_page=1)
        self._recompute(Stage.FILTER)

    @property
    def columns(self) -> List[str]:
        """Field names in the order of the first record."""
        if not self._data:
            return []
        return list(self._data[0].keys())

    @property
    def total_count(self) -> int:
        return len(self._data)

    @property
    def filtered_count(self) -> int:
        return len(self._filtered)

    @property
    def rendered_data(self) -> List[Record]:
        """Current page of filtered, sorted records (copies)."""
        return [dict(record) for record in self._rendered]

    # -------------------------------------------------------------------------
    # Filtering
    # -------------------------------------------------------------------------
    @property
    def filter(self) -> str:
        return self._filter

    @filter.setter
    def filter(self, term: Any) -> None:
        self.set_filter(term)

    def set_filter(self, term: Any) -> None:
        """
        Set the filter term and go back to the first page.

        Numbers are matched by their decimal form, so 2010 and "2010"
        filter the same way. An active sort is re-applied to the result.
        """
        self._filter = normalise_term(term)
        self._page = PageConfig(page_size=self._page.page_size, current_page=1)
        self._recompute(Stage.FILTER)

    def reset_filter(self) -> None:
        self.set_filter("")

    # -------------------------------------------------------------------------
    # Pagination
    # -------------------------------------------------------------------------
    @property
    def page_size(self) -> int:
        return self._page.page_size

    @page_size.setter
    def page_size(self, value: Any) -> None:
        self.set_page_size(value)

    def set_page_size(self, value: Any) -> None:
        size = self._checked_page_size(value)
        self._page = PageConfig(page_size=size, current_page=self._page.current_page)
        self._recompute(Stage.PAGINATE)

    @property
    def current_page(self) -> int:
        return self._page.current_page

    @current_page.setter
    def current_page(self, value: Any) -> None:
        self.set_current_page(value)

    def set_current_page(self, value: Any) -> None:
        page = self._checked_current_page(value)
        self._page = PageConfig(page_size=self._page.page_size, current_page=page)
        self._recompute(Stage.PAGINATE)

    def get_max_pages(self) -> int:
        return max_pages(len(self._filtered), self._page.page_size)

    def next_page(self) -> None:
        if self._page.current_page < self.get_max_pages():
            self.set_current_page(self._page.current_page + 1)

    def previous_page(self) -> None:
        if self._page.current_page > 1:
            self.set_current_page(self._page.current_page - 1)

    # -------------------------------------------------------------------------
    # Sorting
    # -------------------------------------------------------------------------
    @property
    def sort_key(self) -> Optional[str]:
        return self._sort.key

    @property
    def sort_order(self) -> str:
        return self._sort.order.value

    def sort_data(self, key: str, order: Any = SortOrder.ASC) -> None:
        """
        Sort the filtered records by key.

        The sort stays active: later filter changes and dataset replacements
        re-apply it. The current page is kept.

        :raises InvalidSortOrderError: order is not "asc" or "desc"
        :raises UnknownSortKeyError: key is missing from any record
        """
        sort_order = _parse_sort_order(order)
        self._check_sort_key(key)

        self._sort = SortSpec(key=key, order=sort_order)
        self._recompute(Stage.SORT)

    def reset_sorting(self) -> None:
        self._sort = SortSpec()
        self._recompute(Stage.SORT)

    # -------------------------------------------------------------------------
    # State snapshots
    # -------------------------------------------------------------------------
    @property
    def state(self) -> ViewState:
        return ViewState(
            filter=self._filter,
            sort_key=self._sort.key,
            sort_order=self._sort.order.value,
            page_size=self._page.page_size,
            current_page=self._page.current_page,
        )

    def apply_state(self, state: ViewState) -> None:
        """
        Restore controls from a ViewState.

        Everything is validated before anything is applied, so a bad state
        leaves the view untouched. The current page is applied last because
        setting the filter resets it.
        """
        page_size = self._checked_page_size(state.page_size)
        current_page = self._checked_current_page(state.current_page)
        sort_order = _parse_sort_order(state.sort_order)
        if state.sort_key is not None:
            self._check_sort_key(state.sort_key)

        self._filter = normalise_term(state.filter)
        self._sort = (
            SortSpec(key=state.sort_key, order=sort_order)
            if state.sort_key is not None
            else SortSpec()
        )
        self._page = PageConfig(page_size=page_size, current_page=current_page)
        self._recompute(Stage.FILTER)

    def __repr__(self) -> str:
        return (
            f"TableView(records={len(self._data)}, filtered={len(self._filtered)}, "
            f"sort={self._sort.key!r}/{self._sort.order.value}, "
            f"page={self._page.current_page}, page_size={self._page.page_size})"
        )
