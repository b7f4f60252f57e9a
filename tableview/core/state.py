from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional

from tableview.core.values import normalise_term


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortSpec:
    """
    Active sort of the view.

    - key: field name to sort by, None means unsorted (filtered order is kept)
    - order: direction applied when key is set
    """
    key: Optional[str] = None
    order: SortOrder = SortOrder.ASC

    @property
    def active(self) -> bool:
        return self.key is not None


@dataclass(frozen=True)
class PageConfig:
    """
    Page window over the ordered records.

    - page_size: rows per page, 0 disables pagination
    - current_page: 1-based page index, not clamped to the last page
    """
    page_size: int = 0
    current_page: int = 1

    def window(self, total: int) -> tuple[int, int]:
        start = (self.current_page - 1) * self.page_size
        end = start + self.page_size
        if end <= 0:
            end = total
        return start, end


@dataclass
class ViewState:
    """
    Serialisable snapshot of the user-facing controls of a TableView.

    Presentation layers store this between requests and hand it back
    through TableView.apply_state.
    """

    filter: str = ""
    sort_key: Optional[str] = None
    sort_order: str = SortOrder.ASC.value

    page_size: int = 0
    current_page: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ViewState:
        raw_filter = data.get("filter")
        return cls(
            filter="" if raw_filter is None else normalise_term(raw_filter),
            sort_key=data.get("sort_key") or None,
            sort_order=data.get("sort_order", SortOrder.ASC.value),
            page_size=data.get("page_size", 0),
            current_page=data.get("current_page", 1),
        )
