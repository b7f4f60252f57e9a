from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class ViewConfig:
    """
    Initial controls for a TableView.

    All fields are optional so a partial config file still parses:

    - page_size: rows per page, 0 means everything on one page
    - filter: initial filter term, numbers match by their decimal form
    - sort_key: field to sort by, None for dataset order
    - sort_order: "asc" or "desc"
    """

    page_size: int = 0
    filter: Union[str, int, float] = ""
    sort_key: Optional[str] = None
    sort_order: str = "asc"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> ViewConfig:
        return cls(
            page_size=raw.get("page_size", 0),
            filter=raw.get("filter", ""),
            sort_key=raw.get("sort_key"),
            sort_order=raw.get("sort_order", "asc"),
        )
