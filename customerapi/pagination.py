"""Page parameters and paginated results."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, TypeVar

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

T = TypeVar("T")
D = TypeVar("D")


@dataclass
class Params:
    """Requested page number and page size."""

    page: int = 0
    limit: int = 0

    def normalize(self) -> None:
        """Replace non-positive values with the defaults."""
        if self.page <= 0:
            self.page = DEFAULT_PAGE
        if self.limit <= 0:
            self.limit = DEFAULT_LIMIT

    def calculate_offset(self) -> int:
        """Return the number of items that come before this page."""
        return (self.page - 1) * self.limit


def _item_to_dict(item: Any) -> Any:
    to_dict = getattr(item, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(item) and not isinstance(item, type):
        return dataclasses.asdict(item)
    return item


@dataclass
class Pagination(Generic[T]):
    """One page of items together with paging metadata."""

    data: list[T] = field(default_factory=list)
    total: int = 0
    page: int = 0
    limit: int = 0
    total_pages: int = 0

    def set_total_pages(self) -> None:
        """Compute the page count from the total and the page size."""
        if self.limit <= 0:
            self.total_pages = 0
            return
        pages, rest = divmod(self.total, self.limit)
        self.total_pages = pages + (1 if rest > 0 else 0)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation."""
        return {
            "data": [_item_to_dict(item) for item in self.data],
            "total": self.total,
            "page": self.page,
            "limit": self.limit,
            "total_pages": self.total_pages,
        }


def copy_metadata(page: Pagination[T], data: Iterable[D]) -> Pagination[D]:
    """Return a new page holding ``data`` with the metadata of ``page``."""
    return Pagination(
        data=list(data),
        total=page.total,
        page=page.page,
        limit=page.limit,
        total_pages=page.total_pages,
    )