"""Pagination helpers for resource collections."""
import math
from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class Page:
    """A window of items plus the numbers needed to describe it."""

    items: List[Any] = field(default_factory=list)
    page: int = 1
    per_page: int = 15
    total: int = 0
    path: str = ""

    @classmethod
    def paginate(cls, sequence, page=1, per_page=15, path="", max_per_page=100) -> "Page":
        """
        Slice an in-memory sequence into a page.

        Page numbers below 1 are treated as 1 and ``per_page`` is clamped
        to ``1..max_per_page``.
        """
        page = max(int(page or 1), 1)
        per_page = min(max(int(per_page or 1), 1), max_per_page)
        items = list(sequence)
        start = (page - 1) * per_page
        return cls(
            items=items[start:start + per_page],
            page=page,
            per_page=per_page,
            total=len(items),
            path=path,
        )

    @property
    def last_page(self) -> int:
        return max(math.ceil(self.total / self.per_page), 1)

    @property
    def first_item(self) -> Optional[int]:
        if not self.items:
            return None
        return (self.page - 1) * self.per_page + 1

    @property
    def last_item(self) -> Optional[int]:
        if not self.items:
            return None
        return self.first_item + len(self.items) - 1

    def url(self, page: int) -> str:
        return f"{self.path}?page={page}"

    def links(self) -> dict:
        return {
            "first": self.url(1),
            "last": self.url(self.last_page),
            "prev": self.url(self.page - 1) if self.page > 1 else None,
            "next": self.url(self.page + 1) if self.page < self.last_page else None,
        }

    def meta(self) -> dict:
        return {
            "current_page": self.page,
            "from": self.first_item,
            "last_page": self.last_page,
            "path": self.path,
            "per_page": self.per_page,
            "to": self.last_item,
            "total": self.total,
        }
