from __future__ import annotations

from dataclasses import dataclass


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class Pagination:
    page: int
    limit: int

    @classmethod
    def normalize(cls, page: int | None, limit: int | None) -> "Pagination":
        """Clamp untrusted page/limit values.

        page < 1 becomes 1; limit outside [1, MAX_LIMIT] falls back to DEFAULT_LIMIT
        (it is not clamped to the maximum).
        """

        p = page if page is not None and page >= 1 else DEFAULT_PAGE
        l = limit if limit is not None and 1 <= limit <= MAX_LIMIT else DEFAULT_LIMIT
        return cls(page=p, limit=l)

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def total_pages(self, total: int) -> int:
        return (total + self.limit - 1) // self.limit

    def has_more(self, total: int) -> bool:
        return self.page * self.limit < total

    def meta(self, total: int) -> dict[str, int | bool]:
        return {
            "page": self.page,
            "limit": self.limit,
            "total": total,
            "total_pages": self.total_pages(total),
            "has_more": self.has_more(total),
        }


def parse_int(raw: str | int | None) -> int | None:
    """Lenient query-string integer parsing; anything unparseable is None."""

    if raw is None:
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        return None
