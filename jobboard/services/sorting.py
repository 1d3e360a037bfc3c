from __future__ import annotations

from dataclasses import dataclass


ASCENDING = "asc"
DESCENDING = "desc"


@dataclass(frozen=True)
class SortPolicy:
    fields: tuple[str, ...]
    default: str = "created_time"


def resolve_sort_field(requested: str | None, policy: SortPolicy) -> str:
    if requested and requested in policy.fields:
        return requested
    return policy.default


def resolve_sort_order(order: str | None) -> str:
    # Only the exact token "asc" sorts ascending; everything else is newest/largest first.
    return ASCENDING if order == ASCENDING else DESCENDING
