"""Translate named string filters into SQLAlchemy WHERE clauses."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Mapping

from sqlalchemy import or_
from sqlalchemy.sql.elements import ColumnElement


# Largest value a BIGINT / sqlite INTEGER column holds.
MAX_IDENTIFIER = 2**63 - 1


class MatchKind(str, enum.Enum):
    SUBSTRING = "substring"
    IDENTIFIER = "identifier"
    ANY_SUBSTRING = "any_substring"


@dataclass(frozen=True)
class FilterSpec:
    kind: MatchKind
    fields: tuple[str, ...]

    @classmethod
    def substring(cls, field: str) -> "FilterSpec":
        return cls(MatchKind.SUBSTRING, (field,))

    @classmethod
    def identifier(cls, field: str) -> "FilterSpec":
        return cls(MatchKind.IDENTIFIER, (field,))

    @classmethod
    def any_substring(cls, *fields: str) -> "FilterSpec":
        return cls(MatchKind.ANY_SUBSTRING, tuple(fields))


def parse_identifier(value: Any) -> int | None:
    """Return the store-native id for ``value`` or None when it does not parse.

    Only ASCII decimal digits parse, and the result must fit a signed 64-bit
    integer column.
    """

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        ident = value
    else:
        text = str(value if value is not None else "").strip()
        if not text or not (text.isascii() and text.isdigit()):
            return None
        ident = int(text)
    if ident < 0 or ident > MAX_IDENTIFIER:
        return None
    return ident


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _contains(column: Any, value: str) -> ColumnElement[bool]:
    return column.ilike(f"%{_escape_like(value)}%", escape="\\")


def build_filters(model: type, filters: Mapping[str, str], policy: Mapping[str, FilterSpec]) -> list[ColumnElement[bool]]:
    """Build the clauses for ``filters`` according to ``policy``.

    Empty values and unknown filter names are ignored, and identifier filters
    whose value does not parse are dropped rather than reported. An empty
    result matches every row.
    """

    clauses: list[ColumnElement[bool]] = []
    for name, raw in filters.items():
        spec = policy.get(name)
        if spec is None or raw is None:
            continue
        value = str(raw)
        if value == "":
            continue

        if spec.kind is MatchKind.SUBSTRING:
            clauses.append(_contains(getattr(model, spec.fields[0]), value))
        elif spec.kind is MatchKind.IDENTIFIER:
            ident = parse_identifier(value)
            if ident is not None:
                clauses.append(getattr(model, spec.fields[0]) == ident)
        elif spec.kind is MatchKind.ANY_SUBSTRING:
            clauses.append(or_(*[_contains(getattr(model, field), value) for field in spec.fields]))
    return clauses
