"""Per-entity configuration consumed by the generic repository and router factory."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from pydantic import BaseModel

from jobboard.errors import FieldError
from jobboard.services.query_builder import FilterSpec
from jobboard.services.sorting import SortPolicy


@dataclass(frozen=True)
class Reference:
    """A foreign key that must resolve before the owning entity is created."""

    field: str
    resource: str
    label: str
    optional: bool = False


@dataclass(frozen=True)
class DeleteGuard:
    """Rows of ``resource`` whose ``field`` points at the target block its deletion."""

    resource: str
    field: str


@dataclass(frozen=True)
class FieldUpdate:
    field: str
    schema: type[BaseModel]


@dataclass(frozen=True)
class NestedListing:
    """Exposes ``GET /{parent}/{id}/{segment}`` listing rows whose ``field`` equals id."""

    parent: str
    segment: str
    field: str


@dataclass(frozen=True)
class Resource:
    name: str
    label: str
    model: type
    create_schema: type[BaseModel]
    read_schema: type[BaseModel]
    filters: Mapping[str, FilterSpec]
    sort: SortPolicy
    created_field: str = "created_time"
    references: tuple[Reference, ...] = ()
    delete_guards: tuple[DeleteGuard, ...] = ()
    update: FieldUpdate | None = None
    nested: tuple[NestedListing, ...] = ()
    checks: tuple[Callable[[Any], list[FieldError]], ...] = ()
    secret_fields: tuple[str, ...] = ()

    @property
    def not_found_message(self) -> str:
        return f"{self.label.capitalize()} not found"

    def cross_field_errors(self, payload: BaseModel) -> list[FieldError]:
        errors: list[FieldError] = []
        for check in self.checks:
            errors.extend(check(payload))
        return errors
