from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Generic, Mapping, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.errors import NotFoundError, StoreError
from jobboard.services.pagination import Pagination
from jobboard.services.query_builder import build_filters, parse_identifier
from jobboard.services.resource import Resource
from jobboard.services.sorting import ASCENDING, resolve_sort_field, resolve_sort_order


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ResourceRepository(Generic[ModelT]):
    """CRUD over one table, driven by a :class:`Resource` configuration.

    Every public method raises :class:`NotFoundError` for ids that do not parse
    or do not match a row, and :class:`StoreError` when the driver fails.
    """

    def __init__(self, db: Session, resource: Resource) -> None:
        self.db = db
        self.resource = resource
        self.model = resource.model

    def list(
        self,
        page: int | None,
        limit: int | None,
        filters: Mapping[str, str],
        sort: str | None,
        order: str | None,
    ) -> tuple[list[ModelT], int]:
        pagination = Pagination.normalize(page, limit)
        clauses = build_filters(self.model, filters, self.resource.filters)

        sort_column = getattr(self.model, resolve_sort_field(sort, self.resource.sort))
        if resolve_sort_order(order) == ASCENDING:
            ordering = [sort_column.asc(), self.model.id.asc()]
        else:
            ordering = [sort_column.desc(), self.model.id.desc()]

        count_stmt = select(func.count()).select_from(self.model)
        stmt = select(self.model)
        if clauses:
            count_stmt = count_stmt.where(*clauses)
            stmt = stmt.where(*clauses)
        stmt = stmt.order_by(*ordering).offset(pagination.skip).limit(pagination.limit)

        try:
            total = int(self.db.scalar(count_stmt) or 0)
            items = list(self.db.scalars(stmt).all())
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to list {self.resource.name}") from exc
        return items, total

    def get_by_id(self, item_id: Any) -> ModelT:
        ident = parse_identifier(item_id)
        if ident is None:
            raise NotFoundError(self.resource.not_found_message)
        try:
            item = self.db.get(self.model, ident)
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to load {self.resource.label} {ident}") from exc
        if item is None:
            raise NotFoundError(self.resource.not_found_message)
        return item

    def get_by_foreign_key(self, fk_field: str, fk_value: Any) -> list[ModelT]:
        ident = parse_identifier(fk_value)
        if ident is None:
            raise NotFoundError(f"invalid {fk_field}")
        stmt = select(self.model).where(getattr(self.model, fk_field) == ident).order_by(self.model.id)
        try:
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to list {self.resource.name} by {fk_field}") from exc

    def count_where(self, field: str, value: int) -> int:
        stmt = select(func.count()).select_from(self.model).where(getattr(self.model, field) == value)
        try:
            return int(self.db.scalar(stmt) or 0)
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to count {self.resource.name}") from exc

    def create(self, item: ModelT) -> ModelT:
        try:
            self.db.add(item)
            self.db.commit()
            self.db.refresh(item)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(f"failed to create {self.resource.label}") from exc
        return item

    def update_field(self, item_id: Any, field: str, value: Any, actor: str) -> None:
        # An empty value is invalid input, not a no-op.
        if value is None or value == "":
            raise NotFoundError(self.resource.not_found_message)
        item = self.get_by_id(item_id)
        setattr(item, field, value)
        setattr(item, "updated_time", _utc_now())
        setattr(item, "updated_by", actor)
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(f"failed to update {self.resource.label}") from exc

    def delete(self, item_id: Any) -> None:
        ident = parse_identifier(item_id)
        if ident is None:
            raise NotFoundError(self.resource.not_found_message)
        try:
            result = self.db.execute(delete(self.model).where(self.model.id == ident))
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(f"failed to delete {self.resource.label}") from exc
        if result.rowcount == 0:
            raise NotFoundError(self.resource.not_found_message)
