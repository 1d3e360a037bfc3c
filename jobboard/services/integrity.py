"""Application-level referential integrity.

The existence checks run in the caller's session right before the insert and
commit together with it. Referenced rows are not locked, so a concurrent delete
of a referenced row between check and commit can still leave a dangling id;
that window is accepted.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Protocol

from sqlalchemy.orm import Session

from jobboard.errors import DeleteBlockedError, NotFoundError, ReferenceNotFoundError
from jobboard.services.query_builder import parse_identifier
from jobboard.services.repository import ResourceRepository
from jobboard.services.resource import Resource


logger = logging.getLogger(__name__)


class ReferenceValidator(Protocol):
    def validate(self, resource: Resource, data: Mapping[str, Any]) -> None: ...


class StoreReferenceValidator:
    """Resolves every declared reference through the referenced resource's repository."""

    def __init__(self, db: Session, registry: Mapping[str, Resource]) -> None:
        self.db = db
        self.registry = registry

    def validate(self, resource: Resource, data: Mapping[str, Any]) -> None:
        for ref in resource.references:
            value = data.get(ref.field)
            if value is None and ref.optional:
                continue
            target = self.registry[ref.resource]
            try:
                ResourceRepository(self.db, target).get_by_id(value)
            except NotFoundError as exc:
                logger.info("reference check failed resource=%s %s=%s", resource.name, ref.field, value)
                raise ReferenceNotFoundError(ref.field, f"{ref.label} not found") from exc


class NullReferenceValidator:
    """Accepts every reference. Used when integrity checks are switched off."""

    def validate(self, resource: Resource, data: Mapping[str, Any]) -> None:
        return None


def ensure_deletable(db: Session, registry: Mapping[str, Resource], resource: Resource, item_id: Any) -> None:
    """Raise if any dependent row still points at ``item_id``."""

    ident = parse_identifier(item_id)
    if ident is None:
        raise NotFoundError(resource.not_found_message)
    for guard in resource.delete_guards:
        dependents = ResourceRepository(db, registry[guard.resource]).count_where(guard.field, ident)
        if dependents > 0:
            logger.info(
                "delete blocked resource=%s id=%s dependents=%s(%d)",
                resource.name,
                ident,
                guard.resource,
                dependents,
            )
            raise DeleteBlockedError(
                f"cannot delete {resource.label}: {dependents} {guard.resource} still reference it"
            )


def ensure_storable_references(resource: Resource, data: Mapping[str, Any]) -> None:
    """Reject reference values that cannot name any row, even with checks switched off."""

    for ref in resource.references:
        value = data.get(ref.field)
        if value is None and ref.optional:
            continue
        if parse_identifier(value) is None:
            raise ReferenceNotFoundError(ref.field, f"{ref.label} not found")
