from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Mapping

from pydantic import BaseModel
from sqlalchemy.orm import Session

from jobboard.errors import DomainValidationError
from jobboard.services.integrity import ReferenceValidator, ensure_deletable, ensure_storable_references
from jobboard.services.repository import ResourceRepository
from jobboard.services.resource import Resource
from jobboard.utils.password_hash import hash_password


logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def build_entity(resource: Resource, payload: BaseModel, actor: str) -> Any:
    data = payload.model_dump()
    for secret in resource.secret_fields:
        data[secret] = hash_password(data[secret])
    now = _utc_now()
    data[resource.created_field] = now
    data["updated_time"] = now
    data["created_by"] = actor
    data["updated_by"] = actor
    return resource.model(**data)


def create_resource(
    db: Session,
    resource: Resource,
    payload: BaseModel,
    validator: ReferenceValidator,
    actor: str,
) -> Any:
    errors = resource.cross_field_errors(payload)
    if errors:
        raise DomainValidationError(errors)

    data = payload.model_dump()
    ensure_storable_references(resource, data)
    validator.validate(resource, data)
    item = ResourceRepository(db, resource).create(build_entity(resource, payload, actor))
    logger.info("created %s id=%s", resource.label, item.id)
    return item


def delete_resource(db: Session, registry: Mapping[str, Resource], resource: Resource, item_id: Any) -> None:
    ensure_deletable(db, registry, resource, item_id)
    ResourceRepository(db, resource).delete(item_id)
    logger.info("deleted %s id=%s", resource.label, item_id)
