# resources.py
# No postponed annotations here: endpoint signatures reference the schemas captured
# by each factory call, and FastAPI resolves them from the live function objects.
from typing import Mapping, Optional

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from jobboard.config import Settings
from jobboard.database import get_db
from jobboard.routers.dependencies import get_app_settings, get_reference_validator, get_registry
from jobboard.schemas.common import ErrorResponse, PaginatedResponse
from jobboard.services.integrity import ReferenceValidator
from jobboard.services.pagination import Pagination, parse_int
from jobboard.services.repository import ResourceRepository
from jobboard.services.resource import NestedListing, Resource
from jobboard.services.resource_service import create_resource, delete_resource


def build_resource_router(resource: Resource) -> APIRouter:
    """Build list/get/create/delete (and the narrow update, if any) for one resource."""

    router = APIRouter(prefix=f"/{resource.name}", tags=[resource.name])
    create_schema = resource.create_schema
    read_schema = resource.read_schema
    filter_names = tuple(resource.filters)

    @router.get("", response_model=PaginatedResponse[read_schema])
    def list_items(
        request: Request,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        sort: str = "",
        order: str = "",
        db: Session = Depends(get_db),
    ):
        # Non-numeric page/limit fall back to defaults instead of failing the request.
        pagination = Pagination.normalize(parse_int(page), parse_int(limit))
        filters = {name: request.query_params.get(name, "") for name in filter_names}
        items, total = ResourceRepository(db, resource).list(
            pagination.page, pagination.limit, filters, sort, order
        )
        return {
            "data": [read_schema.model_validate(item) for item in items],
            "pagination": pagination.meta(total),
        }

    @router.get("/{item_id}", response_model=read_schema)
    def get_item(item_id: str, db: Session = Depends(get_db)):
        return read_schema.model_validate(ResourceRepository(db, resource).get_by_id(item_id))

    @router.post(
        "",
        response_model=read_schema,
        status_code=status.HTTP_201_CREATED,
        responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
    )
    def create_item(
        payload: create_schema,
        db: Session = Depends(get_db),
        validator: ReferenceValidator = Depends(get_reference_validator),
        settings: Settings = Depends(get_app_settings),
    ):
        item = create_resource(db, resource, payload, validator, settings.audit_actor)
        return read_schema.model_validate(item)

    @router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
    def delete_item(
        item_id: str,
        db: Session = Depends(get_db),
        registry: Mapping[str, Resource] = Depends(get_registry),
    ) -> Response:
        delete_resource(db, registry, resource, item_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    if resource.update is not None:
        update = resource.update
        update_schema = update.schema

        @router.put("/{item_id}", status_code=status.HTTP_200_OK, response_class=Response)
        def update_item(
            item_id: str,
            payload: update_schema,
            db: Session = Depends(get_db),
            settings: Settings = Depends(get_app_settings),
        ) -> Response:
            ResourceRepository(db, resource).update_field(
                item_id, update.field, getattr(payload, update.field), settings.audit_actor
            )
            return Response(status_code=status.HTTP_200_OK)

    return router


def _add_nested_route(router: APIRouter, resource: Resource, nested: NestedListing) -> None:
    read_schema = resource.read_schema

    def list_children(parent_id: str, db: Session = Depends(get_db)):
        items = ResourceRepository(db, resource).get_by_foreign_key(nested.field, parent_id)
        return [read_schema.model_validate(item) for item in items]

    router.add_api_route(
        f"/{nested.parent}/{{parent_id}}/{nested.segment}",
        list_children,
        methods=["GET"],
        response_model=list[read_schema],
        name=f"list_{resource.name}_by_{nested.field}",
        tags=[nested.parent],
    )


def build_nested_router(registry: Mapping[str, Resource]) -> APIRouter:
    """Unpaginated child listings, e.g. ``GET /companies/{id}/jobs``."""

    router = APIRouter()
    for resource in registry.values():
        for nested in resource.nested:
            _add_nested_route(router, resource, nested)
    return router
