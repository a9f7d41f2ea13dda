"""
Spool routes.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from fabtrack.api.dependencies.auth import OptionalCaller
from fabtrack.api.dependencies.services import get_spool_service
from fabtrack.api.handlers import ResourceHandler
from fabtrack.core.auth import ResourceType
from fabtrack.schemas.spool import SpoolProgressUpdate, SpoolResponse
from fabtrack.services.spool import SpoolService

router = APIRouter()

handler = ResourceHandler(
    ResourceType.SPOOL,
    SpoolResponse,
    not_found_message="Ürün alt kalemi bulunamadı.",
)

Service = Annotated[SpoolService, Depends(get_spool_service)]


@router.get("")
async def list_spools(
    caller: OptionalCaller,
    service: Service,
    project_id: str | None = Query(None, alias="projectId"),
    status: str | None = Query(None),
):
    """List spools for a project, or by status, or all."""
    return await handler.list(caller, service, project_id=project_id, status=status)


@router.post("")
async def create_spool(request: Request, caller: OptionalCaller, service: Service):
    return await handler.create(caller, service, request)


@router.get("/{spool_id}")
async def get_spool(spool_id: str, caller: OptionalCaller, service: Service):
    return await handler.get(caller, service, spool_id)


@router.put("/{spool_id}")
async def update_spool(
    spool_id: str,
    request: Request,
    caller: OptionalCaller,
    service: Service,
):
    return await handler.update(caller, service, spool_id, request)


@router.put("/{spool_id}/progress")
async def update_spool_progress(
    spool_id: str,
    request: Request,
    caller: OptionalCaller,
    service: Service,
):
    """Record completed quantity; the status follows from it."""
    return await handler.update_with(
        caller,
        SpoolProgressUpdate,
        request,
        lambda payload: service.update_progress(
            spool_id,
            payload["completed_quantity"],
            actor=caller,
        ),
    )


@router.delete("/{spool_id}")
async def delete_spool(spool_id: str, caller: OptionalCaller, service: Service):
    return await handler.delete(caller, service, spool_id)
