"""
Personnel routes.

Creating personnel also creates the person's login account (role ``user``).
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from fabtrack.api.dependencies.auth import OptionalCaller
from fabtrack.api.dependencies.services import get_personnel_service
from fabtrack.api.handlers import ResourceHandler
from fabtrack.core.auth import Action, ResourceType
from fabtrack.core.responses import success_response
from fabtrack.schemas.personnel import PersonnelResponse
from fabtrack.services.personnel import PersonnelService

router = APIRouter()

handler = ResourceHandler(
    ResourceType.PERSONNEL,
    PersonnelResponse,
    not_found_message="Personel bulunamadı.",
)

Service = Annotated[PersonnelService, Depends(get_personnel_service)]


@router.get("")
async def list_personnel(
    caller: OptionalCaller,
    service: Service,
    department: str | None = Query(None),
    position: str | None = Query(None),
):
    """List personnel by full name."""
    return await handler.list(caller, service, department=department, position=position)


@router.post("")
async def create_personnel(request: Request, caller: OptionalCaller, service: Service):
    """Create personnel and their login account (admin only)."""
    return await handler.create(caller, service, request)


@router.get("/stats")
async def personnel_stats(caller: OptionalCaller, service: Service):
    """Headcount overall and per department."""
    handler.authorize(caller, Action.READ)
    stats = await handler.delegate(service.stats)
    return success_response(stats)


@router.get("/{personnel_id}")
async def get_personnel(personnel_id: str, caller: OptionalCaller, service: Service):
    return await handler.get(caller, service, personnel_id)


@router.put("/{personnel_id}")
async def update_personnel(
    personnel_id: str,
    request: Request,
    caller: OptionalCaller,
    service: Service,
):
    return await handler.update(caller, service, personnel_id, request)


@router.delete("/{personnel_id}")
async def delete_personnel(personnel_id: str, caller: OptionalCaller, service: Service):
    """Delete personnel and their login account."""
    return await handler.delete(caller, service, personnel_id)
