"""
Project routes.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from fabtrack.api.dependencies.auth import OptionalCaller
from fabtrack.api.dependencies.services import get_project_service
from fabtrack.api.handlers import ResourceHandler
from fabtrack.core.auth import ResourceType
from fabtrack.schemas.project import ProjectResponse
from fabtrack.services.project import ProjectService

router = APIRouter()

handler = ResourceHandler(
    ResourceType.PROJECT,
    ProjectResponse,
    not_found_message="Proje bulunamadı.",
)

Service = Annotated[ProjectService, Depends(get_project_service)]


@router.get("")
async def list_projects(
    caller: OptionalCaller,
    service: Service,
    status: str | None = Query(None),
    search: str | None = Query(None),
):
    """List projects, optionally by status or name search."""
    return await handler.list(caller, service, status=status, search=search)


@router.post("")
async def create_project(request: Request, caller: OptionalCaller, service: Service):
    """Create project."""
    return await handler.create(caller, service, request)


@router.get("/{project_id}")
async def get_project(project_id: str, caller: OptionalCaller, service: Service):
    """Get project by ID."""
    return await handler.get(caller, service, project_id)


@router.put("/{project_id}")
async def update_project(
    project_id: str,
    request: Request,
    caller: OptionalCaller,
    service: Service,
):
    """Update project."""
    return await handler.update(caller, service, project_id, request)


@router.delete("/{project_id}")
async def delete_project(project_id: str, caller: OptionalCaller, service: Service):
    """Delete project."""
    return await handler.delete(caller, service, project_id)
