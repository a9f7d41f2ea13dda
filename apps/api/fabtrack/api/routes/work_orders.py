"""
Work order routes.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from fabtrack.api.dependencies.auth import OptionalCaller
from fabtrack.api.dependencies.services import get_work_order_service
from fabtrack.api.handlers import ResourceHandler
from fabtrack.core.auth import ResourceType
from fabtrack.schemas.work_order import WorkOrderResponse
from fabtrack.services.work_order import WorkOrderService

router = APIRouter()

handler = ResourceHandler(
    ResourceType.WORK_ORDER,
    WorkOrderResponse,
    not_found_message="İş emri bulunamadı.",
)

Service = Annotated[WorkOrderService, Depends(get_work_order_service)]


@router.get("")
async def list_work_orders(
    caller: OptionalCaller,
    service: Service,
    project_id: str | None = Query(None, alias="projectId"),
    status: str | None = Query(None),
):
    return await handler.list(caller, service, project_id=project_id, status=status)


@router.post("")
async def create_work_order(request: Request, caller: OptionalCaller, service: Service):
    return await handler.create(caller, service, request)


@router.get("/{work_order_id}")
async def get_work_order(work_order_id: str, caller: OptionalCaller, service: Service):
    return await handler.get(caller, service, work_order_id)


@router.put("/{work_order_id}")
async def update_work_order(
    work_order_id: str,
    request: Request,
    caller: OptionalCaller,
    service: Service,
):
    return await handler.update(caller, service, work_order_id, request)


@router.delete("/{work_order_id}")
async def delete_work_order(work_order_id: str, caller: OptionalCaller, service: Service):
    return await handler.delete(caller, service, work_order_id)
