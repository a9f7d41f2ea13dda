"""
Shipment routes.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from fabtrack.api.dependencies.auth import OptionalCaller
from fabtrack.api.dependencies.services import get_shipment_service
from fabtrack.api.handlers import ResourceHandler
from fabtrack.core.auth import ResourceType
from fabtrack.schemas.shipment import ShipmentResponse
from fabtrack.services.shipment import ShipmentService

router = APIRouter()

handler = ResourceHandler(
    ResourceType.SHIPMENT,
    ShipmentResponse,
    not_found_message="Sevkiyat bulunamadı.",
)

Service = Annotated[ShipmentService, Depends(get_shipment_service)]


@router.get("")
async def list_shipments(
    caller: OptionalCaller,
    service: Service,
    project_id: str | None = Query(None, alias="projectId"),
    status: str | None = Query(None),
):
    return await handler.list(caller, service, project_id=project_id, status=status)


@router.post("")
async def create_shipment(request: Request, caller: OptionalCaller, service: Service):
    return await handler.create(caller, service, request)


@router.get("/{shipment_id}")
async def get_shipment(shipment_id: str, caller: OptionalCaller, service: Service):
    return await handler.get(caller, service, shipment_id)


@router.put("/{shipment_id}")
async def update_shipment(
    shipment_id: str,
    request: Request,
    caller: OptionalCaller,
    service: Service,
):
    return await handler.update(caller, service, shipment_id, request)


@router.delete("/{shipment_id}")
async def delete_shipment(shipment_id: str, caller: OptionalCaller, service: Service):
    return await handler.delete(caller, service, shipment_id)
