"""
Inventory routes.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from fabtrack.api.dependencies.auth import OptionalCaller
from fabtrack.api.dependencies.services import get_inventory_service
from fabtrack.api.handlers import ResourceHandler
from fabtrack.core.auth import ResourceType
from fabtrack.schemas.inventory import InventoryItemResponse, InventoryStockUpdate
from fabtrack.services.inventory import InventoryService

router = APIRouter()

handler = ResourceHandler(
    ResourceType.INVENTORY_ITEM,
    InventoryItemResponse,
    not_found_message="Envanter öğesi bulunamadı.",
)

Service = Annotated[InventoryService, Depends(get_inventory_service)]


@router.get("")
async def list_inventory(
    caller: OptionalCaller,
    service: Service,
    low_stock: str | None = Query(None, alias="lowStock"),
    category: str | None = Query(None),
    search: str | None = Query(None),
):
    """
    List inventory items.

    ``lowStock=true`` wins over ``category``, which wins over ``search``.
    """
    return await handler.list(
        caller,
        service,
        low_stock=low_stock == "true",
        category=category,
        search=search,
    )


@router.post("")
async def create_inventory_item(request: Request, caller: OptionalCaller, service: Service):
    return await handler.create(caller, service, request)


@router.get("/{item_id}")
async def get_inventory_item(item_id: str, caller: OptionalCaller, service: Service):
    return await handler.get(caller, service, item_id)


@router.put("/{item_id}")
async def update_inventory_item(
    item_id: str,
    request: Request,
    caller: OptionalCaller,
    service: Service,
):
    return await handler.update(caller, service, item_id, request)


@router.put("/{item_id}/stock")
async def update_inventory_stock(
    item_id: str,
    request: Request,
    caller: OptionalCaller,
    service: Service,
):
    """Set the stock level of an item."""
    return await handler.update_with(
        caller,
        InventoryStockUpdate,
        request,
        lambda payload: service.update_stock(item_id, payload["quantity"], actor=caller),
    )


@router.delete("/{item_id}")
async def delete_inventory_item(item_id: str, caller: OptionalCaller, service: Service):
    return await handler.delete(caller, service, item_id)
