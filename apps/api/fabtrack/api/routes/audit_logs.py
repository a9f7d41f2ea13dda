"""
Audit log API routes (admin only).
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from fabtrack.api.dependencies.auth import OptionalCaller
from fabtrack.api.dependencies.services import get_audit_service
from fabtrack.api.handlers import ResourceHandler
from fabtrack.core.auth import ResourceType
from fabtrack.schemas.audit_log import AuditLogResponse
from fabtrack.services.audit import DEFAULT_LIMIT, AuditLogService

router = APIRouter()

handler = ResourceHandler(
    ResourceType.AUDIT_LOG,
    AuditLogResponse,
    not_found_message="Denetim kaydı bulunamadı.",
)

Service = Annotated[AuditLogService, Depends(get_audit_service)]


@router.get("")
async def list_audit_logs(
    caller: OptionalCaller,
    service: Service,
    table_name: str | None = Query(None, alias="tableName"),
    user_id: str | None = Query(None, alias="userId"),
    action: str | None = Query(None),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=500),
):
    """List audit logs, newest first."""
    return await handler.list(
        caller,
        service,
        table_name=table_name,
        user_id=user_id,
        action=action,
        limit=limit,
    )


@router.get("/{log_id}")
async def get_audit_log(log_id: str, caller: OptionalCaller, service: Service):
    return await handler.get(caller, service, log_id)
