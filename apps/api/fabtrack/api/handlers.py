"""
Resource request handler.

Every resource endpoint runs the same pipeline, stopping at the first
failure:

    authorize -> parse body -> validate -> delegate to service -> respond

Authorization and validation failures are raised as their AppError.
Anything the service (or JSON parsing) raises is logged and reported as
Unexpected with the original message.

Usage:
    projects = ResourceHandler(
        ResourceType.PROJECT,
        ProjectResponse,
        not_found_message="Proje bulunamadı.",
    )

    @router.get("/{project_id}")
    async def get_project(project_id: str, caller: OptionalCaller, service: ...):
        return await projects.get(caller, service, project_id)
"""

import json
from typing import Any, Awaitable, Callable, Optional, TypeVar

import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from fabtrack.core.auth import Action, Caller, ResourceType, gate
from fabtrack.core.errors import AppError, NotFound, Unexpected, ValidationFailed
from fabtrack.core.responses import success_response
from fabtrack.schemas.base import ResponseSchema
from fabtrack.schemas.validation import Operation, validate, validate_model
from fabtrack.services.base import CrudService

logger = structlog.get_logger()

T = TypeVar("T")


async def read_json(request: Request) -> Any:
    """Decode the request body. Unparseable JSON is an Unexpected error."""
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.info("request.body_unparseable", path=request.url.path, error=str(exc))
        raise Unexpected(str(exc)) from exc


class ResourceHandler:
    """CRUD pipeline for one resource type."""

    def __init__(
        self,
        resource_type: ResourceType,
        response_schema: type[ResponseSchema],
        not_found_message: str,
    ):
        self.resource_type = resource_type
        self.response_schema = response_schema
        self.not_found_message = not_found_message

    # ------------------------------------------------------------------
    # pipeline steps
    # ------------------------------------------------------------------

    def authorize(self, caller: Optional[Caller], action: Action) -> None:
        gate.require(caller, self.resource_type, action)

    def check(self, operation: Operation, raw: Any) -> dict[str, Any]:
        result = validate(self.resource_type, operation, raw)
        if not result.ok:
            logger.info(
                "validation.failed",
                resource_type=self.resource_type.value,
                operation=operation.value,
                fields=list(result.errors),
            )
            raise ValidationFailed(result.errors)
        return result.payload

    def check_model(self, model: type[BaseModel], raw: Any) -> dict[str, Any]:
        """Validate against a schema outside the create/update registry."""
        result = validate_model(model, raw)
        if not result.ok:
            logger.info(
                "validation.failed",
                resource_type=self.resource_type.value,
                schema=model.__name__,
                fields=list(result.errors),
            )
            raise ValidationFailed(result.errors)
        return result.payload

    async def delegate(self, call: Callable[[], Awaitable[T]]) -> T:
        """Run a service call, downgrading unknown failures to Unexpected."""
        try:
            return await call()
        except AppError:
            raise
        except Exception as exc:
            logger.exception(
                "service.failed",
                resource_type=self.resource_type.value,
                error=str(exc),
            )
            raise Unexpected(str(exc)) from exc

    def found(self, record: Optional[T]) -> T:
        if record is None:
            raise NotFound(self.not_found_message)
        return record

    def serialize(self, record: Any) -> dict[str, Any]:
        return self.response_schema.model_validate(record).to_wire()

    # ------------------------------------------------------------------
    # endpoints
    # ------------------------------------------------------------------

    async def list(
        self,
        caller: Optional[Caller],
        service: CrudService,
        **filters: Any,
    ) -> JSONResponse:
        self.authorize(caller, Action.LIST)
        records = await self.delegate(lambda: service.list(**filters))
        return success_response([self.serialize(record) for record in records])

    async def get(
        self,
        caller: Optional[Caller],
        service: CrudService,
        record_id: str,
    ) -> JSONResponse:
        self.authorize(caller, Action.READ)
        record = self.found(await self.delegate(lambda: service.get(record_id)))
        return success_response(self.serialize(record))

    async def create(
        self,
        caller: Optional[Caller],
        service: CrudService,
        request: Request,
    ) -> JSONResponse:
        self.authorize(caller, Action.CREATE)
        payload = self.check(Operation.CREATE, await read_json(request))
        record = await self.delegate(lambda: service.create(payload, actor=caller))
        return success_response(
            self.serialize(record),
            status_code=status.HTTP_201_CREATED,
        )

    async def update(
        self,
        caller: Optional[Caller],
        service: CrudService,
        record_id: str,
        request: Request,
    ) -> JSONResponse:
        self.authorize(caller, Action.UPDATE)
        payload = self.check(Operation.UPDATE, await read_json(request))
        record = self.found(
            await self.delegate(lambda: service.update(record_id, payload, actor=caller))
        )
        return success_response(self.serialize(record))

    async def delete(
        self,
        caller: Optional[Caller],
        service: CrudService,
        record_id: str,
    ) -> JSONResponse:
        self.authorize(caller, Action.DELETE)
        deleted = await self.delegate(lambda: service.delete(record_id, actor=caller))
        if not deleted:
            raise NotFound(self.not_found_message)
        return success_response()

    async def update_with(
        self,
        caller: Optional[Caller],
        model: type[BaseModel],
        request: Request,
        call: Callable[[dict[str, Any]], Awaitable[Optional[T]]],
    ) -> JSONResponse:
        """
        Update through a dedicated body schema and service method.

        Used by the spool progress and inventory stock endpoints.
        """
        self.authorize(caller, Action.UPDATE)
        payload = self.check_model(model, await read_json(request))
        record = self.found(await self.delegate(lambda: call(payload)))
        return success_response(self.serialize(record))
