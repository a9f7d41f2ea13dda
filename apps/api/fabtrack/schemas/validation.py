"""
Schema validators.

``validate(resource_type, operation, raw)`` checks a decoded JSON body
against the create or update schema of a resource type and returns either
the normalized payload (snake_case keys, unknown fields dropped, nulls
removed, create defaults applied) or an ordered field-error map keyed by
wire name. Validation never touches the database.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ValidationError

from fabtrack.core.auth.interfaces import ResourceType
from fabtrack.core.errors import FieldErrors

from .fields import INVALID_VALUE_MESSAGE, find_constraint
from .inventory import InventoryItemCreate, InventoryItemUpdate
from .personnel import PersonnelCreate, PersonnelUpdate
from .project import ProjectCreate, ProjectUpdate
from .shipment import ShipmentCreate, ShipmentUpdate
from .spool import SpoolCreate, SpoolUpdate
from .work_order import WorkOrderCreate, WorkOrderUpdate

BODY_KEY = "body"
BODY_MESSAGE = "İstek gövdesi bir nesne olmalı."


class Operation(str, Enum):
    CREATE = "create"
    UPDATE = "update"


SCHEMAS: Mapping[tuple[ResourceType, Operation], type[BaseModel]] = MappingProxyType({
    (ResourceType.PROJECT, Operation.CREATE): ProjectCreate,
    (ResourceType.PROJECT, Operation.UPDATE): ProjectUpdate,
    (ResourceType.WORK_ORDER, Operation.CREATE): WorkOrderCreate,
    (ResourceType.WORK_ORDER, Operation.UPDATE): WorkOrderUpdate,
    (ResourceType.PERSONNEL, Operation.CREATE): PersonnelCreate,
    (ResourceType.PERSONNEL, Operation.UPDATE): PersonnelUpdate,
    (ResourceType.SHIPMENT, Operation.CREATE): ShipmentCreate,
    (ResourceType.SHIPMENT, Operation.UPDATE): ShipmentUpdate,
    (ResourceType.SPOOL, Operation.CREATE): SpoolCreate,
    (ResourceType.SPOOL, Operation.UPDATE): SpoolUpdate,
    (ResourceType.INVENTORY_ITEM, Operation.CREATE): InventoryItemCreate,
    (ResourceType.INVENTORY_ITEM, Operation.UPDATE): InventoryItemUpdate,
})


@dataclass(frozen=True)
class ValidationResult:
    """Ok(payload) or Invalid(errors); exactly one of the two is set."""

    payload: dict[str, Any] | None = None
    errors: FieldErrors | None = None

    @property
    def ok(self) -> bool:
        return self.errors is None

    @classmethod
    def valid(cls, payload: dict[str, Any]) -> "ValidationResult":
        return cls(payload=payload)

    @classmethod
    def invalid(cls, errors: FieldErrors) -> "ValidationResult":
        return cls(errors=errors)


def _field_by_wire_name(model: type[BaseModel], wire_name: Any):
    for field_name, info in model.model_fields.items():
        if wire_name in (field_name, info.alias):
            return info
    return None


def _messages_for(model: type[BaseModel], error: Mapping[str, Any]) -> list[str]:
    ctx = error.get("ctx") or {}
    if "messages" in ctx:
        return list(ctx["messages"])

    field = _field_by_wire_name(model, error["loc"][0])
    constraint = find_constraint(*field.metadata, field.annotation) if field else None
    if constraint is None:
        return [INVALID_VALUE_MESSAGE]
    if error["type"] == "missing":
        return [constraint.message]
    return [constraint.type_message]


def field_errors(model: type[BaseModel], exc: ValidationError) -> FieldErrors:
    """Collapse pydantic errors into ``{wireName: [message, ...]}``."""
    errors: FieldErrors = {}
    for error in exc.errors():
        if not error["loc"]:
            errors.setdefault(BODY_KEY, []).append(BODY_MESSAGE)
            continue
        messages = errors.setdefault(str(error["loc"][0]), [])
        for message in _messages_for(model, error):
            if message not in messages:
                messages.append(message)
    return errors


def validate_model(model: type[BaseModel], raw: Any) -> ValidationResult:
    """Validate ``raw`` against ``model`` and normalize the result."""
    try:
        instance = model.model_validate(raw)
    except ValidationError as exc:
        return ValidationResult.invalid(field_errors(model, exc))
    return ValidationResult.valid(instance.model_dump(exclude_none=True))


def validate(
    resource_type: ResourceType,
    operation: Operation,
    raw: Any,
) -> ValidationResult:
    """Validate a decoded request body for ``resource_type``."""
    try:
        model = SCHEMAS[(resource_type, operation)]
    except KeyError:
        raise LookupError(
            f"no {operation.value} schema for {resource_type.value}"
        ) from None
    return validate_model(model, raw)
