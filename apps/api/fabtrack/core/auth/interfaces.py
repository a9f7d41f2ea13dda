"""
Authorization vocabulary.

These types are shared by the policy table, the gate and the route layer:

- Role: the role claim a caller carries
- ResourceType / Action: the two halves of a policy key
- Caller: who is making the request (None when anonymous)
- PolicyDecision: allow/deny with a reason
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Role(str, Enum):
    """Caller roles, most privileged first."""

    ADMIN = "admin"
    MANAGER = "manager"
    USER = "user"


class ResourceType(str, Enum):
    """Tracked entity kinds. Each has its own id space."""

    PROJECT = "project"
    WORK_ORDER = "work_order"
    PERSONNEL = "personnel"
    SHIPMENT = "shipment"
    SPOOL = "spool"
    INVENTORY_ITEM = "inventory_item"
    AUDIT_LOG = "audit_log"


# Resource types with create/update schemas and CRUD endpoints.
MANAGED_RESOURCES: tuple[ResourceType, ...] = (
    ResourceType.PROJECT,
    ResourceType.WORK_ORDER,
    ResourceType.PERSONNEL,
    ResourceType.SHIPMENT,
    ResourceType.SPOOL,
    ResourceType.INVENTORY_ITEM,
)


class Action(str, Enum):
    """Operations a policy entry can govern."""

    LIST = "list"
    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class DenyReason(str, Enum):
    """Why the gate refused a request. Maps 1:1 onto 401 / 403."""

    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True)
class Caller:
    """
    The authenticated actor behind a request.

    Built fresh from the users table on every request; never cached.
    """

    id: str
    role: Role
    email: str | None = None
    name: str | None = None


@dataclass
class PolicyDecision:
    """
    Result of a policy evaluation.

    Attributes:
        allowed: Whether the action is permitted
        reason: DenyReason when denied, None when allowed
        metadata: Additional data for logging (policy key, role)
    """

    allowed: bool
    reason: DenyReason | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def allow(cls, **metadata: Any) -> "PolicyDecision":
        return cls(allowed=True, metadata=metadata)

    @classmethod
    def deny(cls, reason: DenyReason, **metadata: Any) -> "PolicyDecision":
        return cls(allowed=False, reason=reason, metadata=metadata)
