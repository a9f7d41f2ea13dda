"""
Authorization core.

- interfaces: Role, ResourceType, Action, Caller, PolicyDecision
- policy: the static role policy table
- gate: authorize() and the raising AuthorizationGate

Usage:
    from fabtrack.core.auth import Action, ResourceType, gate

    gate.require(caller, ResourceType.INVENTORY_ITEM, Action.CREATE)
"""

from .interfaces import (
    Action,
    Caller,
    DenyReason,
    MANAGED_RESOURCES,
    PolicyDecision,
    ResourceType,
    Role,
)
from .policy import POLICY_TABLE, Audience, PolicyEntry, allowed_roles, get_policy_entry
from .gate import AuthorizationGate, authorize, gate

__all__ = [
    "Action",
    "Caller",
    "DenyReason",
    "MANAGED_RESOURCES",
    "PolicyDecision",
    "ResourceType",
    "Role",
    "POLICY_TABLE",
    "Audience",
    "PolicyEntry",
    "allowed_roles",
    "get_policy_entry",
    "AuthorizationGate",
    "authorize",
    "gate",
]
