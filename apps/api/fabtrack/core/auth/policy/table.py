"""
Role policy table.

Static mapping from (resource type, action) to who may perform it. Built once
at import from per-action defaults plus the explicit per-resource overrides
below, then frozen. A key missing from the table is denied.

Defaults:
    read            any authenticated caller
    create, update  admin, manager
    delete          admin
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

from fabtrack.core.auth.interfaces import (
    Action,
    MANAGED_RESOURCES,
    ResourceType,
    Role,
)


class Audience(str, Enum):
    """Who a policy entry admits."""

    ANYONE = "anyone"
    AUTHENTICATED = "authenticated"
    ROLES = "roles"


@dataclass(frozen=True)
class PolicyEntry:
    """Allowed audience for one (resource type, action) pair."""

    audience: Audience
    roles: frozenset[Role] = frozenset()

    @classmethod
    def anyone(cls) -> "PolicyEntry":
        return cls(Audience.ANYONE)

    @classmethod
    def authenticated(cls) -> "PolicyEntry":
        return cls(Audience.AUTHENTICATED)

    @classmethod
    def only(cls, *roles: Role) -> "PolicyEntry":
        return cls(Audience.ROLES, frozenset(roles))

    @property
    def requires_authentication(self) -> bool:
        return self.audience is not Audience.ANYONE

    def admits(self, role: Role) -> bool:
        if self.audience is Audience.ROLES:
            return role in self.roles
        return True


PolicyKey = tuple[ResourceType, Action]

DEFAULT_ENTRIES: Mapping[Action, PolicyEntry] = {
    Action.LIST: PolicyEntry.authenticated(),
    Action.READ: PolicyEntry.authenticated(),
    Action.CREATE: PolicyEntry.only(Role.ADMIN, Role.MANAGER),
    Action.UPDATE: PolicyEntry.only(Role.ADMIN, Role.MANAGER),
    Action.DELETE: PolicyEntry.only(Role.ADMIN),
}

OVERRIDES: Mapping[PolicyKey, PolicyEntry] = {
    # Collection listings that the floor screens show without a login
    (ResourceType.PROJECT, Action.LIST): PolicyEntry.anyone(),
    (ResourceType.WORK_ORDER, Action.LIST): PolicyEntry.anyone(),
    (ResourceType.PERSONNEL, Action.LIST): PolicyEntry.anyone(),
    (ResourceType.SHIPMENT, Action.LIST): PolicyEntry.anyone(),
    (ResourceType.SPOOL, Action.LIST): PolicyEntry.anyone(),
    # Personnel records create login accounts
    (ResourceType.PERSONNEL, Action.CREATE): PolicyEntry.only(Role.ADMIN),
    (ResourceType.SPOOL, Action.DELETE): PolicyEntry.only(Role.ADMIN, Role.MANAGER),
    # Audit trail is read-only and admin-only
    (ResourceType.AUDIT_LOG, Action.LIST): PolicyEntry.only(Role.ADMIN),
    (ResourceType.AUDIT_LOG, Action.READ): PolicyEntry.only(Role.ADMIN),
}


def build_policy_table(
    resources: Iterable[ResourceType] = MANAGED_RESOURCES,
    defaults: Mapping[Action, PolicyEntry] = DEFAULT_ENTRIES,
    overrides: Mapping[PolicyKey, PolicyEntry] = OVERRIDES,
) -> Mapping[PolicyKey, PolicyEntry]:
    """Expand defaults over every managed resource, then apply overrides."""
    table: dict[PolicyKey, PolicyEntry] = {
        (resource, action): entry
        for resource in resources
        for action, entry in defaults.items()
    }
    table.update(overrides)
    return MappingProxyType(table)


POLICY_TABLE: Mapping[PolicyKey, PolicyEntry] = build_policy_table()


def get_policy_entry(
    resource_type: ResourceType,
    action: Action,
    table: Mapping[PolicyKey, PolicyEntry] = POLICY_TABLE,
) -> PolicyEntry | None:
    """Look up the entry for a key; None means deny."""
    return table.get((resource_type, action))


def allowed_roles(
    resource_type: ResourceType,
    action: Action,
    table: Mapping[PolicyKey, PolicyEntry] = POLICY_TABLE,
) -> frozenset[Role]:
    """Roles that pass the entry for a key (empty when there is no entry)."""
    entry = get_policy_entry(resource_type, action, table)
    if entry is None:
        return frozenset()
    return frozenset(role for role in Role if entry.admits(role))
