"""
Tests for the role policy table and the authorization gate.
"""

import pytest

from fabtrack.core.auth import (
    Action,
    AuthorizationGate,
    Caller,
    DenyReason,
    MANAGED_RESOURCES,
    POLICY_TABLE,
    ResourceType,
    Role,
    allowed_roles,
    authorize,
)
from fabtrack.core.auth.policy import Audience, PolicyEntry, build_policy_table
from fabtrack.core.errors import Forbidden, Unauthenticated

ALL_ROLES = frozenset(Role)

ADMIN = Caller(id="u-admin", role=Role.ADMIN)
MANAGER = Caller(id="u-manager", role=Role.MANAGER)
USER = Caller(id="u-user", role=Role.USER)


def test_every_managed_pair_has_an_entry():
    for resource in MANAGED_RESOURCES:
        for action in Action:
            assert (resource, action) in POLICY_TABLE


def test_table_is_read_only():
    with pytest.raises(TypeError):
        POLICY_TABLE[(ResourceType.PROJECT, Action.DELETE)] = PolicyEntry.anyone()


@pytest.mark.parametrize(
    "resource",
    [
        ResourceType.PROJECT,
        ResourceType.WORK_ORDER,
        ResourceType.PERSONNEL,
        ResourceType.SHIPMENT,
        ResourceType.SPOOL,
    ],
)
def test_collection_listing_is_public(resource):
    assert POLICY_TABLE[(resource, Action.LIST)].audience is Audience.ANYONE
    assert authorize(None, resource, Action.LIST).allowed


def test_inventory_listing_needs_a_session():
    decision = authorize(None, ResourceType.INVENTORY_ITEM, Action.LIST)
    assert not decision.allowed
    assert decision.reason is DenyReason.UNAUTHENTICATED

    assert authorize(USER, ResourceType.INVENTORY_ITEM, Action.LIST).allowed


@pytest.mark.parametrize("resource", MANAGED_RESOURCES)
def test_read_allows_any_authenticated_caller(resource):
    assert allowed_roles(resource, Action.READ) == ALL_ROLES

    decision = authorize(None, resource, Action.READ)
    assert decision.reason is DenyReason.UNAUTHENTICATED


@pytest.mark.parametrize(
    "resource",
    [r for r in MANAGED_RESOURCES if r is not ResourceType.PERSONNEL],
)
def test_create_and_update_are_admin_and_manager(resource):
    for action in (Action.CREATE, Action.UPDATE):
        assert allowed_roles(resource, action) == {Role.ADMIN, Role.MANAGER}
        assert authorize(MANAGER, resource, action).allowed
        decision = authorize(USER, resource, action)
        assert decision.reason is DenyReason.FORBIDDEN


def test_personnel_create_is_admin_only():
    assert allowed_roles(ResourceType.PERSONNEL, Action.CREATE) == {Role.ADMIN}
    assert authorize(ADMIN, ResourceType.PERSONNEL, Action.CREATE).allowed
    assert not authorize(MANAGER, ResourceType.PERSONNEL, Action.CREATE).allowed
    # update keeps the default
    assert authorize(MANAGER, ResourceType.PERSONNEL, Action.UPDATE).allowed


def test_delete_is_admin_only_except_spools():
    for resource in MANAGED_RESOURCES:
        expected = {Role.ADMIN, Role.MANAGER} if resource is ResourceType.SPOOL else {Role.ADMIN}
        assert allowed_roles(resource, Action.DELETE) == expected


def test_anonymous_fails_role_checks_as_forbidden():
    decision = authorize(None, ResourceType.WORK_ORDER, Action.DELETE)
    assert not decision.allowed
    assert decision.reason is DenyReason.FORBIDDEN


def test_audit_log_is_admin_only():
    assert authorize(ADMIN, ResourceType.AUDIT_LOG, Action.LIST).allowed
    assert authorize(MANAGER, ResourceType.AUDIT_LOG, Action.LIST).reason is DenyReason.FORBIDDEN
    assert authorize(None, ResourceType.AUDIT_LOG, Action.READ).reason is DenyReason.FORBIDDEN


def test_missing_entry_denies():
    assert (ResourceType.AUDIT_LOG, Action.DELETE) not in POLICY_TABLE
    decision = authorize(ADMIN, ResourceType.AUDIT_LOG, Action.DELETE)
    assert not decision.allowed
    assert decision.reason is DenyReason.FORBIDDEN
    assert decision.metadata["missing_entry"] is True


def test_build_policy_table_applies_overrides_last():
    table = build_policy_table(
        resources=[ResourceType.PROJECT],
        overrides={(ResourceType.PROJECT, Action.DELETE): PolicyEntry.only(Role.MANAGER)},
    )
    assert authorize(MANAGER, ResourceType.PROJECT, Action.DELETE, table).allowed
    assert not authorize(ADMIN, ResourceType.PROJECT, Action.DELETE, table).allowed
    assert (ResourceType.SPOOL, Action.READ) not in table


def test_decision_carries_policy_key_and_role():
    decision = authorize(USER, ResourceType.SHIPMENT, Action.DELETE)
    assert decision.metadata == {"policy": "shipment:delete", "role": "user"}


def test_gate_raises_matching_errors():
    gate = AuthorizationGate()

    with pytest.raises(Unauthenticated) as exc_info:
        gate.require(None, ResourceType.SPOOL, Action.READ)
    assert exc_info.value.status_code == 401
    assert exc_info.value.error == "Yetkisiz."

    with pytest.raises(Forbidden) as exc_info:
        gate.require(USER, ResourceType.SPOOL, Action.DELETE)
    assert exc_info.value.status_code == 403
    assert exc_info.value.error == "Yetkisiz."

    assert gate.require(MANAGER, ResourceType.SPOOL, Action.DELETE).allowed
