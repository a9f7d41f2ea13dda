"""
Authorization gate.

Decides, for a caller (or no caller), a resource type and an action, whether
the request may proceed. Consults only the static policy table and the
caller handed in, so a role change takes effect on the caller's next request.

Usage:
    decision = authorize(caller, ResourceType.SPOOL, Action.DELETE)
    if not decision.allowed:
        ...

    # Or raise straight into the error taxonomy:
    gate.require(caller, ResourceType.SPOOL, Action.DELETE)
"""

from __future__ import annotations

from typing import Mapping

import structlog

from fabtrack.core.errors import Forbidden, Unauthenticated

from .interfaces import Action, Caller, DenyReason, PolicyDecision, ResourceType
from .policy import POLICY_TABLE, Audience, PolicyEntry, PolicyKey

logger = structlog.get_logger(__name__)


def authorize(
    caller: Caller | None,
    resource_type: ResourceType,
    action: Action,
    table: Mapping[PolicyKey, PolicyEntry] = POLICY_TABLE,
) -> PolicyDecision:
    """
    Evaluate the policy entry for (resource_type, action).

    Rules:
    1. No entry: deny (forbidden)
    2. Entry admits anyone: allow
    3. No caller: unauthenticated when the entry only asks for a session,
       forbidden when it names roles (an anonymous caller holds no role)
    4. Caller role outside the entry's roles: forbidden
    """
    key = f"{resource_type.value}:{action.value}"
    entry = table.get((resource_type, action))

    if entry is None:
        return PolicyDecision.deny(DenyReason.FORBIDDEN, policy=key, missing_entry=True)

    if entry.audience is Audience.ANYONE:
        return PolicyDecision.allow(policy=key)

    if caller is None:
        if entry.audience is Audience.AUTHENTICATED:
            return PolicyDecision.deny(DenyReason.UNAUTHENTICATED, policy=key)
        return PolicyDecision.deny(DenyReason.FORBIDDEN, policy=key)

    if not entry.admits(caller.role):
        return PolicyDecision.deny(
            DenyReason.FORBIDDEN, policy=key, role=caller.role.value
        )

    return PolicyDecision.allow(policy=key, role=caller.role.value)


class AuthorizationGate:
    """Raises the matching AppError when the policy denies a request."""

    def __init__(self, table: Mapping[PolicyKey, PolicyEntry] = POLICY_TABLE):
        self.table = table

    def check(
        self,
        caller: Caller | None,
        resource_type: ResourceType,
        action: Action,
    ) -> PolicyDecision:
        return authorize(caller, resource_type, action, self.table)

    def require(
        self,
        caller: Caller | None,
        resource_type: ResourceType,
        action: Action,
    ) -> PolicyDecision:
        """
        Allow or raise.

        Raises:
            Unauthenticated: no caller where a session is required (401)
            Forbidden: caller's role is not allowed (403)
        """
        decision = self.check(caller, resource_type, action)
        if decision.allowed:
            return decision

        logger.info(
            "authorization.denied",
            reason=decision.reason.value if decision.reason else None,
            caller_id=caller.id if caller else None,
            **decision.metadata,
        )
        if decision.reason is DenyReason.UNAUTHENTICATED:
            raise Unauthenticated()
        raise Forbidden()


gate = AuthorizationGate()
