"""
Role policy table and its entry types.
"""

from .table import (
    Audience,
    PolicyEntry,
    PolicyKey,
    POLICY_TABLE,
    build_policy_table,
    get_policy_entry,
    allowed_roles,
)

__all__ = [
    "Audience",
    "PolicyEntry",
    "PolicyKey",
    "POLICY_TABLE",
    "build_policy_table",
    "get_policy_entry",
    "allowed_roles",
]
