"""
smcrrecon Snapshot Ingestion

Validation and conversion of captured person, register and role-assignment
payloads into smcrrecon domain models.

Usage:
    from smcrrecon.snapshots import load_people, load_role_assignments

    people = load_people(payload["people"])
    roles = load_role_assignments(payload["roles"])
"""
from __future__ import annotations

from .loader import (
    load_people,
    load_person,
    load_role_assignment,
    load_role_assignments,
)
from .schema import (
    ControlFunctionSchema,
    PersonSchema,
    RoleAssignmentSchema,
    VerificationSchema,
)

__all__ = [
    "load_person",
    "load_people",
    "load_role_assignment",
    "load_role_assignments",
    "ControlFunctionSchema",
    "PersonSchema",
    "RoleAssignmentSchema",
    "VerificationSchema",
]
