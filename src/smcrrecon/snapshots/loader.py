"""
smcrrecon Snapshot Loader

Converts captured person and role-assignment payloads into the immutable
domain models the engine reads. This is the only place malformed payloads
are rejected; the engine assumes well-typed snapshots.
"""
from __future__ import annotations

from typing import Any, Iterable

from pydantic import ValidationError

from ..exceptions import SnapshotValidationError
from ..models import (
    ControlFunctionEntry,
    Person,
    RoleAssignment,
    VerificationSnapshot,
)
from .schema import (
    PersonSchema,
    RoleAssignmentSchema,
    VerificationSchema,
)


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_verification(schema: VerificationSchema) -> VerificationSnapshot:
    return VerificationSnapshot(
        status=schema.status,
        last_checked=schema.last_checked,
        has_enforcement_history=schema.has_enforcement_history,
        name=schema.name,
        control_functions=tuple(
            ControlFunctionEntry(
                function=cf.function,
                firm_name=cf.firm_name,
                frn=cf.frn,
                status=cf.status,
                effective_from=cf.effective_from,
                effective_to=cf.effective_to,
            )
            for cf in schema.control_functions
        ),
    )


def _convert_person(schema: PersonSchema) -> Person:
    return Person(
        id=schema.id,
        name=schema.name,
        firm_id=schema.firm_id,
        irn=schema.irn,
        verification=(
            _convert_verification(schema.verification)
            if schema.verification is not None
            else None
        ),
    )


def _convert_role(schema: RoleAssignmentSchema) -> RoleAssignment:
    return RoleAssignment(
        id=schema.id,
        person_id=schema.person_id,
        function_id=schema.function_id,
        function_type=schema.function_type,
        approval_status=schema.approval_status,
        function_label=schema.function_label,
        firm_id=schema.firm_id,
        entity=schema.entity,
        start_date=schema.start_date,
        end_date=schema.end_date,
        notes=schema.notes,
    )


# =============================================================================
# Public Loaders
# =============================================================================

def load_person(data: dict[str, Any]) -> Person:
    """
    Build a Person from a captured payload.

    Raises:
        SnapshotValidationError: If the payload is malformed
    """
    try:
        schema = PersonSchema.model_validate(data)
    except ValidationError as e:
        raise SnapshotValidationError(
            message=f"Person payload validation failed: {e.error_count()} errors",
            details={"errors": e.errors(include_url=False)},
            person_id=data.get("id") if isinstance(data, dict) else None,
        ) from e
    return _convert_person(schema)


def load_people(items: Iterable[dict[str, Any]]) -> list[Person]:
    """Build People from a list of captured payloads."""
    return [load_person(item) for item in items]


def load_role_assignment(data: dict[str, Any]) -> RoleAssignment:
    """
    Build a RoleAssignment from a workflow payload.

    Raises:
        SnapshotValidationError: If the payload is malformed
    """
    try:
        schema = RoleAssignmentSchema.model_validate(data)
    except ValidationError as e:
        raise SnapshotValidationError(
            message=f"Role assignment payload validation failed: {e.error_count()} errors",
            details={
                "errors": e.errors(include_url=False),
                "role_id": data.get("id") if isinstance(data, dict) else None,
            },
        ) from e
    return _convert_role(schema)


def load_role_assignments(items: Iterable[dict[str, Any]]) -> list[RoleAssignment]:
    """Build RoleAssignments from a list of workflow payloads."""
    return [load_role_assignment(item) for item in items]
