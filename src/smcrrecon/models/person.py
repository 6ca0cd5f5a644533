"""
smcrrecon Person Models

Immutable snapshots of the inputs the engine reads:

- Person: identity plus an optional external verification snapshot
- VerificationSnapshot: what the regulator's public register showed
- ControlFunctionEntry: one function row on that register
- RoleAssignment: a locally recorded function held by a person

Role assignments are not embedded in Person. They are maintained by the
role-assignment workflow and passed to the engine alongside people.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from .enums import ApprovalStatus, FunctionType


# =============================================================================
# External Register Snapshot
# =============================================================================

@dataclass(frozen=True)
class ControlFunctionEntry:
    """
    One control function row captured from the external register.

    Attributes:
        function: Free-text label, e.g. "SMF16 - Compliance Oversight function"
        firm_name: Firm the function is held at
        frn: Firm reference number
        status: Free-text register status, e.g. "Active", "Ceased"
        effective_from: Date the function started
        effective_to: Date the function ended, if any
    """
    function: str
    firm_name: str = ""
    frn: str = ""
    status: str = ""
    effective_from: Optional[date] = None
    effective_to: Optional[date] = None


@dataclass(frozen=True)
class VerificationSnapshot:
    """
    External register snapshot attached to a person.

    Captured and stored by the verification-capture subsystem; the engine
    only reads it.
    """
    status: str
    last_checked: Optional[datetime] = None
    has_enforcement_history: bool = False
    name: Optional[str] = None
    control_functions: tuple[ControlFunctionEntry, ...] = ()


# =============================================================================
# Person
# =============================================================================

@dataclass(frozen=True)
class Person:
    """An individual whose role records are reconciled."""
    id: str
    name: str
    verification: Optional[VerificationSnapshot] = None
    firm_id: Optional[str] = None
    irn: Optional[str] = None  # Individual reference number on the register

    @property
    def is_verified(self) -> bool:
        """Check if a register snapshot has been captured for this person."""
        return self.verification is not None


# =============================================================================
# Local Role Assignment
# =============================================================================

@dataclass(frozen=True)
class RoleAssignment:
    """
    A locally recorded function held by a person.

    function_type and approval_status are plain strings so that values
    outside the recognized vocabularies survive ingestion untouched.
    """
    id: str
    person_id: str
    function_id: str
    function_type: str = FunctionType.SMF.value
    approval_status: str = ApprovalStatus.DRAFT.value
    function_label: str = ""
    firm_id: Optional[str] = None
    entity: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    notes: Optional[str] = field(default=None, compare=False)

    @property
    def is_senior_management(self) -> bool:
        """Check if this is a Senior Management Function assignment."""
        return self.function_type == FunctionType.SMF

    @property
    def normalized_status(self) -> str:
        """Approval status trimmed and lower-cased."""
        return (self.approval_status or "").strip().lower()
