"""
smcrrecon Snapshot Schemas

Pydantic models for the payloads produced by the verification-capture and
role-assignment subsystems. Field aliases follow their camelCase wire
format; snake_case names are accepted too.
"""
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

# Day-first formats seen in register exports, tried after ISO 8601.
REGISTER_DATE_FORMATS = ("%d/%m/%Y", "%d-%m-%Y", "%d.%m.%Y", "%d %B %Y", "%d %b %Y")


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str) and not v.strip():
        return None
    return v


def _date_part(v: Any) -> Any:
    """Blank strings to None; ISO timestamps cut down to their date."""
    v = _blank_to_none(v)
    if isinstance(v, str) and "T" in v:
        return v.split("T", 1)[0]
    return v


def _register_date(v: Any) -> Optional[date]:
    """
    Parse a register effective date, giving None when unrecognised.

    Effective dates are display-only, so an odd value must not reject the
    whole snapshot.
    """
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, date):
        return v
    v = _date_part(v)
    if not isinstance(v, str):
        return None

    text = v.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    for fmt in REGISTER_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    logger.debug("Unrecognised register date %r, treated as absent", v)
    return None


def _none_to_blank(v: Any) -> Any:
    return "" if v is None else v


class _SnapshotModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ControlFunctionSchema(_SnapshotModel):
    """One control function row from the register."""
    function: str = Field(..., description="Register label, e.g. 'SMF1 - Chief Executive function'")
    firm_name: Optional[str] = Field("", alias="firmName")
    frn: Optional[str] = Field("", description="Firm reference number")
    status: Optional[str] = Field("", description="Free-text register status")
    effective_from: Optional[date] = Field(None, alias="effectiveFrom")
    effective_to: Optional[date] = Field(None, alias="effectiveTo")

    @field_validator("effective_from", "effective_to", mode="before")
    @classmethod
    def lenient_dates(cls, v: Any) -> Optional[date]:
        return _register_date(v)

    @field_validator("firm_name", "status", mode="before")
    @classmethod
    def null_text(cls, v: Any) -> Any:
        return _none_to_blank(v)

    @field_validator("frn", mode="before")
    @classmethod
    def frn_as_string(cls, v: Any) -> Any:
        # FRNs are numeric on the register and often arrive as integers.
        return str(v) if isinstance(v, int) else _none_to_blank(v)


class VerificationSchema(_SnapshotModel):
    """Register snapshot for one person."""
    status: str = Field(..., description="Overall register status")
    last_checked: Optional[datetime] = Field(None, alias="lastChecked")
    has_enforcement_history: bool = Field(False, alias="hasEnforcementHistory")
    name: Optional[str] = None
    control_functions: list[ControlFunctionSchema] = Field(
        default_factory=list, alias="controlFunctions"
    )

    @field_validator("last_checked", mode="before")
    @classmethod
    def blank_timestamp(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("control_functions", mode="before")
    @classmethod
    def null_functions(cls, v: Any) -> Any:
        return [] if v is None else v


class PersonSchema(_SnapshotModel):
    """Person identity with optional register snapshot."""
    id: str
    name: str
    firm_id: Optional[str] = Field(None, alias="firmId")
    irn: Optional[str] = None
    verification: Optional[VerificationSchema] = Field(None, alias="fcaVerification")


class RoleAssignmentSchema(_SnapshotModel):
    """A locally recorded role assignment."""
    id: str
    person_id: str = Field(..., alias="personId")
    function_id: str = Field(..., alias="functionId")
    function_type: str = Field(..., alias="functionType")
    approval_status: str = Field(..., alias="approvalStatus")
    function_label: str = Field("", alias="functionLabel")
    firm_id: Optional[str] = Field(None, alias="firmId")
    entity: Optional[str] = None
    start_date: Optional[date] = Field(None, alias="startDate")
    end_date: Optional[date] = Field(None, alias="endDate")
    notes: Optional[str] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def blank_dates(cls, v: Any) -> Any:
        return _date_part(v)
