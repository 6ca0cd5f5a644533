"""
smcrrecon Exception Hierarchy

Exceptions raised at the loading boundary (function catalogs and captured
snapshots). The reconciliation engine itself never raises for business data:
unresolvable inputs are excluded, not escalated.

Exception codes follow the pattern: SMCR_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class ReconciliationError(Exception):
    """
    Base exception for all smcrrecon errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (SMCR_*)
        details: Additional context about the error
        person_id: Associated person ID if applicable
    """
    message: str
    code: str = "SMCR_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    person_id: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.person_id:
            parts.append(f"(person: {self.person_id})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.person_id:
            result["person_id"] = self.person_id
        return result


# =============================================================================
# Catalog Errors
# =============================================================================

@dataclass
class CatalogLoadError(ReconciliationError):
    """Failed to read a function catalog file."""
    code: str = "SMCR_CATALOG_LOAD_ERROR"


@dataclass
class CatalogValidationError(ReconciliationError):
    """Function catalog failed schema or integrity validation."""
    code: str = "SMCR_CATALOG_VALIDATION_ERROR"


@dataclass
class CatalogVersionMismatch(ReconciliationError):
    """Catalog schema version is not supported by this release."""
    code: str = "SMCR_CATALOG_VERSION_MISMATCH"


# =============================================================================
# Snapshot Errors
# =============================================================================

@dataclass
class SnapshotValidationError(ReconciliationError):
    """Captured person, role or verification payload is malformed."""
    code: str = "SMCR_SNAPSHOT_VALIDATION_ERROR"
