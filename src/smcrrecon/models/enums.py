"""
smcrrecon Enumerations

All enums inherit from (str, Enum) for JSON serialization compatibility,
so a raw string from a captured payload compares equal to its member.
"""
from __future__ import annotations

from enum import Enum


# =============================================================================
# Local Role Records
# =============================================================================

class FunctionType(str, Enum):
    """Regulatory function category of a local role assignment."""
    SMF = "SMF"    # Senior Management Function
    CF = "CF"      # Certification Function (never reconciled)


class ApprovalStatus(str, Enum):
    """
    Recognized approval states of a local role assignment.

    The vocabulary is open-ended: assignments may carry other values,
    which the reconciler treats as neither approved nor pending.
    """
    DRAFT = "draft"
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


# =============================================================================
# External Register
# =============================================================================

class RegisterStatus(str, Enum):
    """Bucket a free-text register status is classified into."""
    ACTIVE = "active"
    CEASED = "ceased"
    OTHER = "other"


# =============================================================================
# Mismatches
# =============================================================================

class MismatchType(str, Enum):
    """Kind of discrepancy between local records and the register."""
    MISSING_FROM_EXTERNAL = "missing_from_external"
    MISSING_LOCALLY = "missing_locally"
    STATUS_CONFLICT = "status_conflict"


class MismatchSeverity(str, Enum):
    """How strongly the two sources disagree."""
    WARNING = "warning"    # Needs attention
    ERROR = "error"        # Direct contradiction between sources
