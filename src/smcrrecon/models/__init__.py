"""
smcrrecon Models

All domain models for SM&CR role reconciliation:

    from smcrrecon.models import (
        # Enums
        FunctionType, ApprovalStatus, RegisterStatus,
        MismatchType, MismatchSeverity,
        # Inputs
        Person, VerificationSnapshot, ControlFunctionEntry, RoleAssignment,
        # Catalog
        FunctionCatalog, FunctionDefinition,
        # Outputs
        MismatchRecord, MismatchResult, BatchResult,
    )
"""
from __future__ import annotations

from .catalog import (
    DEFAULT_CODE_PREFIX,
    DEFAULT_REGISTER_NAME,
    FunctionCatalog,
    FunctionDefinition,
)
from .enums import (
    ApprovalStatus,
    FunctionType,
    MismatchSeverity,
    MismatchType,
    RegisterStatus,
)
from .mismatch import (
    BatchResult,
    MismatchRecord,
    MismatchResult,
)
from .person import (
    ControlFunctionEntry,
    Person,
    RoleAssignment,
    VerificationSnapshot,
)

__all__ = [
    # Enums
    "ApprovalStatus",
    "FunctionType",
    "MismatchSeverity",
    "MismatchType",
    "RegisterStatus",
    # Inputs
    "ControlFunctionEntry",
    "Person",
    "RoleAssignment",
    "VerificationSnapshot",
    # Catalog
    "DEFAULT_CODE_PREFIX",
    "DEFAULT_REGISTER_NAME",
    "FunctionCatalog",
    "FunctionDefinition",
    # Outputs
    "BatchResult",
    "MismatchRecord",
    "MismatchResult",
]
