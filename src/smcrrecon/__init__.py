"""
smcrrecon - SM&CR Cross-Source Role Reconciliation

Detects discrepancies between a firm's locally recorded Senior Management
Function assignments and an independently captured snapshot of the
regulator's public register for the same individual.

Core Principle: "Compare, classify, never mutate." The engine reads
immutable snapshots and returns mismatch records; rendering, export and
audit logging belong to the caller.

Quick Start:
    from smcrrecon import (
        load_catalog, load_people, load_role_assignments,
        PersonReconciler, BatchAggregator,
    )

    catalog = load_catalog()                 # bundled FCA SM&CR catalog
    reconciler = PersonReconciler.for_catalog(catalog)

    people = load_people(payload["people"])
    roles = load_role_assignments(payload["roles"])

    batch = BatchAggregator(reconciler).reconcile_all(people, roles)
    for result in batch.results:
        for mismatch in result.mismatches:
            print(result.person_name, mismatch.severity.value, mismatch.description)

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

# =============================================================================
# Core Models (Re-exported for convenience)
# =============================================================================
from .models import (
    # Enums
    ApprovalStatus,
    FunctionType,
    MismatchSeverity,
    MismatchType,
    RegisterStatus,
    # Inputs
    ControlFunctionEntry,
    Person,
    RoleAssignment,
    VerificationSnapshot,
    # Catalog
    FunctionCatalog,
    FunctionDefinition,
    # Outputs
    BatchResult,
    MismatchRecord,
    MismatchResult,
)

# =============================================================================
# Engine
# =============================================================================
from .engine import (
    BatchAggregator,
    CanonicalCodeResolver,
    PersonReconciler,
    ReconciliationCache,
    StatusClassifier,
    classify_status,
    extract_canonical_code,
    reconcile,
    reconcile_all,
)

# =============================================================================
# Loading
# =============================================================================
from .catalog import CatalogLoader, load_catalog, load_catalog_from_string
from .snapshots import load_people, load_person, load_role_assignments

# =============================================================================
# Utilities
# =============================================================================
from .canon import canonical_json, content_hash, content_hash_short

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    CatalogLoadError,
    CatalogValidationError,
    CatalogVersionMismatch,
    ReconciliationError,
    SnapshotValidationError,
)

# =============================================================================
# Public API
# =============================================================================
__all__ = [
    # Version
    "__version__",
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
    "FunctionCatalog",
    "FunctionDefinition",
    # Outputs
    "BatchResult",
    "MismatchRecord",
    "MismatchResult",
    # Engine
    "BatchAggregator",
    "CanonicalCodeResolver",
    "PersonReconciler",
    "ReconciliationCache",
    "StatusClassifier",
    "classify_status",
    "extract_canonical_code",
    "reconcile",
    "reconcile_all",
    # Loading
    "CatalogLoader",
    "load_catalog",
    "load_catalog_from_string",
    "load_people",
    "load_person",
    "load_role_assignments",
    # Utilities
    "canonical_json",
    "content_hash",
    "content_hash_short",
    # Exceptions
    "ReconciliationError",
    "CatalogLoadError",
    "CatalogValidationError",
    "CatalogVersionMismatch",
    "SnapshotValidationError",
]
