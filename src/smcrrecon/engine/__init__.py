"""
smcrrecon Engine

Stateless reconciliation services:

- CanonicalCodeResolver: register labels and local function ids to codes
- StatusClassifier: free-text register status to ACTIVE / CEASED / OTHER
- PersonReconciler: one person's local roles vs. their register snapshot
- BatchAggregator: a firm's people, filtered to those with mismatches
- ReconciliationCache: optional caller-side memoization

Usage:
    from smcrrecon.catalog import load_catalog
    from smcrrecon.engine import PersonReconciler, BatchAggregator

    reconciler = PersonReconciler.for_catalog(load_catalog())
    batch = BatchAggregator(reconciler).reconcile_all(people, roles)
"""
from __future__ import annotations

from .batch import (
    BatchAggregator,
    group_roles_by_person,
    reconcile_all,
)
from .cache import ReconciliationCache
from .code_resolver import (
    CanonicalCodeResolver,
    code_sort_key,
    extract_canonical_code,
)
from .reconciler import (
    ExternalFunction,
    PersonReconciler,
    reconcile,
)
from .status_classifier import (
    ACTIVE_STATUSES,
    CEASED_STATUSES,
    StatusClassifier,
    classify_status,
    normalize_status,
)

__all__ = [
    # Code resolution
    "CanonicalCodeResolver",
    "extract_canonical_code",
    "code_sort_key",
    # Status classification
    "StatusClassifier",
    "classify_status",
    "normalize_status",
    "ACTIVE_STATUSES",
    "CEASED_STATUSES",
    # Reconciliation
    "PersonReconciler",
    "ExternalFunction",
    "reconcile",
    # Batch
    "BatchAggregator",
    "group_roles_by_person",
    "reconcile_all",
    # Caching
    "ReconciliationCache",
]
