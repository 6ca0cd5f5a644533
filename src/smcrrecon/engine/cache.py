"""
smcrrecon Reconciliation Cache

Optional caller-side memoization of PersonReconciler.reconcile.

Reconciliation is a pure function of (catalog, person snapshot, role
assignments), so results can be cached under the SHA-256 content hash of
those inputs. The engine itself holds no state; callers that re-render the
same people repeatedly wrap their reconciler in this cache.
"""
from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Iterable

from ..canon import content_hash
from ..models import MismatchResult, Person, RoleAssignment
from .reconciler import PersonReconciler

logger = logging.getLogger(__name__)


@dataclass
class ReconciliationCache:
    """
    Bounded LRU cache in front of a PersonReconciler.

    Usage:
        cache = ReconciliationCache(PersonReconciler.for_catalog(catalog))
        result = cache.reconcile(person, roles)   # computed
        result = cache.reconcile(person, roles)   # served from cache

    A ReconciliationCache can stand in for the reconciler of a
    BatchAggregator.
    """
    reconciler: PersonReconciler
    max_size: int = 256
    hits: int = field(default=0, init=False)
    misses: int = field(default=0, init=False)
    _entries: OrderedDict[str, MismatchResult] = field(
        default_factory=OrderedDict, init=False, repr=False
    )

    def __post_init__(self) -> None:
        if self.max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {self.max_size}")
        self._catalog_hash = self.reconciler.resolver.catalog.content_hash

    def key_for(self, person: Person, role_assignments: Iterable[RoleAssignment]) -> str:
        """
        Content hash identifying one reconciliation input.

        Role order is part of the key: when two assignments share a code
        the later one wins, so reordering can change the result.
        """
        return content_hash({
            "catalog": self._catalog_hash,
            "person": person,
            "roles": list(role_assignments),
        })

    def reconcile(
        self,
        person: Person,
        role_assignments: Iterable[RoleAssignment],
    ) -> MismatchResult:
        """Return a cached result, computing and storing it on a miss."""
        roles = list(role_assignments)
        key = self.key_for(person, roles)

        cached = self._entries.get(key)
        if cached is not None:
            self._entries.move_to_end(key)
            self.hits += 1
            return cached

        self.misses += 1
        result = self.reconciler.reconcile(person, roles)
        self._entries[key] = result
        if len(self._entries) > self.max_size:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Evicted reconciliation cache entry %s", evicted[:12])
        return result

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)
