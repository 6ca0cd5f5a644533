"""
smcrrecon Batch Aggregator

Runs the person reconciler over a firm's people and keeps only those with
at least one mismatch, together with summary counts for dashboards.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, Optional

from ..models import BatchResult, FunctionCatalog, MismatchResult, Person, RoleAssignment
from .reconciler import PersonReconciler

logger = logging.getLogger(__name__)


def group_roles_by_person(
    role_assignments: Iterable[RoleAssignment],
) -> dict[str, list[RoleAssignment]]:
    """Partition assignments by owning person, preserving input order."""
    grouped: dict[str, list[RoleAssignment]] = defaultdict(list)
    for role in role_assignments:
        grouped[role.person_id].append(role)
    return dict(grouped)


@dataclass
class BatchAggregator:
    """
    Reconciles every verified person in a collection.

    Usage:
        aggregator = BatchAggregator(PersonReconciler.for_catalog(catalog))
        batch = aggregator.reconcile_all(people, roles)

        print(batch.total_mismatches, "mismatches across",
              batch.people_with_mismatches, "people")
    """
    reconciler: PersonReconciler

    def reconcile_all(
        self,
        people: Iterable[Person],
        all_role_assignments: Iterable[RoleAssignment],
    ) -> BatchResult:
        """
        Reconcile a collection of people against their register snapshots.

        People without a snapshot are skipped. Results follow the input
        order of people; only the first verified occurrence of a person id
        is reconciled.
        """
        roles_by_person = group_roles_by_person(all_role_assignments)

        results: list[MismatchResult] = []
        by_person_id: dict[str, MismatchResult] = {}
        total_mismatches = 0
        scanned: set[str] = set()

        for person in people:
            if person.verification is None:
                continue
            if person.id in scanned:
                logger.warning("Person %s appears more than once, repeat skipped", person.id)
                continue
            scanned.add(person.id)
            result = self.reconciler.reconcile(person, roles_by_person.get(person.id, []))
            if not result.has_mismatches:
                continue
            results.append(result)
            by_person_id[person.id] = result
            total_mismatches += len(result.mismatches)

        logger.info(
            "Reconciled %d verified people: %d with mismatches, %d mismatches total",
            len(scanned), len(results), total_mismatches,
            extra={"mismatch_count": total_mismatches},
        )

        return BatchResult(
            total_mismatches=total_mismatches,
            people_with_mismatches=len(results),
            by_person_id=by_person_id,
            results=tuple(results),
        )


def reconcile_all(
    people: Iterable[Person],
    all_role_assignments: Iterable[RoleAssignment],
    catalog: FunctionCatalog,
    reconciler: Optional[PersonReconciler] = None,
) -> BatchResult:
    """Reconcile a collection of people against the given catalog."""
    reconciler = reconciler or PersonReconciler.for_catalog(catalog)
    return BatchAggregator(reconciler).reconcile_all(people, all_role_assignments)
