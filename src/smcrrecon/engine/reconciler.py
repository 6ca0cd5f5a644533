"""
smcrrecon Person Reconciler

Compares one person's local Senior Management Function assignments with
the functions their external register snapshot shows.

Three independent passes over two code-keyed maps:
1. MISSING_FROM_EXTERNAL - held locally, absent from the register (warning)
2. MISSING_LOCALLY - active on the register, not held locally (warning)
3. STATUS_CONFLICT - present on both sides with contradicting status
   (error when approved locally but ceased on the register, warning when
   active on the register but neither approved nor pending locally)

Output is grouped by pass in that order and sorted by canonical code
within each pass, so identical inputs always give identical output.

The reconciler never raises for business data. A person without a
snapshot, or with an empty control function list, gets an empty result.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..models import (
    ApprovalStatus,
    FunctionCatalog,
    MismatchRecord,
    MismatchResult,
    MismatchSeverity,
    MismatchType,
    Person,
    RegisterStatus,
    RoleAssignment,
)
from .code_resolver import CanonicalCodeResolver, code_sort_key
from .status_classifier import StatusClassifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExternalFunction:
    """A register entry reduced to what the comparison passes need."""
    code: str
    function: str
    raw_status: str
    status: RegisterStatus


@dataclass
class PersonReconciler:
    """
    Reconciles a single person against their register snapshot.

    Usage:
        reconciler = PersonReconciler.for_catalog(load_catalog())
        result = reconciler.reconcile(person, roles)

        for mismatch in result.status_conflicts:
            print(mismatch.severity, mismatch.description)
    """
    resolver: CanonicalCodeResolver
    classifier: StatusClassifier = field(default_factory=StatusClassifier)

    @classmethod
    def for_catalog(
        cls,
        catalog: FunctionCatalog,
        classifier: Optional[StatusClassifier] = None,
    ) -> PersonReconciler:
        return cls(
            resolver=CanonicalCodeResolver(catalog),
            classifier=classifier or StatusClassifier(),
        )

    @property
    def register_name(self) -> str:
        return self.resolver.catalog.register_name

    def reconcile(
        self,
        person: Person,
        role_assignments: Iterable[RoleAssignment],
    ) -> MismatchResult:
        """
        Reconcile one person's local roles against their register snapshot.

        Args:
            person: Person with an optional verification snapshot
            role_assignments: That person's local role assignments

        Returns:
            MismatchResult, empty when there is nothing to compare against
        """
        verification = person.verification
        if verification is None or not verification.control_functions:
            return MismatchResult.empty(person.id, person.name)

        external = self.build_external_map(person)
        local = self.build_local_map(person, role_assignments)

        mismatches: list[MismatchRecord] = []
        mismatches.extend(self._missing_from_external(local, external))
        mismatches.extend(self._missing_locally(local, external))
        mismatches.extend(self._status_conflicts(local, external))

        if mismatches:
            logger.debug(
                "Person %s: %d mismatches (%d local, %d external functions)",
                person.id, len(mismatches), len(local), len(external),
            )

        return MismatchResult(
            person_id=person.id,
            person_name=person.name,
            mismatches=tuple(mismatches),
        )

    # =========================================================================
    # Map Building
    # =========================================================================

    def build_external_map(self, person: Person) -> dict[str, ExternalFunction]:
        """
        Register entries keyed by canonical code.

        Entries whose label has no code are dropped. When several entries
        share a code, the last one in snapshot order wins.
        """
        external: dict[str, ExternalFunction] = {}
        if person.verification is None:
            return external

        for entry in person.verification.control_functions or ():
            code = self.resolver.extract_canonical_code(entry.function)
            if code is None:
                logger.debug(
                    "Person %s: register label %r has no %s code, skipped",
                    person.id, entry.function, self.resolver.code_prefix,
                )
                continue
            external[code] = ExternalFunction(
                code=code,
                function=entry.function,
                raw_status=entry.status or "",
                status=self.classifier.classify(entry.status),
            )
        return external

    def build_local_map(
        self,
        person: Person,
        role_assignments: Iterable[RoleAssignment],
    ) -> dict[str, RoleAssignment]:
        """
        Non-rejected SMF assignments keyed by canonical code.

        Certification functions, rejected assignments and function ids
        missing from the catalog are dropped. When several assignments
        share a code, the last one wins.
        """
        local: dict[str, RoleAssignment] = {}
        for role in role_assignments:
            if not role.is_senior_management:
                continue
            if role.normalized_status == ApprovalStatus.REJECTED:
                continue
            code = self.resolver.resolve_local_code(role.function_id)
            if code is None:
                logger.debug(
                    "Person %s: function id %r not in catalog %s, skipped",
                    person.id, role.function_id, self.resolver.catalog.id,
                )
                continue
            local[code] = role
        return local

    # =========================================================================
    # Comparison Passes
    # =========================================================================

    def _missing_from_external(
        self,
        local: dict[str, RoleAssignment],
        external: dict[str, ExternalFunction],
    ) -> list[MismatchRecord]:
        # Presence only: a ceased register entry still counts as present.
        return [
            MismatchRecord(
                type=MismatchType.MISSING_FROM_EXTERNAL,
                severity=MismatchSeverity.WARNING,
                code=code,
                local_role=local[code],
                description=(
                    f"{code} is assigned locally but not found on the {self.register_name}"
                ),
            )
            for code in sorted(local, key=code_sort_key)
            if code not in external
        ]

    def _missing_locally(
        self,
        local: dict[str, RoleAssignment],
        external: dict[str, ExternalFunction],
    ) -> list[MismatchRecord]:
        return [
            MismatchRecord(
                type=MismatchType.MISSING_LOCALLY,
                severity=MismatchSeverity.WARNING,
                code=code,
                external_function=external[code].function,
                description=(
                    f"{code} is active on the {self.register_name} "
                    f"but has no local assignment"
                ),
            )
            for code in sorted(external, key=code_sort_key)
            if external[code].status == RegisterStatus.ACTIVE and code not in local
        ]

    def _status_conflicts(
        self,
        local: dict[str, RoleAssignment],
        external: dict[str, ExternalFunction],
    ) -> list[MismatchRecord]:
        conflicts: list[MismatchRecord] = []

        for code in sorted(local.keys() & external.keys(), key=code_sort_key):
            role = local[code]
            entry = external[code]
            local_status = role.normalized_status

            if local_status == ApprovalStatus.APPROVED:
                if entry.status != RegisterStatus.CEASED:
                    continue
                conflicts.append(MismatchRecord(
                    type=MismatchType.STATUS_CONFLICT,
                    severity=MismatchSeverity.ERROR,
                    code=code,
                    local_role=role,
                    external_function=entry.function,
                    description=(
                        f'{code} is approved locally but shows "{entry.raw_status}" '
                        f"on the {self.register_name}"
                    ),
                ))
            elif (
                entry.status == RegisterStatus.ACTIVE
                and local_status != ApprovalStatus.PENDING
            ):
                # Pending assignments already active on the register are
                # awaiting internal sign-off, not in conflict.
                conflicts.append(MismatchRecord(
                    type=MismatchType.STATUS_CONFLICT,
                    severity=MismatchSeverity.WARNING,
                    code=code,
                    local_role=role,
                    external_function=entry.function,
                    description=(
                        f"{code} is active on the {self.register_name} "
                        f'but local status is "{role.approval_status}"'
                    ),
                ))

        return conflicts


# =============================================================================
# Convenience Functions
# =============================================================================

def reconcile(
    person: Person,
    role_assignments: Iterable[RoleAssignment],
    catalog: FunctionCatalog,
) -> MismatchResult:
    """Reconcile one person with a throwaway reconciler for the catalog."""
    return PersonReconciler.for_catalog(catalog).reconcile(person, role_assignments)
