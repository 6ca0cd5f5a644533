"""
smcrrecon Mismatch Models

Output of the reconciliation engine:

- MismatchRecord: one typed, severity-tagged discrepancy
- MismatchResult: all discrepancies for one person
- BatchResult: people with at least one discrepancy, plus summary counts

Results are produced fresh on every call and never persisted by the
engine. Rendering, export and audit logging are caller concerns; to_dict()
gives them a JSON-ready view.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .enums import MismatchSeverity, MismatchType
from .person import RoleAssignment


@dataclass(frozen=True)
class MismatchRecord:
    """
    A single discrepancy between local records and the external register.

    Attributes:
        type: Which comparison pass produced the record
        severity: WARNING (needs attention) or ERROR (direct contradiction)
        code: Canonical function code involved (e.g. "SMF3")
        description: Human-readable explanation
        local_role: Local assignment involved, if any
        external_function: Raw register label involved, if any
    """
    type: MismatchType
    severity: MismatchSeverity
    code: str
    description: str
    local_role: Optional[RoleAssignment] = None
    external_function: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.severity == MismatchSeverity.ERROR

    def to_dict(self) -> dict[str, Any]:
        """Serialize for rendering or audit logging."""
        return {
            "type": self.type.value,
            "severity": self.severity.value,
            "code": self.code,
            "description": self.description,
            "local_role_id": self.local_role.id if self.local_role else None,
            "external_function": self.external_function,
        }


@dataclass(frozen=True)
class MismatchResult:
    """
    Reconciliation outcome for one person.

    Mismatches are grouped by pass (missing from external, missing locally,
    status conflict) and sorted by canonical code within each group.
    """
    person_id: str
    person_name: str
    mismatches: tuple[MismatchRecord, ...] = ()

    @classmethod
    def empty(cls, person_id: str, person_name: str) -> MismatchResult:
        """A zero-mismatch result."""
        return cls(person_id=person_id, person_name=person_name)

    @property
    def has_mismatches(self) -> bool:
        return len(self.mismatches) > 0

    def of_type(self, mismatch_type: MismatchType) -> list[MismatchRecord]:
        """Mismatches of a single type, in result order."""
        return [m for m in self.mismatches if m.type == mismatch_type]

    @property
    def missing_from_external(self) -> list[MismatchRecord]:
        return self.of_type(MismatchType.MISSING_FROM_EXTERNAL)

    @property
    def missing_locally(self) -> list[MismatchRecord]:
        return self.of_type(MismatchType.MISSING_LOCALLY)

    @property
    def status_conflicts(self) -> list[MismatchRecord]:
        return self.of_type(MismatchType.STATUS_CONFLICT)

    @property
    def error_count(self) -> int:
        return sum(1 for m in self.mismatches if m.is_error)

    def find_for_role(
        self,
        role_id: str,
        code: Optional[str] = None,
    ) -> Optional[MismatchRecord]:
        """
        First mismatch concerning a local assignment.

        Matches on the assignment id, or on its canonical code when given,
        so a role row can be badged even for register-side mismatches.
        """
        for mismatch in self.mismatches:
            if code is not None and mismatch.code == code.upper():
                return mismatch
            if mismatch.local_role is not None and mismatch.local_role.id == role_id:
                return mismatch
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "person_id": self.person_id,
            "person_name": self.person_name,
            "has_mismatches": self.has_mismatches,
            "mismatches": [m.to_dict() for m in self.mismatches],
        }


@dataclass(frozen=True)
class BatchResult:
    """
    Reconciliation outcome for a collection of people.

    Only people with at least one mismatch appear in results and
    by_person_id, so:

        people_with_mismatches == len(results) == len(by_person_id)
        total_mismatches == sum(len(r.mismatches) for r in results)
    """
    total_mismatches: int = 0
    people_with_mismatches: int = 0
    by_person_id: dict[str, MismatchResult] = field(default_factory=dict)
    results: tuple[MismatchResult, ...] = ()

    def get(self, person_id: str) -> Optional[MismatchResult]:
        """Result for a person, or None if they have no mismatches."""
        return self.by_person_id.get(person_id)

    def __contains__(self, person_id: object) -> bool:
        return person_id in self.by_person_id

    def severity_counts(self) -> dict[str, int]:
        """Mismatch counts keyed by severity value."""
        counts = {severity.value: 0 for severity in MismatchSeverity}
        for result in self.results:
            for mismatch in result.mismatches:
                counts[mismatch.severity.value] += 1
        return counts

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_mismatches": self.total_mismatches,
            "people_with_mismatches": self.people_with_mismatches,
            "severity_counts": self.severity_counts(),
            "results": [r.to_dict() for r in self.results],
        }
