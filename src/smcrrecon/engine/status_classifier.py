"""
smcrrecon Status Classifier

Buckets free-text register status strings into ACTIVE, CEASED or OTHER.

Matching is exact after trimming and lower-casing. Unexpected register
wording falls through to OTHER, which no comparison pass acts on.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..models import RegisterStatus


ACTIVE_STATUSES = frozenset({"active", "current"})
CEASED_STATUSES = frozenset({"ceased", "inactive"})


def normalize_status(raw: Any) -> str:
    """Trim and lower-case a raw status; non-strings normalize to ''."""
    if not isinstance(raw, str):
        return ""
    return raw.strip().lower()


@dataclass(frozen=True)
class StatusClassifier:
    """Exact-match classifier over two fixed vocabularies."""
    active_statuses: frozenset[str] = field(default=ACTIVE_STATUSES)
    ceased_statuses: frozenset[str] = field(default=CEASED_STATUSES)

    def classify(self, raw_status: Any) -> RegisterStatus:
        normalized = normalize_status(raw_status)
        if normalized in self.active_statuses:
            return RegisterStatus.ACTIVE
        if normalized in self.ceased_statuses:
            return RegisterStatus.CEASED
        return RegisterStatus.OTHER


_DEFAULT_CLASSIFIER = StatusClassifier()


def classify_status(raw_status: Any) -> RegisterStatus:
    """Classify with the default vocabularies."""
    return _DEFAULT_CLASSIFIER.classify(raw_status)
