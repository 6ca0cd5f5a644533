"""
smcrrecon Canonical Code Resolver

Maps both sides of a reconciliation onto the same code space:

- Register labels ("SMF16 - Compliance Oversight function") yield their
  leading code ("SMF16")
- Local function identifiers ("smf16") are looked up in the injected catalog

Labels and identifiers that do not resolve yield None and simply drop out of
reconciliation. Certification function labels ("CF30 - Customer Dealing
function") never match the catalog's SMF prefix, so they are excluded.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Optional

from ..models import DEFAULT_CODE_PREFIX, FunctionCatalog


_SORT_PATTERN = re.compile(r"^([A-Za-z]*)(\d+)$")


@lru_cache(maxsize=16)
def _code_pattern(code_prefix: str) -> re.Pattern[str]:
    return re.compile(rf"^({re.escape(code_prefix)}\d+)", re.IGNORECASE)


def extract_canonical_code(
    label: Any,
    code_prefix: str = DEFAULT_CODE_PREFIX,
) -> Optional[str]:
    """
    Extract the leading function code from a register label.

    Args:
        label: Free-text register label; non-strings are tolerated
        code_prefix: Letters the code must start with

    Returns:
        Upper-cased code, or None if the label has no leading code

    Example:
        >>> extract_canonical_code("smf1 - Chief Executive function")
        'SMF1'
        >>> extract_canonical_code("CF30 - Customer Dealing function") is None
        True
    """
    if not isinstance(label, str):
        return None
    match = _code_pattern(code_prefix).match(label.strip())
    return match.group(1).upper() if match else None


def code_sort_key(code: str) -> tuple[str, int, str]:
    """
    Natural ordering for canonical codes, so SMF3 sorts before SMF16.

    Codes without a numeric suffix sort after numbered ones with the same
    prefix, then lexically.
    """
    match = _SORT_PATTERN.match(code)
    if match is None:
        return (code, 1 << 31, code)
    return (match.group(1).upper(), int(match.group(2)), code)


@dataclass
class CanonicalCodeResolver:
    """
    Resolves register labels and local function identifiers to codes.

    Usage:
        resolver = CanonicalCodeResolver(catalog=load_catalog())
        resolver.extract_canonical_code("SMF3 - Executive Director")  # "SMF3"
        resolver.resolve_local_code("smf3")                           # "SMF3"
    """
    catalog: FunctionCatalog
    code_prefix: str = field(init=False)

    def __post_init__(self) -> None:
        self.code_prefix = self.catalog.code_prefix

    def extract_canonical_code(self, label: Any) -> Optional[str]:
        """Leading code of a register label, or None."""
        return extract_canonical_code(label, self.code_prefix)

    def resolve_local_code(self, function_id: Any) -> Optional[str]:
        """Catalog code for a local function identifier, or None."""
        if not isinstance(function_id, str):
            return None
        return self.catalog.code_for(function_id)
