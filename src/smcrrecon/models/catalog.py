"""
smcrrecon Function Catalog

The static catalog mapping internal function identifiers (e.g. "smf16")
to canonical register codes (e.g. "SMF16"). Catalogs are loaded from
versioned files (see smcrrecon.catalog) and injected into the engine, so a
regime's function list can change without touching reconciliation logic.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..canon import content_hash


DEFAULT_CODE_PREFIX = "SMF"
DEFAULT_REGISTER_NAME = "FCA Register"


@dataclass(frozen=True)
class FunctionDefinition:
    """
    A single Senior Management Function in a catalog.

    Attributes:
        id: Internal catalog key used by role assignments (e.g. "smf1")
        code: Canonical register code (e.g. "SMF1")
        title: Function title (e.g. "Chief Executive")
        category: Grouping such as "universal" or "investment_specific"
        description: Optional longer description
    """
    id: str
    code: str
    title: str
    category: str = "universal"
    description: str = ""


@dataclass
class FunctionCatalog:
    """
    Versioned catalog of Senior Management Functions for one regime.

    Usage:
        catalog = FunctionCatalog(
            id="fca-smcr",
            name="FCA SM&CR",
            version="2024.1",
            functions=[FunctionDefinition(id="smf1", code="SMF1", title="Chief Executive")],
        )
        catalog.code_for("smf1")  # "SMF1"
    """
    id: str
    name: str
    version: str
    functions: list[FunctionDefinition] = field(default_factory=list)
    regime: str = "smcr"
    register_name: str = DEFAULT_REGISTER_NAME
    code_prefix: str = DEFAULT_CODE_PREFIX

    _by_id: dict[str, FunctionDefinition] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )
    _by_code: dict[str, FunctionDefinition] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        for definition in self.functions:
            self._by_id[definition.id] = definition
            self._by_code[definition.code.upper()] = definition

    def get(self, function_id: str) -> Optional[FunctionDefinition]:
        """Get a function definition by internal identifier."""
        return self._by_id.get(function_id)

    def code_for(self, function_id: str) -> Optional[str]:
        """Canonical code for an internal identifier, or None if unknown."""
        definition = self._by_id.get(function_id)
        return definition.code.upper() if definition else None

    def by_code(self, code: str) -> Optional[FunctionDefinition]:
        """Get a function definition by canonical code (case-insensitive)."""
        return self._by_code.get(code.upper())

    def __contains__(self, function_id: object) -> bool:
        return function_id in self._by_id

    def __len__(self) -> int:
        return len(self.functions)

    @property
    def content_hash(self) -> str:
        """
        SHA-256 over the rule-bearing content of the catalog.

        Functions are sorted by id so the hash does not depend on file order.
        """
        return content_hash({
            "id": self.id,
            "version": self.version,
            "regime": self.regime,
            "code_prefix": self.code_prefix,
            "register_name": self.register_name,
            "functions": sorted(
                ({"id": f.id, "code": f.code.upper()} for f in self.functions),
                key=lambda f: f["id"],
            ),
        })
