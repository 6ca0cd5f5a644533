"""
Pytest configuration and fixtures for smcrrecon tests.

Provides helper factories and common fixtures matching the model definitions.
"""
import pytest
from datetime import date, datetime, timezone
from typing import Optional

from smcrrecon.catalog import load_catalog
from smcrrecon.engine import BatchAggregator, PersonReconciler
from smcrrecon.models import (
    ControlFunctionEntry,
    FunctionCatalog,
    FunctionDefinition,
    Person,
    RoleAssignment,
    VerificationSnapshot,
)


# =============================================================================
# Factory Helpers
# =============================================================================

def make_entry(
    function: str,
    status: str = "Active",
    firm_name: str = "Acme Payments Ltd",
    frn: str = "123456",
    effective_from: Optional[date] = date(2021, 4, 1),
    effective_to: Optional[date] = None,
) -> ControlFunctionEntry:
    """Create a register control function row."""
    return ControlFunctionEntry(
        function=function,
        firm_name=firm_name,
        frn=frn,
        status=status,
        effective_from=effective_from,
        effective_to=effective_to,
    )


def make_verification(
    *entries: ControlFunctionEntry,
    status: str = "Active",
    has_enforcement_history: bool = False,
) -> VerificationSnapshot:
    """Create a register snapshot holding the given entries."""
    return VerificationSnapshot(
        status=status,
        last_checked=datetime(2024, 6, 1, 9, 30, tzinfo=timezone.utc),
        has_enforcement_history=has_enforcement_history,
        control_functions=tuple(entries),
    )


def make_person(
    id: str = "person-001",
    name: str = "Jane Smith",
    entries: Optional[list[ControlFunctionEntry]] = None,
    verified: bool = True,
) -> Person:
    """
    Create a Person.

    verified=False gives a person with no snapshot; entries=None with
    verified=True gives a snapshot with no control functions.
    """
    verification = make_verification(*(entries or [])) if verified else None
    return Person(id=id, name=name, verification=verification, firm_id="firm-001")


def make_role(
    function_id: str,
    approval_status: str = "approved",
    function_type: str = "SMF",
    person_id: str = "person-001",
    id: Optional[str] = None,
) -> RoleAssignment:
    """Create a local RoleAssignment."""
    return RoleAssignment(
        id=id or f"role-{person_id}-{function_id}",
        person_id=person_id,
        function_id=function_id,
        function_type=function_type,
        approval_status=approval_status,
        function_label=function_id.upper(),
        firm_id="firm-001",
    )


def make_catalog(
    codes: tuple[str, ...] = ("SMF1", "SMF3", "SMF9", "SMF16", "SMF17"),
    register_name: str = "FCA Register",
    code_prefix: str = "SMF",
) -> FunctionCatalog:
    """Create a small in-memory catalog keyed by lower-cased codes."""
    return FunctionCatalog(
        id="test-catalog",
        name="Test Catalog",
        version="1",
        register_name=register_name,
        code_prefix=code_prefix,
        functions=[
            FunctionDefinition(id=code.lower(), code=code, title=f"Function {code}")
            for code in codes
        ],
    )


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def catalog() -> FunctionCatalog:
    return make_catalog()


@pytest.fixture
def bundled_catalog() -> FunctionCatalog:
    return load_catalog()


@pytest.fixture
def reconciler(catalog) -> PersonReconciler:
    return PersonReconciler.for_catalog(catalog)


@pytest.fixture
def aggregator(reconciler) -> BatchAggregator:
    return BatchAggregator(reconciler)
