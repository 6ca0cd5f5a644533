"""
Tests for snapshot ingestion: captured payloads into domain models.
"""
from datetime import date

import pytest

from smcrrecon.engine import classify_status, reconcile, reconcile_all
from smcrrecon.exceptions import SnapshotValidationError
from smcrrecon.models import MismatchType, RegisterStatus
from smcrrecon.snapshots import (
    load_people,
    load_person,
    load_role_assignment,
    load_role_assignments,
)


def _person_payload(**overrides) -> dict:
    payload = {
        "id": "person-001",
        "name": "Jane Smith",
        "firmId": "firm-001",
        "irn": "JXS01234",
        "fcaVerification": {
            "status": "Active",
            "lastChecked": "2024-06-01T09:30:00Z",
            "hasEnforcementHistory": False,
            "name": "Jane Smith",
            "controlFunctions": [
                {
                    "function": "SMF3 - Executive Director function",
                    "firmName": "Acme Payments Ltd",
                    "frn": 123456,
                    "status": "Ceased",
                    "effectiveFrom": "2019-03-01",
                    "effectiveTo": "2023-12-31T00:00:00Z",
                },
                {
                    "function": "SMF16 - Compliance Oversight function",
                    "firmName": "Acme Payments Ltd",
                    "frn": "123456",
                    "status": "Active",
                    "effectiveFrom": "2021-04-01",
                    "effectiveTo": "",
                },
            ],
        },
    }
    payload.update(overrides)
    return payload


def _role_payload(**overrides) -> dict:
    payload = {
        "id": "role-1",
        "personId": "person-001",
        "functionId": "smf3",
        "functionType": "SMF",
        "approvalStatus": "approved",
        "functionLabel": "SMF3 Executive Director",
        "firmId": "firm-001",
        "startDate": "2019-03-01",
        "endDate": None,
    }
    payload.update(overrides)
    return payload


class TestLoadPerson:

    def test_camel_case_payload(self):
        person = load_person(_person_payload())

        assert person.id == "person-001"
        assert person.firm_id == "firm-001"
        assert person.is_verified
        assert person.verification.last_checked.year == 2024
        assert len(person.verification.control_functions) == 2

    def test_control_function_fields(self):
        person = load_person(_person_payload())
        ceased, active = person.verification.control_functions

        assert ceased.frn == "123456"  # integer FRN kept as text
        assert ceased.effective_from == date(2019, 3, 1)
        assert ceased.effective_to == date(2023, 12, 31)
        assert active.effective_to is None

    def test_snake_case_payload(self):
        person = load_person({
            "id": "p1",
            "name": "Sam",
            "firm_id": "firm-002",
            "verification": {
                "status": "Active",
                "control_functions": [{"function": "SMF1", "status": "Active"}],
            },
        })
        assert person.firm_id == "firm-002"
        assert person.verification.control_functions[0].function == "SMF1"

    def test_missing_verification(self):
        person = load_person({"id": "p1", "name": "Sam"})
        assert person.verification is None
        assert not person.is_verified

    def test_null_control_functions(self):
        person = load_person({
            "id": "p1",
            "name": "Sam",
            "fcaVerification": {"status": "Active", "controlFunctions": None},
        })
        assert person.verification.control_functions == ()

    def test_unknown_fields_ignored(self):
        person = load_person(_person_payload(avatarUrl="https://example.com/a.png"))
        assert person.name == "Jane Smith"

    def test_invalid_payload(self):
        with pytest.raises(SnapshotValidationError) as exc_info:
            load_person({"id": "p1"})

        assert exc_info.value.code == "SMCR_SNAPSHOT_VALIDATION_ERROR"
        assert exc_info.value.person_id == "p1"
        assert exc_info.value.details["errors"]

    def test_load_people(self):
        people = load_people([_person_payload(), _person_payload(id="person-002")])
        assert [p.id for p in people] == ["person-001", "person-002"]


def _single_row_person(**row) -> dict:
    entry = {"function": "SMF16 - Compliance Oversight function", "status": "Active"}
    entry.update(row)
    return {
        "id": "p1",
        "name": "Sam",
        "fcaVerification": {"status": "Active", "controlFunctions": [entry]},
    }


class TestLenientRegisterRows:
    """Display-only register fields never reject the whole person."""

    def test_null_status(self):
        person = load_person(_single_row_person(status=None))

        entry = person.verification.control_functions[0]
        assert entry.status == ""
        assert classify_status(entry.status) == RegisterStatus.OTHER

    def test_null_status_is_inert(self, bundled_catalog):
        person = load_person(_single_row_person(status=None))
        assert not reconcile(person, [], bundled_catalog).has_mismatches

    def test_null_firm_name_and_frn(self):
        person = load_person(_single_row_person(firmName=None, frn=None))

        entry = person.verification.control_functions[0]
        assert entry.firm_name == ""
        assert entry.frn == ""

    @pytest.mark.parametrize("raw,expected", [
        ("01/04/2021", date(2021, 4, 1)),
        ("01-04-2021", date(2021, 4, 1)),
        ("1 April 2021", date(2021, 4, 1)),
        ("2021-04-01T00:00:00Z", date(2021, 4, 1)),
    ])
    def test_day_first_dates(self, raw, expected):
        person = load_person(_single_row_person(effectiveFrom=raw))
        assert person.verification.control_functions[0].effective_from == expected

    @pytest.mark.parametrize("raw", ["not a date", "31/31/2021", 20210401])
    def test_unrecognised_date_is_absent(self, raw):
        person = load_person(_single_row_person(effectiveFrom=raw))
        assert person.verification.control_functions[0].effective_from is None

    def test_odd_row_still_reconciled(self, bundled_catalog):
        people = load_people([
            _single_row_person(firmName=None, effectiveFrom="01/04/2021", effectiveTo="someday"),
        ])

        batch = reconcile_all(people, [], bundled_catalog)

        assert batch.get("p1").missing_locally[0].code == "SMF16"


class TestLoadRoleAssignment:

    def test_camel_case_payload(self):
        role = load_role_assignment(_role_payload())

        assert role.person_id == "person-001"
        assert role.function_id == "smf3"
        assert role.is_senior_management
        assert role.start_date == date(2019, 3, 1)
        assert role.end_date is None

    def test_blank_dates(self):
        role = load_role_assignment(_role_payload(startDate="", endDate="  "))
        assert role.start_date is None
        assert role.end_date is None

    def test_certification_function(self):
        role = load_role_assignment(_role_payload(functionType="CF", functionId="cf30"))
        assert not role.is_senior_management

    def test_missing_required_field(self):
        payload = _role_payload()
        del payload["approvalStatus"]
        with pytest.raises(SnapshotValidationError) as exc_info:
            load_role_assignment(payload)
        assert exc_info.value.details["role_id"] == "role-1"

    def test_load_role_assignments(self):
        roles = load_role_assignments([_role_payload(), _role_payload(id="role-2")])
        assert [r.id for r in roles] == ["role-1", "role-2"]


class TestLoadedSnapshotsReconcile:
    """Loaded payloads flow straight into the engine."""

    def test_end_to_end(self, bundled_catalog):
        people = load_people([_person_payload()])
        roles = load_role_assignments([
            _role_payload(),
            _role_payload(id="role-2", functionId="smf17", approvalStatus="Approved"),
        ])

        batch = reconcile_all(people, roles, bundled_catalog)
        result = batch.get("person-001")

        assert [(m.type, m.code) for m in result.mismatches] == [
            (MismatchType.MISSING_FROM_EXTERNAL, "SMF17"),
            (MismatchType.MISSING_LOCALLY, "SMF16"),
            (MismatchType.STATUS_CONFLICT, "SMF3"),
        ]
        assert result.find_for_role("role-1").description == (
            'SMF3 is approved locally but shows "Ceased" on the FCA Register'
        )
