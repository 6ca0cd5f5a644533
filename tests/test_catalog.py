"""
Function Catalog Tests

Tests that verify:
1. The bundled catalog loads and validates
2. Schema validation rejects malformed catalogs
3. Reference integrity (unique ids and codes, prefixed codes)
4. Determinism of the catalog content hash
"""
from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from smcrrecon.catalog import (
    DEFAULT_CATALOG_PATH,
    SCHEMA_VERSION,
    CatalogLoader,
    check_schema_version,
    load_catalog,
    load_catalog_from_string,
)
from smcrrecon.exceptions import (
    CatalogLoadError,
    CatalogValidationError,
    CatalogVersionMismatch,
)

from tests.conftest import make_catalog


def _catalog_dict(**overrides) -> dict:
    data = {
        "schema_version": SCHEMA_VERSION,
        "id": "custom",
        "name": "Custom Catalog",
        "version": "1",
        "functions": [
            {"id": "smf1", "code": "SMF1", "title": "Chief Executive"},
            {"id": "smf3", "code": "smf3", "title": "Executive Director"},
        ],
    }
    data.update(overrides)
    return data


class TestBundledCatalog:
    """The catalog shipped with the package."""

    def test_loads(self):
        catalog = load_catalog()

        assert catalog.id == "fca-smcr"
        assert catalog.register_name == "FCA Register"
        assert catalog.code_prefix == "SMF"

    def test_contains_expected_functions(self):
        catalog = load_catalog()

        expected = {
            "smf1": "SMF1", "smf3": "SMF3", "smf4": "SMF4", "smf9": "SMF9",
            "smf10": "SMF10", "smf16": "SMF16", "smf17": "SMF17",
            "smf24": "SMF24", "smf27": "SMF27",
        }
        assert len(catalog) == len(expected)
        for function_id, code in expected.items():
            assert catalog.code_for(function_id) == code

    def test_has_no_certification_functions(self):
        data = yaml.safe_load(DEFAULT_CATALOG_PATH.read_text(encoding="utf-8"))
        assert all(fn["code"].startswith("SMF") for fn in data["functions"])

    def test_lookup_by_code(self):
        catalog = load_catalog()
        assert catalog.by_code("smf16").title == "Compliance Oversight"
        assert catalog.get("smf17").category == "universal"
        assert "smf9" in catalog
        assert "cf30" not in catalog


class TestCatalogLoader:

    def test_load_yaml_file(self, tmp_path: Path):
        path = tmp_path / "catalog.yaml"
        path.write_text(yaml.safe_dump(_catalog_dict()), encoding="utf-8")

        loader = CatalogLoader()
        catalog = loader.load(path)

        assert catalog.code_for("smf3") == "SMF3"  # normalized to upper case
        assert loader.get_catalog("custom") is catalog
        assert loader.list_catalogs() == ["custom"]

    def test_load_json_file(self, tmp_path: Path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(_catalog_dict()), encoding="utf-8")

        assert load_catalog(path).code_for("smf1") == "SMF1"

    def test_load_from_string(self):
        catalog = load_catalog_from_string(json.dumps(_catalog_dict()), format="json")
        assert len(catalog) == 2

    def test_defaults_applied(self):
        catalog = CatalogLoader().load_data(_catalog_dict())
        assert catalog.register_name == "FCA Register"
        assert catalog.regime == "smcr"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(CatalogLoadError) as exc_info:
            load_catalog(tmp_path / "missing.yaml")
        assert exc_info.value.code == "SMCR_CATALOG_LOAD_ERROR"

    def test_malformed_yaml(self):
        with pytest.raises(CatalogLoadError):
            load_catalog_from_string("functions: [unclosed")

    def test_non_mapping(self):
        with pytest.raises(CatalogValidationError):
            load_catalog_from_string("- just\n- a list\n")

    def test_missing_required_field(self):
        data = _catalog_dict()
        del data["version"]
        with pytest.raises(CatalogValidationError) as exc_info:
            CatalogLoader().load_data(data)
        assert exc_info.value.details["errors"]

    def test_duplicate_ids_rejected(self):
        data = _catalog_dict(functions=[
            {"id": "smf1", "code": "SMF1", "title": "A"},
            {"id": "smf1", "code": "SMF2", "title": "B"},
        ])
        with pytest.raises(CatalogValidationError):
            CatalogLoader().load_data(data)

    def test_duplicate_codes_rejected(self):
        data = _catalog_dict(functions=[
            {"id": "smf1", "code": "SMF1", "title": "A"},
            {"id": "ceo", "code": "smf1", "title": "B"},
        ])
        with pytest.raises(CatalogValidationError):
            CatalogLoader().load_data(data)

    def test_code_without_prefix_rejected(self):
        data = _catalog_dict(functions=[{"id": "cf30", "code": "CF30", "title": "Customer"}])
        with pytest.raises(CatalogValidationError):
            CatalogLoader().load_data(data)

    def test_non_alpha_prefix_rejected(self):
        with pytest.raises(CatalogValidationError):
            CatalogLoader().load_data(_catalog_dict(code_prefix="SMF-"))


class TestSchemaVersion:

    def test_same_major_version_accepted(self):
        assert check_schema_version({"schema_version": "1.4.2"})

    def test_missing_version_assumed_current(self):
        assert check_schema_version({})

    def test_major_version_mismatch(self):
        with pytest.raises(CatalogVersionMismatch):
            CatalogLoader().load_data(_catalog_dict(schema_version="2.0.0"))

    def test_non_strict_loader_ignores_version(self):
        catalog = CatalogLoader(strict_version=False).load_data(
            _catalog_dict(schema_version="2.0.0")
        )
        assert catalog.id == "custom"


class TestCatalogHash:

    def test_hash_is_stable(self):
        assert load_catalog().content_hash == load_catalog().content_hash

    def test_hash_ignores_function_order(self):
        forward = make_catalog(codes=("SMF1", "SMF3"))
        backward = make_catalog(codes=("SMF3", "SMF1"))
        assert forward.content_hash == backward.content_hash

    def test_hash_changes_with_content(self):
        assert (
            make_catalog(codes=("SMF1",)).content_hash
            != make_catalog(codes=("SMF1", "SMF3")).content_hash
        )
