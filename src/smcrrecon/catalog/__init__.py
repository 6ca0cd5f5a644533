"""
smcrrecon Function Catalogs

Schema validation and loading for Senior Management Function catalogs.

Catalogs are YAML or JSON files mapping internal function identifiers to
canonical register codes for one regulatory regime. They are injected into
the reconciliation engine rather than compiled in.

Usage:
    from smcrrecon.catalog import load_catalog, CatalogLoader

    # Bundled FCA SM&CR catalog
    catalog = load_catalog()

    # A custom, versioned catalog
    catalog = load_catalog("catalogs/fca_smcr_2025.yaml")
"""
from __future__ import annotations

from .loader import (
    DEFAULT_CATALOG_PATH,
    CatalogLoader,
    load_catalog,
    load_catalog_from_string,
)
from .schema import (
    SCHEMA_VERSION,
    FunctionCatalogSchema,
    FunctionDefinitionSchema,
    check_schema_version,
    validate_catalog,
)

__all__ = [
    "SCHEMA_VERSION",
    "DEFAULT_CATALOG_PATH",
    "CatalogLoader",
    "load_catalog",
    "load_catalog_from_string",
    "validate_catalog",
    "check_schema_version",
    "FunctionCatalogSchema",
    "FunctionDefinitionSchema",
]
