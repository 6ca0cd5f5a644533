"""
smcrrecon Catalog Loader

Loads and validates function catalogs from YAML or JSON files and converts
the Pydantic schema models to smcrrecon domain models.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..exceptions import CatalogLoadError, CatalogValidationError, CatalogVersionMismatch
from ..models import FunctionCatalog, FunctionDefinition
from .schema import (
    SCHEMA_VERSION,
    FunctionCatalogSchema,
    check_schema_version,
    validate_catalog,
)

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_CATALOG_PATH = DATA_DIR / "fca_smcr.yaml"


def _convert_catalog(schema: FunctionCatalogSchema) -> FunctionCatalog:
    """Convert FunctionCatalogSchema to FunctionCatalog model."""
    return FunctionCatalog(
        id=schema.id,
        name=schema.name,
        version=schema.version,
        regime=schema.regime,
        register_name=schema.register_name,
        code_prefix=schema.code_prefix,
        functions=[
            FunctionDefinition(
                id=fn.id,
                code=fn.code,
                title=fn.title,
                category=fn.category,
                description=fn.description,
            )
            for fn in schema.functions
        ],
    )


class CatalogLoader:
    """
    Loads function catalogs from files, caching them by catalog ID.

    Usage:
        loader = CatalogLoader()
        catalog = loader.load("catalogs/fca_smcr.yaml")
        loader.get_catalog("fca-smcr")
    """

    def __init__(self, strict_version: bool = True) -> None:
        self.strict_version = strict_version
        self._catalogs: dict[str, FunctionCatalog] = {}

    def load(self, path: Union[str, Path]) -> FunctionCatalog:
        """
        Load and validate a catalog file.

        Raises:
            CatalogLoadError: If the file cannot be read or parsed
            CatalogVersionMismatch: If the schema version is incompatible
            CatalogValidationError: If schema validation fails
        """
        path = Path(path)

        try:
            data = self._load_file(path)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise CatalogLoadError(
                message=f"Failed to load function catalog: {e}",
                details={"path": str(path), "error": str(e)},
            ) from e

        catalog = self.load_data(data, source=str(path))
        self._catalogs[catalog.id] = catalog
        return catalog

    def load_data(self, data: Any, source: str = "<data>") -> FunctionCatalog:
        """Validate already-parsed catalog data."""
        if not isinstance(data, dict):
            raise CatalogValidationError(
                message="Function catalog must be a mapping",
                details={"source": source, "type": type(data).__name__},
            )

        if self.strict_version and not check_schema_version(data):
            found = data.get("schema_version", "unknown")
            raise CatalogVersionMismatch(
                message=f"Schema version mismatch: catalog has {found}, expected {SCHEMA_VERSION}",
                details={"catalog_version": found, "expected_version": SCHEMA_VERSION},
            )

        try:
            schema = validate_catalog(data)
        except ValidationError as e:
            raise CatalogValidationError(
                message=f"Function catalog validation failed: {e.error_count()} errors",
                details={"errors": e.errors(include_url=False), "source": source},
            ) from e

        catalog = _convert_catalog(schema)
        hash_short = catalog.content_hash[:12]
        logger.info(
            "Loaded function catalog %s v%s (%d functions, hash %s) from %s",
            catalog.id,
            catalog.version,
            len(catalog),
            hash_short,
            source,
            extra={"catalog_id": catalog.id, "catalog_hash_short": hash_short},
        )
        return catalog

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)

    def get_catalog(self, catalog_id: str) -> Optional[FunctionCatalog]:
        """Get a cached catalog by ID."""
        return self._catalogs.get(catalog_id)

    def list_catalogs(self) -> list[str]:
        """List IDs of all loaded catalogs."""
        return list(self._catalogs.keys())


# =============================================================================
# Convenience Functions
# =============================================================================

def load_catalog(path: Union[str, Path, None] = None) -> FunctionCatalog:
    """
    Load a function catalog from a file.

    With no path, loads the bundled FCA SM&CR catalog.
    """
    return CatalogLoader().load(path or DEFAULT_CATALOG_PATH)


def load_catalog_from_string(content: str, format: str = "yaml") -> FunctionCatalog:
    """Load a function catalog from a YAML or JSON string."""
    try:
        if format.lower() == "json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise CatalogLoadError(
            message=f"Failed to parse function catalog: {e}",
            details={"format": format},
        ) from e
    return CatalogLoader().load_data(data, source=f"<string:{format}>")
