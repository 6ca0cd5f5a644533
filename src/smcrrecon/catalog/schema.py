"""
smcrrecon Catalog Schemas

Pydantic models for validating function catalog YAML/JSON files.
They map to the domain models in smcrrecon.models.catalog.

Schema versioning:
- schema_version field tracks breaking changes
- Loaders check major-version compatibility
"""
from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Catalog Schemas
# =============================================================================

class FunctionDefinitionSchema(BaseModel):
    """Schema for one Senior Management Function entry."""
    id: str = Field(..., min_length=1, description="Internal catalog key (e.g., 'smf1')")
    code: str = Field(..., min_length=1, description="Canonical register code (e.g., 'SMF1')")
    title: str = Field(..., description="Function title")
    category: str = Field("universal", description="Function grouping")
    description: str = Field("", description="Longer description")

    @field_validator("code")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        return v.strip().upper()


class FunctionCatalogSchema(BaseModel):
    """Root schema for a function catalog file."""
    schema_version: str = Field(SCHEMA_VERSION, description="Catalog schema version")
    id: str = Field(..., description="Catalog identifier")
    name: str = Field(..., description="Catalog display name")
    version: str = Field(..., description="Catalog content version")
    regime: str = Field("smcr", description="Regulatory regime")
    register_name: str = Field("FCA Register", description="Name of the external register")
    code_prefix: str = Field("SMF", min_length=1, description="Letters every code starts with")
    functions: list[FunctionDefinitionSchema] = Field(default_factory=list)

    @field_validator("code_prefix")
    @classmethod
    def validate_code_prefix(cls, v: str) -> str:
        v = v.strip().upper()
        if not v.isalpha():
            raise ValueError(f"code_prefix must be letters only, got '{v}'")
        return v

    @model_validator(mode="after")
    def validate_functions(self) -> "FunctionCatalogSchema":
        """Codes must carry the prefix; ids and codes must be unique."""
        pattern = re.compile(rf"^{re.escape(self.code_prefix)}\d+$")
        errors = []
        seen_ids: set[str] = set()
        seen_codes: set[str] = set()

        for fn in self.functions:
            if not pattern.match(fn.code):
                errors.append(
                    f"Function '{fn.id}' code '{fn.code}' does not match "
                    f"'{self.code_prefix}<digits>'"
                )
            if fn.id in seen_ids:
                errors.append(f"Duplicate function ID: '{fn.id}'")
            if fn.code in seen_codes:
                errors.append(f"Duplicate function code: '{fn.code}'")
            seen_ids.add(fn.id)
            seen_codes.add(fn.code)

        if errors:
            raise ValueError("; ".join(errors))
        return self


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_catalog(data: dict[str, Any]) -> FunctionCatalogSchema:
    """
    Validate raw catalog data against the schema.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return FunctionCatalogSchema.model_validate(data)


def check_schema_version(data: dict[str, Any], expected: Optional[str] = None) -> bool:
    """Check that the catalog's major schema version matches."""
    expected = expected or SCHEMA_VERSION
    found = str(data.get("schema_version", SCHEMA_VERSION))
    return found.split(".")[0] == expected.split(".")[0]
