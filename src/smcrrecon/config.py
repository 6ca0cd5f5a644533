"""
smcrrecon Configuration

Environment-driven settings, structured logging setup and the process-wide
default function catalog.

Environment variables:
    SMCR_CATALOG_PATH  - function catalog file (default: bundled FCA catalog)
    SMCR_LOG_LEVEL     - log level for the smcrrecon logger (default: INFO)
    SMCR_LOG_JSON      - "true" for JSON log lines, "false" for plain text
    SMCR_CACHE_SIZE    - entries kept by make_cached_reconciler (default: 256)
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .catalog import DEFAULT_CATALOG_PATH, load_catalog
from .engine import PersonReconciler, ReconciliationCache
from .models import FunctionCatalog


# =============================================================================
# Settings
# =============================================================================

@dataclass(frozen=True)
class Settings:
    """Runtime settings for the reconciliation engine."""
    catalog_path: Path = DEFAULT_CATALOG_PATH
    log_level: str = "INFO"
    log_json: bool = True
    cache_size: int = 256

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            catalog_path=Path(os.getenv("SMCR_CATALOG_PATH") or DEFAULT_CATALOG_PATH),
            log_level=os.getenv("SMCR_LOG_LEVEL", "INFO").upper(),
            log_json=os.getenv("SMCR_LOG_JSON", "true").lower() == "true",
            cache_size=int(os.getenv("SMCR_CACHE_SIZE", "256")),
        )


# =============================================================================
# Logging Setup (Structured JSON)
# =============================================================================

# Extra attributes copied from log records into JSON lines when present.
LOG_EXTRA_FIELDS = (
    "person_id",
    "catalog_id",
    "catalog_hash_short",
    "mismatch_count",
    "duration_ms",
)


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in LOG_EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Attach a single stream handler to the smcrrecon logger.

    Calling this again replaces the handler rather than stacking another.
    """
    settings = settings or Settings.from_env()
    logger = logging.getLogger("smcrrecon")
    logger.setLevel(getattr(logging, settings.log_level, logging.INFO))

    for existing in list(logger.handlers):
        if getattr(existing, "_smcrrecon_handler", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler()
    if settings.log_json:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    handler._smcrrecon_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger


# =============================================================================
# Default Catalog
# =============================================================================

_default_catalog: Optional[FunctionCatalog] = None


def get_default_catalog(settings: Optional[Settings] = None) -> FunctionCatalog:
    """Get or load the catalog configured by SMCR_CATALOG_PATH."""
    global _default_catalog
    if _default_catalog is None:
        settings = settings or Settings.from_env()
        _default_catalog = load_catalog(settings.catalog_path)
    return _default_catalog


def reset_default_catalog() -> None:
    """Forget the loaded default catalog (tests, catalog hot-swap)."""
    global _default_catalog
    _default_catalog = None


def make_cached_reconciler(settings: Optional[Settings] = None) -> ReconciliationCache:
    """A cache-wrapped reconciler over the default catalog."""
    settings = settings or Settings.from_env()
    reconciler = PersonReconciler.for_catalog(get_default_catalog(settings))
    return ReconciliationCache(reconciler, max_size=settings.cache_size)
