"""
Environment-driven settings for HireShield entry points.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_AUDIT_LOG = Path("project_bundle/hireshield_audit.jsonl")
DEFAULT_STORE_PATH = Path("project_bundle/remediation_items.json")


def _env_path(name: str) -> Optional[Path]:
    value = os.getenv(name)
    return Path(value) if value else None


@dataclass(slots=True)
class Settings:
    """Paths and logging level resolved from HIRESHIELD_* variables."""

    reference_path: Optional[Path] = None
    audit_log_path: Path = DEFAULT_AUDIT_LOG
    store_path: Path = DEFAULT_STORE_PATH
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            reference_path=_env_path("HIRESHIELD_REFERENCE_PATH"),
            audit_log_path=_env_path("HIRESHIELD_AUDIT_LOG") or DEFAULT_AUDIT_LOG,
            store_path=_env_path("HIRESHIELD_STORE_PATH") or DEFAULT_STORE_PATH,
            log_level=os.getenv("HIRESHIELD_LOG_LEVEL", "INFO").upper(),
        )


__all__ = ["Settings", "DEFAULT_AUDIT_LOG", "DEFAULT_STORE_PATH"]
