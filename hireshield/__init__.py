"""
hireshield package bootstrap.

Rule engine and remediation tracking for AI-hiring compliance
(NYC Local Law 144, Colorado AI Act, Illinois HB 3773, CCPA ADMT).
"""

from importlib import metadata


def get_version() -> str:
    """Return the package version if installed, else '0.0.0'."""
    try:
        return metadata.version("hireshield")
    except metadata.PackageNotFoundError:  # pragma: no cover - best effort only
        return "0.0.0"


__all__ = ["get_version"]
