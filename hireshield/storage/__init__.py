"""Audit log and remediation item stores."""

from .audit import AuditRecord, JsonlAuditLogger
from .remediation import InMemoryRemediationStore, JsonFileRemediationStore

__all__ = ["AuditRecord", "JsonlAuditLogger", "InMemoryRemediationStore", "JsonFileRemediationStore"]
