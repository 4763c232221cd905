"""
Service layer coordinating audits, logging and remediation tracking.
"""

from .tracker import AuditOutcome, ComplianceStatus, ComplianceTracker, StateProgress

__all__ = ["AuditOutcome", "ComplianceStatus", "ComplianceTracker", "StateProgress"]
