"""
Facade tying the rule engine to the audit log and remediation store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from hireshield.compliance.remediation import build_remediation_checklist, progress
from hireshield.compliance.rules import evaluate, index_requirements
from hireshield.compliance.types import EvaluationResult, Progress, RemediationItem, SelectionInput
from hireshield.config.loader import ReferenceData
from hireshield.storage.audit import JsonlAuditLogger
from hireshield.storage.remediation import InMemoryRemediationStore

logger = logging.getLogger("hireshield.services.tracker")


@dataclass(slots=True)
class AuditOutcome:
    result: EvaluationResult
    audit_id: Optional[str] = None
    seeded: Dict[str, int] = field(default_factory=dict)


@dataclass(slots=True)
class StateProgress:
    code: str
    name: str
    completed: int
    total: int
    percent: int


@dataclass(slots=True)
class ComplianceStatus:
    states: List[StateProgress]
    overall: Progress


@dataclass(slots=True)
class ComplianceTracker:
    """Runs audits for an org and keeps its remediation checklist current."""

    reference: ReferenceData = field(default_factory=ReferenceData)
    store: InMemoryRemediationStore = field(default_factory=InMemoryRemediationStore)
    audit_log_path: Optional[Path] = None
    audit_logger: Optional[JsonlAuditLogger] = field(init=False, default=None)
    _hiring_states: Dict[str, List[str]] = field(init=False, default_factory=dict)

    def __post_init__(self) -> None:
        if self.audit_log_path is not None:
            self.audit_logger = JsonlAuditLogger(self.audit_log_path)

    def is_regulated(self, code: str) -> bool:
        entry = index_requirements(self.reference.requirements).get(code)
        return bool(entry and entry.is_regulated)

    def hiring_states(self, org_id: str) -> List[str]:
        return list(self._hiring_states.get(org_id, []))

    def run_audit(
        self,
        org_id: str,
        selection: SelectionInput,
        *,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> AuditOutcome:
        """
        Evaluate a selection, record it, and seed remediation items.

        The org's hiring states are replaced by the audited jurisdictions.
        Every regulated jurisdiction with a checklist is seeded; seeding is an
        upsert so repeated audits never duplicate items.
        """

        result = evaluate(selection, self.reference.requirements)
        outcome = AuditOutcome(result=result)

        if self.audit_logger is not None:
            record = self.audit_logger.log(org_id, selection, result, metadata=metadata)
            outcome.audit_id = record.audit_id

        self._hiring_states[org_id] = list(dict.fromkeys(selection.jurisdictions or ()))
        for code in self._hiring_states[org_id]:
            if self.is_regulated(code):
                outcome.seeded[code] = self.seed(org_id, code, audit_id=outcome.audit_id)

        logger.info(
            "Audit completed",
            extra={
                "org_id": org_id,
                "audit_id": outcome.audit_id,
                "risk_score": result.risk_score,
                "findings": len(result.findings),
                "seeded": outcome.seeded,
            },
        )
        return outcome

    def seed(self, org_id: str, code: str, *, audit_id: Optional[str] = None) -> int:
        items = build_remediation_checklist(code, self.reference.checklists, audit_id=audit_id)
        if not items:
            logger.warning("No checklist for jurisdiction", extra={"org_id": org_id, "jurisdiction_code": code})
            return 0
        return self.store.upsert_items(org_id, items)

    def add_hiring_state(self, org_id: str, code: str) -> bool:
        """Add a hiring state; return False if it was already present."""
        states = self._hiring_states.setdefault(org_id, [])
        if code in states:
            return False
        states.append(code)
        if self.is_regulated(code):
            self.seed(org_id, code)
        return True

    def remove_hiring_state(self, org_id: str, code: str) -> bool:
        """Drop a hiring state. Its remediation items stay as history."""
        states = self._hiring_states.get(org_id, [])
        if code not in states:
            return False
        states.remove(code)
        return True

    def update_item(self, org_id: str, code: str, item_key: str, status: str) -> RemediationItem:
        return self.store.update_status(org_id, code, item_key, status)

    def items(self, org_id: str, code: Optional[str] = None) -> List[RemediationItem]:
        return self.store.list_items(org_id, code)

    def compliance_status(self, org_id: str) -> ComplianceStatus:
        """Per regulated hiring state progress plus totals over all stored items."""
        names = {entry.code: entry.name for entry in self.reference.requirements}
        states: List[StateProgress] = []
        for code in self.hiring_states(org_id):
            if not self.is_regulated(code):
                continue
            state_progress = progress(self.store.list_items(org_id, code))
            total = state_progress.total or len(self.reference.checklists.get(code, ()))
            states.append(
                StateProgress(
                    code=code,
                    name=names.get(code, code),
                    completed=state_progress.completed,
                    total=total,
                    percent=state_progress.percent,
                )
            )
        return ComplianceStatus(states=states, overall=progress(self.store.list_items(org_id)))


__all__ = ["AuditOutcome", "ComplianceStatus", "ComplianceTracker", "StateProgress"]
