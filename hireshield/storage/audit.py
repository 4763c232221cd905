"""
Audit logging utilities for HireShield.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional
from uuid import uuid4

from hireshield.compliance.rules import finding_severity
from hireshield.compliance.types import EvaluationResult, SelectionInput


@dataclass(slots=True)
class AuditRecord:
    """Structured log entry for one completed audit."""

    audit_id: str
    timestamp: str
    org_id: str
    jurisdictions: List[str]
    tools: List[str]
    usages: List[str]
    risk_score: int
    status: str
    findings: List[Dict[str, Any]]
    metadata: Dict[str, Any]


class JsonlAuditLogger:
    """Append-only JSONL log of audit runs."""

    def __init__(self, path: Path):
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def log(
        self,
        org_id: str,
        selection: SelectionInput,
        result: EvaluationResult,
        metadata: Dict[str, Any] | None = None,
    ) -> AuditRecord:
        record = AuditRecord(
            audit_id=uuid4().hex,
            timestamp=datetime.now(timezone.utc).isoformat(),
            org_id=org_id,
            jurisdictions=list(selection.jurisdictions or ()),
            tools=list(selection.tools or ()),
            usages=list(selection.usages or ()),
            risk_score=result.risk_score,
            status="completed",
            findings=[
                {
                    "jurisdiction_code": finding.jurisdiction_code,
                    "finding_type": finding.requirement,
                    "severity": finding_severity(finding.status),
                    "remediation": finding.action,
                    "status": finding.status,
                }
                for finding in result.findings
            ],
            metadata=dict(metadata or {}),
        )
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(asdict(record), ensure_ascii=False) + "\n")
        return record

    def iter_records(self, org_id: Optional[str] = None) -> Iterator[Dict[str, Any]]:
        """Yield logged audits in write order, skipping unreadable lines."""
        if not self.path.exists():
            return
        with self.path.open("r", encoding="utf-8") as handle:
            for line in handle:
                line = line.strip()
                if not line:
                    continue
                try:
                    record = json.loads(line)
                except json.JSONDecodeError:
                    continue
                if org_id is None or record.get("org_id") == org_id:
                    yield record

    def history(self, org_id: str) -> List[Dict[str, Any]]:
        """Audits for an org, newest first."""
        return list(reversed(list(self.iter_records(org_id))))

    def latest(self, org_id: str) -> Optional[Dict[str, Any]]:
        records = self.history(org_id)
        return records[0] if records else None


__all__ = ["AuditRecord", "JsonlAuditLogger"]
