"""
Dataclasses describing compliance engine inputs and outputs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Sequence, Tuple

FINDING_STATUSES = ("compliant", "at-risk", "non-compliant")


@dataclass(frozen=True, slots=True)
class JurisdictionRequirement:
    """Reference entry for a state or city that may regulate AI hiring."""

    code: str
    name: str
    law: str
    is_regulated: bool
    effective: Optional[str] = None
    requirements: Tuple[str, ...] = ()
    penalties: Optional[str] = None


@dataclass(slots=True)
class SelectionInput:
    """Jurisdictions, tools and usages picked by a tenant (may be partial)."""

    jurisdictions: Sequence[str] = field(default_factory=list)
    tools: Sequence[str] = field(default_factory=list)
    usages: Sequence[str] = field(default_factory=list)


@dataclass(slots=True)
class Finding:
    """Single compliance obligation or risk flag."""

    jurisdiction: str
    requirement: str
    status: str  # one of FINDING_STATUSES
    action: str
    jurisdiction_code: Optional[str] = None


@dataclass(slots=True)
class EvaluationResult:
    """Risk score and ordered findings for one selection."""

    risk_score: int
    findings: List[Finding] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ChecklistTemplateItem:
    """Static checklist entry for a regulated jurisdiction."""

    key: str
    label: str
    description: str
    route: Optional[str] = None


@dataclass(slots=True)
class RemediationItem:
    """Trackable action moving a jurisdiction towards compliance."""

    jurisdiction_code: str
    item_key: str
    item_label: str
    item_description: str
    status: str = "pending"
    completed_at: Optional[datetime] = None
    route: Optional[str] = None
    audit_id: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Progress:
    completed: int
    total: int
    percent: int


@dataclass(frozen=True, slots=True)
class ComplianceRequirement:
    """Concrete deliverable a state expects (document, action or ongoing task)."""

    id: str
    title: str
    description: str
    type: str  # "document", "action" or "ongoing"
    href: str
    doc_type: Optional[str] = None
    estimated_time: Optional[str] = None


@dataclass(frozen=True, slots=True)
class StateCompliance:
    """Per-state deliverables with the governing law and effective date."""

    code: str
    name: str
    law: str
    effective_date: str
    is_active: bool
    requirements: Tuple[ComplianceRequirement, ...] = ()


__all__ = [
    "FINDING_STATUSES",
    "JurisdictionRequirement",
    "SelectionInput",
    "Finding",
    "EvaluationResult",
    "ChecklistTemplateItem",
    "RemediationItem",
    "Progress",
    "ComplianceRequirement",
    "StateCompliance",
]
