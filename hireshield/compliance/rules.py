"""
Audit risk scoring and compliance findings for AI-hiring jurisdictions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Collection, Dict, Iterable, List, Mapping, Tuple, Union

from hireshield.compliance.types import EvaluationResult, Finding, JurisdictionRequirement, SelectionInput
from hireshield.config.reference import HIGH_RISK_USAGES

BASE_INCREMENT = 20
HIGH_RISK_INCREMENT = 15
MAX_RISK_SCORE = 100

RequirementTable = Union[Mapping[str, JurisdictionRequirement], Iterable[JurisdictionRequirement]]


@dataclass(frozen=True, slots=True)
class JurisdictionRule:
    """Extra obligation emitted for one specific jurisdiction."""

    code: str
    requirement: str
    status: str
    action: str


# Emitted after the base disclosure finding, before the usage-risk finding.
JURISDICTION_RULES: Tuple[JurisdictionRule, ...] = (
    JurisdictionRule(
        code="CO",
        requirement="Impact Assessment Required",
        status="non-compliant",
        action="Complete impact assessment template",
    ),
    JurisdictionRule(
        code="NYC",
        requirement="Annual Bias Audit Required",
        status="at-risk",
        action="Schedule bias audit with independent auditor",
    ),
)

DISCLOSURE_ACTION = "Generate disclosure notice for candidates/employees"
HIGH_RISK_REQUIREMENT = "High-risk AI usage detected"
HIGH_RISK_ACTION = "Review AI usage for potential discrimination"

SEVERITY_BY_STATUS: Dict[str, str] = {
    "non-compliant": "high",
    "at-risk": "medium",
}


def index_requirements(requirements: RequirementTable) -> Dict[str, JurisdictionRequirement]:
    """Return a code -> requirement mapping; the first entry wins on duplicate codes."""
    if isinstance(requirements, Mapping):
        return dict(requirements)
    indexed: Dict[str, JurisdictionRequirement] = {}
    for entry in requirements:
        indexed.setdefault(entry.code, entry)
    return indexed


def _uses_high_risk(usages: Iterable[str], high_risk_usages: Collection[str]) -> bool:
    return any(usage in high_risk_usages for usage in usages)


def _finding_factory(requirement: JurisdictionRequirement) -> Callable[[str, str, str], Finding]:
    def make(text: str, status: str, action: str) -> Finding:
        return Finding(
            jurisdiction=requirement.name,
            requirement=text,
            status=status,
            action=action,
            jurisdiction_code=requirement.code,
        )

    return make


def evaluate(
    selection: SelectionInput,
    requirements: RequirementTable,
    *,
    high_risk_usages: Collection[str] = HIGH_RISK_USAGES,
    rules: Iterable[JurisdictionRule] = JURISDICTION_RULES,
) -> EvaluationResult:
    """
    Score a tenant selection and list the findings it triggers.

    Jurisdictions are walked in input order. Unknown or unregulated codes
    contribute nothing. Each regulated jurisdiction adds a base increment and
    a disclosure finding, any jurisdiction-specific findings, and, when one of
    the selected usages is high risk, a usage-risk finding plus its increment.
    The final score is clamped to 100.

    Args:
        selection: Jurisdictions, tools and usages; any of them may be empty.
        requirements: Reference table as a sequence or a code mapping.
        high_risk_usages: Usage identifiers treated as high risk.
        rules: Jurisdiction-specific extra findings.

    Returns:
        EvaluationResult with the clamped score and ordered findings.
    """

    table = index_requirements(requirements)
    rules = tuple(rules)
    usages = tuple(selection.usages or ())
    high_risk = _uses_high_risk(usages, high_risk_usages)

    score = 0
    findings: List[Finding] = []

    for code in selection.jurisdictions or ():
        requirement = table.get(code)
        if requirement is None or not requirement.is_regulated:
            continue

        make = _finding_factory(requirement)
        score += BASE_INCREMENT
        findings.append(make(f"{requirement.law} - Disclosure Required", "non-compliant", DISCLOSURE_ACTION))

        for rule in rules:
            if rule.code == code:
                findings.append(make(rule.requirement, rule.status, rule.action))

        if high_risk:
            score += HIGH_RISK_INCREMENT
            findings.append(make(HIGH_RISK_REQUIREMENT, "at-risk", HIGH_RISK_ACTION))

    return EvaluationResult(risk_score=min(score, MAX_RISK_SCORE), findings=findings)


def finding_severity(status: str) -> str:
    """Map a finding status onto the stored severity scale."""
    return SEVERITY_BY_STATUS.get(status, "low")


__all__ = [
    "BASE_INCREMENT",
    "HIGH_RISK_INCREMENT",
    "JURISDICTION_RULES",
    "JurisdictionRule",
    "MAX_RISK_SCORE",
    "RequirementTable",
    "evaluate",
    "finding_severity",
    "index_requirements",
]
