"""
Reference tables for AI-hiring jurisdictions.

These are defaults only. Engine functions take the tables as arguments so
callers can inject replacements (see `hireshield.config.loader`).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from hireshield.compliance.types import (
    ChecklistTemplateItem,
    ComplianceRequirement,
    JurisdictionRequirement,
    StateCompliance,
)

# Canonical high-risk usage set shared by the audit and onboarding scorers.
HIGH_RISK_USAGES: frozenset[str] = frozenset({"screening", "ranking", "interview-analysis", "termination"})

JURISDICTION_REQUIREMENTS: Tuple[JurisdictionRequirement, ...] = (
    JurisdictionRequirement(
        code="IL",
        name="Illinois",
        law="HB 3773 - AI Employment Decision Act",
        is_regulated=True,
        effective="January 1, 2026",
        requirements=(
            "Notify employees when AI is used in employment decisions",
            "Prohibit AI-driven discrimination based on protected classes",
            "Cannot use zip code as proxy for protected characteristics",
            "Must disclose AI system name, purpose, and data collected",
        ),
        penalties=(
            "Civil rights violation under Illinois Human Rights Act. Employees can file charges "
            "with Human Rights Commission or pursue civil complaints."
        ),
    ),
    JurisdictionRequirement(
        code="CO",
        name="Colorado",
        law="Colorado AI Act (SB24-205)",
        is_regulated=True,
        effective="February 1, 2026",
        requirements=(
            "Use reasonable care to protect consumers from algorithmic discrimination",
            "Implement risk management programs (NIST AI RMF recommended)",
            "Complete impact assessments annually or within 90 days of substantial modification",
            "Provide consumer notifications before consequential decisions",
            "Give statement of reasons for adverse decisions",
            "Allow opportunity to correct incorrect personal data",
            "Provide opportunity to appeal with human review",
        ),
        penalties=(
            "Up to $20,000 per violation. Enforced by Colorado Attorney General as unfair or "
            "deceptive trade practice."
        ),
    ),
    JurisdictionRequirement(
        code="CA",
        name="California",
        law="CCPA ADMT Regulations",
        is_regulated=True,
        effective="January 1, 2026 (partial), January 1, 2027 (full)",
        requirements=(
            "Provide pre-use notice explaining ADMT purpose and opt-out rights",
            "Allow consumers to opt out of ADMT for significant decisions",
            "Conduct risk assessments for ADMT in employment contexts",
            "Human reviewers must be able to interpret and override ADMT decisions",
            "Applies to any tech that 'replaces or substantially replaces human decision-making'",
        ),
        penalties=(
            "$2,500 per unintentional violation, $7,500 per intentional violation. Each affected "
            "consumer counts as separate violation."
        ),
    ),
    JurisdictionRequirement(
        code="NYC",
        name="New York City",
        law="NYC Local Law 144",
        is_regulated=True,
        effective="Active (July 5, 2023)",
        requirements=(
            "Annual bias audit by independent auditor",
            "Publish audit results on company website",
            "Notify candidates 10 business days before use",
            "Allow candidates to request alternative selection process",
            "Applies to automated employment decision tools (AEDT)",
        ),
        penalties="$500 for first violation, $500-$1,500 per subsequent violation per day.",
    ),
    # Facial-recognition consent only; not scored by the audit.
    JurisdictionRequirement(
        code="MD",
        name="Maryland",
        law="HB 1202",
        is_regulated=False,
        effective="October 1, 2020",
        requirements=("Get consent before using facial recognition in interviews",),
    ),
)

REGULATED_CODES: Tuple[str, ...] = tuple(entry.code for entry in JURISDICTION_REQUIREMENTS if entry.is_regulated)


def _checklist(*entries: Tuple[str, str, str, str]) -> Tuple[ChecklistTemplateItem, ...]:
    return tuple(ChecklistTemplateItem(key=k, label=l, description=d, route=r) for k, l, d, r in entries)


_AUDIT_ENTRY = ("audit", "Complete Compliance Audit", "Run an audit to identify AI tools and usage patterns", "/audit")
_TRAINING_ENTRY = ("training", "Complete Training", "Ensure HR staff understands compliance requirements", "/training")

STATE_CHECKLISTS: Mapping[str, Tuple[ChecklistTemplateItem, ...]] = MappingProxyType(
    {
        "CO": _checklist(
            _AUDIT_ENTRY,
            ("disclosure", "Create Disclosure Notice", "Generate disclosure documents for candidates and employees", "/documents"),
            (
                "impact_assessment",
                "Complete Impact Assessment",
                "Document AI system risks and safeguards (annual requirement)",
                "/documents/impact-assessment",
            ),
            _TRAINING_ENTRY,
            ("adverse_decision", "Set Up Adverse Decision Process", "Configure human review and appeal process", "/settings/adverse-decisions"),
            ("consent_tracking", "Set Up Consent Tracking", "Track candidate disclosures and consents", "/consent"),
        ),
        "IL": _checklist(
            _AUDIT_ENTRY,
            ("disclosure", "Create Disclosure Notice", "Generate disclosure documents for employees", "/documents"),
            _TRAINING_ENTRY,
        ),
        "CA": _checklist(
            _AUDIT_ENTRY,
            ("disclosure", "Create Pre-Use Notice", "Generate disclosure documents with opt-out rights", "/documents"),
            ("consent_tracking", "Set Up Opt-Out Tracking", "Track candidate opt-out requests", "/consent"),
            _TRAINING_ENTRY,
        ),
        "NYC": _checklist(
            ("audit", "Complete Compliance Audit", "Run an audit to identify AEDT usage", "/audit"),
            ("bias_audit", "Schedule Bias Audit", "Annual independent bias audit required", "/documents"),
            ("disclosure", "Publish Bias Audit Results", "Create public disclosure page", "/documents"),
            _TRAINING_ENTRY,
        ),
    }
)


def _candidate_notice(req_id: str, title: str, description: str) -> ComplianceRequirement:
    return ComplianceRequirement(
        id=req_id,
        title=title,
        description=description,
        type="document",
        doc_type="disclosure-candidate",
        href="/documents?generate=disclosure-candidate",
        estimated_time="2 min",
    )


STATE_COMPLIANCE: Tuple[StateCompliance, ...] = (
    StateCompliance(
        code="IL",
        name="Illinois",
        law="HB 3773",
        effective_date="2026-01-01",
        is_active=True,
        requirements=(
            _candidate_notice("il-disclosure", "Candidate Disclosure Notice", "Notify candidates that AI is used in hiring decisions"),
            ComplianceRequirement(
                id="il-employee-notice",
                title="Employee Notification",
                description="Notify employees when AI affects employment decisions",
                type="document",
                doc_type="disclosure-employee",
                href="/documents?generate=disclosure-employee",
                estimated_time="2 min",
            ),
        ),
    ),
    StateCompliance(
        code="CO",
        name="Colorado",
        law="AI Act (SB24-205)",
        effective_date="2026-02-01",
        is_active=False,
        requirements=(
            ComplianceRequirement(
                id="co-impact",
                title="Impact Assessment",
                description="Annual assessment of AI system risks and safeguards",
                type="document",
                doc_type="impact-assessment",
                href="/documents/impact-assessment",
                estimated_time="15 min",
            ),
            _candidate_notice("co-disclosure", "Candidate Disclosure Notice", "Pre-decision notification to candidates"),
            ComplianceRequirement(
                id="co-consent",
                title="Consent Collection",
                description="Collect and track candidate consent",
                type="ongoing",
                href="/consent",
                estimated_time="ongoing",
            ),
        ),
    ),
    StateCompliance(
        code="NYC",
        name="New York City",
        law="Local Law 144",
        effective_date="2023-07-05",
        is_active=True,
        requirements=(
            ComplianceRequirement(
                id="nyc-audit",
                title="Annual Bias Audit",
                description="Independent auditor must analyze tool for bias",
                type="action",
                href="/audit",
                estimated_time="varies",
            ),
            ComplianceRequirement(
                id="nyc-disclosure",
                title="Bias Audit Disclosure",
                description="Publish audit results on your website",
                type="document",
                doc_type="bias-audit-disclosure",
                href="/disclosures",
                estimated_time="5 min",
            ),
            _candidate_notice("nyc-notice", "Candidate Notice (10 days)", "Notify candidates 10 business days before AI use"),
        ),
    ),
    StateCompliance(
        code="CA",
        name="California",
        law="CCPA ADMT Rules",
        effective_date="2026-01-01",
        is_active=True,
        requirements=(
            _candidate_notice("ca-disclosure", "Pre-Use Notice", "Explain ADMT purpose and opt-out rights"),
            ComplianceRequirement(
                id="ca-consent",
                title="Opt-Out Mechanism",
                description="Allow candidates to opt out of AI processing",
                type="ongoing",
                href="/consent",
                estimated_time="ongoing",
            ),
        ),
    ),
    StateCompliance(
        code="MD",
        name="Maryland",
        law="HB 1202",
        effective_date="2020-10-01",
        is_active=True,
        requirements=(
            ComplianceRequirement(
                id="md-consent",
                title="Facial Recognition Consent",
                description="Get consent before using facial recognition in interviews",
                type="document",
                doc_type="consent-form",
                href="/documents?generate=consent-form",
                estimated_time="2 min",
            ),
        ),
    ),
)

GENERAL_REQUIREMENTS: Tuple[ComplianceRequirement, ...] = (
    ComplianceRequirement(
        id="training",
        title="Train Your Team",
        description="Certify recruiters and hiring managers on AI compliance",
        type="action",
        href="/training",
        estimated_time="15-30 min",
    ),
    ComplianceRequirement(
        id="handbook",
        title="Employee Handbook Policy",
        description="Add AI use policy to your employee handbook",
        type="document",
        doc_type="handbook-policy",
        href="/documents?generate=handbook-policy",
        estimated_time="5 min",
    ),
)

USAGE_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "screening": "Resume/Application Screening",
        "ranking": "Candidate Ranking/Scoring",
        "matching": "Job Matching",
        "interview-analysis": "Interview Analysis",
        "assessment-scoring": "Assessment Scoring",
        "chatbot-screening": "Chatbot Screening",
        "scheduling": "Interview Scheduling",
        "job-description": "Job Description Writing",
        "background-check": "Background Check Review",
        "compensation": "Compensation Decisions",
        "promotion": "Promotion Decisions",
        "termination": "Termination Decisions",
    }
)

_STATE_NAMES: Dict[str, str] = {
    "AL": "Alabama", "AK": "Alaska", "AZ": "Arizona", "AR": "Arkansas", "CA": "California",
    "CO": "Colorado", "CT": "Connecticut", "DE": "Delaware", "DC": "Washington D.C.", "FL": "Florida",
    "GA": "Georgia", "HI": "Hawaii", "ID": "Idaho", "IL": "Illinois", "IN": "Indiana",
    "IA": "Iowa", "KS": "Kansas", "KY": "Kentucky", "LA": "Louisiana", "ME": "Maine",
    "MD": "Maryland", "MA": "Massachusetts", "MI": "Michigan", "MN": "Minnesota", "MS": "Mississippi",
    "MO": "Missouri", "MT": "Montana", "NE": "Nebraska", "NV": "Nevada", "NH": "New Hampshire",
    "NJ": "New Jersey", "NM": "New Mexico", "NY": "New York", "NYC": "New York City", "NC": "North Carolina",
    "ND": "North Dakota", "OH": "Ohio", "OK": "Oklahoma", "OR": "Oregon", "PA": "Pennsylvania",
    "RI": "Rhode Island", "SC": "South Carolina", "SD": "South Dakota", "TN": "Tennessee", "TX": "Texas",
    "UT": "Utah", "VT": "Vermont", "VA": "Virginia", "WA": "Washington", "WV": "West Virginia",
    "WI": "Wisconsin", "WY": "Wyoming",
}
ALL_STATES: Mapping[str, str] = MappingProxyType(_STATE_NAMES)


def state_name(code: str) -> str:
    """Display name for a state code, falling back to the code itself."""
    return ALL_STATES.get(code, code)


__all__ = [
    "ALL_STATES",
    "GENERAL_REQUIREMENTS",
    "HIGH_RISK_USAGES",
    "JURISDICTION_REQUIREMENTS",
    "REGULATED_CODES",
    "STATE_CHECKLISTS",
    "STATE_COMPLIANCE",
    "USAGE_TYPES",
    "state_name",
]
