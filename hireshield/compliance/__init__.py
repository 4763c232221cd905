"""
Compliance rule evaluation and remediation helpers.

Attributes are resolved lazily so that `hireshield.config.reference` can
import `hireshield.compliance.types` without pulling in the rule engine,
which itself depends on the reference tables.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict

__all__ = [
    "AuditWizard",
    "EvaluationResult",
    "Finding",
    "JurisdictionRequirement",
    "RemediationItem",
    "SelectionInput",
    "build_remediation_checklist",
    "estimate_onboarding_risk",
    "evaluate",
    "finding_severity",
    "progress",
    "requirements_for_states",
    "total_requirements",
]

_MODULE_ATTRS: Dict[str, str] = {
    "AuditWizard": "hireshield.compliance.wizard",
    "EvaluationResult": "hireshield.compliance.types",
    "Finding": "hireshield.compliance.types",
    "JurisdictionRequirement": "hireshield.compliance.types",
    "RemediationItem": "hireshield.compliance.types",
    "SelectionInput": "hireshield.compliance.types",
    "build_remediation_checklist": "hireshield.compliance.remediation",
    "estimate_onboarding_risk": "hireshield.compliance.onboarding",
    "evaluate": "hireshield.compliance.rules",
    "finding_severity": "hireshield.compliance.rules",
    "progress": "hireshield.compliance.remediation",
    "requirements_for_states": "hireshield.compliance.requirements",
    "total_requirements": "hireshield.compliance.requirements",
}


def __getattr__(name: str) -> Any:
    module_path = _MODULE_ATTRS.get(name)
    if not module_path:
        raise AttributeError(f"module 'hireshield.compliance' has no attribute '{name}'")  # pragma: no cover
    module = import_module(module_path)
    return getattr(module, name)


def __dir__() -> list[str]:  # pragma: no cover - convenience helper
    return sorted(__all__)
