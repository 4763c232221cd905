"""
Step model for the four-page audit wizard.

The wizard only collects a selection; scoring goes through `evaluate`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from hireshield.compliance.rules import RequirementTable, evaluate
from hireshield.compliance.types import EvaluationResult, SelectionInput

STEPS: Tuple[str, ...] = ("states", "tools", "usage", "results")

# Selection field edited on each input step.
_FIELDS: Dict[str, str] = {"states": "jurisdictions", "tools": "tools", "usage": "usages"}


class WizardError(ValueError):
    """Raised for unknown steps or fields and when navigating past either end."""


@dataclass(slots=True)
class AuditWizard:
    step: str = STEPS[0]
    jurisdictions: List[str] = field(default_factory=list)
    tools: List[str] = field(default_factory=list)
    usages: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.step not in STEPS:
            raise WizardError(f"Unknown wizard step '{self.step}'.")

    @property
    def step_index(self) -> int:
        return STEPS.index(self.step)

    def toggle(self, field_name: str, value: str) -> None:
        """Add `value` to a selection field, or remove it if already present."""
        if field_name in _FIELDS:
            field_name = _FIELDS[field_name]
        if field_name not in _FIELDS.values():
            raise WizardError(f"Unknown selection field '{field_name}'.")
        values: List[str] = getattr(self, field_name)
        if value in values:
            values.remove(value)
        else:
            values.append(value)

    def next(self) -> str:
        if self.step_index == len(STEPS) - 1:
            raise WizardError("Already at the results step.")
        self.step = STEPS[self.step_index + 1]
        return self.step

    def back(self) -> str:
        if self.step_index == 0:
            raise WizardError("Already at the first step.")
        self.step = STEPS[self.step_index - 1]
        return self.step

    def selection(self) -> SelectionInput:
        return SelectionInput(
            jurisdictions=list(self.jurisdictions),
            tools=list(self.tools),
            usages=list(self.usages),
        )

    def results(self, requirements: RequirementTable) -> EvaluationResult:
        # Valid mid-wizard; partial selections just yield fewer findings.
        return evaluate(self.selection(), requirements)


__all__ = ["AuditWizard", "STEPS", "WizardError"]
