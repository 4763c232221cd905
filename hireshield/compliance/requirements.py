"""
Lookup of per-state deliverables for the compliance dashboard.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple

from hireshield.compliance.types import ComplianceRequirement, StateCompliance
from hireshield.config.reference import GENERAL_REQUIREMENTS, STATE_COMPLIANCE


@dataclass(slots=True)
class RequirementsSummary:
    states: List[StateCompliance] = field(default_factory=list)
    general: Tuple[ComplianceRequirement, ...] = ()

    @property
    def total(self) -> int:
        return sum(len(state.requirements) for state in self.states) + len(self.general)


def requirements_for_states(
    state_codes: Iterable[str],
    table: Sequence[StateCompliance] = STATE_COMPLIANCE,
    general: Sequence[ComplianceRequirement] = GENERAL_REQUIREMENTS,
) -> RequirementsSummary:
    """Return known states in input order plus the requirements every tenant has."""
    by_code = {state.code: state for state in table}
    states = [by_code[code] for code in state_codes if code in by_code]
    return RequirementsSummary(states=states, general=tuple(general))


def total_requirements(
    state_codes: Iterable[str],
    table: Sequence[StateCompliance] = STATE_COMPLIANCE,
    general: Sequence[ComplianceRequirement] = GENERAL_REQUIREMENTS,
) -> int:
    return requirements_for_states(state_codes, table, general).total


__all__ = ["RequirementsSummary", "requirements_for_states", "total_requirements"]
