"""
Quick risk estimate shown at the end of the onboarding quiz.
"""

from __future__ import annotations

from typing import Collection

from hireshield.compliance.types import SelectionInput
from hireshield.config.reference import HIGH_RISK_USAGES, REGULATED_CODES

STATE_INCREMENT = 25
HIGH_RISK_INCREMENT = 15
PER_TOOL_INCREMENT = 5
TOOL_CAP = 20


def estimate_onboarding_risk(
    selection: SelectionInput,
    regulated_codes: Collection[str] = REGULATED_CODES,
    *,
    high_risk_usages: Collection[str] = HIGH_RISK_USAGES,
) -> int:
    """
    Coarse 0-100 score from the onboarding selections.

    Unlike the audit score the usage term is counted once, and tool count
    adds up to TOOL_CAP on its own.
    """

    score = sum(STATE_INCREMENT for code in selection.jurisdictions or () if code in regulated_codes)
    if any(usage in high_risk_usages for usage in selection.usages or ()):
        score += HIGH_RISK_INCREMENT
    tools = selection.tools or ()
    if tools:
        score += min(len(tools) * PER_TOOL_INCREMENT, TOOL_CAP)
    return min(score, 100)


__all__ = ["estimate_onboarding_risk"]
