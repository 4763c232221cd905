"""
Remediation checklist seeding and progress arithmetic.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Mapping, Optional, Sequence, Union

from hireshield.compliance.types import ChecklistTemplateItem, Progress, RemediationItem

PENDING = "pending"
IN_PROGRESS = "in_progress"
COMPLETE = "complete"
REMEDIATION_STATUSES = (PENDING, IN_PROGRESS, COMPLETE)

ChecklistTemplate = Union[
    Sequence[ChecklistTemplateItem],
    Mapping[str, Sequence[ChecklistTemplateItem]],
]


def build_remediation_checklist(
    jurisdiction_code: str,
    checklist_template: ChecklistTemplate,
    *,
    audit_id: Optional[str] = None,
) -> List[RemediationItem]:
    """
    Produce one pending remediation item per checklist entry.

    `checklist_template` is either the entry list for this jurisdiction or
    the whole per-jurisdiction table; an unknown code yields no items.
    Persisting the result must upsert on (jurisdiction_code, item_key).
    """

    if isinstance(checklist_template, Mapping):
        entries: Sequence[ChecklistTemplateItem] = checklist_template.get(jurisdiction_code, ())
    else:
        entries = checklist_template

    items: List[RemediationItem] = []
    seen: set[str] = set()
    for entry in entries:
        if entry.key in seen:
            continue
        seen.add(entry.key)
        items.append(
            RemediationItem(
                jurisdiction_code=jurisdiction_code,
                item_key=entry.key,
                item_label=entry.label,
                item_description=entry.description,
                status=PENDING,
                completed_at=None,
                route=entry.route,
                audit_id=audit_id,
            )
        )
    return items


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def progress(items: Iterable[RemediationItem]) -> Progress:
    """Count completed items and the rounded completion percentage."""
    items = list(items)
    total = len(items)
    completed = sum(1 for item in items if item.status == COMPLETE)
    percent = 0 if total == 0 else _round_half_up(100 * completed / total)
    return Progress(completed=completed, total=total, percent=percent)


__all__ = [
    "COMPLETE",
    "IN_PROGRESS",
    "PENDING",
    "REMEDIATION_STATUSES",
    "ChecklistTemplate",
    "build_remediation_checklist",
    "progress",
]
