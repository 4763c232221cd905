"""
Markdown compliance packet summarising an audit and remediation progress.
"""

from __future__ import annotations

from collections import OrderedDict
from datetime import date
from typing import Dict, Iterable, List, Optional

from jinja2 import Template

from hireshield.compliance.remediation import progress
from hireshield.compliance.rules import RequirementTable, finding_severity, index_requirements
from hireshield.compliance.types import EvaluationResult, Progress, RemediationItem, SelectionInput
from hireshield.config.reference import USAGE_TYPES, state_name

PACKET_TEMPLATE = Template(
    r"""# AI Hiring Compliance Packet: {{ org_name }}

Generated {{ generated_on }}

## Risk score

**{{ result.risk_score }} / 100** ({{ risk_level }})

{% if jurisdictions -%}
| Jurisdiction | Law | Effective |
|---|---|---|
{% for entry in jurisdictions -%}
| {{ cell(entry.name) }} | {{ cell(entry.law) }} | {{ cell(entry.effective or "n/a") }} |
{% endfor %}
{%- else -%}
No regulated jurisdictions selected.
{%- endif %}

{% if usages -%}
AI usage: {{ usages | join(", ") }}
{% endif %}
## Findings

{% if result.findings -%}
| # | Jurisdiction | Requirement | Status | Severity | Action |
|---|---|---|---|---|---|
{% for finding in result.findings -%}
| {{ loop.index }} | {{ cell(finding.jurisdiction) }} | {{ cell(finding.requirement) }} | {{ cell(finding.status) }} | {{ severity(finding.status) }} | {{ cell(finding.action) }} |
{% endfor %}
{%- else -%}
No findings.
{%- endif %}

## Remediation progress

{% if groups -%}
Overall: {{ overall.completed }}/{{ overall.total }} complete ({{ overall.percent }}%)

{% for code, items in groups.items() -%}
### {{ names.get(code) or state_name(code) }} ({{ group_progress[code].percent }}%)

{% for item in items -%}
- [{{ "x" if item.status == "complete" else " " }}] {{ item.item_label }}: {{ item.item_description }}
{% endfor %}
{% endfor %}
{%- else -%}
No remediation items tracked yet.
{%- endif %}
"""
)


def escape_cell(value: object) -> str:
    """Make a value safe to place inside a Markdown table cell."""
    text = " ".join(str(value).splitlines())
    return text.replace("|", "\\|")


def risk_level(score: int) -> str:
    if score > 50:
        return "high"
    if score > 25:
        return "medium"
    return "low"


def render_compliance_packet(
    org_name: str,
    selection: SelectionInput,
    result: EvaluationResult,
    items: Iterable[RemediationItem],
    requirements: RequirementTable,
    *,
    generated_on: Optional[date] = None,
) -> str:
    """Render the packet as Markdown."""

    table = index_requirements(requirements)
    regulated = [
        table[code]
        for code in OrderedDict.fromkeys(selection.jurisdictions or ())
        if code in table and table[code].is_regulated
    ]

    groups: Dict[str, List[RemediationItem]] = OrderedDict()
    for item in items:
        groups.setdefault(item.jurisdiction_code, []).append(item)
    group_progress: Dict[str, Progress] = {code: progress(group) for code, group in groups.items()}

    return PACKET_TEMPLATE.render(
        org_name=org_name,
        generated_on=(generated_on or date.today()).isoformat(),
        result=result,
        risk_level=risk_level(result.risk_score),
        jurisdictions=regulated,
        usages=[USAGE_TYPES.get(usage, usage) for usage in selection.usages or ()],
        severity=finding_severity,
        cell=escape_cell,
        groups=groups,
        group_progress=group_progress,
        overall=progress(item for group in groups.values() for item in group),
        names={code: entry.name for code, entry in table.items()},
        state_name=state_name,
    )


__all__ = ["PACKET_TEMPLATE", "escape_cell", "render_compliance_packet", "risk_level"]
