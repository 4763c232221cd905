import json
from datetime import date

from hireshield.compliance.rules import evaluate
from hireshield.compliance.types import EvaluationResult, JurisdictionRequirement, SelectionInput
from hireshield.config.reference import JURISDICTION_REQUIREMENTS
from hireshield.reporting.packet import escape_cell, render_compliance_packet, risk_level
from hireshield.scripts.run_audit import run
from hireshield.services.tracker import ComplianceTracker


def test_packet_lists_score_findings_and_progress():
    tracker = ComplianceTracker()
    selection = SelectionInput(jurisdictions=["NYC", "CO"], usages=["screening"])
    outcome = tracker.run_audit("org-1", selection)
    tracker.update_item("org-1", "NYC", "audit", "complete")

    packet = render_compliance_packet(
        "Acme Corp",
        selection,
        outcome.result,
        tracker.items("org-1"),
        JURISDICTION_REQUIREMENTS,
        generated_on=date(2026, 3, 1),
    )

    assert "# AI Hiring Compliance Packet: Acme Corp" in packet
    assert "Generated 2026-03-01" in packet
    assert "**70 / 100** (high)" in packet
    assert "Annual Bias Audit Required" in packet
    assert "Impact Assessment Required" in packet
    assert "Resume/Application Screening" in packet
    assert "- [x] Complete Compliance Audit" in packet
    assert "Overall: 1/10 complete (10%)" in packet
    assert "### New York City (25%)" in packet


def test_packet_for_empty_selection():
    selection = SelectionInput()
    packet = render_compliance_packet("Acme", selection, evaluate(selection, JURISDICTION_REQUIREMENTS), [], JURISDICTION_REQUIREMENTS)
    assert "**0 / 100** (low)" in packet
    assert "No findings." in packet
    assert "No remediation items tracked yet." in packet


def test_risk_levels():
    assert risk_level(0) == "low"
    assert risk_level(25) == "low"
    assert risk_level(35) == "medium"
    assert risk_level(51) == "high"


def test_cli_prints_json(capsys):
    code = run(["--states", "NYC", "--usages", "screening"])
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["risk_score"] == 35
    assert payload["audit_id"] is None
    assert [f["requirement"] for f in payload["findings"]] == [
        "NYC Local Law 144 - Disclosure Required",
        "Annual Bias Audit Required",
        "High-risk AI usage detected",
    ]
    assert payload["remediation"][0]["code"] == "NYC"
    assert payload["overall"]["total"] == 4


def test_cli_records_audit_and_store(tmp_path, capsys):
    audit_log = tmp_path / "audit.jsonl"
    store = tmp_path / "items.json"
    args = ["--states", "IL", "--record", "--audit-log", str(audit_log), "--store", str(store)]

    assert run(args) == 0
    assert run(args) == 0
    capsys.readouterr()

    assert len(audit_log.read_text(encoding="utf-8").splitlines()) == 2
    assert len(json.loads(store.read_text(encoding="utf-8"))) == 3


def test_cli_markdown_output(capsys):
    assert run(["--states", "CA", "--format", "markdown", "--org-name", "Acme"]) == 0
    out = capsys.readouterr().out
    assert "Compliance Packet: Acme" in out
    assert "CCPA ADMT Regulations - Disclosure Required" in out


def test_cli_reports_truncated_store(tmp_path, capsys):
    store = tmp_path / "items.json"
    store.write_text('[{"org_id": "local", "jurisdiction_code": "NYC"', encoding="utf-8")
    args = ["--states", "NYC", "--record", "--store", str(store), "--audit-log", str(tmp_path / "audit.jsonl")]

    assert run(args) == 1
    assert "failed to open remediation store" in capsys.readouterr().err
    assert not (tmp_path / "audit.jsonl").exists()


def test_cli_reports_bad_reference_file(tmp_path, capsys):
    reference = tmp_path / "reference.json"
    reference.write_text("[1, 2]", encoding="utf-8")
    assert run(["--states", "NYC", "--reference", str(reference)]) == 1
    assert "failed to load reference tables" in capsys.readouterr().err


def test_packet_escapes_pipes_in_table_cells():
    requirements = [JurisdictionRequirement(code="NJ", name="New Jersey", law="A | B", is_regulated=True)]
    selection = SelectionInput(jurisdictions=["NJ"])
    packet = render_compliance_packet("Acme", selection, evaluate(selection, requirements), [], requirements)

    assert escape_cell("A | B\nC") == "A \\| B C"
    finding_rows = [line for line in packet.splitlines() if line.startswith("| 1 |")]
    assert finding_rows == [
        "| 1 | New Jersey | A \\| B - Disclosure Required | non-compliant | high "
        "| Generate disclosure notice for candidates/employees |"
    ]
    assert "| New Jersey | A \\| B | n/a |" in packet


def test_packet_names_items_outside_the_requirement_table():
    tracker = ComplianceTracker()
    tracker.add_hiring_state("org-1", "IL")
    requirements = [JurisdictionRequirement(code="NJ", name="New Jersey", law="Draft Bill", is_regulated=True)]

    packet = render_compliance_packet(
        "Acme", SelectionInput(), EvaluationResult(risk_score=0), tracker.items("org-1"), requirements
    )
    assert "### Illinois (0%)" in packet
