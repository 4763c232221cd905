import json
from datetime import datetime, timezone

import pytest

from hireshield.compliance.remediation import build_remediation_checklist
from hireshield.compliance.types import EvaluationResult, Finding, SelectionInput
from hireshield.config.reference import STATE_CHECKLISTS
from hireshield.storage.audit import JsonlAuditLogger
from hireshield.storage.remediation import InMemoryRemediationStore, JsonFileRemediationStore

ORG = "org-1"


def test_seeding_twice_does_not_duplicate():
    store = InMemoryRemediationStore()
    assert store.upsert_items(ORG, build_remediation_checklist("NYC", STATE_CHECKLISTS)) == 4
    assert store.upsert_items(ORG, build_remediation_checklist("NYC", STATE_CHECKLISTS)) == 0

    items = store.list_items(ORG)
    pairs = [(item.jurisdiction_code, item.item_key) for item in items]
    assert len(pairs) == len(set(pairs)) == 4


def test_reseeding_keeps_existing_status():
    store = InMemoryRemediationStore()
    store.upsert_items(ORG, build_remediation_checklist("NYC", STATE_CHECKLISTS))
    store.update_status(ORG, "NYC", "audit", "complete")
    store.upsert_items(ORG, build_remediation_checklist("NYC", STATE_CHECKLISTS))

    audit_item = next(item for item in store.list_items(ORG, "NYC") if item.item_key == "audit")
    assert audit_item.status == "complete"
    assert audit_item.completed_at is not None


def test_orgs_are_isolated():
    store = InMemoryRemediationStore()
    store.upsert_items(ORG, build_remediation_checklist("IL", STATE_CHECKLISTS))
    assert store.upsert_items("org-2", build_remediation_checklist("IL", STATE_CHECKLISTS)) == 3
    assert len(store.list_items(ORG)) == 3
    assert store.list_items("org-3") == []


def test_update_status_stamps_and_clears_completion():
    store = InMemoryRemediationStore()
    store.upsert_items(ORG, build_remediation_checklist("CA", STATE_CHECKLISTS))
    now = datetime(2026, 1, 2, tzinfo=timezone.utc)

    updated = store.update_status(ORG, "CA", "training", "complete", now=now)
    assert updated.completed_at == now

    reopened = store.update_status(ORG, "CA", "training", "in_progress")
    assert reopened.status == "in_progress"
    assert reopened.completed_at is None


def test_update_status_rejects_bad_input():
    store = InMemoryRemediationStore()
    store.upsert_items(ORG, build_remediation_checklist("CA", STATE_CHECKLISTS))
    with pytest.raises(ValueError):
        store.update_status(ORG, "CA", "training", "done")
    with pytest.raises(KeyError):
        store.update_status(ORG, "CA", "bias_audit", "complete")


def test_listed_items_are_copies():
    store = InMemoryRemediationStore()
    store.upsert_items(ORG, build_remediation_checklist("IL", STATE_CHECKLISTS))
    store.list_items(ORG)[0].status = "complete"
    assert all(item.status == "pending" for item in store.list_items(ORG))


def test_json_store_round_trips_through_disk(tmp_path):
    path = tmp_path / "store" / "items.json"
    store = JsonFileRemediationStore(path)
    store.upsert_items(ORG, build_remediation_checklist("NYC", STATE_CHECKLISTS))
    store.update_status(ORG, "NYC", "bias_audit", "complete")

    reloaded = JsonFileRemediationStore(path)
    assert reloaded.upsert_items(ORG, build_remediation_checklist("NYC", STATE_CHECKLISTS)) == 0
    bias_audit = next(item for item in reloaded.list_items(ORG) if item.item_key == "bias_audit")
    assert bias_audit.status == "complete"
    assert isinstance(bias_audit.completed_at, datetime)

    records = json.loads(path.read_text(encoding="utf-8"))
    assert {record["org_id"] for record in records} == {ORG}


@pytest.mark.parametrize(
    "content",
    ['[{"org_id": "org-1", "jurisdiction_code": "NYC"', '{"org_id": "org-1"}', '[{"jurisdiction_code": "NYC"}]'],
)
def test_json_store_rejects_malformed_file(tmp_path, content):
    path = tmp_path / "items.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError, match="Remediation store"):
        JsonFileRemediationStore(path)


def test_json_store_keeps_memory_and_disk_in_step_when_write_fails(tmp_path, monkeypatch):
    path = tmp_path / "items.json"
    store = JsonFileRemediationStore(path)
    store.upsert_items(ORG, build_remediation_checklist("NYC", STATE_CHECKLISTS))
    on_disk = path.read_text(encoding="utf-8")

    def fail_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("hireshield.storage.remediation.os.replace", fail_replace)
    with pytest.raises(OSError):
        store.update_status(ORG, "NYC", "audit", "complete")
    with pytest.raises(OSError):
        store.upsert_items(ORG, build_remediation_checklist("IL", STATE_CHECKLISTS))

    assert path.read_text(encoding="utf-8") == on_disk
    assert not list(tmp_path.glob("*.tmp"))
    assert all(item.status == "pending" for item in store.list_items(ORG))
    assert store.list_items(ORG, "IL") == []


def test_audit_logger_appends_records(tmp_path):
    logger = JsonlAuditLogger(tmp_path / "logs" / "audit.jsonl")
    result = EvaluationResult(
        risk_score=20,
        findings=[
            Finding(
                jurisdiction="New York City",
                requirement="Annual Bias Audit Required",
                status="at-risk",
                action="Schedule bias audit with independent auditor",
                jurisdiction_code="NYC",
            )
        ],
    )
    first = logger.log(ORG, SelectionInput(jurisdictions=["NYC"]), result)
    second = logger.log(ORG, SelectionInput(jurisdictions=["NYC"]), result, metadata={"source": "test"})
    logger.log("org-2", SelectionInput(), EvaluationResult(risk_score=0))

    history = logger.history(ORG)
    assert [record["audit_id"] for record in history] == [second.audit_id, first.audit_id]
    assert logger.latest(ORG)["metadata"] == {"source": "test"}
    assert history[0]["findings"][0]["severity"] == "medium"
    assert history[0]["findings"][0]["jurisdiction_code"] == "NYC"
    assert logger.latest("missing") is None


def test_audit_logger_skips_corrupt_lines(tmp_path):
    path = tmp_path / "audit.jsonl"
    path.write_text('{"org_id": "org-1", "audit_id": "a"}\nnot-json\n\n', encoding="utf-8")
    assert [record["audit_id"] for record in JsonlAuditLogger(path).iter_records()] == ["a"]
