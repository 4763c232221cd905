"""
Remediation item stores keyed by (org_id, jurisdiction_code, item_key).

Seeding is an upsert: items already present keep their status and
completion timestamp, so re-running a seed is harmless.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from hireshield.compliance.remediation import COMPLETE, REMEDIATION_STATUSES
from hireshield.compliance.types import RemediationItem

logger = logging.getLogger("hireshield.storage.remediation")

ItemId = Tuple[str, str, str]


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


class InMemoryRemediationStore:
    """Process-local store; not thread-safe."""

    def __init__(self) -> None:
        self._items: Dict[ItemId, RemediationItem] = {}

    def upsert_items(self, org_id: str, items: Iterable[RemediationItem]) -> int:
        """Insert items whose key is not yet stored; return how many were inserted."""
        added: List[ItemId] = []
        for item in items:
            item_id = (org_id, item.jurisdiction_code, item.item_key)
            if item_id in self._items:
                continue
            self._items[item_id] = replace(item)
            added.append(item_id)
        inserted = len(added)
        if inserted:
            try:
                self._persist()
            except OSError:
                for item_id in added:
                    del self._items[item_id]
                raise
        logger.debug(
            "Remediation items upserted",
            extra={"org_id": org_id, "inserted": inserted},
        )
        return inserted

    def list_items(self, org_id: str, jurisdiction_code: Optional[str] = None) -> List[RemediationItem]:
        return [
            replace(item)
            for (owner, code, _), item in self._items.items()
            if owner == org_id and (jurisdiction_code is None or code == jurisdiction_code)
        ]

    def update_status(
        self,
        org_id: str,
        jurisdiction_code: str,
        item_key: str,
        status: str,
        *,
        now: Optional[datetime] = None,
    ) -> RemediationItem:
        """
        Set an item's status.

        `completed_at` is stamped when the status becomes complete and cleared
        for any other status.

        Raises:
            ValueError: Unknown status value.
            KeyError: No such item for this org.
        """

        if status not in REMEDIATION_STATUSES:
            raise ValueError(f"Unknown remediation status '{status}'.")
        item_id = (org_id, jurisdiction_code, item_key)
        if item_id not in self._items:
            raise KeyError(f"No remediation item '{item_key}' for {jurisdiction_code}.")

        previous = self._items[item_id]
        completed_at = (now or datetime.now(timezone.utc)) if status == COMPLETE else None
        item = replace(previous, status=status, completed_at=completed_at)
        self._items[item_id] = item
        try:
            self._persist()
        except OSError:
            self._items[item_id] = previous
            raise
        logger.info(
            "Remediation status updated",
            extra={"org_id": org_id, "jurisdiction_code": jurisdiction_code, "item_key": item_key, "status": status},
        )
        return replace(item)

    def _persist(self) -> None:
        """Hook for durable subclasses."""


class JsonFileRemediationStore(InMemoryRemediationStore):
    """Store that rewrites a single JSON document after each change."""

    def __init__(self, path: Path):
        super().__init__()
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if self.path.exists():
            self._load()

    def _load(self) -> None:
        """
        Raises:
            ValueError: The file is not a JSON list of remediation records.
        """

        try:
            records = json.loads(self.path.read_text(encoding="utf-8") or "[]")
        except json.JSONDecodeError as exc:
            raise ValueError(f"Remediation store {self.path} is not valid JSON: {exc}") from exc
        if not isinstance(records, list):
            raise ValueError(f"Remediation store {self.path} must contain a JSON list.")
        for record in records:
            try:
                org_id = record.pop("org_id")
                record["completed_at"] = _parse_timestamp(record.get("completed_at"))
                item = RemediationItem(**record)
            except (AttributeError, KeyError, TypeError, ValueError) as exc:
                raise ValueError(f"Remediation store {self.path} has a malformed record: {exc}") from exc
            self._items[(org_id, item.jurisdiction_code, item.item_key)] = item

    def _persist(self) -> None:
        records = []
        for (org_id, _, _), item in self._items.items():
            record = asdict(item)
            record["completed_at"] = item.completed_at.isoformat() if item.completed_at else None
            records.append({"org_id": org_id, **record})
        # Written to a sibling file, then swapped in.
        tmp_path = self.path.with_name(f".{self.path.name}.tmp")
        try:
            tmp_path.write_text(json.dumps(records, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise


__all__ = ["InMemoryRemediationStore", "JsonFileRemediationStore"]
