"""
Load replacement reference tables from a JSON file.

Expected layout::

    {
      "jurisdictions": [
        {"code": "NYC", "name": "New York City", "law": "NYC Local Law 144", "is_regulated": true}
      ],
      "checklists": {
        "NYC": [{"key": "audit", "label": "Complete Compliance Audit", "description": "..."}]
      }
    }

Either section may be omitted, in which case the built-in table is kept.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ValidationError, field_validator

from hireshield.compliance.types import ChecklistTemplateItem, JurisdictionRequirement
from hireshield.config.reference import JURISDICTION_REQUIREMENTS, STATE_CHECKLISTS

logger = logging.getLogger("hireshield.config.loader")


class JurisdictionEntry(BaseModel):
    code: str
    name: str
    law: str
    is_regulated: bool
    effective: Optional[str] = None
    requirements: List[str] = []
    penalties: Optional[str] = None


class ChecklistEntry(BaseModel):
    key: str
    label: str
    description: str
    route: Optional[str] = None


class ReferenceFile(BaseModel):
    jurisdictions: Optional[List[JurisdictionEntry]] = None
    checklists: Optional[Dict[str, List[ChecklistEntry]]] = None

    @field_validator("jurisdictions")
    @classmethod
    def _unique_codes(cls, value: Optional[List[JurisdictionEntry]]) -> Optional[List[JurisdictionEntry]]:
        if value is None:
            return value
        codes = [entry.code for entry in value]
        duplicates = sorted({code for code in codes if codes.count(code) > 1})
        if duplicates:
            raise ValueError(f"duplicate jurisdiction codes: {', '.join(duplicates)}")
        return value

    @field_validator("checklists")
    @classmethod
    def _unique_item_keys(
        cls, value: Optional[Dict[str, List[ChecklistEntry]]]
    ) -> Optional[Dict[str, List[ChecklistEntry]]]:
        if value is None:
            return value
        for code, entries in value.items():
            keys = [entry.key for entry in entries]
            if len(keys) != len(set(keys)):
                raise ValueError(f"duplicate checklist keys for {code}")
        return value


@dataclass(frozen=True, slots=True)
class ReferenceData:
    """Immutable bundle of the tables injected into the engine."""

    requirements: Tuple[JurisdictionRequirement, ...] = JURISDICTION_REQUIREMENTS
    checklists: Mapping[str, Tuple[ChecklistTemplateItem, ...]] = field(default_factory=lambda: STATE_CHECKLISTS)

    @property
    def regulated_codes(self) -> Tuple[str, ...]:
        return tuple(entry.code for entry in self.requirements if entry.is_regulated)


def parse_reference(payload: Mapping[str, object]) -> ReferenceData:
    """Validate a decoded JSON payload and convert it to engine types."""
    try:
        parsed = ReferenceFile.model_validate(payload)
    except ValidationError as exc:
        raise ValueError(f"Invalid reference data: {exc}") from exc

    requirements = JURISDICTION_REQUIREMENTS
    if parsed.jurisdictions is not None:
        requirements = tuple(
            JurisdictionRequirement(
                code=entry.code,
                name=entry.name,
                law=entry.law,
                is_regulated=entry.is_regulated,
                effective=entry.effective,
                requirements=tuple(entry.requirements),
                penalties=entry.penalties,
            )
            for entry in parsed.jurisdictions
        )

    checklists: Mapping[str, Tuple[ChecklistTemplateItem, ...]] = STATE_CHECKLISTS
    if parsed.checklists is not None:
        checklists = MappingProxyType(
            {
                code: tuple(
                    ChecklistTemplateItem(key=e.key, label=e.label, description=e.description, route=e.route)
                    for e in entries
                )
                for code, entries in parsed.checklists.items()
            }
        )

    return ReferenceData(requirements=requirements, checklists=checklists)


def load_reference(path: Optional[Path]) -> ReferenceData:
    """Read reference tables from `path`, or return the built-in defaults."""
    if path is None:
        return ReferenceData()
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Reference file {path} is not valid JSON: {exc}") from exc
    data = parse_reference(payload)
    logger.info(
        "Loaded reference tables",
        extra={
            "path": str(path),
            "jurisdictions": len(data.requirements),
            "checklists": len(data.checklists),
        },
    )
    return data


__all__ = ["ReferenceData", "load_reference", "parse_reference"]
