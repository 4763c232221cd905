#!/usr/bin/env python3
"""
Run a compliance audit from the command line.

Usage:
    python -m hireshield.scripts.run_audit --states NYC CO --usages screening

Environment variables:
    HIRESHIELD_REFERENCE_PATH  JSON file replacing the built-in reference tables.
    HIRESHIELD_AUDIT_LOG       Audit JSONL path used with --record.
    HIRESHIELD_STORE_PATH      Remediation store path used with --record.
    HIRESHIELD_LOG_LEVEL       Logging level (default: INFO).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from hireshield.compliance.types import SelectionInput
from hireshield.config.loader import load_reference
from hireshield.config.settings import Settings
from hireshield.reporting.packet import render_compliance_packet
from hireshield.services.tracker import ComplianceTracker
from hireshield.storage.remediation import InMemoryRemediationStore, JsonFileRemediationStore


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="HireShield AI-hiring compliance audit")
    parser.add_argument("--states", nargs="*", default=[], help="Jurisdiction codes, e.g. NYC CO IL")
    parser.add_argument("--tools", nargs="*", default=[], help="Tool identifiers, e.g. hirevue")
    parser.add_argument("--usages", nargs="*", default=[], help="Usage identifiers, e.g. screening")
    parser.add_argument("--org-id", default="local", help="Tenant identifier for stored records")
    parser.add_argument("--org-name", default="Your Company", help="Name printed on the packet")
    parser.add_argument("--format", choices=["json", "markdown"], default="json")
    parser.add_argument("--reference", type=Path, default=None, help="Override reference JSON file")
    parser.add_argument("--record", action="store_true", help="Append to the audit log and seed the store")
    parser.add_argument("--audit-log", type=Path, default=None)
    parser.add_argument("--store", type=Path, default=None)
    return parser.parse_args(argv)


def print_step(message: str) -> None:
    print(f"[hireshield] {message}", file=sys.stderr)


def run(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    settings = Settings.from_env()

    if not logging.getLogger().handlers:
        logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

    try:
        reference = load_reference(args.reference or settings.reference_path)
    except (OSError, ValueError) as exc:
        print_step(f"ERROR: failed to load reference tables: {exc}")
        return 1

    if args.record:
        try:
            store = JsonFileRemediationStore(args.store or settings.store_path)
        except (OSError, ValueError) as exc:
            print_step(f"ERROR: failed to open remediation store: {exc}")
            return 1
        audit_log = args.audit_log or settings.audit_log_path
    else:
        store = InMemoryRemediationStore()
        audit_log = None

    tracker = ComplianceTracker(reference=reference, store=store, audit_log_path=audit_log)
    selection = SelectionInput(jurisdictions=args.states, tools=args.tools, usages=args.usages)
    try:
        outcome = tracker.run_audit(args.org_id, selection, metadata={"source": "cli"})
    except OSError as exc:
        print_step(f"ERROR: failed to record audit: {exc}")
        return 1

    if args.format == "markdown":
        print(
            render_compliance_packet(
                args.org_name,
                selection,
                outcome.result,
                tracker.items(args.org_id),
                reference.requirements,
            )
        )
    else:
        status = tracker.compliance_status(args.org_id)
        payload = {
            "audit_id": outcome.audit_id,
            "risk_score": outcome.result.risk_score,
            "findings": [asdict(finding) for finding in outcome.result.findings],
            "remediation": [asdict(state) for state in status.states],
            "overall": asdict(status.overall),
        }
        print(json.dumps(payload, indent=2))
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
