"""
Module 09C - CLI Check Command

Verify an externally built distribution file against its own root:
- Recompute each entry's leaf and fold its proof
- Compare the declared total supply with the sum of allocations

Usage:
    airdrop check distribution.json [--address 0x..] [--json] [--debug]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional

from core.airdrop.distribution import DistributionFile, EntryCheck
from core.schemas.errors import DistributionFileException, SchemaValidationException


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


@dataclass
class CheckSummary:
    """Summary of a distribution check for CLI output."""
    path: str = ""
    root: str = ""
    entries_checked: int = 0
    entries_failed: int = 0
    declared_total: Optional[int] = None
    computed_total: int = 0
    checks: list[dict[str, Any]] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        # uint256 totals overflow most JSON readers
        d["computed_total"] = str(self.computed_total)
        if self.declared_total is None:
            del d["declared_total"]
        else:
            d["declared_total"] = str(self.declared_total)
        for check in d["checks"]:
            check["amount"] = str(check["amount"])
        if not d["checks"]:
            del d["checks"]
        if not d["errors"]:
            del d["errors"]
        return d

    @property
    def totals_ok(self) -> bool:
        return self.declared_total is None or self.declared_total == self.computed_total

    @property
    def all_ok(self) -> bool:
        return self.entries_failed == 0 and not self.errors


def build_summary(
    path: str,
    distribution: DistributionFile,
    results: list[EntryCheck],
    single: bool = False,
    debug: bool = False,
) -> CheckSummary:
    summary = CheckSummary(
        path=path,
        root=distribution.root,
        entries_checked=len(results),
        entries_failed=sum(1 for r in results if not r.ok),
        declared_total=distribution.total_supply,
        computed_total=distribution.computed_total,
    )

    for result in results:
        if not result.ok:
            summary.errors.append(
                f"Proof: entry {result.index} ({result.identity}) does not verify"
            )

    # A single-address check says nothing about the other allocations
    if not single and not summary.totals_ok:
        summary.errors.append(
            f"Total: declared {summary.declared_total} != sum of allocations "
            f"{summary.computed_total}"
        )

    if debug or single:
        summary.checks = [r.model_dump() for r in results]

    return summary


def print_summary_human(summary: CheckSummary) -> None:
    status = "OK" if summary.all_ok else "FAILED"
    print(f"distribution: {summary.path}")
    print(f"root: {summary.root}")
    print(f"entries: {summary.entries_checked} checked, {summary.entries_failed} failed")
    if summary.declared_total is not None:
        print(f"total: declared {summary.declared_total}, computed {summary.computed_total}")
    print(f"result: {status}")

    if summary.errors:
        print("\nerrors:")
        for error in summary.errors[:20]:
            print(f"  - {error}")

    for check in summary.checks[:20]:
        status = "✓" if check["ok"] else "✗"
        print(f"  {status} [{check['index']}] {check['identity']} {check['amount']}")


def check_cmd(args: Namespace) -> int:
    """
    Execute the check command.

    Returns:
        Exit code
    """
    path = Path(args.distribution)

    try:
        distribution = DistributionFile.load(path)
    except DistributionFileException as e:
        print(f"Error loading distribution: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    single = bool(args.address)
    if single:
        try:
            entry = distribution.entry_for(args.address)
        except SchemaValidationException as e:
            print(f"Error: {e.message}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR
        if entry is None:
            print(f"No allocation for {args.address} in {path}", file=sys.stderr)
            return EXIT_VERIFICATION_FAILED
        results = [distribution.check_entry(entry)]
    else:
        results = distribution.verify_all()

    summary = build_summary(
        path=str(path),
        distribution=distribution,
        results=results,
        single=single,
        debug=args.debug,
    )

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print_summary_human(summary)

    if summary.all_ok:
        logger.info("Distribution check passed")
        return EXIT_SUCCESS
    logger.warning("Distribution check failed")
    return EXIT_VERIFICATION_FAILED
