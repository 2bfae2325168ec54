"""
Migration report aggregation and rendering.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .executor import ExecutionSummary
from .plan import MigrationPlan
from .templates import get_template_loader

REPORT_TEMPLATE = "report.txt.j2"
RULE = "=" * 60

DRY_RUN_NOTICE = (
    "[!] This was a DRY RUN. No files were actually migrated.",
    "Run with --dry-run=false to perform the actual migration.",
)
LIVE_NOTICE = ("Migration complete!",)


@dataclass
class MigrationReport:
    """
    Summary of one migration run.

    migrated_count is total minus skipped, so failed items are counted as
    migrated, and failed_count is always 0. The real per-outcome counts are
    kept in `counters`.
    """
    source_platform: str
    destination_platform: str
    dry_run: bool
    total_items: int
    skipped_count: int
    categories: List[Tuple[str, int]] = field(default_factory=list)
    counters: Optional[ExecutionSummary] = None

    @property
    def migrated_count(self) -> int:
        return self.total_items - self.skipped_count

    @property
    def failed_count(self) -> int:
        return 0

    @property
    def notice(self) -> Tuple[str, ...]:
        return DRY_RUN_NOTICE if self.dry_run else LIVE_NOTICE

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "source_platform": self.source_platform,
            "destination_platform": self.destination_platform,
            "mode": "dry_run" if self.dry_run else "live",
            "migrated": self.migrated_count,
            "skipped": self.skipped_count,
            "failed": self.failed_count,
            "categories": {label: count for label, count in self.categories},
            "counters": self.counters.to_dict() if self.counters else None,
        }


def group_by_category(plan: MigrationPlan) -> List[Tuple[str, int]]:
    """Item counts per category, sorted by category label."""
    counts = Counter(item.category for item in plan.items)
    return sorted(counts.items())


def build_report(
    plan: MigrationPlan,
    dry_run: bool,
    summary: Optional[ExecutionSummary] = None,
) -> MigrationReport:
    """
    Aggregate an executed plan into a report.

    Args:
        plan: Plan after execution
        dry_run: Whether the run was a dry run
        summary: Execution counters, carried through for JSON output

    Returns:
        MigrationReport for display.
    """
    return MigrationReport(
        source_platform=plan.source_platform.value,
        destination_platform=plan.destination_platform.value,
        dry_run=dry_run,
        total_items=plan.total_items,
        skipped_count=plan.skipped_items,
        categories=group_by_category(plan),
        counters=summary,
    )


def render_report(report: MigrationReport) -> str:
    """Render a report as plain text."""
    return get_template_loader().render(REPORT_TEMPLATE, report=report, rule=RULE)
