#!/usr/bin/env python3
"""
ProfileSync Execution Engine

Walks a migration plan and copies each configuration file from the source
home to the destination home, honoring dry-run and force modes.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from common.decorators import timed
from common.logging_config import LogContext

from .plan import ItemStatus, MigrationItem, MigrationPlan

logger = logging.getLogger(__name__)

DIRECTORY_MODE = 0o755

ProgressCallback = Callable[[int, int], None]


@dataclass
class RunOptions:
    """Run-mode options supplied by the command line."""
    dry_run: bool = True
    force: bool = False
    verbose: bool = False
    # Copy directory entries recursively instead of as a single file
    copy_directories: bool = False


@dataclass
class ExecutionSummary:
    """Per-outcome counts for one execution of a plan."""
    migrated: int = 0
    would_migrate: int = 0
    skipped_missing: int = 0
    skipped_exists: int = 0
    failed: int = 0

    def add(self, status: ItemStatus) -> None:
        if status == ItemStatus.MIGRATED:
            self.migrated += 1
        elif status == ItemStatus.WOULD_MIGRATE:
            self.would_migrate += 1
        elif status == ItemStatus.SKIPPED_MISSING_SOURCE:
            self.skipped_missing += 1
        elif status == ItemStatus.SKIPPED_EXISTS:
            self.skipped_exists += 1
        else:
            self.failed += 1

    @property
    def success_count(self) -> int:
        return self.migrated + self.would_migrate

    @property
    def skipped_count(self) -> int:
        return self.skipped_missing + self.skipped_exists

    @property
    def total(self) -> int:
        return self.success_count + self.skipped_count + self.failed

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "migrated": self.migrated,
            "would_migrate": self.would_migrate,
            "skipped_missing": self.skipped_missing,
            "skipped_exists": self.skipped_exists,
            "failed": self.failed,
            "total": self.total,
        }


class MigrationExecutor:
    """
    Executes a migration plan item by item.

    Items are processed strictly in plan order. A failing item is logged and
    recorded on the item; it never stops the remaining items.
    """

    def __init__(
        self,
        options: Optional[RunOptions] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ):
        self.options = options or RunOptions()
        self._progress_callback = progress_callback

    def set_progress_callback(self, callback: ProgressCallback):
        """Set callback for progress updates, called with (done, total)."""
        self._progress_callback = callback

    @timed
    def execute(self, plan: MigrationPlan) -> ExecutionSummary:
        """
        Execute every item of a plan.

        Args:
            plan: Plan whose items have no outcome yet

        Returns:
            Summary of outcomes. The plan's total_items and skipped_items
            are updated to match it.
        """
        summary = ExecutionSummary()
        total = len(plan.items)

        mode = "dry run" if self.options.dry_run else "live"
        logger.info(f"Starting migration ({mode})...")

        for index, item in enumerate(plan.items, start=1):
            with LogContext(
                source=str(item.source_path),
                destination=str(item.destination_path),
            ):
                self._process_item(item)

            summary.add(item.status)
            if item.status.is_skip:
                plan.skipped_items += 1

            self._notify_progress(index, total)

        plan.total_items = summary.total
        return summary

    def _process_item(self, item: MigrationItem):
        """Apply the existence policy to one item, then copy it."""
        # exists() only swallows "not found" errors; an unsearchable parent raises
        try:
            if not item.source_path.exists():
                log = logger.warning if self.options.verbose else logger.debug
                log(f"Skipped (not found): {item.description}")
                item.record(ItemStatus.SKIPPED_MISSING_SOURCE)
                return

            destination_exists = item.destination_path.exists()
        except OSError as e:
            logger.error(f"Error checking {item.description}: {e}")
            item.record(ItemStatus.FAILED, str(e))
            return

        if destination_exists and not self.options.force:
            logger.warning(f"Skipped (exists): {item.description}")
            item.record(ItemStatus.SKIPPED_EXISTS)
            return

        parent_dir = item.destination_path.parent

        if self.options.dry_run:
            logger.info(f"Would create directory: {parent_dir}")
            logger.info(f"Would migrate: {item.description}")
            item.record(ItemStatus.WOULD_MIGRATE)
            return

        try:
            parent_dir.mkdir(parents=True, exist_ok=True, mode=DIRECTORY_MODE)
        except OSError as e:
            logger.error(f"Error creating directory {parent_dir}: {e}")
            item.record(ItemStatus.FAILED, str(e))
            return

        try:
            self._copy(item)
        except OSError as e:
            logger.error(f"Error migrating {item.description}: {e}")
            item.record(ItemStatus.FAILED, str(e))
            return

        logger.info(f"Migrated: {item.description}")
        item.record(ItemStatus.MIGRATED)

    def _copy(self, item: MigrationItem):
        """Copy one item. Directory entries fail unless copy_directories is set."""
        source = item.source_path
        target = item.destination_path

        if self.options.copy_directories and item.is_directory:
            shutil.copytree(source, target, dirs_exist_ok=True)
            return

        # copyfile refuses a directory on either side instead of copying into it
        shutil.copyfile(source, target)
        shutil.copystat(source, target)

    def _notify_progress(self, done: int, total: int):
        """Notify progress callback."""
        if self._progress_callback:
            self._progress_callback(done, total)


def execute_plan(
    plan: MigrationPlan,
    options: Optional[RunOptions] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> ExecutionSummary:
    """Execute a plan with a fresh MigrationExecutor."""
    return MigrationExecutor(options, progress_callback).execute(plan)
