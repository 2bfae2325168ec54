"""
Migration plan model and builder.

A plan holds one MigrationItem per catalog entry with absolute source and
destination paths. Building a plan never touches the filesystem.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from common.decorators import timed
from common.exceptions import OutcomeAlreadyRecordedError, PlanError

from .catalog import MappingCatalog, default_catalog
from .classifier import classify
from .platforms import Platform, home_directory, join_fragment

logger = logging.getLogger(__name__)


class ItemStatus(Enum):
    """Outcome of executing a single migration item."""
    MIGRATED = "migrated"
    WOULD_MIGRATE = "would_migrate"
    SKIPPED_MISSING_SOURCE = "skipped_missing_source"
    SKIPPED_EXISTS = "skipped_exists"
    FAILED = "failed"

    @property
    def is_skip(self) -> bool:
        return self in (ItemStatus.SKIPPED_MISSING_SOURCE, ItemStatus.SKIPPED_EXISTS)

    @property
    def is_success(self) -> bool:
        return self in (ItemStatus.MIGRATED, ItemStatus.WOULD_MIGRATE)


@dataclass
class MigrationItem:
    """A single configuration path to migrate."""
    source_path: Path
    destination_path: Path
    category: str
    description: str
    is_directory: bool = False

    # Set once during execution
    status: Optional[ItemStatus] = None
    error: Optional[str] = None

    def record(self, status: ItemStatus, error: Optional[str] = None) -> None:
        """Attach the execution outcome. An item's outcome is never replaced."""
        if self.status is not None:
            raise OutcomeAlreadyRecordedError(str(self.source_path), self.status.value)
        self.status = status
        self.error = error

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Convert to dictionary."""
        return {
            "source": str(self.source_path),
            "destination": str(self.destination_path),
            "category": self.category,
            "description": self.description,
            "status": self.status.value if self.status else None,
            "error": self.error,
        }


@dataclass
class MigrationPlan:
    """Ordered migration items plus running counters."""
    source_platform: Platform
    destination_platform: Platform
    items: List[MigrationItem] = field(default_factory=list)
    total_items: int = 0
    skipped_items: int = 0

    def add(self, item: MigrationItem) -> None:
        self.items.append(item)
        self.total_items += 1

    def by_status(self, status: ItemStatus) -> List[MigrationItem]:
        """Get all items with a given outcome."""
        return [item for item in self.items if item.status == status]


def build_plan_for_homes(
    source_home: str,
    destination_home: str,
    catalog: Optional[MappingCatalog] = None,
    source_platform: Platform = Platform.UNKNOWN,
    destination_platform: Platform = Platform.UNKNOWN,
) -> MigrationPlan:
    """
    Build a plan from already resolved home directories.

    Args:
        source_home: Home directory to copy from
        destination_home: Home directory to copy to
        catalog: Mappings to plan (default: built-in catalog)
        source_platform: Recorded on the plan for reporting
        destination_platform: Recorded on the plan for reporting

    Returns:
        MigrationPlan with one item per catalog entry, in catalog order.

    Raises:
        PlanError: If either home directory is empty.
    """
    if not source_home:
        raise PlanError(
            "Cannot resolve source home directory",
            details={"platform": source_platform.value},
        )
    if not destination_home:
        raise PlanError(
            "Cannot resolve destination home directory",
            details={"platform": destination_platform.value},
        )

    if catalog is None:
        catalog = default_catalog()

    plan = MigrationPlan(
        source_platform=source_platform,
        destination_platform=destination_platform,
    )

    for entry in catalog.entries():
        plan.add(MigrationItem(
            source_path=join_fragment(source_home, entry.source_fragment),
            destination_path=join_fragment(destination_home, entry.dest_fragment),
            category=classify(entry.source_fragment),
            description=entry.description,
            is_directory=entry.is_directory,
        ))

    logger.debug(f"Planned {plan.total_items} items: {source_home} -> {destination_home}")
    return plan


@timed
def build_plan(
    source_platform: Platform,
    destination_platform: Platform,
    catalog: Optional[MappingCatalog] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> MigrationPlan:
    """
    Build a migration plan between two platforms.

    Home directories are resolved from the environment; no file is read.

    Args:
        source_platform: Platform to copy from
        destination_platform: Platform to copy to
        catalog: Mappings to plan (default: built-in catalog)
        environ: Environment mapping (default: os.environ)

    Returns:
        MigrationPlan with one item per catalog entry.
    """
    return build_plan_for_homes(
        home_directory(source_platform, environ),
        home_directory(destination_platform, environ),
        catalog,
        source_platform=source_platform,
        destination_platform=destination_platform,
    )
