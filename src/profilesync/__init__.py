"""
ProfileSync

Copies developer tool configuration between platform home directories:
- Static catalog of relative configuration paths
- Per-platform home directory resolution
- Dry-run preview with skip/force conflict handling
- Per-category migration report
"""

from .catalog import MappingEntry, MappingCatalog, default_catalog, load_catalog
from .classifier import classify
from .platforms import Platform, detect_platform, parse_platform, home_directory, join_fragment
from .plan import ItemStatus, MigrationItem, MigrationPlan, build_plan, build_plan_for_homes
from .executor import RunOptions, ExecutionSummary, MigrationExecutor, execute_plan
from .report import MigrationReport, build_report, render_report
from .scanner import find_config_files

__version__ = "0.1.0"

__all__ = [
    "MappingEntry",
    "MappingCatalog",
    "default_catalog",
    "load_catalog",
    "classify",
    "Platform",
    "detect_platform",
    "parse_platform",
    "home_directory",
    "join_fragment",
    "ItemStatus",
    "MigrationItem",
    "MigrationPlan",
    "build_plan",
    "build_plan_for_homes",
    "RunOptions",
    "ExecutionSummary",
    "MigrationExecutor",
    "execute_plan",
    "MigrationReport",
    "build_report",
    "render_report",
    "find_config_files",
]
