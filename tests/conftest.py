"""
Pytest configuration and shared fixtures for ProfileSync tests.

Provides fake home directories and single-entry catalogs.
"""

import logging
import os
import pytest
from pathlib import Path
import sys

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# ============ Environment Fixtures ============

@pytest.fixture
def source_home(tmp_path: Path) -> Path:
    """Provide an empty source home directory."""
    home = tmp_path / "source_home"
    home.mkdir()
    return home


@pytest.fixture
def dest_home(tmp_path: Path) -> Path:
    """Provide an empty destination home directory."""
    home = tmp_path / "dest_home"
    home.mkdir()
    return home


@pytest.fixture
def linux_env(monkeypatch, source_home: Path) -> Path:
    """Point HOME at the source home for linux/macos resolution."""
    monkeypatch.setenv("HOME", str(source_home))
    monkeypatch.setenv("USER", "tester")
    return source_home


# ============ Catalog Fixtures ============

@pytest.fixture
def git_catalog():
    """Catalog with the single git/.gitconfig mapping."""
    from profilesync.catalog import MappingCatalog, MappingEntry

    return MappingCatalog([
        MappingEntry("git/.gitconfig", "git/.gitconfig", "Git global configuration"),
    ])


@pytest.fixture
def gitconfig(source_home: Path) -> Path:
    """Create git/.gitconfig under the source home."""
    path = source_home / "git" / ".gitconfig"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"[user]\n\tname = Test User\n\temail = test@example.com\n")
    return path


# ============ Logging ============

@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() replaces root handlers; put them back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    factory = logging.getLogRecordFactory()
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.setLogRecordFactory(factory)


# ============ Marker Configuration ============

def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers", "unit: fast unit tests with no filesystem access"
    )
    config.addinivalue_line(
        "markers", "integration: end-to-end runs against temporary home directories"
    )
    config.addinivalue_line(
        "markers", "requires_non_root: tests that rely on permission errors"
    )


def pytest_collection_modifyitems(config, items):
    """Skip tests based on environment."""
    skip_root = pytest.mark.skip(reason="Permission checks are bypassed for root")

    for item in items:
        if "requires_non_root" in item.keywords:
            try:
                if os.getuid() == 0:
                    item.add_marker(skip_root)
            except AttributeError:
                # Windows doesn't have getuid
                item.add_marker(skip_root)
