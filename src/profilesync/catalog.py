"""
Mapping Catalog - relative configuration paths to migrate.

Holds the ordered table of source/destination path fragments that a
migration plan is built from, with a human-readable description for each.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Tuple

from common.exceptions import CatalogLoadError, DuplicateMappingError

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION = "Configuration file"

# (source fragment, destination fragment) in plan order
DEFAULT_MAPPINGS: Tuple[Tuple[str, str], ...] = (
    # IDE settings
    ("vscode/settings.json", "vscode/settings.json"),
    ("vscode/keybindings.json", "vscode/keybindings.json"),
    ("intellij/", "intellij/"),
    ("vim/.vimrc", "vim/.vimrc"),
    ("vim/.vim/", "vim/.vim/"),
    ("emacs/.emacs", "emacs/.emacs"),
    ("emacs/.emacs.d/", "emacs/.emacs.d/"),

    # Terminal settings
    ("bash/.bashrc", "bash/.bashrc"),
    ("bash/.bash_profile", "bash/.bash_profile"),
    ("zsh/.zshrc", "zsh/.zshrc"),
    ("fish/.config/fish/config.fish", "fish/.config/fish/config.fish"),
    ("tmux/.tmux.conf", "tmux/.tmux.conf"),

    # Git configuration
    ("git/.gitconfig", "git/.gitconfig"),
    ("git/.gitignore_global", "git/.gitignore_global"),

    # SSH configuration
    ("ssh/config", "ssh/config"),
    ("ssh/id_rsa", "ssh/id_rsa"),
    ("ssh/id_rsa.pub", "ssh/id_rsa.pub"),

    # Browser profiles
    ("chrome/Default/", "chrome/Default/"),
    ("firefox/.mozilla/firefox/", "firefox/.mozilla/firefox/"),

    # Package managers
    ("npm/.npmrc", "npm/.npmrc"),
    ("yarn/.yarnrc", "yarn/.yarnrc"),
    ("pip/pip.conf", "pip/pip.conf"),
    ("pip/pip.ini", "pip/pip.ini"),

    # Containers and orchestration
    ("docker/config.json", "docker/config.json"),
    ("kubectl/config", "kubectl/config"),
    ("helm/.helm/", "helm/.helm/"),

    # Infrastructure
    ("terraform/.terraform.d/", "terraform/.terraform.d/"),
    ("terraform/.terraformrc", "terraform/.terraformrc"),

    # Cloud
    ("aws/credentials", "aws/credentials"),
    ("aws/config", "aws/config"),
)

# Keyed by source fragment only
DESCRIPTIONS: Dict[str, str] = {
    "vscode/settings.json": "VS Code user settings",
    "vscode/keybindings.json": "VS Code key bindings",
    "intellij/": "IntelliJ IDEA settings",
    "vim/.vimrc": "Vim configuration",
    "vim/.vim/": "Vim plugins and additional configs",
    "emacs/.emacs": "Emacs main configuration",
    "emacs/.emacs.d/": "Emacs plugins and additional configs",
    "bash/.bashrc": "Bash shell configuration",
    "bash/.bash_profile": "Bash profile settings",
    "zsh/.zshrc": "Zsh shell configuration",
    "fish/.config/fish/config.fish": "Fish shell configuration",
    "tmux/.tmux.conf": "Tmux configuration",
    "git/.gitconfig": "Git global configuration",
    "git/.gitignore_global": "Git global ignore patterns",
    "ssh/config": "SSH configuration",
    "ssh/id_rsa": "SSH private key",
    "ssh/id_rsa.pub": "SSH public key",
    "chrome/Default/": "Chrome browser profile",
    "firefox/.mozilla/firefox/": "Firefox browser profile",
    "npm/.npmrc": "NPM configuration",
    "yarn/.yarnrc": "Yarn configuration",
    "pip/pip.conf": "Python pip configuration (Linux/Mac)",
    "pip/pip.ini": "Python pip configuration (Windows)",
    "docker/config.json": "Docker configuration",
    "kubectl/config": "Kubectl configuration",
    "helm/.helm/": "Helm configuration",
    "terraform/.terraform.d/": "Terraform plugins and configuration",
    "terraform/.terraformrc": "Terraform configuration file",
    "aws/credentials": "AWS credentials",
    "aws/config": "AWS configuration",
}


def describe(fragment: str) -> str:
    """Human-readable description for a source fragment."""
    return DESCRIPTIONS.get(fragment, DEFAULT_DESCRIPTION)


@dataclass(frozen=True)
class MappingEntry:
    """One source -> destination mapping, both relative to a home directory."""
    source_fragment: str
    dest_fragment: str
    description: str = DEFAULT_DESCRIPTION

    @property
    def is_directory(self) -> bool:
        return self.source_fragment.endswith("/")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "source": self.source_fragment,
            "destination": self.dest_fragment,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MappingEntry":
        """Create from dictionary."""
        source = data["source"]
        return cls(
            source_fragment=source,
            dest_fragment=data.get("destination", source),
            description=data.get("description") or describe(source),
        )


class MappingCatalog:
    """
    Immutable, ordered collection of mapping entries.

    Source fragments are unique; a duplicate would make two plan items
    write the same destination, so construction rejects it.
    """

    def __init__(self, entries: Iterable[MappingEntry]):
        seen = set()
        ordered: List[MappingEntry] = []
        for entry in entries:
            if entry.source_fragment in seen:
                raise DuplicateMappingError(entry.source_fragment)
            seen.add(entry.source_fragment)
            ordered.append(entry)
        self._entries: Tuple[MappingEntry, ...] = tuple(ordered)

    def entries(self) -> Tuple[MappingEntry, ...]:
        """All entries in insertion order."""
        return self._entries

    def __iter__(self) -> Iterator[MappingEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other) -> bool:
        if not isinstance(other, MappingCatalog):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"MappingCatalog({len(self._entries)} entries)"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON catalog layout."""
        return {
            "version": "1.0",
            "mappings": [entry.to_dict() for entry in self._entries],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MappingCatalog":
        """Create from the JSON catalog layout."""
        return cls(MappingEntry.from_dict(item) for item in data.get("mappings", []))


def default_catalog() -> MappingCatalog:
    """Build the catalog of built-in developer tool mappings."""
    return MappingCatalog(
        MappingEntry(source, dest, describe(source))
        for source, dest in DEFAULT_MAPPINGS
    )


def load_catalog(path: Path) -> MappingCatalog:
    """
    Load a mapping catalog from a JSON file.

    Args:
        path: Path to a catalog file ({"version": ..., "mappings": [...]})

    Returns:
        The loaded catalog.

    Raises:
        CatalogLoadError: If the file is missing or malformed.
        DuplicateMappingError: If two mappings share a source fragment.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise CatalogLoadError(str(path), e.strerror or str(e), cause=e)
    except json.JSONDecodeError as e:
        raise CatalogLoadError(str(path), f"invalid JSON: {e.msg}", cause=e)

    if not isinstance(data, dict) or not isinstance(data.get("mappings"), list):
        raise CatalogLoadError(str(path), "expected an object with a 'mappings' list")

    try:
        catalog = MappingCatalog.from_dict(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise CatalogLoadError(str(path), f"malformed mapping: {e}", cause=e)

    logger.info(f"Loaded {len(catalog)} mappings from {path}")
    return catalog
