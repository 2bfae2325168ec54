"""
Report Template Loader

Template loading from the package with an optional user override directory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, List

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, Template, TemplateNotFound

from common.exceptions import TemplateNotFoundError

logger = logging.getLogger(__name__)


class TemplateLoader:
    """
    Loads report templates from multiple locations.

    Search order:
    1. User templates (~/.config/profilesync/templates)
    2. Package templates (this directory)
    """

    PACKAGE_PATH = Path(__file__).parent

    def __init__(self, additional_paths: Optional[List[Path]] = None):
        self._paths = [Path.home() / ".config/profilesync/templates", self.PACKAGE_PATH]
        if additional_paths:
            self._paths = list(additional_paths) + self._paths

        self._env = self._create_environment()

    def _create_environment(self) -> Environment:
        """Create Jinja2 environment with all existing template paths."""
        loaders = []

        for path in self._paths:
            if path.exists() and path.is_dir():
                loaders.append(FileSystemLoader(str(path)))
                logger.debug(f"Added template path: {path}")

        return Environment(
            loader=ChoiceLoader(loaders),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a template by name.

        Raises:
            TemplateNotFoundError: If no search path has the template.
        """
        try:
            return self._env.get_template(name)
        except TemplateNotFound:
            raise TemplateNotFoundError(name)

    def render(self, name: str, **variables) -> str:
        """Render a template with variables."""
        return self.get_template(name).render(**variables)

    def list_templates(self) -> List[str]:
        """List all available templates."""
        templates = []
        for path in self._paths:
            if path.exists():
                templates.extend(f.name for f in path.glob("*.j2"))
        return sorted(set(templates))


# Global loader instance
_loader: Optional[TemplateLoader] = None


def get_template_loader() -> TemplateLoader:
    """Get the global template loader."""
    global _loader
    if _loader is None:
        _loader = TemplateLoader()
    return _loader
