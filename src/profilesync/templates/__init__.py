"""
ProfileSync Report Templates

Provides jinja2 template loading and rendering for migration reports.
"""

from .loader import TemplateLoader, get_template_loader

__all__ = ["TemplateLoader", "get_template_loader"]
