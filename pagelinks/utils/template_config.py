"""
Centralized template configuration for pagination templates.
"""

from fastapi.templating import Jinja2Templates

from pagelinks.utils.template_filters import register_filters


def get_templates(directory: str) -> Jinja2Templates:
    """
    Get a Jinja2 templates instance with the pagination filters registered.
    Call this once at module level in route files.
    """
    templates = Jinja2Templates(directory=directory)
    register_filters(templates)
    return templates
