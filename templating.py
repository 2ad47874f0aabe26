"""
Shared Jinja2 environment for pages, report fragments and report emails.
"""

from pathlib import Path

from fastapi.templating import Jinja2Templates

from config import settings

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["strategy_call_url"] = settings.STRATEGY_CALL_URL


def render_fragment(template_name: str, **context) -> str:
    """Render a template outside of a request (report fragments, emails)."""
    return templates.env.get_template(template_name).render(**context)
