"""Standalone HTML preview pages for rendered fragments."""

from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

TEMPLATES_PATH = Path(__file__).parent / "templates"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_PATH)),
    # Catches silent failures
    undefined=StrictUndefined,
    autoescape=select_autoescape(["html.jinja"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_page(title: str, fragments: List[str]) -> str:
    """
    Wrap serialized fragments in a standalone HTML page.

    Args:
        title: Page title (escaped)
        fragments: Serialized fragments, inserted verbatim

    Returns:
        HTML document
    """
    template = _env.get_template("page.html.jinja")
    return template.render(title=title, fragments=fragments)
