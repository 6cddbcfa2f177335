# mdedit/services/markdown_renderer.py
from __future__ import annotations

import html as html_lib
import logging

import markdown

from mdedit.domain.interfaces import IMarkdownRenderer
from mdedit.domain.models import Theme
from mdedit.utils.constants import CSS_BASE, CSS_THEMES, HTML_TEMPLATE

log = logging.getLogger(__name__)

# GitHub-flavoured superset on top of Python-Markdown:
#   extra      -> tables, fenced code, footnotes, attr lists, abbreviations
#   tilde      -> ~~strikethrough~~
#   magiclink  -> bare URLs / emails become links
#   tasklist   -> "- [ ]" / "- [x]" checkboxes
EXTENSIONS = [
    "extra",
    "sane_lists",
    "pymdownx.tilde",
    "pymdownx.magiclink",
    "pymdownx.tasklist",
]

EXTENSION_CONFIGS = {
    "pymdownx.tilde": {"subscript": False},
    "pymdownx.magiclink": {"hide_protocol": False, "repo_url_shortener": False},
    "pymdownx.tasklist": {"custom_checkbox": False, "clickable_checkbox": False},
}


class MarkdownRenderer(IMarkdownRenderer):
    """
    Converts Markdown to a complete HTML page for the preview pane.

    Rendering is total: whatever the input, a page comes back. If the markdown
    pipeline itself fails, the raw text is shown escaped in a <pre> block.
    """

    def __init__(self, theme: Theme = Theme.SYSTEM) -> None:
        self.theme: Theme = theme

    def to_html(self, markdown_text: str) -> str:
        body = self.render_body(markdown_text)
        return HTML_TEMPLATE.format(css=self.css(), body=body)

    def render_body(self, markdown_text: str) -> str:
        try:
            # A fresh Markdown instance per call keeps output independent of history.
            return markdown.markdown(
                markdown_text,
                extensions=EXTENSIONS,
                extension_configs=EXTENSION_CONFIGS,
                output_format="html",
            )
        except Exception:
            log.warning("Markdown rendering failed; showing text literally", exc_info=True)
            return f"<pre>{html_lib.escape(markdown_text)}</pre>"

    def css(self) -> str:
        return CSS_THEMES[self.theme.value] + CSS_BASE
