# tests/test_markdown_renderer.py
import pytest

from mdedit.domain.models import Theme
from mdedit.services.markdown_renderer import MarkdownRenderer


def test_renderer_basic_html(renderer: MarkdownRenderer):
    html = renderer.to_html("# Title\n\nSome **bold** text.")
    assert "<h1" in html and "Title" in html
    assert "<strong>" in html
    # Template + CSS present
    assert html.lower().startswith("<!doctype html")
    assert "<style>" in html


def test_renderer_code_block(renderer: MarkdownRenderer):
    md = "```python\nprint('x')\n```"
    html = renderer.to_html(md)
    assert "<pre" in html and "<code" in html and "print" in html


def test_gfm_table(renderer: MarkdownRenderer):
    md = "| H1 | H2 |\n| -- | -- |\n| a  | b  |\n"
    html = renderer.to_html(md)
    assert "<table>" in html
    assert "<th>H1</th>" in html
    assert "<td>a</td>" in html


def test_gfm_strikethrough(renderer: MarkdownRenderer):
    html = renderer.to_html("this is ~~gone~~ now")
    assert "<del>gone</del>" in html


def test_gfm_autolink(renderer: MarkdownRenderer):
    html = renderer.to_html("see https://example.com/page for details")
    assert 'href="https://example.com/page"' in html


def test_task_list(renderer: MarkdownRenderer):
    html = renderer.to_html("- [x] done\n- [ ] todo\n")
    assert 'type="checkbox"' in html
    assert "checked" in html


def test_sample_document_renders_all_features(renderer: MarkdownRenderer):
    from mdedit.utils.constants import SAMPLE_DOCUMENT

    html = renderer.to_html(SAMPLE_DOCUMENT)
    assert "<table>" in html
    assert "<pre><code" in html
    assert 'href="https://github.com"' in html


@pytest.mark.parametrize(
    "text",
    [
        "",
        "```\nunterminated fence",
        "| a | b |\n| --- |\n| 1 | 2 | 3 | 4 |",
        "<div><span>unclosed",
        "[broken](",
        "\x00\x01\x02 control chars",
        "*" * 5000,
        "> " * 200 + "deep quote",
        "\ud83d lone surrogate",
        "~~~~\n~~~",
    ],
)
def test_rendering_is_total(renderer: MarkdownRenderer, text: str):
    html = renderer.to_html(text)
    assert isinstance(html, str)
    assert "<body>" in html


def test_rendering_is_idempotent(renderer: MarkdownRenderer):
    md = "# A\n\n| x | y |\n|---|---|\n| 1 | 2 |\n\n~~s~~ https://a.example\n"
    assert renderer.to_html(md) == renderer.to_html(md)
    assert MarkdownRenderer().to_html(md) == renderer.to_html(md)


def test_library_failure_falls_back_to_literal_text(monkeypatch, renderer: MarkdownRenderer):
    def boom(*a, **k):
        raise RuntimeError("parser exploded")

    monkeypatch.setattr("mdedit.services.markdown_renderer.markdown.markdown", boom)
    html = renderer.to_html("# <b>raw</b>")
    assert "<pre># &lt;b&gt;raw&lt;/b&gt;</pre>" in html


@pytest.mark.parametrize(
    "theme,present,absent",
    [
        (Theme.LIGHT, "--bg:#ffffff", "--bg:#0f1115"),
        (Theme.DARK, "--bg:#0f1115", "--bg:#ffffff"),
        (Theme.SYSTEM, "prefers-color-scheme", None),
    ],
)
def test_theme_selects_css(theme, present, absent):
    html = MarkdownRenderer(theme=theme).to_html("x")
    assert present in html
    if absent:
        assert absent not in html


def test_theme_does_not_change_body():
    light = MarkdownRenderer(theme=Theme.LIGHT).render_body("# same")
    dark = MarkdownRenderer(theme=Theme.DARK).render_body("# same")
    assert light == dark
