"""Tests for fenced-region detection and Pygments highlighting."""

from __future__ import annotations

from bs4 import BeautifulSoup
from pygments.lexers.special import TextLexer

from transcript_pipeline import highlight as highlight_module
from transcript_pipeline.highlight import (
    FENCE_RE,
    highlight_code,
    highlight_fenced_regions,
    literal_code_html,
    resolve_lexer,
)


def test_fence_spans_embedded_newlines_as_one_region() -> None:
    got = list(FENCE_RE.finditer("```python\nline1\nline2\n```"))

    assert len(got) == 1
    assert got[0].group(1) == "python"
    assert got[0].group(2) == "line1\nline2\n"


def test_first_closing_fence_ends_region() -> None:
    text = "```\na\n```\nbetween\n```sh\nb\n```"

    got = [(m.group(1), m.group(2)) for m in FENCE_RE.finditer(text)]

    assert got == [(None, "a\n"), ("sh", "b\n")]


def test_resolve_lexer_by_alias_and_extension() -> None:
    assert resolve_lexer("python").name == "Python"
    assert resolve_lexer("rust").name == "Rust"
    # not an alias, only a file extension
    assert resolve_lexer("hpp").name == "C++"


def test_resolve_lexer_falls_back_to_plain_text() -> None:
    assert isinstance(resolve_lexer(None), TextLexer)
    assert isinstance(resolve_lexer(""), TextLexer)
    assert isinstance(resolve_lexer("definitely_not_a_language_42"), TextLexer)


def test_highlight_code_uses_inline_dark_theme() -> None:
    got = highlight_code("def f():\n    return 1\n", "python")

    assert got.startswith('<div class="highlight" style="background: #272822">')
    assert "<span style=" in got


def test_garbage_tag_still_renders() -> None:
    got = highlight_fenced_regions("```zzgarbage\nfoo < bar\n```")

    assert 'class="highlight"' in got
    assert "foo &lt; bar" in got


def test_highlighter_failure_falls_back_to_literal(monkeypatch) -> None:
    def boom(*args, **kwargs):
        raise RuntimeError("highlighter exploded")

    monkeypatch.setattr(highlight_module, "highlight", boom)

    got = highlight_code("<b>x</b>\n", "python")

    assert got == literal_code_html("<b>x</b>\n")
    assert got == "<pre><code>&lt;b&gt;x&lt;/b&gt;\n</code></pre>"


def test_non_code_text_is_unchanged_and_order_kept() -> None:
    text = "intro *text*\n```python\nalpha = 1\n```\nmiddle\n```\nplain\n```\noutro"

    got = highlight_fenced_regions(text)

    assert got.startswith("intro *text*\n\n\n<div")
    assert got.index("alpha") < got.index("middle") < got.index("plain") < got.index("outro")
    assert got.endswith("\noutro")
    assert "```" not in got


def test_unclosed_fence_is_left_alone() -> None:
    text = "```python\nprint(1)\n"

    assert highlight_fenced_regions(text) == text


def test_lexers_keep_leading_and_trailing_blank_lines() -> None:
    assert resolve_lexer("python").stripnl is False
    assert resolve_lexer(None).stripnl is False

    pre = BeautifulSoup(highlight_code("\n\nx\n\n"), "html.parser").find("pre")

    assert pre.get_text() == "\n\nx\n\n"


def test_store_receives_rendered_html_and_placeholder_is_inserted() -> None:
    stored = []

    def store(html_text: str) -> str:
        stored.append(html_text)
        return f"@@{len(stored)}@@"

    got = highlight_fenced_regions("a\n```\nx\n```\nb", store=store)

    assert got == "a\n\n\n@@1@@\n\n\nb"
    assert stored[0].startswith('<div class="highlight"')
