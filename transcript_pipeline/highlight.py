# transcript_pipeline/highlight.py
from __future__ import annotations

import html
import logging
import re
from typing import Callable, Optional

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, get_lexer_for_filename
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)


# Fence, optional word-only language tag, newline, then everything up to the
# first closing fence. DOTALL so code spans lines; lazy so the first closing
# fence ends the region.
FENCE_RE = re.compile(r"```(\w+)?\n(.*?)```", re.DOTALL)

# Fixed dark theme. The HTML shell's <pre> background matches it.
PYGMENTS_STYLE = "monokai"

# Region text is highlighted as-is: keep leading/trailing blank lines.
LEXER_OPTIONS = {"stripnl": False}


def resolve_lexer(tag: Optional[str]) -> Lexer:
    """
    Map a fence language tag to a Pygments lexer.

    Tries the tag as a lexer alias ("python"), then as a file extension
    token ("py"). Anything else, including no tag, is plain text.
    """
    if not tag:
        return TextLexer(**LEXER_OPTIONS)

    try:
        return get_lexer_by_name(tag, **LEXER_OPTIONS)
    except ClassNotFound:
        pass

    try:
        return get_lexer_for_filename(f"snippet.{tag}", **LEXER_OPTIONS)
    except ClassNotFound:
        logger.debug("No lexer for fence tag %r; using plain text", tag)
        return TextLexer(**LEXER_OPTIONS)


def literal_code_html(code: str) -> str:
    return f"<pre><code>{html.escape(code)}</code></pre>"


def highlight_code(code: str, tag: Optional[str] = None) -> str:
    """
    Render code as inline-styled HTML. Never raises: if Pygments fails the
    code comes back as an unstyled <pre><code> block.
    """
    formatter = HtmlFormatter(style=PYGMENTS_STYLE, noclasses=True)
    try:
        return highlight(code, resolve_lexer(tag), formatter)
    except Exception as e:
        logger.warning("Highlighting failed for fence tag %r (%s); using literal block", tag, e)
        return literal_code_html(code)


def highlight_fenced_regions(markdown: str, store: Optional[Callable[[str], str]] = None) -> str:
    """
    Replace every fenced code region with pre-rendered HTML.

    With `store` (e.g. a Markdown htmlStash), the rendered HTML is handed to
    it and its placeholder is substituted instead, so no later Markdown
    processor ever sees the highlighter's output. Each replacement is set off
    by blank lines. Text outside fences is unchanged.
    """
    def _replace(m: re.Match) -> str:
        rendered = highlight_code(m.group(2), m.group(1)).rstrip()
        if store is not None:
            rendered = store(rendered)
        return f"\n\n{rendered}\n\n"

    return FENCE_RE.sub(_replace, markdown)
