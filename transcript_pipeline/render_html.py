# transcript_pipeline/render_html.py
from __future__ import annotations

from typing import List

import markdown
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor

from .highlight import highlight_fenced_regions


# Everything Python-Markdown ships that applies to chat text, plus
# strikethrough and task lists from pymdown-extensions.
# codehilite is left out: code is highlighted by FencedHighlightExtension.
MARKDOWN_EXTENSIONS = [
    "extra",
    "admonition",
    "sane_lists",
    "smarty",
    "toc",
    "pymdownx.tilde",
    "pymdownx.tasklist",
]

CSS = """
body { font-family: Arial, sans-serif; padding: 40px; }
pre { overflow-x: auto; background-color: #272822; color: #f8f8f2; padding: 15px; border-radius: 5px; -webkit-print-color-adjust: exact; print-color-adjust: exact; }
code { font-family: monospace; }
h2 { border-bottom: 1px solid #ddd; padding-bottom: 4px; }
"""


def wrap_html(body_html: str) -> str:
    """Fixed document shell. No title or timestamp, so output is reproducible."""
    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<style>{CSS}</style>
</head>
<body>
{body_html}
</body>
</html>"""


class FencedHighlightPreprocessor(Preprocessor):
    """
    Swap each fenced region for a stashed placeholder holding its
    highlighted HTML. The stash is restored verbatim after every other
    processor has run.
    """

    def run(self, lines: List[str]) -> List[str]:
        text = "\n".join(lines)
        return highlight_fenced_regions(text, store=self.md.htmlStash.store).split("\n")


class FencedHighlightExtension(Extension):
    def extendMarkdown(self, md: markdown.Markdown) -> None:
        # After normalize_whitespace (30), which strips stash markers;
        # before fenced_code_block (25) and html_block (20).
        md.preprocessors.register(FencedHighlightPreprocessor(md), "fenced_highlight", 28)


def markdown_to_html(md_text: str) -> str:
    extensions = [*MARKDOWN_EXTENSIONS, FencedHighlightExtension()]
    return markdown.markdown(md_text, extensions=extensions, output_format="html")


def render_markdown_with_highlighting(md_text: str) -> str:
    """
    Conversation Markdown -> standalone HTML document.

    Two phases, in this order:
      1) fenced code regions -> Pygments HTML, stashed as opaque blocks
      2) remaining Markdown -> HTML
    Running phase 2 over the highlighter's markup would escape or
    re-transform it (e.g. ~~~ lines inside the code).
    """
    return wrap_html(markdown_to_html(md_text))
