# transcript_pipeline/run_all.py
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from .contracts import ConversionPaths, ConversionResult, PdfRenderer
from .errors import ConversionError, RenderError
from .extract import extract_conversation_markdown
from .io_utils import PathLike, absolute_path, remove_file, write_text
from .render_html import render_markdown_with_highlighting
from .render_pdf import ChromeConfig, chrome_pdf_renderer, verify_pdf

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


def resolve_paths(input_path: PathLike, output_path: Optional[PathLike] = None) -> ConversionPaths:
    """
    <input>.jsonl -> <input>.pdf unless output is given.
    The intermediate HTML always sits next to the PDF.
    """
    inp = Path(input_path)
    pdf = Path(output_path) if output_path is not None else inp.with_suffix(".pdf")
    return ConversionPaths(input_jsonl=inp, html=pdf.with_suffix(".html"), pdf=pdf)


def convert_file(
    input_path: PathLike,
    output_path: Optional[PathLike] = None,
    renderer: Optional[PdfRenderer] = None,
) -> ConversionResult:
    """
    Run the whole pipeline (fail-closed; the first error aborts).

    The HTML file is written before the renderer runs and is never cleaned
    up, so it is still there to inspect when rendering fails. Any existing
    PDF at the output path is removed first.
    """
    paths = resolve_paths(input_path, output_path)
    if renderer is None:
        renderer = chrome_pdf_renderer(ChromeConfig())

    logger.info("Extracting conversation from %s", paths.input_jsonl)
    md_text = extract_conversation_markdown(paths.input_jsonl)

    logger.info("Rendering HTML (%d chars of markdown)", len(md_text))
    html_doc = render_markdown_with_highlighting(md_text)
    write_text(paths.html, html_doc)

    # A PDF left by an earlier run must not pass verification.
    remove_file(paths.pdf)

    abs_html = absolute_path(paths.html)
    logger.info("Printing %s -> %s", abs_html, paths.pdf)
    if not renderer(abs_html, paths.pdf):
        raise RenderError(f"PDF renderer failed for {abs_html} -> {paths.pdf}")

    page_count = verify_pdf(paths.pdf)

    return ConversionResult(
        paths=paths,
        page_count=page_count,
        markdown_chars=len(md_text),
        html_chars=len(html_doc),
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="transcript2pdf",
        description="Convert a conversational AI session log (JSONL) into a syntax-highlighted PDF.",
    )
    parser.add_argument("input", type=str, help="Path to the input JSONL file")
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Path for the output PDF (defaults to <input>.pdf)",
    )
    parser.add_argument(
        "--chrome",
        type=str,
        default=None,
        help="Chrome/Chromium executable to print with (defaults to the first one found on PATH)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    renderer = chrome_pdf_renderer(ChromeConfig(executable=args.chrome))
    try:
        result = convert_file(args.input, args.output, renderer=renderer)
    except ConversionError as e:
        raise SystemExit(f"Error: {e}") from e

    print(f"[OK] Wrote: {result.paths.pdf} ({result.page_count} pages)")


if __name__ == "__main__":
    main()
