# transcript_pipeline/render_pdf.py
from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from .contracts import PdfRenderer
from .errors import RenderError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChromeConfig:
    # Explicit browser executable; when None, candidates are tried in order.
    executable: Optional[str] = None
    candidates: Sequence[str] = (
        "google-chrome",
        "google-chrome-stable",
        "chromium",
        "chromium-browser",
        "chrome",
        "/Applications/Google Chrome.app/Contents/MacOS/Google Chrome",
    )
    # Appended after the base flags, before the file:// URL.
    extra_args: Sequence[str] = ()


def find_chrome(cfg: ChromeConfig = ChromeConfig()) -> Optional[str]:
    if cfg.executable:
        return shutil.which(cfg.executable) or cfg.executable
    for name in cfg.candidates:
        found = shutil.which(name)
        if found:
            return found
    return None


def build_chrome_command(chrome: str, html_path: Path, pdf_path: Path, cfg: ChromeConfig) -> List[str]:
    return [
        chrome,
        "--headless",
        "--disable-gpu",
        f"--print-to-pdf={pdf_path}",
        *cfg.extra_args,
        html_path.as_uri(),
    ]


def chrome_pdf_renderer(cfg: ChromeConfig = ChromeConfig()) -> PdfRenderer:
    """
    Build a renderer that prints an HTML file to PDF with headless Chrome.

    The call blocks until Chrome exits; there is no timeout. Failures are
    logged and reported as False so the caller decides how to fail.
    """

    def render(html_path: Path, pdf_path: Path) -> bool:
        chrome = find_chrome(cfg)
        if chrome is None:
            logger.error("No Chrome/Chromium executable found (tried: %s)", ", ".join(cfg.candidates))
            return False

        cmd = build_chrome_command(chrome, html_path, pdf_path, cfg)
        logger.debug("Running: %s", cmd)
        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except OSError as e:
            logger.error("Could not launch %s: %s", chrome, e)
            return False

        if result.returncode != 0:
            logger.error("Chrome exited with code %d: %s", result.returncode, (result.stderr or "").strip()[:2000])
            return False
        return True

    return render


def verify_pdf(pdf_path: Path) -> int:
    """
    Fail-closed check that the renderer really produced a PDF.
    Returns the page count.
    """
    if not pdf_path.exists():
        raise RenderError(f"Renderer reported success but no PDF was written: {pdf_path}")
    try:
        page_count = len(PdfReader(str(pdf_path)).pages)
    except (PyPdfError, OSError, ValueError) as e:
        raise RenderError(f"Output is not a readable PDF: {pdf_path}: {e}") from e
    if page_count == 0:
        raise RenderError(f"PDF has no pages: {pdf_path}")
    return page_count
