"""Font discovery and registration for the invoice page."""

from __future__ import annotations

import logging
import os
from typing import Dict, List, Optional

from fpdf import FPDF  # type: ignore

from .pdf_constants import FONT_FAMILY

logger = logging.getLogger(__name__)

_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def find_font_path(env_var: str, candidates: List[str]) -> Optional[str]:
    override = os.getenv(env_var)
    if override and os.path.exists(override):
        return override

    for path in candidates:
        if os.path.exists(path):
            return path
    return None


def _candidates(filename: str) -> List[str]:
    return [
        os.path.join(_PROJECT_ROOT, "fonts", filename),
        os.path.join("/usr/share/fonts/truetype/dejavu", filename),
        os.path.join("/usr/share/fonts/dejavu", filename),
        os.path.join("/Library/Fonts", filename),
    ]


def font_path(style: str = "") -> Optional[str]:
    """TTF file for a style ('', 'B' or 'I'), or None when none is installed."""
    env_var, filename = FontManager.STYLE_FILES[style]
    return find_font_path(env_var, _candidates(filename))


class FontManager:
    """Registers a Unicode TTF family when one is available.

    Without a regular TTF the page falls back to the core Helvetica font,
    which only covers Latin-1 text. Styles whose TTF is missing are drawn
    with the regular face.
    """

    FAMILY = "InvoiceFont"
    STYLE_FILES = {
        "": ("INVOICE_FONT_PATH", "DejaVuSans.ttf"),
        "B": ("INVOICE_FONT_BOLD_PATH", "DejaVuSans-Bold.ttf"),
        "I": ("INVOICE_FONT_ITALIC_PATH", "DejaVuSans-Oblique.ttf"),
    }

    def __init__(self, pdf: FPDF) -> None:
        self.pdf = pdf
        self.family = FONT_FAMILY
        self.styles: Dict[str, str] = {"": "", "B": "B", "I": "I"}

        regular_path = font_path("")
        if not regular_path:
            logger.debug("No TTF font found; using core %s (Latin-1 only)", FONT_FAMILY)
            return

        self.family = self.FAMILY
        self.pdf.add_font(self.FAMILY, "", regular_path)
        for style in ("B", "I"):
            path = font_path(style)
            if path:
                self.pdf.add_font(self.FAMILY, style, path)
            else:
                self.styles[style] = ""

    @property
    def is_unicode(self) -> bool:
        return self.family == self.FAMILY

    def set_font(self, size: int, style: str = "") -> None:
        self.pdf.set_font(self.family, self.styles.get(style, ""), size)
