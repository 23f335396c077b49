"""Invoice PDF rendering logic."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from fpdf import FPDF  # type: ignore
from fpdf.errors import FPDFException  # type: ignore

from .errors import RenderError
from .fonts import FontManager
from .formatting import fmt_money, fmt_qty
from .invoice import TAX_RATE, Invoice, InvoiceNumber
from .pdf_constants import (
    ADDRESS_Y,
    BALANCE_Y,
    BILL_TO_ADDR_Y,
    BILL_TO_LABEL_Y,
    BILL_TO_NAME_Y,
    BILL_TO_STATE_Y,
    CREATION_DATE,
    DATE_Y,
    FONT_SIZE_BALANCE,
    FONT_SIZE_NORMAL,
    FONT_SIZE_TITLE,
    ITEM_HEADER_Y,
    ITEM_ROW_Y,
    NAME_Y,
    NOTES_LABEL_Y,
    NOTES_TEXT_Y,
    NUMBER_Y,
    PAGE_FORMAT,
    RIGHT_EDGE,
    RULE_WIDTH,
    RULE_Y,
    STATE_Y,
    TERMS_LABEL_Y,
    TERMS_TEXT_Y,
    TITLE_Y,
    TOTAL_ROW_H,
    TOTALS_START_Y,
    UNIT,
    X_AMOUNT,
    X_BALANCE_LABEL,
    X_BALANCE_VALUE,
    X_ITEM,
    X_LEFT,
    X_QTY,
    X_RATE,
    X_TITLE,
    X_TOTALS_LABEL,
)

logger = logging.getLogger(__name__)

NORMAL = ""
BOLD = "B"
ITALIC = "I"


def invoice_filename(number: InvoiceNumber) -> str:
    """Output file name; a missing number is rendered literally as ``None``."""
    return f"invoice-{number}.pdf"


class InvoiceRenderer:
    """Draws one invoice onto a single fixed-layout page.

    Every block is placed at absolute coordinates; nothing flows or wraps.
    """

    def __init__(self, invoice: Invoice) -> None:
        self.invoice = invoice
        self.pdf = FPDF(unit=UNIT, format=PAGE_FORMAT)
        self.pdf.set_auto_page_break(False)
        self.pdf.set_creation_date(CREATION_DATE)
        self.pdf.add_page()
        try:
            self.fonts = FontManager(self.pdf)
        except (FPDFException, OSError) as exc:
            raise RenderError(f"Failed to load invoice fonts: {exc}") from exc

    def _font(self, size: int, style: str = NORMAL) -> None:
        self.fonts.set_font(size, style)

    def _text(self, x: float, y: float, text: str) -> None:
        if text:
            self.pdf.text(x, y, text)

    def _text_right(self, right: float, y: float, text: str) -> None:
        self._text(right - self.pdf.get_string_width(text), y, text)

    def _draw_name_and_address(self) -> None:
        self._font(FONT_SIZE_NORMAL, BOLD)
        self._text(X_LEFT, NAME_Y, self.invoice.bill_from_name)
        self._font(FONT_SIZE_NORMAL)
        self._text(X_LEFT, ADDRESS_Y, self.invoice.bill_from_address)
        self._text(X_LEFT, STATE_Y, self.invoice.bill_from_state)

    def _draw_title(self) -> None:
        self._font(FONT_SIZE_TITLE, BOLD)
        self._text(X_TITLE, TITLE_Y, "INVOICE")
        self._font(FONT_SIZE_NORMAL)
        self._text(X_TITLE, NUMBER_Y, f"Invoice #: {self.invoice.number}")
        self._text(X_TITLE, DATE_Y, f"Date: {self.invoice.date}")

    def _draw_bill_to(self) -> None:
        self._font(FONT_SIZE_NORMAL)
        self._text(X_LEFT, BILL_TO_LABEL_Y, "Bill To:")
        self._font(FONT_SIZE_NORMAL, BOLD)
        self._text(X_LEFT, BILL_TO_NAME_Y, self.invoice.bill_to_name)
        self._text(X_LEFT, BILL_TO_ADDR_Y, self.invoice.bill_to_address)
        self._text(X_LEFT, BILL_TO_STATE_Y, self.invoice.bill_to_state)

    def _draw_balance_due(self) -> None:
        self._font(FONT_SIZE_BALANCE, BOLD)
        self._text(X_BALANCE_LABEL, BALANCE_Y, "Balance Due:")
        self._text(X_BALANCE_VALUE, BALANCE_Y, fmt_money(self.invoice.amount))

    def _draw_item_header(self) -> None:
        self._font(FONT_SIZE_NORMAL)
        self._text(X_ITEM, ITEM_HEADER_Y, "Item")
        self._text(X_QTY, ITEM_HEADER_Y, "Quantity")
        self._text(X_RATE, ITEM_HEADER_Y, "Rate")
        self._text(X_AMOUNT, ITEM_HEADER_Y, "Amount")
        self.pdf.set_line_width(RULE_WIDTH)
        self.pdf.line(X_ITEM, RULE_Y, RIGHT_EDGE, RULE_Y)

    def _draw_item_row(self) -> None:
        self._font(FONT_SIZE_NORMAL)
        self._text(X_ITEM, ITEM_ROW_Y, self.invoice.item)
        self._text(X_QTY, ITEM_ROW_Y, fmt_qty(self.invoice.quantity))
        self._text(X_RATE, ITEM_ROW_Y, fmt_money(self.invoice.rate))
        self._text(X_AMOUNT, ITEM_ROW_Y, fmt_money(self.invoice.amount))

    def _draw_totals(self) -> None:
        rows = (
            ("Subtotal:", fmt_money(self.invoice.amount)),
            (f"Tax ({TAX_RATE}%):", fmt_money(0.0)),
            ("Total:", fmt_money(self.invoice.amount)),
        )
        for index, (label, value) in enumerate(rows):
            y = TOTALS_START_Y + index * TOTAL_ROW_H
            self._font(FONT_SIZE_NORMAL, ITALIC)
            self._text(X_TOTALS_LABEL, y, label)
            self._font(FONT_SIZE_NORMAL)
            self._text_right(RIGHT_EDGE, y, value)

    def _draw_notes_and_terms(self) -> None:
        self._font(FONT_SIZE_NORMAL, BOLD)
        self._text(X_LEFT, NOTES_LABEL_Y, "Notes:")
        self._text(X_LEFT, TERMS_LABEL_Y, "Terms:")
        self._font(FONT_SIZE_NORMAL)
        self._text(X_LEFT, NOTES_TEXT_Y, self.invoice.notes)
        self._text(X_LEFT, TERMS_TEXT_Y, self.invoice.terms)

    def render(self) -> FPDF:
        try:
            self._draw_name_and_address()
            self._draw_title()
            self._draw_bill_to()
            self._draw_balance_due()
            self._draw_item_header()
            self._draw_item_row()
            self._draw_totals()
            self._draw_notes_and_terms()
        except FPDFException as exc:
            raise RenderError(f"Failed to draw invoice {self.invoice.number}: {exc}") from exc
        return self.pdf

    def to_bytes(self) -> bytes:
        pdf = self.render()
        try:
            pdf_blob = pdf.output()
        except FPDFException as exc:
            raise RenderError(f"Failed to serialize invoice {self.invoice.number}: {exc}") from exc
        if isinstance(pdf_blob, (bytes, bytearray)):
            return bytes(pdf_blob)
        raise RenderError(f"Unexpected PDF output type: {type(pdf_blob).__name__}")


def render_invoice(invoice: Invoice) -> bytes:
    return InvoiceRenderer(invoice).to_bytes()


def write_invoice(invoice: Invoice, directory: Union[str, "os.PathLike[str]"] = ".") -> Path:
    """Render ``invoice`` and write it to ``directory``, replacing any existing file."""
    pdf_bytes = render_invoice(invoice)
    path = Path(directory) / invoice_filename(invoice.number)
    try:
        path.write_bytes(pdf_bytes)
    except OSError as exc:
        raise RenderError(f"Could not write {path}: {exc}") from exc
    logger.info("Wrote invoice %s to %s (%d bytes)", invoice.number, path, len(pdf_bytes))
    return path
