"""Public package API for recurring invoice generation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .config import InvoiceConfig
    from .invoice import Invoice
    from .orchestrator import InvoiceRun


def build_invoice(
    reference: Any,
    number: Any,
    adjust_amount: Optional[float] = None,
    config: Optional["InvoiceConfig"] = None,
) -> "Invoice":
    from .invoice import build_invoice as _build_invoice

    return _build_invoice(reference, number, adjust_amount, config)


def render_invoice(invoice: "Invoice") -> bytes:
    from .rendering import render_invoice as _render_invoice

    return _render_invoice(invoice)


def run_invoice(config: "InvoiceConfig", number: Any, **kwargs: Any) -> "InvoiceRun":
    from .orchestrator import run_invoice as _run_invoice

    return _run_invoice(config, number, **kwargs)


__all__ = ["build_invoice", "render_invoice", "run_invoice"]
