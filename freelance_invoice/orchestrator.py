"""Runs one invoice end to end: build, render to disk, optionally email."""

from __future__ import annotations

import logging
import os
from concurrent.futures import Future
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

from .config import InvoiceConfig
from .dates import parse_reference_date
from .invoice import Invoice, InvoiceNumber, build_invoice
from .mailer import Dispatcher
from .rendering import write_invoice

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvoiceRun:
    invoice: Invoice
    path: Path
    dispatch: Optional["Future[str]"]


def run_invoice(
    config: InvoiceConfig,
    number: InvoiceNumber,
    reference_date: Any = None,
    adjust_amount: Optional[float] = None,
    send_email: bool = True,
    output_dir: Union[str, "os.PathLike[str]"] = ".",
    dispatcher: Optional[Dispatcher] = None,
) -> InvoiceRun:
    config.validate(send_email)
    if number is None or number == "":
        logger.warning("No invoice number given; output will be named invoice-%s.pdf", number)

    reference = parse_reference_date(reference_date)
    invoice = build_invoice(reference, number, adjust_amount, config)
    path = write_invoice(invoice, output_dir)

    dispatcher = dispatcher or Dispatcher(config)
    future = dispatcher.dispatch(invoice.number, path, send_email)
    return InvoiceRun(invoice=invoice, path=path, dispatch=future)
