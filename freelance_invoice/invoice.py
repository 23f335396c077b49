"""Invoice record assembly."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from .config import InvoiceConfig
from .dates import derive_dates

logger = logging.getLogger(__name__)

QUANTITY = 40
TAX_RATE = 0
ITEM = "Software development and consulting"
TERMS = "Payment for direct deposit; to be paid within 2 weeks."

InvoiceNumber = Union[str, int, None]


@dataclass(frozen=True)
class Invoice:
    number: InvoiceNumber
    date: str
    bill_from_name: str
    bill_from_address: str
    bill_from_state: str
    bill_to_name: str
    bill_to_address: str
    bill_to_state: str
    notes: str
    terms: str
    item: str
    quantity: int
    rate: float
    amount: float


def compute_amount(rate: float, adjust_amount: Optional[float] = None) -> float:
    """Line total for the fixed quantity, less an optional adjustment.

    The adjustment is subtracted as given; the result may go negative.
    """
    amount = QUANTITY * rate
    if adjust_amount is not None:
        amount -= adjust_amount
    return amount


def build_invoice(
    reference: Any,
    number: InvoiceNumber,
    adjust_amount: Optional[float] = None,
    config: Optional[InvoiceConfig] = None,
) -> Invoice:
    config = config or InvoiceConfig()
    dates = derive_dates(reference)
    rate = config.rate_value
    amount = compute_amount(rate, adjust_amount)
    if amount < 0:
        logger.warning("Invoice %s total is negative after adjustment: %.2f", number, amount)

    return Invoice(
        number=number,
        date=dates.invoice_date,
        bill_from_name=config.name,
        bill_from_address=config.address,
        bill_from_state=config.state,
        bill_to_name=config.company,
        bill_to_address=config.client_address,
        bill_to_state=config.client_state,
        notes=f"Hours worked {dates.work_start_date}-{dates.work_end_date}",
        terms=TERMS,
        item=ITEM,
        quantity=QUANTITY,
        rate=rate,
        amount=amount,
    )
