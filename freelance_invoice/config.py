"""Runtime configuration loaded from environment variables."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import List, Optional

from .errors import ConfigError
from .formatting import safe_float

logger = logging.getLogger(__name__)

DEFAULT_SMTP_HOST = "smtp.gmail.com"
DEFAULT_SMTP_PORT = 465

PARTY_FIELDS = (
    "name",
    "address",
    "state",
    "company",
    "client_address",
    "client_state",
)


def env_str(name: str, default: str = "") -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip()


def env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


def is_number(value: object) -> bool:
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return False
    return math.isfinite(number)


@dataclass(frozen=True)
class InvoiceConfig:
    """Biller, payee, rate and mail settings for one invoice run."""

    name: str = ""
    address: str = ""
    state: str = ""
    company: str = ""
    client_address: str = ""
    client_state: str = ""
    rate: Optional[str] = None
    email_secret: str = ""
    email_from: str = ""
    email_to: str = ""
    email_bcc: str = ""
    smtp_host: str = DEFAULT_SMTP_HOST
    smtp_port: int = DEFAULT_SMTP_PORT

    @classmethod
    def from_env(cls) -> "InvoiceConfig":
        return cls(
            name=env_str("INVOICE_NAME"),
            address=env_str("INVOICE_ADDRESS"),
            state=env_str("INVOICE_STATE"),
            company=env_str("INVOICE_COMPANY"),
            client_address=env_str("INVOICE_CLIENT_ADDRESS"),
            client_state=env_str("INVOICE_CLIENT_STATE"),
            rate=os.getenv("INVOICE_RATE"),
            email_secret=env_str("INVOICE_EMAIL_SECRET"),
            email_from=env_str("INVOICE_EMAIL_FROM"),
            email_to=env_str("INVOICE_EMAIL_TO"),
            email_bcc=env_str("INVOICE_EMAIL_BCC"),
            smtp_host=env_str("INVOICE_SMTP_HOST", DEFAULT_SMTP_HOST),
            smtp_port=env_int("INVOICE_SMTP_PORT", DEFAULT_SMTP_PORT, minimum=1),
        )

    @property
    def rate_value(self) -> float:
        return safe_float(self.rate, 0.0)

    def validate(self, send_email: bool) -> None:
        """Check the settings a run depends on.

        Blank party fields only produce a visually incomplete page, so they
        are logged. A missing or non-numeric rate, or missing mail settings
        when the invoice is going to be sent, raise ``ConfigError``.
        """
        for field_name in PARTY_FIELDS:
            if not getattr(self, field_name):
                logger.warning("Configuration field %r is blank; it will render empty", field_name)

        problems: List[str] = []
        if self.rate is None or not str(self.rate).strip():
            problems.append("rate is not set (INVOICE_RATE)")
        elif not is_number(self.rate):
            problems.append(f"rate must be numeric, got {self.rate!r}")

        if send_email:
            if not self.email_secret:
                problems.append("email secret is not set (INVOICE_EMAIL_SECRET)")
            if not self.email_from:
                problems.append("sender address is not set (INVOICE_EMAIL_FROM)")
            if not self.email_to:
                problems.append("recipient address is not set (INVOICE_EMAIL_TO)")

        if problems:
            raise ConfigError("Invalid configuration: " + "; ".join(problems))
