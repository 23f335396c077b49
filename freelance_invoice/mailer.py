"""Email delivery of rendered invoices."""

from __future__ import annotations

import logging
import smtplib
from concurrent.futures import Future, ThreadPoolExecutor
from email.message import EmailMessage
from pathlib import Path
from typing import Optional, Protocol

from .config import InvoiceConfig
from .errors import DispatchError
from .invoice import InvoiceNumber

logger = logging.getLogger(__name__)


class Transport(Protocol):
    def send(self, message: EmailMessage) -> None:
        ...


def invoice_subject(invoice_number: InvoiceNumber) -> str:
    return f"Invoice #{invoice_number}"


def build_message(
    invoice_number: InvoiceNumber,
    attachment: Path,
    sender: str,
    recipient: str,
    bcc: str = "",
) -> EmailMessage:
    subject = invoice_subject(invoice_number)
    message = EmailMessage()
    message["From"] = sender
    message["To"] = recipient
    if bcc:
        message["Bcc"] = bcc
    message["Subject"] = subject
    message.set_content(subject)
    message.add_attachment(
        attachment.read_bytes(),
        maintype="application",
        subtype="pdf",
        filename=attachment.name,
    )
    return message


class SmtpTransport:
    """Sends messages over implicit-TLS SMTP with a login."""

    def __init__(self, host: str, port: int, username: str, password: str) -> None:
        self.host = host
        self.port = port
        self.username = username
        self.password = password

    @classmethod
    def from_config(cls, config: InvoiceConfig) -> "SmtpTransport":
        return cls(config.smtp_host, config.smtp_port, config.email_from, config.email_secret)

    def send(self, message: EmailMessage) -> None:
        with smtplib.SMTP_SSL(self.host, self.port) as server:
            server.login(self.username, self.password)
            server.send_message(message)


def log_dispatch_result(future: "Future[str]") -> None:
    exc = future.exception()
    if exc is not None:
        logger.error("ERROR SENDING MAIL: %s", exc)
    else:
        logger.info("Email sent: %s", future.result())


class Dispatcher:
    """Emails the rendered invoice in the background.

    ``dispatch`` hands the send to a worker thread and returns its future.
    Transport failures are captured as ``DispatchError`` on the future and
    logged; they never propagate to the caller.
    """

    def __init__(
        self,
        config: InvoiceConfig,
        transport: Optional[Transport] = None,
        executor: Optional[ThreadPoolExecutor] = None,
    ) -> None:
        self.config = config
        self.transport = transport or SmtpTransport.from_config(config)
        self.executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="invoice-mail")

    def _send(self, invoice_number: InvoiceNumber, path: Path) -> str:
        try:
            message = build_message(
                invoice_number,
                path,
                sender=self.config.email_from,
                recipient=self.config.email_to,
                bcc=self.config.email_bcc,
            )
            self.transport.send(message)
        except (OSError, smtplib.SMTPException) as exc:
            raise DispatchError(f"Failed to send invoice {invoice_number}: {exc}") from exc
        return f"invoice {invoice_number} sent to {self.config.email_to}"

    def dispatch(
        self,
        invoice_number: InvoiceNumber,
        path: Path,
        should_send: bool,
    ) -> Optional["Future[str]"]:
        if not should_send:
            logger.info("Email disabled; not sending invoice %s", invoice_number)
            return None

        logger.info("Sending Email...")
        future = self.executor.submit(self._send, invoice_number, Path(path))
        future.add_done_callback(log_dispatch_result)
        return future

    def shutdown(self, wait: bool = True) -> None:
        self.executor.shutdown(wait=wait)
