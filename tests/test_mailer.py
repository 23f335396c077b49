import smtplib
import tempfile
import unittest
from concurrent.futures import Future, ThreadPoolExecutor
from email.message import EmailMessage
from pathlib import Path
from typing import List
from unittest.mock import MagicMock, patch

from freelance_invoice.config import InvoiceConfig
from freelance_invoice.errors import DispatchError
from freelance_invoice.mailer import Dispatcher, SmtpTransport, build_message, log_dispatch_result

CONFIG = InvoiceConfig(
    rate="50",
    email_secret="app-password",
    email_from="jane@example.com",
    email_to="billing@example.com",
    email_bcc="jane+copy@example.com",
)


class RecordingTransport:
    def __init__(self) -> None:
        self.sent: List[EmailMessage] = []

    def send(self, message: EmailMessage) -> None:
        self.sent.append(message)


class FailingTransport:
    def send(self, message: EmailMessage) -> None:
        raise smtplib.SMTPAuthenticationError(535, b"Username and Password not accepted")


class MailerTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.pdf_path = Path(self._tmp.name) / "invoice-42.pdf"
        self.pdf_path.write_bytes(b"%PDF-1.3 test")
        self.executor = ThreadPoolExecutor(max_workers=1)
        self.addCleanup(self.executor.shutdown)

    def test_build_message_has_subject_body_and_single_attachment(self) -> None:
        message = build_message("42", self.pdf_path, "jane@example.com", "billing@example.com", "copy@example.com")

        self.assertEqual(message["Subject"], "Invoice #42")
        self.assertEqual(message["From"], "jane@example.com")
        self.assertEqual(message["To"], "billing@example.com")
        self.assertEqual(message["Bcc"], "copy@example.com")
        self.assertEqual(message.get_body(preferencelist=("plain",)).get_content().strip(), "Invoice #42")

        attachments = list(message.iter_attachments())
        self.assertEqual(len(attachments), 1)
        self.assertEqual(attachments[0].get_filename(), "invoice-42.pdf")
        self.assertEqual(attachments[0].get_content_type(), "application/pdf")
        self.assertEqual(attachments[0].get_content(), b"%PDF-1.3 test")

    def test_build_message_omits_empty_bcc(self) -> None:
        message = build_message("42", self.pdf_path, "jane@example.com", "billing@example.com")

        self.assertIsNone(message["Bcc"])

    def test_dispatch_is_a_no_op_when_disabled(self) -> None:
        transport = RecordingTransport()
        executor = MagicMock()
        dispatcher = Dispatcher(CONFIG, transport=transport, executor=executor)

        self.assertIsNone(dispatcher.dispatch("42", self.pdf_path, False))
        executor.submit.assert_not_called()
        self.assertEqual(transport.sent, [])

    def test_dispatch_sends_in_background(self) -> None:
        transport = RecordingTransport()
        dispatcher = Dispatcher(CONFIG, transport=transport, executor=self.executor)

        future = dispatcher.dispatch("42", self.pdf_path, True)

        self.assertIsNotNone(future)
        assert future is not None
        self.assertIn("billing@example.com", future.result(timeout=5))
        self.assertEqual(len(transport.sent), 1)
        self.assertEqual(transport.sent[0]["Subject"], "Invoice #42")

    def test_transport_failure_is_captured_not_raised(self) -> None:
        dispatcher = Dispatcher(CONFIG, transport=FailingTransport(), executor=self.executor)

        future = dispatcher.dispatch("42", self.pdf_path, True)

        assert future is not None
        self.assertIsInstance(future.exception(timeout=5), DispatchError)

    def test_missing_attachment_is_captured_as_dispatch_error(self) -> None:
        dispatcher = Dispatcher(CONFIG, transport=RecordingTransport(), executor=self.executor)

        future = dispatcher.dispatch("42", Path(self._tmp.name) / "missing.pdf", True)

        assert future is not None
        self.assertIsInstance(future.exception(timeout=5), DispatchError)

    def test_log_dispatch_result_reports_success_and_failure(self) -> None:
        ok: Future = Future()
        ok.set_result("invoice 42 sent to billing@example.com")
        failed: Future = Future()
        failed.set_exception(DispatchError("smtp down"))

        with self.assertLogs("freelance_invoice.mailer", level="INFO") as logs:
            log_dispatch_result(ok)
            log_dispatch_result(failed)

        self.assertTrue(any("Email sent" in line for line in logs.output))
        self.assertTrue(any("ERROR SENDING MAIL: smtp down" in line for line in logs.output))

    def test_smtp_transport_logs_in_and_sends(self) -> None:
        message = EmailMessage()
        with patch("freelance_invoice.mailer.smtplib.SMTP_SSL") as smtp_ssl:
            SmtpTransport.from_config(CONFIG).send(message)

        smtp_ssl.assert_called_once_with("smtp.gmail.com", 465)
        server = smtp_ssl.return_value.__enter__.return_value
        server.login.assert_called_once_with("jane@example.com", "app-password")
        server.send_message.assert_called_once_with(message)


if __name__ == "__main__":
    unittest.main()
