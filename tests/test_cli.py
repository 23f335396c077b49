import unittest
from unittest.mock import patch

from freelance_invoice.__main__ import main, parse_args
from freelance_invoice.errors import RenderError


class CliTests(unittest.TestCase):
    def test_parse_args_reads_invoice_options(self) -> None:
        args = parse_args(["-n", "42", "-d", "2024-01-19", "-a", "200", "--no-email"])

        self.assertEqual(args.number, "42")
        self.assertEqual(args.date, "2024-01-19")
        self.assertEqual(args.adjust, 200.0)
        self.assertFalse(args.email)
        self.assertEqual(args.output_dir, ".")

    def test_parse_args_accepts_short_no_email_flag(self) -> None:
        args = parse_args(["-n", "42", "-ne"])

        self.assertEqual(args.number, "42")
        self.assertFalse(args.email)

    def test_parse_args_defaults_to_sending(self) -> None:
        args = parse_args([])

        self.assertIsNone(args.number)
        self.assertIsNone(args.date)
        self.assertIsNone(args.adjust)
        self.assertTrue(args.email)

    @patch("freelance_invoice.__main__.load_dotenv")
    @patch("freelance_invoice.__main__.run_invoice")
    def test_main_passes_options_to_run(self, run_invoice, _load_dotenv) -> None:
        main(["-n", "42", "-d", "2024-01-19", "--no-email", "-o", "/tmp"])

        _, kwargs = run_invoice.call_args
        self.assertEqual(run_invoice.call_args.args[1], "42")
        self.assertEqual(kwargs["reference_date"], "2024-01-19")
        self.assertFalse(kwargs["send_email"])
        self.assertEqual(kwargs["output_dir"], "/tmp")

    @patch("freelance_invoice.__main__.load_dotenv")
    @patch("freelance_invoice.__main__.run_invoice", side_effect=RenderError("disk full"))
    def test_main_exits_non_zero_on_fatal_errors(self, _run_invoice, _load_dotenv) -> None:
        with self.assertRaises(SystemExit) as ctx:
            main(["-n", "42"])

        self.assertEqual(ctx.exception.code, 1)


if __name__ == "__main__":
    unittest.main()
