"""Command-line entrypoint for generating and sending an invoice."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .config import InvoiceConfig
from .errors import InvoiceError
from .orchestrator import run_invoice


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="freelance-invoice",
        description="Render this period's invoice as a PDF and email it.",
    )
    parser.add_argument("-n", "--number", help="invoice number, used in the output file name")
    parser.add_argument("-d", "--date", help="reference date (defaults to today)")
    parser.add_argument("-a", "--adjust", type=float, help="amount subtracted from the invoice total")
    parser.add_argument(
        "-ne",
        "--no-email",
        dest="email",
        action="store_false",
        help="write the PDF without emailing it",
    )
    parser.add_argument("-o", "--output-dir", default=".", help="directory the PDF is written to")
    parser.add_argument(
        "--log-level",
        default=os.getenv("INVOICE_LOG_LEVEL", "INFO"),
        help="logging level (default: INFO)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        run_invoice(
            InvoiceConfig.from_env(),
            args.number,
            reference_date=args.date,
            adjust_amount=args.adjust,
            send_email=args.email,
            output_dir=args.output_dir,
        )
    except InvoiceError as exc:
        print(str(exc), file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
