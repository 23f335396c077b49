"""Exception types raised while producing an invoice."""

from __future__ import annotations


class InvoiceError(RuntimeError):
    """Base class for invoice run failures."""


class ConfigError(InvoiceError):
    """Raised when required configuration is missing or malformed."""


class InvalidDateError(InvoiceError):
    """Raised when the reference date cannot be interpreted."""


class RenderError(InvoiceError):
    """Raised when the PDF cannot be drawn or written."""


class DispatchError(InvoiceError):
    """Raised inside the email task when the transport fails."""
