"""Domain errors raised by the quote services."""

from __future__ import annotations


class CateringError(ValueError):
    """Base class for recoverable catering domain errors."""

    status_code = 400

    def __init__(self, code: str, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.hint = hint


class QuoteValidationError(CateringError):
    """Raised when a quote or catalogue payload fails pre-submission checks."""


class InvalidTransitionError(CateringError):
    """Raised when a status change is not allowed from the current status."""

    status_code = 409


class QuoteNotEditableError(CateringError):
    """Raised when content edits are attempted on a locked quote."""

    status_code = 409


class QuoteNotFoundError(CateringError):
    """Raised when a lifecycle action names an unknown quote."""

    status_code = 404

    def __init__(self, quote_id: str) -> None:
        super().__init__("QUOTE_NOT_FOUND", f"Quote {quote_id} not found")
        self.quote_id = quote_id
