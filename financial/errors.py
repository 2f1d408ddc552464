from __future__ import annotations


class FinancialError(Exception):
    """Base class for errors the API renders as envelopes."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.message)
        self.detail = detail or self.message


class MalformedInputError(FinancialError, ValueError):
    """A controlled-vocabulary string outside the accepted set."""

    status_code = 400
    message = "Malformed request"


class ReferentialIntegrityError(FinancialError):
    """The store rejected a write because of a foreign-key constraint."""

    status_code = 409
    message = "Operation violates referential integrity"
