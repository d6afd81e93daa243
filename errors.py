"""Central exception hierarchy for the transaction display engine."""
from __future__ import annotations


class TxnDisplayError(Exception):
    """Base exception for all custom errors raised by the display engine."""


class ConfigurationError(TxnDisplayError):
    """Raised when configuration loading or validation fails."""


class InvariantViolation(TxnDisplayError):
    """
    Raised when an already-validated transaction breaks an internal invariant.

    The enclosing parse is abandoned: the transaction cannot be safely
    displayed and must not be signed.
    """


class MissingFieldError(InvariantViolation):
    """Raised when a required slot of a TransactionV1 field map is absent."""


class MalformedFieldError(InvariantViolation):
    """Raised when a TransactionV1 field map slot holds a value of the wrong type."""


class MalformedAmountError(InvariantViolation):
    """Raised when an amount argument is not a non-negative decimal integer literal."""


class UnexpectedItemKindError(InvariantViolation):
    """Raised when a dispatch site reaches an item kind it cannot handle."""


class UnsupportedEntryPointError(InvariantViolation):
    """Raised when an entry point is not supported for the transaction's target."""


class UnsupportedArgsError(InvariantViolation):
    """Raised when transaction arguments are not in named form."""
