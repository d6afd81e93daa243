"""Transaction to display-row translation for the signing confirmation screen."""

from .element import Element, Sensitivity, as_expert
from .transaction import Transaction, parse_transaction, visible_rows

__all__ = [
    "Element",
    "Sensitivity",
    "Transaction",
    "as_expert",
    "parse_transaction",
    "visible_rows",
]
