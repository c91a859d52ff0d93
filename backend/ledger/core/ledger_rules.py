"""Ledger Rules — the arithmetic that turns user input into stored values.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - Stored amount sign always reflects the transaction type at write time
    - Balance of an empty ledger is 0.0, never None

Design Decisions:
    - Type is not persisted: a credit of 0 and a debit of 0 are indistinguishable
      once stored, so no function here tries to recover the type from a row
"""

from decimal import Decimal

from ledger.core.domain_types import TransactionType


def sign_adjusted_amount(amount: float, transaction_type: TransactionType | str) -> float:
    """Credit keeps the amount as given, debit negates it."""
    if TransactionType(transaction_type) is TransactionType.CREDIT:
        return amount
    return -amount


def normalize_balance(raw_sum: float | Decimal | None) -> float:
    """SUM() over zero rows yields NULL; the balance of nothing is 0."""
    if raw_sum is None:
        return 0.0
    return float(raw_sum)
