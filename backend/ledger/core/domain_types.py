"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TransactionId wraps UUID; SessionToken wraps the opaque cookie string
    - TransactionType is the only place the credit/debit literals are spelled out

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - SessionToken is str, not UUID: clients may present any cookie value and it
      is reused as-is (a correlation key, not a validated identity)
    - str Enum: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

TransactionId = NewType("TransactionId", UUID)
SessionToken = NewType("SessionToken", str)


# ─── Enums ───────────────────────────────────────────────────────

class TransactionType(str, Enum):
    """Direction of a transaction. Collapsed into the amount sign on write."""
    CREDIT = "credit"
    DEBIT = "debit"
