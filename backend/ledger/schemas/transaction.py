"""Transaction Schemas — Pydantic models for the ledger API boundary.

Invariants:
    - TransactionWrite.title: non-empty string, not trimmed
    - TransactionWrite.amount: finite number; strings and booleans rejected
    - TransactionWrite.amount fits the Numeric(10, 2) column: |amount| < 10**8,
      at most two decimal places
    - TransactionWrite.type: exactly "credit" or "debit"
    - Extra request fields are ignored, missing or mistyped ones rejected
    - Responses expose the stored (sign-adjusted) amount, never the type

Design Decisions:
    - One write schema for create and update: both accept the same shape
    - Strict fields over lax coercion: "5000" is a malformed amount, not 5000
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ledger.core.domain_types import TransactionType

# Numeric(10, 2): eight integer digits, two fractional
AMOUNT_LIMIT = 10**8
AMOUNT_DECIMAL_PLACES = 2


class TransactionWrite(BaseModel):
    """Create/update body."""
    model_config = ConfigDict(extra="ignore")

    title: str = Field(min_length=1, strict=True)
    amount: float = Field(
        strict=True, allow_inf_nan=False, gt=-AMOUNT_LIMIT, lt=AMOUNT_LIMIT,
    )
    type: TransactionType

    @field_validator("amount")
    @classmethod
    def amount_has_cents_precision(cls, v: float) -> float:
        if round(v, AMOUNT_DECIMAL_PLACES) != v:
            raise ValueError(
                f"amount must have at most {AMOUNT_DECIMAL_PLACES} decimal places"
            )
        return v


class TransactionResponse(BaseModel):
    """A persisted transaction as returned to its owning session."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    amount: float
    session_id: str
    created_at: datetime


class TransactionListResponse(BaseModel):
    transactions: list[TransactionResponse]


class TransactionDetailResponse(BaseModel):
    transaction: TransactionResponse


class SummaryAmount(BaseModel):
    amount: float


class SummaryResponse(BaseModel):
    summary: SummaryAmount


class MessageResponse(BaseModel):
    message: str
