"""Transaction ORM — a single credit or debit entry owned by a session token.

Invariants:
    - id is UUID primary key, generated server-side (never client supplied)
    - amount is stored sign-adjusted: credit positive, debit negative
    - session_id is non-null; every query filters on it
    - The credit/debit type is NOT a column (collapsed into the sign)

Design Decisions:
    - Numeric(10, 2) with asdecimal=False: exact storage, float in Python so the
      JSON response carries a plain number
    - session_id as String, not UUID: cookie values are reused verbatim
    - created_at kept for insertion ordering of list results
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Numeric, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from ledger.db.base import Base


class Transaction(Base):
    """Ledger entry — visible only to requests presenting its session_id."""
    __tablename__ = "transactions"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    amount: Mapped[float] = mapped_column(
        Numeric(10, 2, asdecimal=False), nullable=False,
    )
    session_id: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
