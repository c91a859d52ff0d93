"""Transaction Repository — parametrized queries against the transactions table.

Invariants:
    - Every statement filters on session_id; no method reads or writes a row
      owned by another session
    - Every method returns a StoreResult; SQLAlchemyError never escapes
    - Amounts are sign-adjusted here, on the way in (ledger_rules)
    - update/delete are single conditional statements; zero affected rows
      means NOT_FOUND

Design Decisions:
    - SQLAlchemy expressions only: user input always travels as bound parameters
    - Conditional UPDATE/DELETE with rowcount instead of SELECT-then-mutate:
      one round trip, no window for a concurrent delete between check and write
    - Failed writes roll back before returning, so the request session stays usable
"""

import logging
from uuid import uuid4

from fastapi import Depends
from sqlalchemy import select, update, delete, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ledger.core.domain_types import SessionToken, TransactionId, TransactionType
from ledger.core.ledger_rules import sign_adjusted_amount, normalize_balance
from ledger.core.store_result import StoreResult
from ledger.infrastructure.database import get_db
from ledger.models.transaction import Transaction

logger = logging.getLogger(__name__)


class TransactionRepository:
    """Store access for Transaction rows, scoped by session token."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_for_session(self, session_id: SessionToken) -> StoreResult:
        """All rows owned by session_id, oldest first."""
        try:
            result = await self._db.execute(
                select(Transaction)
                .where(Transaction.session_id == session_id)
                .order_by(Transaction.created_at),
            )
            return StoreResult.ok(list(result.scalars().all()))
        except SQLAlchemyError as e:
            return await self._fail("list", e, session_id=session_id)

    async def get(self, transaction_id: TransactionId, session_id: SessionToken) -> StoreResult:
        try:
            result = await self._db.execute(
                select(Transaction).where(
                    Transaction.id == transaction_id,
                    Transaction.session_id == session_id,
                ),
            )
            row = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            return await self._fail(
                "get", e,
                session_id=session_id, transaction_id=transaction_id,
            )
        if row is None:
            return StoreResult.not_found()
        return StoreResult.ok(row)

    async def summarize(self, session_id: SessionToken) -> StoreResult:
        """Current balance: sum of sign-adjusted amounts, 0 when empty."""
        try:
            result = await self._db.execute(
                select(func.coalesce(func.sum(Transaction.amount), 0)).where(
                    Transaction.session_id == session_id,
                ),
            )
            return StoreResult.ok(normalize_balance(result.scalar_one()))
        except SQLAlchemyError as e:
            return await self._fail("summarize", e, session_id=session_id)

    async def create(
        self,
        title: str,
        amount: float,
        transaction_type: TransactionType,
        session_id: SessionToken,
    ) -> StoreResult:
        row = Transaction(
            id=uuid4(),
            title=title,
            amount=sign_adjusted_amount(amount, transaction_type),
            session_id=session_id,
        )
        try:
            self._db.add(row)
            await self._db.commit()
        except SQLAlchemyError as e:
            return await self._fail("create", e, session_id=session_id)
        return StoreResult.ok(row)

    async def update(
        self,
        transaction_id: TransactionId,
        session_id: SessionToken,
        title: str,
        amount: float,
        transaction_type: TransactionType,
    ) -> StoreResult:
        try:
            result = await self._db.execute(
                update(Transaction)
                .where(
                    Transaction.id == transaction_id,
                    Transaction.session_id == session_id,
                )
                .values(
                    title=title,
                    amount=sign_adjusted_amount(amount, transaction_type),
                ),
            )
            await self._db.commit()
        except SQLAlchemyError as e:
            return await self._fail(
                "update", e,
                session_id=session_id, transaction_id=transaction_id,
            )
        if result.rowcount == 0:
            return StoreResult.not_found()
        return StoreResult.ok(result.rowcount)

    async def delete(self, transaction_id: TransactionId, session_id: SessionToken) -> StoreResult:
        try:
            result = await self._db.execute(
                delete(Transaction).where(
                    Transaction.id == transaction_id,
                    Transaction.session_id == session_id,
                ),
            )
            await self._db.commit()
        except SQLAlchemyError as e:
            return await self._fail(
                "delete", e,
                session_id=session_id, transaction_id=transaction_id,
            )
        if result.rowcount == 0:
            return StoreResult.not_found()
        return StoreResult.ok(result.rowcount)

    async def _fail(
        self, operation: str, exc: SQLAlchemyError, **context: object,
    ) -> StoreResult:
        await self._db.rollback()
        logger.error(
            f"Transaction store {operation} failed: {exc}",
            extra={"operation": operation, **context},
            exc_info=True,
        )
        return StoreResult.failure(f"{operation}: {type(exc).__name__}")


def get_transaction_repository(
    db: AsyncSession = Depends(get_db),
) -> TransactionRepository:
    """FastAPI dependency — one repository per request session."""
    return TransactionRepository(db)
