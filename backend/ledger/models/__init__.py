"""ORM Models — SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Transaction is the only entity; rows are scoped by session_id

Design Decisions:
    - All models imported here so Base.metadata is complete for create_all
      and alembic autogenerate
"""

from ledger.models.transaction import Transaction  # noqa: F401
