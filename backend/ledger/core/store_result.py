"""Store Results — explicit outcome values returned by the store access layer.

Invariants:
    - Every repository method returns a StoreResult; none raise for DB failures
    - NOT_FOUND means "zero rows matched id + session", never an error
    - STORE_FAILURE carries a short diagnostic for logs only (never sent to clients)

Design Decisions:
    - Result values over exceptions: route handlers match on the kind and map it
      to a status code, keeping the error path identical to the success path
    - Frozen dataclass with classmethod constructors: call sites read as
      StoreResult.ok(row) / StoreResult.not_found() / StoreResult.failure(...)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class StoreResultKind(str, Enum):
    """Outcome of a single store operation."""
    OK = "ok"
    NOT_FOUND = "not_found"
    STORE_FAILURE = "store_failure"


@dataclass(frozen=True)
class StoreResult:
    """Outcome + payload of a store call."""
    kind: StoreResultKind
    value: Any = None
    reason: str | None = None

    @classmethod
    def ok(cls, value: Any = None) -> "StoreResult":
        return cls(StoreResultKind.OK, value)

    @classmethod
    def not_found(cls) -> "StoreResult":
        return cls(StoreResultKind.NOT_FOUND)

    @classmethod
    def failure(cls, reason: str) -> "StoreResult":
        return cls(StoreResultKind.STORE_FAILURE, reason=reason)

    @property
    def is_ok(self) -> bool:
        return self.kind is StoreResultKind.OK
