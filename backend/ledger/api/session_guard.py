"""Session Guard — cookie-carried session token extraction and bootstrap.

Invariants:
    - Guarded routes never reach validation or the store without a token
    - The token is an opaque correlation key: never parsed, never looked up,
      never granted anything beyond row scoping
    - Only create may mint a token; a token already present is reused as-is

Design Decisions:
    - Dependency that raises SessionRequiredError: FastAPI resolves sub-dependencies
      before validating path/body, so a missing cookie yields 401 ahead of any 400
    - Cookie name and lifetime read from settings at request time
"""

import logging
from uuid import uuid4

from fastapi import Request, Response

from ledger.config import get_settings
from ledger.core.domain_types import SessionToken
from ledger.core.errors import SessionRequiredError

logger = logging.getLogger(__name__)


def read_session_id(request: Request) -> SessionToken | None:
    """Cookie value, or None when absent or empty."""
    value = request.cookies.get(get_settings().session_cookie_name)
    return SessionToken(value) if value else None


def require_session_id(request: Request) -> SessionToken:
    """Dependency for guarded routes — 401 when the session cookie is missing."""
    session_id = read_session_id(request)
    if session_id is None:
        logger.info(
            f"Rejected {request.method} {request.url.path}: no session cookie",
            extra={"path": request.url.path},
        )
        raise SessionRequiredError()
    return session_id


def resolve_session_id(request: Request) -> tuple[SessionToken, bool]:
    """Reuse the presented token or mint a new one. Returns (token, minted)."""
    session_id = read_session_id(request)
    if session_id is not None:
        return session_id, False
    return SessionToken(str(uuid4())), True


def issue_session_cookie(response: Response, session_id: SessionToken) -> None:
    """Instruct the client to present session_id on every later request."""
    settings = get_settings()
    response.set_cookie(
        settings.session_cookie_name,
        session_id,
        max_age=settings.session_cookie_max_age,
        path="/",
    )
