"""Session Guard — cookie extraction, bootstrap and cookie issuing.

Tests cover:
    - require_session_id raises SessionRequiredError when absent or empty
    - resolve_session_id reuses a present token, mints a UUID otherwise
    - issue_session_cookie sets name, path and 7-day max-age
"""

from uuid import UUID

import pytest
from fastapi import Response
from starlette.requests import Request

from ledger.api.session_guard import (
    issue_session_cookie, require_session_id, resolve_session_id,
)
from ledger.core.errors import SessionRequiredError


def _request(cookie: str | None = None) -> Request:
    headers = [(b"cookie", cookie.encode())] if cookie is not None else []
    return Request({
        "type": "http", "method": "GET", "path": "/transactions",
        "headers": headers, "query_string": b"",
    })


def test_require_returns_cookie_value():
    assert require_session_id(_request("sessionId=abc")) == "abc"


@pytest.mark.parametrize("cookie", [None, "other=1", "sessionId="])
def test_require_rejects_missing_or_empty(cookie):
    with pytest.raises(SessionRequiredError):
        require_session_id(_request(cookie))


def test_resolve_reuses_existing_token():
    assert resolve_session_id(_request("sessionId=abc")) == ("abc", False)


def test_resolve_mints_uuid_when_absent():
    token, minted = resolve_session_id(_request())
    assert minted
    assert str(UUID(token)) == token


def test_resolve_mints_distinct_tokens():
    first, _ = resolve_session_id(_request())
    second, _ = resolve_session_id(_request())
    assert first != second


def test_issue_session_cookie_attributes():
    response = Response()
    issue_session_cookie(response, "abc")

    header = response.headers["set-cookie"]
    assert header.startswith("sessionId=abc;")
    assert "Max-Age=604800" in header
    assert "Path=/" in header
