"""Update & Delete Transactions — ownership, 404 semantics and terminal delete.

Invariants:
    - PUT/DELETE without a cookie return 401, even when the body is not JSON
    - PUT re-applies the sign rule; id and session_id never change
    - PUT/DELETE on a row owned by another session return 404 and leave it intact
    - DELETE is terminal: get-one afterwards is 404, a second DELETE is 404 (not 500)
"""

from uuid import uuid4

from tests.api.ledger_client import balance, create, list_all, send


async def _seed(client, title="Salary", amount=5000, type="credit"):
    """Create one transaction under a fresh session. Returns (session, tx)."""
    _, sid = await create(client, title, amount, type)
    [tx] = await list_all(client, sid)
    return sid, tx


# ─── update ──────────────────────────────────────────────────────

async def test_update_requires_session_cookie(client):
    res = await send(
        client, "PUT", f"/{uuid4()}",
        json={"title": "X", "amount": 1, "type": "credit"},
    )
    assert res.status_code == 401


async def test_update_replaces_title_and_reapplies_sign(client):
    sid, tx = await _seed(client)

    res = await send(
        client, "PUT", f"/{tx['id']}", session_id=sid,
        json={"title": "Rent", "amount": 1200, "type": "debit"},
    )

    assert res.status_code == 200
    assert res.json() == {"message": "Transaction updated successfully"}
    [updated] = await list_all(client, sid)
    assert updated["id"] == tx["id"]
    assert updated["session_id"] == sid
    assert updated["title"] == "Rent"
    assert updated["amount"] == -1200


async def test_update_with_identical_values_still_succeeds(client):
    sid, tx = await _seed(client, "Salary", 5000, "credit")

    res = await send(
        client, "PUT", f"/{tx['id']}", session_id=sid,
        json={"title": "Salary", "amount": 5000, "type": "credit"},
    )
    assert res.status_code == 200


async def test_update_unknown_id_returns_404(client):
    sid, _ = await _seed(client)
    res = await send(
        client, "PUT", f"/{uuid4()}", session_id=sid,
        json={"title": "X", "amount": 1, "type": "credit"},
    )
    assert res.status_code == 404
    assert res.json() == {"message": "Transaction not found"}


async def test_update_foreign_row_returns_404_and_leaves_it(client):
    sid_a, tx = await _seed(client, "Salary", 5000, "credit")
    _, sid_b = await create(client, "Other", 1, "credit")

    res = await send(
        client, "PUT", f"/{tx['id']}", session_id=sid_b,
        json={"title": "Hijack", "amount": 1, "type": "debit"},
    )

    assert res.status_code == 404
    [unchanged] = await list_all(client, sid_a)
    assert unchanged["title"] == "Salary"
    assert unchanged["amount"] == 5000


async def test_update_invalid_id_returns_400(client):
    res = await send(
        client, "PUT", "/not-a-uuid", session_id="s-1",
        json={"title": "X", "amount": 1, "type": "credit"},
    )
    assert res.status_code == 400


async def test_update_malformed_body_returns_400(client):
    sid, tx = await _seed(client)
    res = await send(
        client, "PUT", f"/{tx['id']}", session_id=sid,
        json={"title": "X", "amount": 1},
    )
    assert res.status_code == 400
    [unchanged] = await list_all(client, sid)
    assert unchanged["title"] == "Salary"


async def test_update_without_cookie_and_undecodable_body_returns_401(client):
    res = await send(
        client, "PUT", f"/{uuid4()}",
        content=b"{not json", headers_extra={"Content-Type": "application/json"},
    )
    assert res.status_code == 401
    assert res.json() == {"error": "Unauthorized"}


async def test_update_with_cookie_and_undecodable_body_returns_400(client):
    sid, tx = await _seed(client)
    res = await send(
        client, "PUT", f"/{tx['id']}", session_id=sid,
        content=b"{not json", headers_extra={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    assert [d["field"] for d in res.json()["error"]["details"]] == ["body"]


# ─── delete ──────────────────────────────────────────────────────

async def test_delete_requires_session_cookie(client):
    res = await send(client, "DELETE", f"/{uuid4()}")
    assert res.status_code == 401


async def test_delete_removes_row_and_updates_balance(client):
    sid, tx = await _seed(client, "Salary", 5000, "credit")
    await create(client, "Rent", 1200, "debit", session_id=sid)

    res = await send(client, "DELETE", f"/{tx['id']}", session_id=sid)

    assert res.status_code == 200
    assert res.json() == {"message": "Transaction deleted successfully"}
    assert [t["title"] for t in await list_all(client, sid)] == ["Rent"]
    assert await balance(client, sid) == -1200


async def test_delete_is_terminal(client):
    sid, tx = await _seed(client)

    await send(client, "DELETE", f"/{tx['id']}", session_id=sid)
    get_after = await send(client, "GET", f"/{tx['id']}", session_id=sid)
    delete_again = await send(client, "DELETE", f"/{tx['id']}", session_id=sid)

    assert get_after.status_code == 404
    assert delete_again.status_code == 404


async def test_delete_foreign_row_returns_404_and_keeps_it(client):
    sid_a, tx = await _seed(client)

    res = await send(client, "DELETE", f"/{tx['id']}", session_id="intruder")

    assert res.status_code == 404
    assert len(await list_all(client, sid_a)) == 1


async def test_delete_invalid_id_returns_400(client):
    res = await send(client, "DELETE", "/123", session_id="s-1")
    assert res.status_code == 400
