"""Error Hierarchy — status codes and response bodies."""

from ledger.core.errors import (
    DatabaseError, ErrorCategory, LedgerError, SessionRequiredError,
)


def test_session_required_is_401_unauthorized():
    err = SessionRequiredError()
    assert isinstance(err, LedgerError)
    assert err.http_status == 401
    assert err.category is ErrorCategory.UNAUTHENTICATED
    assert err.to_response() == {"error": "Unauthorized"}


def test_database_error_hides_details_from_response():
    err = DatabaseError("Connection or operational error", "execute")
    assert err.http_status == 500
    assert err.operation == "execute"
    assert "execute" in err.message
    assert err.to_response() == {"error": "Internal Server Error"}
