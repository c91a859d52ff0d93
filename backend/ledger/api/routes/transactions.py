"""Transaction Routes — list, get, summarize, create, update, delete.

Invariants:
    - Every route except create depends on require_session_id
    - Each handler is linear: validate → store call → match StoreResult → respond
    - NOT_FOUND → 404 {"message": ...}; STORE_FAILURE → 500 generic body
    - /summary is registered before /{transaction_id} so it is never parsed as an id

Design Decisions:
    - UUID path param is declarative; the TransactionWrite body is read by a
      dependency listed after require_session_id, so a cookieless request with
      undecodable JSON still gets 401 rather than 400
    - List and create answer on both /transactions and /transactions/ (no redirect)
    - Handlers match on StoreResult.kind instead of wrapping bodies in try/except;
      anything truly unexpected falls through to the global catch-all handler
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ledger.api.session_guard import (
    require_session_id, resolve_session_id, issue_session_cookie,
)
from ledger.core.domain_types import SessionToken, TransactionId
from ledger.core.store_result import StoreResult, StoreResultKind
from ledger.infrastructure.transaction_repository import (
    TransactionRepository, get_transaction_repository,
)
from ledger.schemas.transaction import (
    MessageResponse,
    SummaryAmount,
    SummaryResponse,
    TransactionDetailResponse,
    TransactionListResponse,
    TransactionResponse,
    TransactionWrite,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/transactions", tags=["transactions"])

NOT_FOUND_MESSAGE = "Transaction not found"


def _not_found() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": NOT_FOUND_MESSAGE},
    )


def _store_failure() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal Server Error"},
    )


async def read_transaction_body(request: Request) -> TransactionWrite:
    """Decode and validate the create/update body.

    Runs as a dependency so guarded routes resolve the session cookie first.
    Errors are reported under the "body" location, like declared body params.
    """
    raw = await request.body()
    try:
        return TransactionWrite.model_validate_json(raw)
    except ValidationError as e:
        raise RequestValidationError(
            [
                {**err, "loc": ("body", *err["loc"])}
                for err in e.errors(include_url=False)
            ],
            body=raw,
        )


def _error_response(result: StoreResult) -> JSONResponse:
    """Map a non-OK result to its response."""
    match result.kind:
        case StoreResultKind.NOT_FOUND:
            return _not_found()
        case _:
            return _store_failure()


@router.get("", response_model=TransactionListResponse)
@router.get("/", response_model=TransactionListResponse, include_in_schema=False)
async def list_transactions(
    session_id: SessionToken = Depends(require_session_id),
    repo: TransactionRepository = Depends(get_transaction_repository),
):
    """All transactions of the calling session (possibly empty)."""
    result = await repo.list_for_session(session_id)
    if not result.is_ok:
        return _error_response(result)
    return TransactionListResponse(
        transactions=[
            TransactionResponse.model_validate(row) for row in result.value
        ],
    )


@router.get("/summary", response_model=SummaryResponse)
async def summarize_transactions(
    session_id: SessionToken = Depends(require_session_id),
    repo: TransactionRepository = Depends(get_transaction_repository),
):
    """Current balance: sum of sign-adjusted amounts."""
    result = await repo.summarize(session_id)
    if not result.is_ok:
        return _error_response(result)
    return SummaryResponse(summary=SummaryAmount(amount=result.value))


@router.get("/{transaction_id}", response_model=TransactionDetailResponse)
async def get_transaction(
    transaction_id: UUID,
    session_id: SessionToken = Depends(require_session_id),
    repo: TransactionRepository = Depends(get_transaction_repository),
):
    result = await repo.get(TransactionId(transaction_id), session_id)
    match result.kind:
        case StoreResultKind.OK:
            return TransactionDetailResponse(
                transaction=TransactionResponse.model_validate(result.value),
            )
        case _:
            return _error_response(result)


@router.post(
    "", response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
@router.post(
    "/", response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED, include_in_schema=False,
)
async def create_transaction(
    request: Request,
    response: Response,
    body: TransactionWrite = Depends(read_transaction_body),
    repo: TransactionRepository = Depends(get_transaction_repository),
):
    """Record a transaction. Bootstraps the session cookie when absent."""
    session_id, minted = resolve_session_id(request)
    result = await repo.create(body.title, body.amount, body.type, session_id)
    if not result.is_ok:
        return _error_response(result)
    if minted:
        issue_session_cookie(response, session_id)
        logger.info("Minted new session", extra={"session_id": session_id})
    logger.info(
        "Transaction created",
        extra={"session_id": session_id, "transaction_id": result.value.id},
    )
    return MessageResponse(message="Transaction created successfully")


@router.put("/{transaction_id}", response_model=MessageResponse)
async def update_transaction(
    transaction_id: UUID,
    session_id: SessionToken = Depends(require_session_id),
    body: TransactionWrite = Depends(read_transaction_body),
    repo: TransactionRepository = Depends(get_transaction_repository),
):
    """Replace title and amount of an owned transaction. id and session are immutable."""
    result = await repo.update(
        TransactionId(transaction_id), session_id,
        body.title, body.amount, body.type,
    )
    match result.kind:
        case StoreResultKind.OK:
            logger.info(
                "Transaction updated",
                extra={"session_id": session_id, "transaction_id": transaction_id},
            )
            return MessageResponse(message="Transaction updated successfully")
        case StoreResultKind.NOT_FOUND:
            logger.info(
                "Update target not found",
                extra={"session_id": session_id, "transaction_id": transaction_id},
            )
            return _not_found()
        case _:
            return _store_failure()


@router.delete("/{transaction_id}", response_model=MessageResponse)
async def delete_transaction(
    transaction_id: UUID,
    session_id: SessionToken = Depends(require_session_id),
    repo: TransactionRepository = Depends(get_transaction_repository),
):
    result = await repo.delete(TransactionId(transaction_id), session_id)
    match result.kind:
        case StoreResultKind.OK:
            logger.info(
                "Transaction deleted",
                extra={"session_id": session_id, "transaction_id": transaction_id},
            )
            return MessageResponse(message="Transaction deleted successfully")
        case StoreResultKind.NOT_FOUND:
            return _not_found()
        case _:
            return _store_failure()
