from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from blocklist.api.deps import get_store, read_domain_batch
from blocklist.api.responses import classify_batch
from blocklist.db.store import DomainStore
from blocklist.domain.batch import BatchOperation
from blocklist.schemas.response import ApiResponse, CheckResponse
from blocklist.services.batch import apply_batch
from blocklist.services.membership import check_exists

router = APIRouter(prefix="/domains", tags=["domains"])

BATCH_RESPONSES = {
    400: {"model": ApiResponse},
    415: {"model": ApiResponse},
    500: {"model": ApiResponse},
}


def _batch_response(
    store: DomainStore, names: list[str], operation: BatchOperation
) -> JSONResponse:
    result = apply_batch(store, names, operation)
    status_code, body = classify_batch(result)
    return JSONResponse(status_code=status_code, content=body.to_payload())


@router.post(
    "/append",
    response_model=ApiResponse,
    responses={409: {"model": ApiResponse}, **BATCH_RESPONSES},
)
def append_domains(
    names: list[str] = Depends(read_domain_batch),
    store: DomainStore = Depends(get_store),
):
    """
    Add every domain in the JSON array to the blocklist.

    Domains that are already blocked are reported individually; the others
    are still added.
    """
    return _batch_response(store, names, BatchOperation.INSERT)


@router.post(
    "/delete",
    response_model=ApiResponse,
    responses={404: {"model": ApiResponse}, **BATCH_RESPONSES},
)
def delete_domains(
    names: list[str] = Depends(read_domain_batch),
    store: DomainStore = Depends(get_store),
):
    """
    Remove every domain in the JSON array from the blocklist.

    Domains that aren't blocked are reported individually; the others are
    still removed.
    """
    return _batch_response(store, names, BatchOperation.DELETE)


@router.get("/check", response_model=CheckResponse)
def check_domain(
    domain: str | None = Query(default=None),
    store: DomainStore = Depends(get_store),
):
    is_included = check_exists(store, domain)
    return CheckResponse(is_included=is_included)
