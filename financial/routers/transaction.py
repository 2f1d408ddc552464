from fastapi import APIRouter, Depends, Query

from financial.config import settings
from financial.deps.services import get_transaction_service
from financial.responses import to_response
from financial.schemas.envelope import Envelope
from financial.schemas.transaction import TransactionIn
from financial.services.transaction_service import TransactionService
from financial.utils.time import utc_now

router = APIRouter(prefix="/transaction", tags=["transaction"])


@router.get("", response_model=Envelope)
def get_transactions(
    page_number: int = Query(1, alias="pageNumber", ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, alias="pageSize", ge=1, le=settings.MAX_PAGE_SIZE),
    month: int = Query(-1, description="1-12; -1 = current month"),
    year: int = Query(-1, description="-1 = current year"),
    service: TransactionService = Depends(get_transaction_service),
):
    now = utc_now()
    if month == -1:
        month = now.month
    if year == -1:
        year = now.year
    return to_response(service.get_transactions(page_number, page_size, month, year))


@router.get("/{id}", response_model=Envelope)
def get_transaction_by_id(id: int, service: TransactionService = Depends(get_transaction_service)):
    return to_response(service.get_transaction_by_id(id))


@router.post("", status_code=201, response_model=Envelope)
def create_transaction(
    payload: TransactionIn, service: TransactionService = Depends(get_transaction_service)
):
    return to_response(service.create_transaction(payload))


@router.put("/{id}", status_code=204)
def update_transaction(
    id: int, payload: TransactionIn, service: TransactionService = Depends(get_transaction_service)
):
    return to_response(service.update_transaction(id, payload))


@router.delete("/{id}", status_code=204)
def delete_transaction(id: int, service: TransactionService = Depends(get_transaction_service)):
    return to_response(service.delete_transaction(id))
