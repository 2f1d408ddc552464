from fastapi import APIRouter, Depends, Query

from financial.config import settings
from financial.deps.services import get_category_service
from financial.responses import to_response
from financial.schemas.category import CategoryIn
from financial.schemas.envelope import Envelope
from financial.services.category_service import CategoryService

router = APIRouter(prefix="/category", tags=["category"])


@router.get("", response_model=Envelope)
def get_all_categories(
    page_number: int = Query(1, alias="pageNumber", ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, alias="pageSize", ge=1, le=settings.MAX_PAGE_SIZE),
    finality: int = Query(-1, description="finality code; -1 = all"),
    service: CategoryService = Depends(get_category_service),
):
    return to_response(service.get_all_categories(page_number, page_size, finality))


@router.get("/{id}", response_model=Envelope)
def get_category_by_id(id: int, service: CategoryService = Depends(get_category_service)):
    return to_response(service.get_category_by_id(id))


@router.post("", status_code=201, response_model=Envelope)
def create_category(payload: CategoryIn, service: CategoryService = Depends(get_category_service)):
    return to_response(service.create_category(payload))


@router.put("/{id}", status_code=204)
def update_category(
    id: int, payload: CategoryIn, service: CategoryService = Depends(get_category_service)
):
    return to_response(service.update_category(id, payload))


@router.delete("/{id}", status_code=204)
def delete_category(id: int, service: CategoryService = Depends(get_category_service)):
    return to_response(service.delete_category(id))
