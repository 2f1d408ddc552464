from typing import Optional

from fastapi import APIRouter, Depends, Query

from financial.config import settings
from financial.deps.services import get_user_service
from financial.responses import to_response
from financial.schemas.envelope import Envelope
from financial.schemas.user import UserIn
from financial.services.user_service import UserService

router = APIRouter(prefix="/user", tags=["user"])


@router.get("", response_model=Envelope)
def get_all_users(
    page_number: int = Query(1, alias="pageNumber", ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, alias="pageSize", ge=1, le=settings.MAX_PAGE_SIZE),
    name: Optional[str] = Query(None, description="substring of the user's name"),
    max_age: int = Query(-1, alias="maxAge"),
    min_age: int = Query(-1, alias="minAge"),
    service: UserService = Depends(get_user_service),
):
    return to_response(service.get_all_users(page_number, page_size, name, max_age, min_age))


@router.get("/{id}", response_model=Envelope)
def get_user_by_id(id: int, service: UserService = Depends(get_user_service)):
    return to_response(service.get_user_by_id(id))


@router.post("", status_code=201, response_model=Envelope)
def create_user(payload: UserIn, service: UserService = Depends(get_user_service)):
    return to_response(service.create_user(payload))


@router.put("/{id}", status_code=204)
def update_user(id: int, payload: UserIn, service: UserService = Depends(get_user_service)):
    return to_response(service.update_user(id, payload))


@router.delete("/{id}", status_code=204)
def delete_user(id: int, service: UserService = Depends(get_user_service)):
    return to_response(service.delete_user(id))
