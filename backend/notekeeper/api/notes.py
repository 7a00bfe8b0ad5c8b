"""Endpoint'ы заметок: категории и их пункты владельца сессии."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from notekeeper.api.deps import get_carrier_identity, get_note_service, require_owner, to_http_error
from notekeeper.core.exceptions import SessionError
from notekeeper.schemas import CategoryCreate, CategoryResponse, ItemCreate, ItemResponse
from notekeeper.services.note_service import NoteService

router = APIRouter(prefix="/api/notes", tags=["Notes"])


@router.get("/{user_id}")
async def get_all(
    user_id: str,
    carrier_identity: Optional[str] = Depends(get_carrier_identity),
    service: NoteService = Depends(get_note_service),
):
    require_owner(user_id, carrier_identity)
    categories = service.list_categories(user_id)
    return {
        "status": "success",
        "payload": [CategoryResponse.model_validate(c).model_dump(mode="json") for c in categories],
    }


@router.post("/category/{user_id}", status_code=status.HTTP_201_CREATED)
async def save_one_category(
    user_id: str,
    form: CategoryCreate,
    carrier_identity: Optional[str] = Depends(get_carrier_identity),
    service: NoteService = Depends(get_note_service),
):
    require_owner(user_id, carrier_identity)
    try:
        category = service.create_category(user_id, form.title)
    except SessionError as exc:
        raise to_http_error(exc)
    return {
        "status": "success",
        "payload": {"id": category.id, "timestamp": category.timestamp.isoformat()},
    }


@router.post("/{category_id}", status_code=status.HTTP_201_CREATED)
async def save_one_item(
    category_id: str,
    form: ItemCreate,
    carrier_identity: Optional[str] = Depends(get_carrier_identity),
    service: NoteService = Depends(get_note_service),
):
    if not carrier_identity:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    try:
        item = service.add_item(carrier_identity, category_id, form.text)
    except SessionError as exc:
        raise to_http_error(exc)
    return {"status": "success", "payload": ItemResponse.model_validate(item).model_dump(mode="json")}
