"""Endpoint'ы сессий: регистрация, вход, текущий пользователь, выход, настройки, удаление аккаунта."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from notekeeper.api.deps import (
    apply_carrier,
    get_carrier_identity,
    get_session_service,
    require_owner,
    to_http_error,
)
from notekeeper.core.exceptions import SessionError
from notekeeper.schemas import Credentials, OrderCategoriesUpdate, PasswordConfirmation
from notekeeper.services.session_service import SessionService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sessions", tags=["Sessions"])


@router.post("/register")
async def register(form: Credentials, service: SessionService = Depends(get_session_service)):
    """Регистрация нового пользователя"""
    try:
        user_id = service.register(form.username, form.password)
    except SessionError as exc:
        raise to_http_error(exc)
    return {"status": "success", "payload": {"id": user_id}}


@router.post("/login")
async def login(
    form: Credentials,
    response: Response,
    service: SessionService = Depends(get_session_service),
):
    """Вход пользователя, токен уходит в cookie"""
    try:
        outcome = service.login(form.username, form.password)
    except SessionError as exc:
        raise to_http_error(exc)
    apply_carrier(response, outcome)
    return {"status": "success", "message": outcome.message}


@router.get("/current")
async def current(
    carrier_identity: Optional[str] = Depends(get_carrier_identity),
    service: SessionService = Depends(get_session_service),
):
    """Текущий пользователь или null"""
    try:
        user = service.current_user(carrier_identity)
    except SessionError as exc:
        raise to_http_error(exc)
    return {"status": "success", "payload": user.model_dump(mode="json") if user else None}


@router.get("/logout")
async def logout(response: Response, service: SessionService = Depends(get_session_service)):
    outcome = service.logout()
    apply_carrier(response, outcome)
    return {"status": "success", "message": outcome.message}


@router.put("/{user_id}/order")
async def change_order_categories(
    user_id: str,
    form: OrderCategoriesUpdate,
    carrier_identity: Optional[str] = Depends(get_carrier_identity),
    service: SessionService = Depends(get_session_service),
):
    """Смена порядка сортировки категорий"""
    require_owner(user_id, carrier_identity)
    try:
        outcome = service.update_order_preference(user_id, form.order_categories)
    except SessionError as exc:
        raise to_http_error(exc)
    return {"status": "success", "message": outcome.message}


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    response: Response,
    form: Optional[PasswordConfirmation] = None,
    username: Optional[str] = Query(None),
    service: SessionService = Depends(get_session_service),
):
    """Удаление аккаунта вместе со всеми заметками"""
    try:
        outcome = service.delete_account(user_id, username, form.password if form else None)
    except SessionError as exc:
        raise to_http_error(exc)
    apply_carrier(response, outcome)
    return {"status": "success", "message": outcome.message}
