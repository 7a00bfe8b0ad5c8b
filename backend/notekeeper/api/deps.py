"""Общие зависимости API: сервисы из app.state, cookie сессии, ошибки в HTTP."""

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from notekeeper import config
from notekeeper.core.database import get_db
from notekeeper.core.exceptions import (
    DuplicateUsername,
    Internal,
    InvalidCredential,
    InvalidInput,
    NotFound,
    SessionError,
    UnknownUser,
)
from notekeeper.core.security import CredentialHasher, SessionIssuer
from notekeeper.repositories.note_repository import NoteRepository
from notekeeper.repositories.user_repository import UserRepository
from notekeeper.services.note_service import NoteService
from notekeeper.services.session_service import SessionOutcome, SessionService

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = {
    InvalidInput: status.HTTP_400_BAD_REQUEST,
    DuplicateUsername: status.HTTP_400_BAD_REQUEST,
    UnknownUser: status.HTTP_400_BAD_REQUEST,
    InvalidCredential: status.HTTP_400_BAD_REQUEST,
    NotFound: status.HTTP_404_NOT_FOUND,
    Internal: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def to_http_error(exc: SessionError) -> HTTPException:
    """Ошибка сервиса в HTTP ошибку. Наружу уходит только сообщение"""
    code = _STATUS_BY_ERROR.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTTPException(status_code=code, detail=exc.message)


def get_hasher(request: Request) -> CredentialHasher:
    return request.app.state.hasher


def get_issuer(request: Request) -> SessionIssuer:
    return request.app.state.issuer


def get_session_service(
    db: Session = Depends(get_db),
    hasher: CredentialHasher = Depends(get_hasher),
    issuer: SessionIssuer = Depends(get_issuer),
) -> SessionService:
    return SessionService(UserRepository(db), NoteRepository(db), hasher, issuer)


def get_note_service(db: Session = Depends(get_db)) -> NoteService:
    return NoteService(NoteRepository(db))


def get_carrier_identity(
    request: Request,
    issuer: SessionIssuer = Depends(get_issuer),
) -> Optional[str]:
    """id пользователя из cookie сессии или None для анонимного запроса"""
    token = request.cookies.get(config.COOKIE_NAME)
    if not token:
        return None
    return issuer.verify(token)


def require_owner(user_id: str, carrier_identity: Optional[str]) -> None:
    """Действовать с user_id может только сам владелец"""
    if not carrier_identity:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    if carrier_identity != user_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")


def apply_carrier(response: Response, outcome: SessionOutcome) -> None:
    """Ставит или удаляет cookie сессии, как решил сервис"""
    if outcome.token:
        # Срок жизни зашит в сам токен, у cookie max_age нет
        response.set_cookie(
            key=config.COOKIE_NAME,
            value=outcome.token,
            httponly=config.COOKIE_HTTPONLY,
            secure=config.COOKIE_SECURE,
            samesite=config.COOKIE_SAMESITE,
            path="/",
        )
    if outcome.discard_carrier:
        response.delete_cookie(
            config.COOKIE_NAME,
            path="/",
            httponly=config.COOKIE_HTTPONLY,
            secure=config.COOKIE_SECURE,
            samesite=config.COOKIE_SAMESITE,
        )
