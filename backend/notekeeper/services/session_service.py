# backend/notekeeper/services/session_service.py
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Optional

from notekeeper import config
from notekeeper.core.exceptions import (
    DuplicateUsername,
    Internal,
    InvalidCredential,
    InvalidInput,
    SessionError,
    UnknownUser,
)
from notekeeper.core.security import CredentialHasher, SessionIssuer
from notekeeper.repositories.note_repository import NoteRepository
from notekeeper.repositories.user_repository import UserRepository
from notekeeper.schemas import UserResponse

logger = logging.getLogger(__name__)


@dataclass
class SessionOutcome:
    """
    Результат операции для транспортного слоя.

    token - положить в cookie, discard_carrier - удалить cookie.
    """
    message: str
    token: Optional[str] = None
    discard_carrier: bool = False


def _filled(value) -> bool:
    return isinstance(value, str) and value != ""


class SessionService:
    """
    Регистрация, вход, текущий пользователь, выход, настройки и удаление аккаунта.

    Серверного состояния сессий нет: каждый запрос заново получает
    identity из своего токена.
    """

    def __init__(
        self,
        users: UserRepository,
        notes: NoteRepository,
        hasher: CredentialHasher,
        issuer: SessionIssuer,
    ):
        self.users = users
        self.notes = notes
        self.hasher = hasher
        self.issuer = issuer

    @contextmanager
    def _internal(self, action: str):
        """Ошибки хранилища/подписи превращаются в Internal, доменные ошибки проходят как есть"""
        try:
            yield
        except SessionError:
            raise
        except Exception as e:
            logger.error("Ошибка при операции '%s': %s", action, e, exc_info=True)
            raise Internal() from e

    def verify_carrier_token(self, token: Optional[str]) -> Optional[str]:
        """None - Anonymous, иначе id пользователя (Authenticated)"""
        return self.issuer.verify(token)

    def register(self, username, password) -> str:
        """
        Docstring для register

        :param username: Имя пользователя
        :param password: Пароль в открытом виде, сохраняется только хеш
        :return: id нового пользователя. Автоматического входа нет
        :rtype: str
        """
        if not _filled(username) or not _filled(password):
            logger.warning("⚠️ Регистрация: неполные данные")
            raise InvalidInput()

        logger.info("🔄 Попытка регистрации: %s", username)

        with self._internal("register"):
            # Быстрая проверка; от гонки защищает UNIQUE в БД (UserRepository.create)
            if self.users.find_by_username(username):
                logger.warning("⚠️ Username уже занят: %s", username)
                raise DuplicateUsername()

            user = self.users.create(username, self.hasher.hash(password))

        logger.info(f"Пользователь зарегистрирован: {user.username}")
        return user.id

    def login(self, username, password) -> SessionOutcome:
        if not _filled(username) or not _filled(password):
            logger.warning("⚠️ Вход: неполные данные")
            raise InvalidInput()

        logger.info("🔄 Попытка входа: %s", username)

        with self._internal("login"):
            user = self.users.find_by_username(username)

            if not user:
                # Выравниваем время ответа с веткой неверного пароля
                self.hasher.dummy_verify()
                logger.warning("⚠️ Пользователь не зарегистрирован: %s", username)
                raise UnknownUser()

            if not self.hasher.verify(password, user.hashed_password):
                logger.warning("⚠️ Неверный пароль: %s", username)
                raise InvalidCredential()

            token = self.issuer.issue(user.id)

        logger.info(f"Пользователь вошёл: {user.username}")
        return SessionOutcome(message=f"Пользователь {username} вошёл!", token=token)

    def current_user(self, carrier_identity: Optional[str]) -> Optional[UserResponse]:
        """
        Текущий пользователь по id из уже проверенного токена.

        Токен здесь повторно не проверяется, это делает транспортный слой.
        """
        if not carrier_identity:
            return None

        with self._internal("current_user"):
            user = self.users.find_by_id(carrier_identity)

        if user is None:
            return None
        return UserResponse.model_validate(user)

    def logout(self) -> SessionOutcome:
        # Токен остаётся валидным до exp: сервер ничего не отзывает
        return SessionOutcome(message="Пользователь вышел", discard_carrier=True)

    def update_order_preference(self, user_id, value) -> SessionOutcome:
        if not _filled(user_id) or not _filled(value):
            logger.warning("⚠️ Порядок категорий: неполные данные")
            raise InvalidInput()

        if value not in config.ORDER_CATEGORIES_VALUES:
            logger.warning("⚠️ Неизвестный порядок категорий: %s", value)
            raise InvalidInput("Неверные данные")

        with self._internal("update_order_preference"):
            updated = self.users.update_order_preference(user_id, value)

        if not updated:
            logger.warning("⚠️ Пользователь не найден: %s", user_id)
            raise UnknownUser()

        logger.info(f"Порядок категорий изменён: user_id={user_id}, {value}")
        return SessionOutcome(message="Порядок изменён!")

    def delete_account(self, user_id, username, password) -> SessionOutcome:
        """
        Удаляет пользователя, затем все его заметки.

        Два отдельных вызова без общей транзакции: при падении между ними
        остаются заметки без владельца, но не наоборот.

        :param user_id: id удаляемого пользователя (из пути)
        :param username: Имя пользователя (из query)
        :param password: Пароль для подтверждения (из body)
        """
        if user_id is None or username is None or password is None:
            logger.warning("⚠️ Удаление: неполные данные")
            raise InvalidInput()

        if not _filled(user_id) or not _filled(username) or not _filled(password):
            logger.warning("⚠️ Удаление: неверные данные")
            raise InvalidInput("Неверные данные")

        with self._internal("delete_account"):
            user = self.users.find_by_username(username)
            if not user:
                self.hasher.dummy_verify()
            if not user or not self.hasher.verify(password, user.hashed_password):
                logger.warning("⚠️ Удаление: неверный пароль для %s", username)
                raise InvalidCredential()

            if user.id != user_id:
                logger.warning(
                    "⚠️ Удаление: username %s не принадлежит user_id=%s", username, user_id
                )
                raise InvalidCredential()

            self.users.delete_by_id(user_id)

        try:
            self.notes.delete_by_owner(user_id)
        except Exception as e:
            logger.error(
                "Пользователь %s удалён, но его заметки остались без владельца: %s",
                user_id,
                e,
                exc_info=True,
            )
            raise Internal() from e

        logger.info(f"Пользователь удалён: {username}")
        return SessionOutcome(message="Пользователь удалён", discard_carrier=True)
