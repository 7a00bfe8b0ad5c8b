"""
Функции безопасности: хеширование паролей, создание и проверка JWT токенов.
"""
import logging
from datetime import datetime, timezone, timedelta
from typing import Optional

from passlib.context import CryptContext
from passlib.exc import PasswordSizeError
from jose import JWTError, jwt

from notekeeper import config
from notekeeper.core.exceptions import InvalidInput

logger = logging.getLogger(__name__)


class CredentialHasher:
    """Медленный солёный хеш паролей. Соль хранится внутри самого хеша"""

    def __init__(self, schemes: Optional[list] = None):
        self.pwd_context = CryptContext(schemes=schemes or config.PASSWORD_SCHEMES, deprecated="auto")

    def hash(self, password: str) -> str:
        """Хеширует пароль. Слишком длинный пароль - ошибка клиента, а не сбой"""
        try:
            return self.pwd_context.hash(password)
        except PasswordSizeError:
            logger.warning("⚠️ Пароль длиннее допустимого")
            raise InvalidInput("Пароль слишком длинный")

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Проверяет пароль.

        Никогда не бросает исключение: битый хеш, неизвестная схема
        или пустые значения дают просто False.
        """
        if not plain_password or not hashed_password:
            return False
        if not isinstance(plain_password, str) or not isinstance(hashed_password, str):
            return False

        try:
            return self.pwd_context.verify(plain_password, hashed_password)
        except (ValueError, TypeError) as e:
            logger.warning("⚠️ Хеш пароля не распознан: %s", type(e).__name__)
            return False

    def dummy_verify(self) -> None:
        """Холостая проверка, чтобы 'нет пользователя' занимало столько же времени"""
        self.pwd_context.dummy_verify()


class SessionIssuer:
    """
    Выпуск и проверка подписанных токенов сессии.

    Состояния на сервере нет: токен живёт до своего exp даже после logout.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = config.ALGORITHM,
        expires_delta: timedelta = timedelta(days=config.ACCESS_TOKEN_EXPIRE_DAYS),
    ):
        if not secret_key:
            raise ValueError("SECRET_KEY не задан!")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    def issue(self, subject_id: str, expires_delta: Optional[timedelta] = None) -> str:
        """
        Создаёт JWT токен.

        Args:
            subject_id: id пользователя, попадает в claim "sub"
            expires_delta: Время жизни токена (по умолчанию 7 дней)
        """
        issued_at = datetime.now(timezone.utc)
        expire = issued_at + (expires_delta if expires_delta is not None else self.expires_delta)

        to_encode = {"sub": str(subject_id), "iat": issued_at, "exp": expire}
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> Optional[str]:
        """Декодирует JWT токен и возвращает id пользователя или None"""
        if not token or not isinstance(token, str):
            return None

        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require_exp": True, "require_sub": True},
            )
        except JWTError as e:
            logger.debug("Токен отклонён: %s", e)
            return None

        subject_id = payload.get("sub")
        if not subject_id or not isinstance(subject_id, str):
            return None
        return subject_id
