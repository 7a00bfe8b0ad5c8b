import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from notekeeper import config
from notekeeper.core.exceptions import DuplicateUsername
from notekeeper.core.models import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Хранилище пользователей. Отсутствие записи - None/False, а не исключение"""

    def __init__(self, db: Session):
        self.db = db

    def find_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def find_by_id(self, user_id: str) -> Optional[User]:
        if not user_id:
            return None
        return self.db.query(User).filter(User.id == user_id).first()

    def create(
        self,
        username: str,
        hashed_password: str,
        order_categories: str = config.DEFAULT_ORDER_CATEGORIES,
    ) -> User:
        """
        Создаёт пользователя.

        :param username: Уникальное имя пользователя
        :type username: str
        :param hashed_password: Уже захешированный пароль
        :type hashed_password: str
        :return: Сохранённый пользователь с присвоенным id
        :rtype: User
        """
        user = User(
            username=username,
            hashed_password=hashed_password,
            order_categories=order_categories,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # UNIQUE на users.username срабатывает атомарно, даже если
            # параллельная регистрация проскочила предварительную проверку
            self.db.rollback()
            logger.warning("⚠️ Username уже занят (constraint): %s", username)
            raise DuplicateUsername()

        self.db.refresh(user)
        return user

    def update_order_preference(self, user_id: str, value: str) -> bool:
        updated = (
            self.db.query(User)
            .filter(User.id == user_id)
            .update({User.order_categories: value}, synchronize_session=False)
        )
        self.db.commit()
        return updated > 0

    def delete_by_id(self, user_id: str) -> bool:
        deleted = self.db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
        self.db.commit()
        return deleted > 0
