"""
Ошибки сервиса сессий.

HTTP слой превращает их в ответы, сам сервис про HTTP ничего не знает.
"""


class SessionError(Exception):
    """Базовая ошибка сервиса сессий"""

    default_message = "Ошибка"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(SessionError):
    """Не хватает полей или они неверного типа. Повторять запрос бессмысленно"""

    default_message = "Неполные данные"


class DuplicateUsername(SessionError):
    """Имя пользователя уже занято"""

    default_message = "Имя пользователя уже существует"


class UnknownUser(SessionError):
    default_message = "Неверное имя пользователя или пароль"


class InvalidCredential(SessionError):
    default_message = "Неверное имя пользователя или пароль"


class Internal(SessionError):
    """Сбой хранилища, хеширования или подписи. Подробности только в логах"""

    default_message = "Ошибка, попробуйте позже"


class NotFound(SessionError):
    """Запись не найдена или принадлежит другому пользователю"""

    default_message = "Не найдено"
