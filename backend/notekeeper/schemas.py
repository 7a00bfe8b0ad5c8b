"""
Pydantic модели для endpoint'ов сессий и заметок.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List, Optional
from datetime import datetime


class Credentials(BaseModel):
    """
    Схема для регистрации и входа.

    Что фронтенд отправляет:
    POST /api/sessions/register  (и /api/sessions/login)
    {
        "username": "alice",
        "password": "pw123"
    }

    Поля без типа: пустые и нестроковые значения проверяет сервис и отвечает 400.
    Иначе pydantic ответил бы 422 и вернул введённый пароль в теле ответа.
    """
    username: Optional[Any] = Field(None, description="Имя пользователя")
    password: Optional[Any] = Field(None, description="Пароль")


class OrderCategoriesUpdate(BaseModel):
    """Новый порядок сортировки категорий"""
    model_config = ConfigDict(populate_by_name=True)

    order_categories: Optional[Any] = Field(None, alias="orderCategories")


class PasswordConfirmation(BaseModel):
    """Пароль для подтверждения удаления аккаунта"""
    password: Optional[Any] = None


class UserResponse(BaseModel):
    """
    Схема ответа с данными пользователя.

    {
        "id": "3f2b...",
        "username": "alice",
        "order_categories": "date",
        "created_at": "2025-12-27T13:45:00"
    }

    ⚠️ ВАЖНО: НЕ возвращаем пароль! (даже хешированный)
    """
    model_config = ConfigDict(from_attributes=True)  # Позволяет создавать из SQLAlchemy объекта User

    id: str
    username: str
    order_categories: str
    created_at: Optional[datetime] = None


class CategoryCreate(BaseModel):
    title: Optional[Any] = None


class ItemCreate(BaseModel):
    text: Optional[Any] = None


class ItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    text: str
    timestamp: Optional[datetime] = None


class CategoryResponse(BaseModel):
    """Категория вместе с пунктами"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    timestamp: Optional[datetime] = None
    items: List[ItemResponse] = []
