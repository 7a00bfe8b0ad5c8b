# Пользователи и их заметки (категории с пунктами)

from uuid import uuid4
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from notekeeper import config
from notekeeper.core.database import Base


def _new_id() -> str:
    return uuid4().hex


class User(Base):
    """SQLAlchemy модель - структура таблицы в БД"""
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=_new_id)           # Непрозрачный id, не меняется
    username = Column(String, unique=True, nullable=False)               # UNIQUE - защита от гонки при регистрации
    hashed_password = Column(String, nullable=False)                     # Только хеш, никогда не пароль
    order_categories = Column(String, nullable=False, default=config.DEFAULT_ORDER_CATEGORIES)
    created_at = Column(DateTime, default=datetime.utcnow)


class Category(Base):
    """Категория заметок. owner_id без FOREIGN KEY: коллекции независимы"""
    __tablename__ = "categories"

    id = Column(String(32), primary_key=True, default=_new_id)
    owner_id = Column(String(32), index=True, nullable=False)
    title = Column(String, nullable=False)
    timestamp = Column(DateTime, default=datetime.utcnow)

    items = relationship(
        "Item",
        back_populates="category",
        cascade="all, delete-orphan",
        order_by="Item.id",
    )


class Item(Base):
    """Пункт внутри категории"""
    __tablename__ = "items"

    id = Column(Integer, primary_key=True)
    category_id = Column(String(32), ForeignKey("categories.id", ondelete="CASCADE"), nullable=False)
    text = Column(Text, nullable=False)
    timestamp = Column(DateTime, default=datetime.utcnow)

    category = relationship("Category", back_populates="items")
