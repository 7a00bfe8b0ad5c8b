"""
Настройка подключения к базе данных.
"""

from sqlalchemy import create_engine
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker

from notekeeper import config

# Создаём движок БД
engine = create_engine(
    config.DATABASE_URL,
    connect_args={"check_same_thread": False}  # Только для SQLite
)

# Сессия для работы с БД
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Базовый класс для моделей
Base = declarative_base()


def init_db():
    """Создаёт таблицы (и папку data/ для SQLite по умолчанию)"""
    if config.DATABASE_URL == config.DEFAULT_DATABASE_URL:
        config.DATA_DIR.mkdir(parents=True, exist_ok=True)

    # Модели должны быть зарегистрированы в Base.metadata до create_all
    from notekeeper.core import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_db():
    """
    Dependency для получения сессии БД в endpoint'ах.

    Каждый запрос получает свою сессию, общих сессий между запросами нет.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
