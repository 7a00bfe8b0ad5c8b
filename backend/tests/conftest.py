"""
Конфигурация pytest и фикстуры для тестов сессий и заметок.

Переменные окружения выставляются до импорта notekeeper: config читает их
один раз при импорте.
"""

import os
import tempfile
from pathlib import Path

_TMP_DIR = Path(tempfile.mkdtemp(prefix="notekeeper-tests-"))

os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR / 'test.db'}"
os.environ["LOGS_DIR"] = str(_TMP_DIR / "logs")
os.environ["COOKIE_SECURE"] = "false"
os.environ["COOKIE_SAMESITE"] = "lax"
os.environ["PASSWORD_SCHEMES"] = "pbkdf2_sha256"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from notekeeper.core import models  # noqa: F401  (регистрирует таблицы)
from notekeeper.core.database import Base, engine
from notekeeper.core.security import CredentialHasher, SessionIssuer
from notekeeper.repositories.note_repository import NoteRepository
from notekeeper.repositories.user_repository import UserRepository
from notekeeper.services.session_service import SessionService

TEST_SECRET = "test-secret-key"


@pytest.fixture
def db_session():
    """Сессия над чистой in-memory SQLite."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=test_engine)
        test_engine.dispose()


@pytest.fixture
def hasher():
    return CredentialHasher(["pbkdf2_sha256"])


@pytest.fixture
def issuer():
    return SessionIssuer(TEST_SECRET)


@pytest.fixture
def users(db_session):
    return UserRepository(db_session)


@pytest.fixture
def notes(db_session):
    return NoteRepository(db_session)


@pytest.fixture
def service(users, notes, hasher, issuer):
    return SessionService(users, notes, hasher, issuer)


@pytest.fixture
def clean_app_db():
    """Пустые таблицы в файловой БД, с которой работает приложение."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(clean_app_db):
    """TestClient с выполненным lifespan (hasher, issuer, таблицы)."""
    from notekeeper.main import app

    with TestClient(app) as test_client:
        yield test_client
