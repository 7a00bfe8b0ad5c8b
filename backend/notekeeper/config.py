"""
Конфигурация бэкенда.
"""

from pathlib import Path
from dotenv import load_dotenv
import os

load_dotenv()

# Корневая директория проекта и базовые настройки
BASE_DIR = Path(__file__).parent.parent  # backend/
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")


# ============= DATA =============
DATA_DIR = BASE_DIR / "data"
LOGS_DIR = Path(os.getenv("LOGS_DIR", str(BASE_DIR / "logs")))

DEFAULT_DATABASE_URL = f"sqlite:///{str(DATA_DIR / 'app.db')}"
DATABASE_URL = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)


# ============= БЕЗОПАСНОСТЬ =============
# Секрет читается один раз при старте процесса, из запроса он не берётся никогда
SECRET_KEY = os.getenv("SECRET_KEY", "")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_DAYS = int(os.getenv("ACCESS_TOKEN_EXPIRE_DAYS", "7"))

# Схемы passlib через запятую, первая используется для новых хешей
PASSWORD_SCHEMES = [
    s.strip() for s in os.getenv("PASSWORD_SCHEMES", "pbkdf2_sha256").split(",") if s.strip()
]


# ============= COOKIE =============
COOKIE_NAME = os.getenv("COOKIE_NAME", "noteToken")
COOKIE_SECURE = os.getenv("COOKIE_SECURE", "true").lower() == "true"
COOKIE_HTTPONLY = os.getenv("COOKIE_HTTPONLY", "true").lower() == "true"
COOKIE_SAMESITE = os.getenv("COOKIE_SAMESITE", "none")  # "lax", "strict" или "none"


# ============= ЗАМЕТКИ =============
# Допустимые значения сортировки категорий на клиенте
ORDER_CATEGORIES_VALUES = ("date", "date-reverse", "alphabetical", "alphabetical-reverse")
DEFAULT_ORDER_CATEGORIES = "date"


# ============= API =============
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))

RAW_ALLOWED_ORIGINS = os.getenv("ALLOWED_CORS_ORIGINS", "")
ALLOWED_CORS_ORIGINS = [o.strip() for o in RAW_ALLOWED_ORIGINS.split(",") if o.strip()]
