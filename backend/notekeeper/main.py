"""
Notekeeper API - главный файл приложения.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from notekeeper import config
from notekeeper.api import notes, sessions
from notekeeper.core.database import init_db
from notekeeper.core.exceptions import InvalidInput
from notekeeper.core.logging_config import setup_logging
from notekeeper.core.security import CredentialHasher, SessionIssuer

logger = logging.getLogger(__name__)


# ============= LIFESPAN EVENT =============

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Выполняется при запуске и остановке приложения.

    Код ДО yield - выполняется при старте (startup).
    Код ПОСЛЕ yield - выполняется при остановке (shutdown).
    """
    # ===== STARTUP =====
    setup_logging()
    logger.info("Notekeeper API запускается...")

    if not config.SECRET_KEY:
        logger.critical("SECRET_KEY не задан, запуск невозможен")
        raise RuntimeError("SECRET_KEY не задан!")

    # Один экземпляр на процесс, в запросы попадает через app.state
    app.state.hasher = CredentialHasher(config.PASSWORD_SCHEMES)
    app.state.issuer = SessionIssuer(config.SECRET_KEY)

    # Создание таблиц в БД
    init_db()
    logger.info(f"База данных: {config.DATABASE_URL}")

    logger.info(f"Документация: http://{config.API_HOST}:{config.API_PORT}/docs")
    logger.info("API готов к работе!")

    yield  # Приложение работает

    # ===== SHUTDOWN =====
    logger.info("Приложение остановлено")


# ============= СОЗДАНИЕ ПРИЛОЖЕНИЯ =============

app = FastAPI(
    title="Notekeeper API",
    description="Notes organized in categories, with cookie-based sessions",
    version="1.0.0",
    lifespan=lifespan
)


# ============= CORS =============

# С credentials нельзя "*", поэтому origins берём из конфигурации
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============= ОШИБКИ ВАЛИДАЦИИ =============

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Кривое тело запроса - это 400 без эха введённых данных (там может быть пароль)"""
    logger.warning("⚠️ Невалидный запрос %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": InvalidInput().message},
    )


# ============= HEALTH CHECK =============

@app.get("/health", tags=["Health"])
async def health():
    """Проверка что API работает"""
    logger.debug("Health check вызван")
    return {"status": "ok", "version": "1.0.0"}


# ============= ROUTERS =============

app.include_router(sessions.router)
app.include_router(notes.router)
