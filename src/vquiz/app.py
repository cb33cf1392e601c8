import logging
import os
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .config import settings
from .globals import PACKAGE_DIR, session_store
from .router import router


# --- Logging Setup ---
def setup_logging():
    logger = logging.getLogger("vquiz")
    logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)

    if not os.path.exists(settings.LOG_DIR):
        os.makedirs(settings.LOG_DIR, exist_ok=True)
    log_path = os.path.abspath(os.path.join(settings.LOG_DIR, settings.LOG_FILE))
    # Drop handlers left behind by an earlier app pointing at another LOG_DIR
    for handler in list(logger.handlers):
        if isinstance(handler, RotatingFileHandler) and handler.baseFilename != log_path:
            logger.removeHandler(handler)
            handler.close()
    if not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        file_handler = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=3)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)
    # Also configure root logger to see logs from other libraries
    logging.basicConfig(level=logging.INFO)


# --- Lifecycle ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.getLogger(__name__).info(
        f"{settings.PROJECT_NAME} ready [auto-advance every {settings.TICK_SECONDS}s]"
    )
    yield
    session_store.sessions.clear()


# --- App Factory ---
def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(
        title=settings.PROJECT_NAME,
        debug=settings.DEBUG,
        lifespan=lifespan,
        root_path=settings.ROOT_PATH,
    )

    app.mount(
        "/static", StaticFiles(directory=str(PACKAGE_DIR / "static")), name="static"
    )

    app.include_router(router)

    return app
