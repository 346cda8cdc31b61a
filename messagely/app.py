"""
Messagely - direct messaging API with SMS account recovery

Run with: uvicorn messagely.app:create_app --factory
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy.orm import sessionmaker

from messagely.api.router import router as api_router
from messagely.core.auth_service import AuthService
from messagely.core.config import Settings, get_settings
from messagely.core.db.engine import build_engine, create_tables
from messagely.core.logger import configure_app_logging, get_logger
from messagely.core.middleware import SecurityHeadersMiddleware, RequestLoggingMiddleware
from messagely.core.notifier import Notifier

logger = get_logger(__name__)


def create_app(settings: Settings | None = None, notifier: Notifier | None = None) -> FastAPI:
    """
    Build the application.

    Settings, the database engine and the AuthService are created once here
    and shared with request handlers through app.state.
    """
    settings = settings or get_settings()
    configure_app_logging(log_to_file=settings.log_to_file)

    engine = build_engine(settings.database_url)
    create_tables(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        app.state.auth_service.notifier.close()
        engine.dispose()
        logger.info("Messagely application shut down")

    app = FastAPI(title="Messagely", debug=settings.debug, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    app.state.auth_service = AuthService.from_settings(settings, notifier=notifier)

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(api_router)

    @app.get("/")
    def health_check():
        return {"status": "ok"}

    logger.info("Messagely application initialized")
    return app
