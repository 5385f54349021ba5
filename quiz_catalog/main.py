from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI

from quiz_catalog.api.routes.categories import router as categories_router
from quiz_catalog.api.routes.health import router as health_router
from quiz_catalog.api.routes.questions import router as questions_router
from quiz_catalog.catalog.categories import CategoryStore
from quiz_catalog.catalog.questions import QuestionStore
from quiz_catalog.core.config import Settings, get_settings
from quiz_catalog.core.logging import configure_logging
from quiz_catalog.db.session import Database

logger = structlog.get_logger(__name__)


def _build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        database = Database(settings.database_url, echo=settings.database_echo)
        await database.open()
        if settings.db_create_schema:
            await database.create_all()

        app.state.database = database
        app.state.category_store = CategoryStore(
            database,
            default_limit=settings.page_size_default,
            max_limit=settings.page_size_max,
        )
        app.state.question_store = QuestionStore(
            database,
            require_correct_option=settings.require_correct_option,
            default_limit=settings.page_size_default,
            max_limit=settings.page_size_max,
        )
        logger.info("app_startup", app_env=settings.app_env)
        try:
            yield
        finally:
            await database.close()
            logger.info("app_shutdown")

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Quiz Catalog API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=_build_lifespan(settings),
    )
    app.include_router(health_router)
    app.include_router(categories_router)
    app.include_router(questions_router)
    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "quiz_catalog.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.app_env == "dev",
    )


if __name__ == "__main__":
    run()
