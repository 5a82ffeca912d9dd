"""
Main FastAPI application entry point
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from codequest_api.api.router import api_router
from codequest_api.core.config import Settings, get_settings
from codequest_api.core.database import create_engine, create_session_maker, verify_connection
from codequest_api.core.logger import get_logger, set_package_level


def served_routes(app: FastAPI) -> list[tuple[str, str, str]]:
    """(method, path, summary) for every documented route, in registration order"""
    routes = []
    for path, operations in app.openapi()["paths"].items():
        for method, operation in operations.items():
            routes.append((method.upper(), path, operation.get("summary") or operation.get("operationId", "")))
    return routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events
    """
    settings: Settings = app.state.settings
    logger = get_logger(__name__, settings.LOG_LEVEL)

    # Startup
    try:
        engine = create_engine(settings)
    except RuntimeError as e:
        logger.critical(str(e))
        raise

    try:
        await verify_connection(engine)
    except Exception as e:
        await engine.dispose()
        logger.critical(f"Failed to connect to database: {e}")
        raise RuntimeError(f"Failed to connect to database: {e}") from e

    app.state.engine = engine
    app.state.session_maker = create_session_maker(engine)
    logger.info("Connected to database successfully")

    logger.info(f"Server running on http://{settings.HOST}:{settings.PORT}")
    logger.info("Available endpoints:")
    for method, path, summary in served_routes(app):
        logger.info(f"   {method} {path} - {summary}")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.PROJECT_NAME}...")
    await engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application. Each app owns its settings and, once started, its pool.
    """
    settings = settings or get_settings()
    prefix = settings.API_PREFIX

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description=settings.DESCRIPTION,
        openapi_url=f"{prefix}/openapi.json" if settings.DOCS_ENABLED else None,
        docs_url=f"{prefix}/docs" if settings.DOCS_ENABLED else None,
        redoc_url=f"{prefix}/redoc" if settings.DOCS_ENABLED else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    set_package_level(settings.LOG_LEVEL)

    # CORS Configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )

    app.include_router(api_router, prefix=prefix)
    return app


app = create_app()


def run() -> None:
    """
    Serve the app with uvicorn on HOST:PORT (default 0.0.0.0:3001)
    """
    import uvicorn

    settings: Settings = app.state.settings
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    #
    # Use '$ python -m codequest_api.main' or '$ codequest-api' on the root directory of the project
    # Use '$ uvicorn codequest_api.main:app --host 0.0.0.0 --port 3001' behind a process manager
    #
    run()
