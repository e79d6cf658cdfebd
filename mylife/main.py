"""MyLife API - FastAPI app entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mylife.core.config import Settings, get_settings
from mylife.db.session import build_engine, build_sessionmaker, create_tables
from mylife.routers import auth, backup, shopping, todos, workouts

logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": _describe_validation_error(exc)})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app around an explicit settings object and its own engine."""
    if settings is None:
        settings = get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.create_tables_on_startup:
            await create_tables(engine)
        yield
        await engine.dispose()

    app = FastAPI(
        title=settings.app_name,
        description="Tasks, a shared shopping list and a workout tracker",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.sessionmaker = build_sessionmaker(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(auth.router)
    app.include_router(todos.router)
    app.include_router(shopping.router)
    app.include_router(workouts.router)
    app.include_router(backup.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.post("/api/init")
    async def init_db(request: Request):
        """Create all tables and indexes; safe to call repeatedly."""
        await create_tables(request.app.state.engine)
        logger.info("Database initialized")
        return {"message": "Database initialized successfully"}

    return app


app = create_app()
