from contextlib import asynccontextmanager
import logging
import os
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from financial import __version__, metrics
from financial.config import ALLOW_ORIGINS, settings
from financial.db import Base, engine, is_in_memory
from financial.errors import FinancialError
from financial.logging import configure_logging
from financial.middleware.request_id import RequestIdMiddleware
from financial.middleware.request_logging import RequestLogMiddleware
from financial.responses import envelope
from financial.routers import category, health, transaction, user
from financial.routers import metrics as metrics_router

configure_logging(
    settings.LOG_LEVEL,
    json_logs=settings.JSON_LOGS or settings.APP_ENV.lower() == "prod",
)

logger = logging.getLogger(__name__)


def _create_tables():
    """Create the schema in place (dev/test); prod runs alembic migrations."""
    if not settings.CREATE_TABLES:
        return
    if engine.url.get_backend_name() == "sqlite" and not is_in_memory(engine.url):
        db_path = engine.url.database
        if db_path:
            os.makedirs(os.path.dirname(os.path.abspath(db_path)), exist_ok=True)
    import financial.orm_models  # noqa: F401  # register tables on Base

    Base.metadata.create_all(bind=engine)


@asynccontextmanager
async def lifespan(app: FastAPI):
    _create_tables()
    logger.info("financial api %s started (env=%s)", __version__, settings.APP_ENV)
    try:
        yield
    finally:
        # Keep in-memory SQLite alive for the test session
        if not is_in_memory(engine.url):
            engine.dispose()


app = FastAPI(
    title="Financial Tracker API",
    version=__version__,
    openapi_url="/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


def _validation_details(exc: RequestValidationError) -> list[str]:
    details = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        details.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return details


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content=envelope("Malformed request", _validation_details(exc)),
    )


@app.exception_handler(FinancialError)
async def financial_error_handler(request: Request, exc: FinancialError):
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=envelope(exc.message, [exc.detail]),
    )


# Global exception handler to log unhandled errors (prevents silent 500s)
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Log unhandled exceptions with full traceback."""
    logger.error(
        "Unhandled exception in API request %s %s:\n%s",
        request.method,
        request.url.path,
        "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
    )
    route = getattr(request.scope.get("route"), "path", request.url.path)
    metrics.HTTP_ERRORS.labels(route=route).inc()
    return JSONResponse(
        status_code=500,
        content=envelope("Internal server error"),
    )


app.add_middleware(RequestLogMiddleware)
app.add_middleware(RequestIdMiddleware)  # outermost so the access log sees the rid
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(category.router)
app.include_router(transaction.router)
app.include_router(user.router)
app.include_router(health.router)
app.include_router(metrics_router.router)
