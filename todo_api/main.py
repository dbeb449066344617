"""Todo API application: middleware, error envelope, health and metrics."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import text
from datetime import datetime
from pathlib import Path
import logging
import time
import uuid

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi.responses import Response

from todo_api.config import settings
from todo_api.core.database import init_db, SessionLocal
from todo_api.core.exceptions import BaseAPIException
from todo_api.api.v1 import auth, todos
from todo_api.services.purge_worker import purge_worker

# Log file directory may not exist on first run.
_log_dir = Path(settings.get_log_file()).parent
_log_dir.mkdir(parents=True, exist_ok=True)
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.FileHandler(settings.get_log_file()),
        logging.StreamHandler()
    ]
)

logger = logging.getLogger(__name__)

REQUEST_COUNT = Counter(
    "todo_http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)
REQUEST_LATENCY = Histogram(
    "todo_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "path"],
)
AUTH_REJECTIONS = Counter(
    "todo_auth_rejections_total",
    "Requests rejected with 401",
)

app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION, debug=settings.DEBUG)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _route_label(request: Request) -> str:
    # Use the route template so todo IDs don't explode metric cardinality.
    route = request.scope.get("route")
    return getattr(route, "path", request.url.path)


@app.middleware("http")
async def add_headers_and_timing(request: Request, call_next):
    """Tag each response with a request id, security headers and metrics."""
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id

    start = time.time()
    response = await call_next(request)
    duration = time.time() - start

    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    response.headers["Cache-Control"] = "no-store"
    response.headers["X-Request-ID"] = request_id

    path = _route_label(request)
    REQUEST_COUNT.labels(request.method, path, str(response.status_code)).inc()
    REQUEST_LATENCY.labels(request.method, path).observe(duration)
    if response.status_code == status.HTTP_401_UNAUTHORIZED:
        AUTH_REJECTIONS.inc()

    if duration > 1.0:
        logger.warning(
            "Slow request: %s %s took %.2fs request_id=%s",
            request.method,
            request.url.path,
            duration,
            request_id,
        )

    return response


def _error_response(request: Request, status_code: int, message: str, details=None, headers=None):
    content = {
        "success": False,
        "error": message,
        "path": request.url.path,
        "timestamp": datetime.utcnow().isoformat(),
    }
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


@app.exception_handler(BaseAPIException)
async def api_exception_handler(request: Request, exc: BaseAPIException):
    log = logger.error if exc.status_code >= 500 else logger.warning
    log("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)

    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return _error_response(request, exc.status_code, exc.message, exc.details, headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    logger.warning("%s %s rejected: %d invalid field(s)", request.method, request.url.path, len(errors))
    return _error_response(
        request, status.HTTP_422_UNPROCESSABLE_ENTITY, "Validation failed", {"errors": errors}
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "A database error occurred. Please try again later.",
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.critical("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    return _error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred.")


@app.on_event("startup")
async def startup_event():
    """Reject unsafe settings, prepare the schema and start the purge worker."""
    settings.validate_security_settings()
    logger.info("Starting %s v%s (%s)", settings.APP_NAME, settings.APP_VERSION, settings.ENVIRONMENT)
    try:
        init_db()
    except Exception:
        logger.exception("Database initialization failed (mode=%s)", settings.DB_INIT_MODE)
        raise

    if settings.RUN_PURGE_WORKER:
        purge_worker.start()


@app.on_event("shutdown")
async def shutdown_event():
    """Stop the purge worker."""
    if purge_worker.is_running():
        purge_worker.stop()
    logger.info("Shutting down %s", settings.APP_NAME)


@app.get("/health")
async def health_check():
    """Database reachability and purge worker state."""
    db_ok = True
    db_error = None
    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
    except Exception as exc:
        db_ok = False
        db_error = str(exc)
    finally:
        db.close()

    return {
        "status": "healthy" if db_ok else "degraded",
        "version": settings.APP_VERSION,
        "timestamp": datetime.utcnow().isoformat(),
        "readiness": {
            "database": {"ok": db_ok, "error": db_error},
            "purge_worker": purge_worker.status(),
        },
    }


@app.get("/metrics")
async def metrics():
    """Prometheus metrics endpoint."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(todos.router, prefix="/api/todos", tags=["Todos"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "todo_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        workers=1 if settings.DEBUG else settings.WORKERS
    )
