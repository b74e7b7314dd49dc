"""FastAPI application entrypoint: wiring, logging, and error envelopes. No business logic."""

import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.api.v1 import router as v1_router
from app.core.config import settings
from app.core.errors import ApiError, InternalError

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Configure root logging once from LOG_LEVEL."""
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.DEBUG else logging.WARNING
    )


def _error_response(
    status_code: int,
    errors: list[dict],
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": False, "errors": errors},
        headers=headers,
    )


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return _error_response(exc.status_code, [exc.to_dict()], headers=exc.headers)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Map request-body/query validation failures to INVALID_INPUT entries."""
    errors = []
    for err in exc.errors():
        loc = [part for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        # Malformed JSON reports a character offset, not a field.
        if all(isinstance(part, int) for part in loc):
            loc = []
        errors.append(
            {
                "param": ".".join(str(part) for part in loc) or None,
                "message": err.get("msg", "Invalid input."),
                "code": "INVALID_INPUT",
            }
        )
    return _error_response(400, errors)


_HTTP_STATUS_CODES = {
    400: "INVALID_INPUT",
    401: "NOT_SIGNEDIN",
    403: "NOT_ALLOWED_ACCESS",
    404: "RESOURCE_NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "RESOURCE_EXISTS",
}


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    code = _HTTP_STATUS_CODES.get(exc.status_code)
    if code is None:
        code = "INTERNAL_ERROR" if exc.status_code >= 500 else "INVALID_INPUT"
    return _error_response(
        exc.status_code,
        [{"message": str(exc.detail), "code": code}],
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled error on %s %s", request.method, request.url.path
    )
    return _error_response(500, [InternalError().to_dict()])


def register_exception_handlers(app: FastAPI) -> None:
    """Every failure leaves the API as {status: false, errors: [...]}."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


setup_logging()

app = FastAPI(
    title="Conclave API",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(v1_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Conclave API"}
