from http import HTTPStatus

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.applications import Starlette
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Mount

from multistream.config import get_settings
from multistream.exceptions import ClientError, NotFoundError, UpstreamError
from multistream.logging import configure_logging
from multistream.mcp_server import mcp
from multistream.models.common import ErrorResponse
from multistream.routers.meta import API_NAME, API_VERSION, router as meta_router
from multistream.routers.search import router as search_router
from multistream.routers.stream import router as stream_router

logger = structlog.get_logger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    body = ErrorResponse(error=HTTPStatus(status_code).phrase, message=message, code=status_code)
    return JSONResponse(status_code=status_code, content=body.model_dump())


# --- FastAPI app ---

api = FastAPI(title=API_NAME, version=API_VERSION)
api.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Accept", "Authorization", "Content-Type"],
    allow_credentials=True,
    max_age=300,
)
api.include_router(meta_router)
api.include_router(search_router)
api.include_router(stream_router)


# --- Exception handlers ---

@api.exception_handler(ClientError)
async def client_error_handler(request: Request, exc: ClientError):
    return error_response(400, str(exc))


@api.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError):
    return error_response(404, str(exc))


@api.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError):
    return error_response(500, str(exc))


@api.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return error_response(400, "; ".join(err.get("msg", "") for err in exc.errors()))


@api.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


@api.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("request.unhandled_error", path=request.url.path)
    return error_response(500, "internal server error")


# --- Starlette root app ---

mcp_app = mcp.http_app(path="/", stateless_http=True)

app = Starlette(
    routes=[
        Mount("/mcp", app=mcp_app),
        Mount("/", app=api),
    ],
    lifespan=mcp_app.lifespan,
)


def run():
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)
    logger.info(
        "multistream.starting",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
        youtube="configured" if settings.youtube_api_key else "not configured (set YOUTUBE_API_KEY)",
        kick="enabled (unofficial)",
    )
    uvicorn.run(
        "multistream.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
