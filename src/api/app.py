import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.domain.entities import StoreBackend
from .error import MISSING_FIELDS, ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(f"Client error on {request.url.path}: {exc.base_error.code}")
    return JSONResponse(status_code=exc.status_code, content=exc.body())


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error on {request.url.path}: {exc.base_error.code} {exc.base_error.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.body())


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    logger.warning(f"Malformed request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ClientError(MISSING_FIELDS).body(),
    )


async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
    )
    return response


def create_app(ApplicationConfig) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.STORE_BACKEND == StoreBackend.sql.value:
            from src.depends import init_db

            await init_db()
        yield

    app = FastAPI(title="Waitlist API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.middleware("http")(log_requests)

    from src.api.routes import health_check, mail, waitlist

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(mail.router, prefix=ApplicationConfig.API_PREFIX, tags=["Mail"])
    app.include_router(waitlist.router, prefix=ApplicationConfig.API_PREFIX, tags=["Waitlist"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)

    return app
