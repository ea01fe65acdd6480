from dotenv import load_dotenv

load_dotenv(".env")

from contextlib import asynccontextmanager
from typing import Optional

import logfire
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from controllers.inference import InferenceClient
from core.config import get_settings
from core.exceptions import AppError, ValidationError
from database.storage import BaseStore, MemoryStore
from routes import assessments, messages
from utils.state import State

state = State()


@asynccontextmanager
async def lifespan(app: FastAPI):
    state.logger.info("Starting up...")
    yield
    state.logger.info("Shutting down...")


async def app_error_handler(request: Request, exc: AppError):
    content = {"error": exc.message}
    if isinstance(exc, ValidationError):
        content["field"] = exc.field
    state.logger.error(
        f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}"
    )
    return JSONResponse(status_code=exc.status_code, content=content)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    state.logger.error(
        f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}"
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {"loc": ("body",), "msg": "invalid"}
    field = (
        ".".join(p for p in first["loc"] if isinstance(p, str) and p != "body")
        or "body"
    )
    state.logger.error(f"{request.method} {request.url.path} -> 400: {first['msg']}")
    return JSONResponse(
        status_code=400,
        content={"error": f"Invalid {field}: {first['msg']}", "field": field},
    )


def create_app(
    store: Optional[BaseStore] = None,
    inference: Optional[InferenceClient] = None,
) -> FastAPI:
    """Build the API with its own store; pass ``store``/``inference`` to inject."""
    settings = get_settings()
    app = FastAPI(
        title="Symptom Assessment API",
        description="Symptom intake and AI-assisted assessment API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else MemoryStore()
    app.state.inference = inference if inference is not None else InferenceClient()

    app.add_middleware(
        CORSMiddleware,
        allow_credentials=False,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    logfire.instrument_fastapi(app, capture_headers=True)

    app.include_router(assessments.router, prefix="/api", tags=["Assessments"])
    app.include_router(messages.router, prefix="/api", tags=["Messages"])

    @app.get("/")
    async def root():
        return {"message": "Welcome to the Symptom Assessment API"}

    return app


logfire.instrument_httpx()
app = create_app()
