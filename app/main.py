# /app/main.py

# --- Core FastAPI Imports ---
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# --- Application-specific Imports ---
from .core.config import get_settings
from .core.exceptions import CopilotError, StoreError
from .core.logging_config import setup_logging
from .db.database import init_db
from .routers import generate_router, history_router, languages_router
from .services import language_service

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Runs once when the application starts up.
    setup_logging()
    init_db()
    language_service.initialize_language_cache()
    logger.info("Code Copilot API started (engine=%s)", get_settings().database_engine.value)
    yield


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Code Generation Copilot API",
    description="AI-powered code generation with a persistent, paginated history.",
    version="1.0.0",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Health", "description": "Health check endpoints"},
        {"name": "Languages", "description": "Supported programming languages"},
        {"name": "Generate", "description": "Code generation endpoints"},
        {"name": "History", "description": "Generation history endpoints"},
    ],
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Error Handlers ---
# Every error body carries exactly one of `error` (string) or `errors` (list).
@app.exception_handler(CopilotError)
async def copilot_error_handler(request: Request, exc: CopilotError):
    if isinstance(exc, StoreError):
        logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc.detail)
    else:
        logger.info("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query"))
        messages.append(f"{location}: {error['msg']}" if location else error["msg"])
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": messages})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": GENERIC_ERROR_MESSAGE},
    )


# --- API Router Inclusion ---
app.include_router(languages_router.router, prefix="/api/languages", tags=["Languages"])
app.include_router(generate_router.router, prefix="/api/generate", tags=["Generate"])
app.include_router(history_router.router, prefix="/api/history", tags=["History"])


# --- Root / Health Check Endpoints ---
@app.get("/", tags=["Health"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Code Copilot API is running!", "version": app.version}


@app.get("/health", tags=["Health"])
async def health_check():
    return {"status": "healthy", "version": app.version}
