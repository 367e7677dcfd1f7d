"""
Main FastAPI application.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bacprep.api.v1 import api_router
from bacprep.core.agents.tutor import TutorGateway
from bacprep.core.config import Settings, settings as default_settings
from bacprep.services.storage import SQLStorage, Storage

# Configure logging BEFORE creating the app
logging.basicConfig(
    level=default_settings.LOG_LEVEL,
    format='%(levelname)s:\t%(name)s\t%(message)s',
    handlers=[
        logging.StreamHandler()  # Output to console
    ]
)
logging.getLogger("uvicorn").setLevel(logging.INFO)

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return ", ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map every failure to a ``{"message": ...}`` body.

    Domain errors are translated by the routes that call the store or the
    tutor; anything reaching the catch-all handler is unexpected.
    """

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": _validation_message(exc)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )


def create_app(
    storage: Optional[Storage] = None,
    tutor: Optional[TutorGateway] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        storage: Data store; defaults to one on ``settings.DATABASE_URL``
        tutor: AI tutor gateway; defaults to one on the configured OpenAI model
        settings: Settings override

    Returns:
        The configured FastAPI app
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Bacalaureat exam preparation backend with an AI tutor",
        version=VERSION,
        debug=settings.DEBUG,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    if storage is None:
        storage = SQLStorage.from_url(settings.DATABASE_URL)
        if settings.SEED_DEMO_DATA:
            storage.initialize_demo_data()
            logger.info("Demo data seeded at startup")
    app.state.storage = storage
    app.state.tutor = tutor or TutorGateway(settings=settings)

    cors_origins = settings.BACKEND_CORS_ORIGINS
    if cors_origins == "*" or not cors_origins:
        cors_origins = ["*"]
    logger.info(f"CORS enabled for origins: {cors_origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin).rstrip("/") for origin in cors_origins],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/", tags=["Health"])
    async def root():
        """
        Root endpoint - Health check.

        Returns:
            Status message
        """
        return {
            "message": f"{settings.PROJECT_NAME} API",
            "status": "healthy",
            "version": VERSION,
            "docs": "/docs",
        }

    @app.get("/health", tags=["Health"])
    async def health_check():
        return {"status": "healthy"}

    # Include API routers
    app.include_router(api_router, prefix=settings.API_PREFIX)

    return app


app = create_app()
