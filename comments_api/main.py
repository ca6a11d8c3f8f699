import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from comments_api.config import settings
from comments_api.database import dispose_engine
from comments_api.dependencies import NotAuthenticated, not_authenticated_handler
from comments_api.middleware import RequestContextMiddleware
from comments_api.responses import send_api_response
from comments_api.routers import comments
from comments_api.validation import format_validation_error

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    configure_logging()
    logger.info("Comments API starting (env=%s)", settings.APP_ENV)
    yield
    # Shutdown
    await dispose_engine()

app = FastAPI(
    title="Blog Comments API",
    description="Comments attached to blog posts",
    version="1.0.0",
    lifespan=lifespan,
)

# Middleware
app.add_middleware(RequestContextMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(comments.router)


# Error handlers
app.add_exception_handler(NotAuthenticated, not_authenticated_handler)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Malformed JSON bodies land here before the handler's own validation.
    return send_api_response(
        success=False,
        msg=format_validation_error(exc),
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return send_api_response(success=False, msg="Internal server error")


@app.get("/health")
async def health():
    return {"status": "healthy", "version": "1.0.0"}
