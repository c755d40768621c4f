"""FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from jobnest.api.limiter import limiter
from jobnest.config import DEFAULT_JWT_SECRET, Settings, settings
from jobnest.db.base import init_db
from jobnest.errors import JobNestError

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

ALLOWED_ORIGINS = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]


def check_jwt_secret(config: Settings = settings) -> bool:
    """Warn when tokens would be signed with the built-in secret. Returns True if the secret is set."""
    if config.jwt_secret == DEFAULT_JWT_SECRET:
        logger.warning("JWT_SECRET not configured, signing tokens with the default secret")
        return False
    return True


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database on startup."""
    check_jwt_secret()
    try:
        init_db()
    except ValueError:
        logger.warning("DATABASE_URL not configured, skipping table creation")
    yield


app = FastAPI(
    title="JobNest API",
    description="Job board backend: jobs, applications, saved jobs and messaging",
    version="1.0.0",
    lifespan=lifespan,
)

app.state.limiter = limiter


@app.exception_handler(JobNestError)
async def jobnest_error_handler(request: Request, exc: JobNestError):
    """Render core rejections (not found, forbidden, conflict, validation)."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are validation failures: 400, not 422."""
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    """Return 429 with a clear message when rate limit is exceeded."""
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded: {exc.detail}"},
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)


# Import and include routers
from jobnest.api.routes import applications, auth, jobs, messages, saved_jobs, users  # noqa: E402

app.include_router(auth.router, prefix="/auth", tags=["Auth"])
app.include_router(users.router, prefix="/users", tags=["Users"])
app.include_router(jobs.router, prefix="/jobs", tags=["Jobs"])
app.include_router(applications.router, prefix="/applications", tags=["Applications"])
app.include_router(saved_jobs.router, prefix="/saved-jobs", tags=["Saved Jobs"])
app.include_router(messages.router, prefix="/messages", tags=["Messages"])


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
