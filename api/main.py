import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes.forms import router as forms_router
from api.routes.public_forms import router as public_forms_router
from api.routes.responses import router as responses_router
from config.settings import settings
from services.exceptions import ServiceError
from utils.database import create_tables, get_engine

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

DESCRIPTION = """
Hiring forms with adaptive AI follow-up questions and candidate summaries.

## Authentication

Owner endpoints require a bearer token via the `Authorization: Bearer <token>` header.
Public endpoints (`/public/forms/{shareToken}/...`) need only the form's share token.

Use the **Authorize** button above to set your token for testing.

## Candidate Flow

1. **Upload resume** → `POST /public/forms/{shareToken}/resume` returns `resumeProfile`
2. **Answer base questions**, then **ask for a follow-up** → `POST /public/forms/{shareToken}/ai-next`
3. Repeat step 2 with the growing history until the response says `done: true`
4. **Submit** → `POST /public/forms/{shareToken}/responses`

## Errors

Every error is returned as `{"error": "<message>"}`.
"""

tags_metadata = [
    {
        "name": "Health",
        "description": "Health check endpoints. No authentication required.",
    },
    {
        "name": "Forms",
        "description": "Manage your hiring forms, preview the candidate flow and read results.",
    },
    {
        "name": "Responses",
        "description": "Candidate responses and their AI summaries.",
    },
    {
        "name": "Public Forms",
        "description": "Candidate-facing endpoints reached through a form's share token.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.AUTO_CREATE_TABLES:
        create_tables(get_engine())
        logger.info("Database tables ensured")
    yield


app = FastAPI(
    title=settings.APP_NAME,
    description=DESCRIPTION,
    version="1.0.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Configure CORS
ALLOWED_ORIGINS = settings.ALLOWED_ORIGINS.split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============ ERROR HANDLERS ============

@app.exception_handler(ServiceError)
def service_error_handler(request: Request, exc: ServiceError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        message = str(errors[0].get("msg", message))
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.get("/", tags=["Root"])
def root():
    """Root endpoint with API information and documentation links"""
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": "1.0.0",
        "documentation": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "authentication": {
            "type": "Bearer",
            "header": "Authorization",
            "note": "Required for owner endpoints; public endpoints use the share token"
        },
        "endpoints": {
            "health": "/health",
            "ping": "/ping",
            "forms": "/forms",
            "responses": "/responses",
            "public_forms": "/public/forms"
        }
    }


# Health check endpoints (public - no authentication required)
@app.get("/ping", tags=["Health"])
def ping():
    """Simple ping endpoint to check if API is responding. No authentication required."""
    return {"message": "pong"}


@app.get("/health", tags=["Health"])
def health():
    """Health check endpoint with basic status information. No authentication required."""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": "1.0.0"
    }


# Register routers
app.include_router(forms_router)
app.include_router(responses_router)
app.include_router(public_forms_router)
