"""
Cooking Compass API — Application entry point.

Bootstraps FastAPI, wires up middleware, attaches the cooldown limiter,
renders HTTP errors as plain text and registers the route groups.

Run locally:
    uvicorn cooking_compass.main:app --reload

Serverless: `handler` adapts the same app for AWS Lambda / API Gateway.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from mangum import Mangum
from starlette.exceptions import HTTPException as StarletteHTTPException

from cooking_compass.core.config import settings
from cooking_compass.core.rate_limit import limiter
from cooking_compass.routes.compass import router as compass_router
from cooking_compass.routes.health import VERSION
from cooking_compass.routes.health import router as health_router

# ─── Logging ───────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


# ─── Lifespan ──────────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Cooking Compass API (env: %s)", settings.environment)
    yield
    logger.info("Shutting down Cooking Compass API")


# ─── App ───────────────────────────────────────────────────────────────────────
app = FastAPI(
    title="Cooking Compass API",
    description=(
        "Turns a messy ingredient list into one coherent recipe direction. "
        "Suggestions are AI-generated and may need tasting and adjusting."
    ),
    version=VERSION,
    lifespan=lifespan,
    # Disable docs in production to reduce attack surface
    docs_url="/docs" if settings.environment != "production" else None,
    redoc_url="/redoc" if settings.environment != "production" else None,
)


# ─── Rate limiting ─────────────────────────────────────────────────────────────
# Routes read the limiter from app state; tests replace it per test.
app.state.limiter = limiter


# ─── Errors ────────────────────────────────────────────────────────────────────
@app.exception_handler(StarletteHTTPException)
async def plain_text_http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render every HTTP error (ours and the router's 404/405) as text/plain."""
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


# ─── Middleware ─────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)


# ─── Routes ────────────────────────────────────────────────────────────────────
app.include_router(health_router, prefix="/health", tags=["health"])
app.include_router(compass_router)


# ─── Serverless ────────────────────────────────────────────────────────────────
handler = Mangum(app)
