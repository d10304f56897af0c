"""Main FastAPI application for Dream Cinema."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from dreamcinema.api.deps import limiter
from dreamcinema.api.routers import catalog, dreams
from dreamcinema.core.config import get_settings
from dreamcinema.core.constants import PROJECT_NAME, VERSION
from dreamcinema.core.exceptions import ValidationError
from dreamcinema.core.logging_config import get_logger
from dreamcinema.service import DreamVideoService

logger = get_logger("api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.service = DreamVideoService()
    yield
    await app.state.service.aclose()


app = FastAPI(
    title="Dream Cinema API",
    description="API for turning dream narrations into short videos",
    version=VERSION,
    lifespan=lifespan,
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    logger.info(f"Rejected request: {exc.message}")
    return JSONResponse(
        status_code=422,
        content={"error": exc.message, "details": exc.details},
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(catalog.router, prefix="/api/catalog", tags=["catalog"])
app.include_router(dreams.router, prefix="/api/dreams", tags=["dreams"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": f"{PROJECT_NAME} API", "version": VERSION}


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


def start_server(host: str = "0.0.0.0", port: int = 8000, reload: bool = False):
    """Start the FastAPI server."""
    uvicorn.run(
        "dreamcinema.api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level="warning",
    )


if __name__ == "__main__":
    settings = get_settings()
    start_server(settings.host, settings.port)
