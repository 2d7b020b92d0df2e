"""Main FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from locsync import __version__
from locsync.api.v1.routes import llm_settings, translation
from locsync.config import settings

app = FastAPI(
    title=settings.app_name,
    description="String catalog localization with LLM providers",
    version=__version__,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(translation.router, prefix="/api/v1", tags=["translation"])
app.include_router(llm_settings.router, prefix="/api/v1", tags=["settings"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "locsync API", "version": __version__}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
