"""FastAPI application factory"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ghana_legal_docs import __version__
from ghana_legal_docs.api.routes.documents import router as documents_router
from ghana_legal_docs.api.routes.drafts import router as drafts_router
from ghana_legal_docs.api.schemas import HealthResponse


def create_app() -> FastAPI:
    """Create and configure the FastAPI application"""
    app = FastAPI(
        title="Ghana Legal Documents API",
        description="Compose, preview and export tenancy and vehicle transfer agreements",
        version=__version__,
    )

    # The form UI is served from a different origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(status="ok", version=__version__)

    app.include_router(documents_router)
    app.include_router(drafts_router)

    return app
