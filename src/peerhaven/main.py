"""
PeerHaven FastAPI Application Entry Point

Main application initialization with:
- Lifespan management (startup/shutdown)
- CORS configuration
- Error handling middleware
- Router registration
- Prometheus metrics endpoint
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from peerhaven import __version__
from peerhaven.api.middleware.error_handler import ErrorHandlerMiddleware
from peerhaven.api.v1.router import api_router
from peerhaven.config import Settings, get_settings
from peerhaven.config.logging_config import configure_logging, get_logger
from peerhaven.infrastructure.metrics.prometheus_metrics import metrics_router, update_system_info
from peerhaven.services.container import ServiceContainer, set_container

logger = get_logger(__name__)


def create_application(
    settings: Optional[Settings] = None,
    container: Optional[ServiceContainer] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.
    
    Args:
        settings: Settings to use (environment settings when None)
        container: Pre-built services (built from settings at startup when None)
        
    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    configure_logging(settings)
    
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Start and stop the service container."""
        logger.info(
            "Starting PeerHaven application",
            env=settings.env,
            version=__version__,
            store_backend=settings.store.backend,
        )
        
        services = container or ServiceContainer.from_settings(settings)
        try:
            await services.initialize()
            set_container(services)
            update_system_info(__version__, settings.env, settings.store.backend)
            
            yield
        
        finally:
            logger.info("Shutting down PeerHaven application")
            set_container(None)
            await services.shutdown()
            logger.info("PeerHaven application shutdown complete")
    
    app = FastAPI(
        title="PeerHaven API",
        description="Peer support marketplace - matching, assistant and resources API",
        version=__version__,
        docs_url="/docs" if not settings.is_production() else None,
        redoc_url="/redoc" if not settings.is_production() else None,
        lifespan=lifespan,
    )
    
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(ErrorHandlerMiddleware)
    
    app.include_router(api_router, prefix=f"/api/{settings.api_version}")
    app.include_router(metrics_router)
    
    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return {
            "name": "PeerHaven API",
            "version": __version__,
            "status": "operational",
        }
    
    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn
    
    settings = get_settings()
    uvicorn.run(
        "peerhaven.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.env == "development",
        log_level=settings.log_level.lower(),
    )
