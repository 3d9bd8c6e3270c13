"""FastAPI application for the execution timer demo."""
import os
from typing import Dict, Optional

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from exec_timer import __version__
from exec_timer.config import settings
from exec_timer.monitoring.logger import get_logger
from exec_timer.services.order_service import OrderService

logger = get_logger("api")

def create_app(order_service: Optional[OrderService] = None) -> FastAPI:
    """
    Build the API around an explicitly supplied order service.

    Args:
        order_service: Service invoked by ``GET /order``. A default
            ``OrderService`` is constructed when omitted.
    """
    service = order_service if order_service is not None else OrderService()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Logs the execution time of a timed order service",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Plain def: FastAPI runs it in the threadpool, one timed call per request
    @app.get("/order", tags=["Orders"])
    def process_order() -> Response:
        """Process one order and return an empty response."""
        service.process_order()
        return Response(status_code=200)

    @app.get("/health", tags=["Health"])
    async def get_health() -> Dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "app": settings.APP_NAME}

    @app.get("/", tags=["Root"])
    async def root() -> Dict[str, str]:
        """Root endpoint."""
        return {
            "message": f"Welcome to the {settings.APP_NAME} API",
            "version": __version__,
            "docs": "/docs",
        }

    @app.on_event("startup")
    async def startup_event():
        logger.info(f"Starting {settings.APP_NAME} API...")
        logger.info(f"Environment: {os.getenv('ENVIRONMENT', 'development')}")
        logger.info(f"Order processing delay: {service.delay_ms}ms")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info(f"Shutting down {settings.APP_NAME} API...")

    return app

app = create_app()

def main() -> None:
    """Run the API with uvicorn."""
    uvicorn.run(
        "exec_timer.api.app:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level="info" if not settings.DEBUG else "debug",
    )

if __name__ == "__main__":
    main()
