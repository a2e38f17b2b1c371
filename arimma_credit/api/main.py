"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from arimma_credit.api.middleware import RequestIDMiddleware, MetricsMiddleware
from arimma_credit.api.v1 import credit_score
from arimma_credit.infrastructure.observability.logging import setup_logging
from arimma_credit.config import settings

setup_logging(settings.log_level, settings.service_name)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Arimma Agricultural Credit Gateway",
        description="Credit scoring and loan eligibility for farmers",
        version="0.1.0",
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
    )

    # Last added = first executed
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(credit_score.router, prefix=settings.api_prefix, tags=["credit"])

    return app


app = create_app()
