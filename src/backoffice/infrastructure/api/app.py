"""FastAPI application factory."""

from __future__ import annotations

import structlog
from fastapi import FastAPI

from backoffice.infrastructure.api import invoice_routes, order_routes, shipment_routes, stock_routes
from backoffice.infrastructure.api.errors import register_error_handlers
from backoffice.infrastructure.bootstrap import Container, build_container
from backoffice.infrastructure.logging_config import configure_logging

logger = structlog.get_logger(__name__)


def create_app(container: Container | None = None) -> FastAPI:
    """Build the app around ``container`` (or one built from the environment)."""
    if container is None:
        container = build_container()
        configure_logging(
            log_level=container.settings.log_level,
            json_format=container.settings.log_json,
        )

    app = FastAPI(
        title="Logistics back-office API",
        description="Orders, stock reservations, shipments and invoices",
        version="0.1.0",
    )
    app.state.container = container
    register_error_handlers(app)

    app.include_router(order_routes.router)
    app.include_router(shipment_routes.router)
    app.include_router(invoice_routes.router)
    app.include_router(stock_routes.router)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "backend": container.settings.backend}

    logger.debug("app_created", backend=container.settings.backend)
    return app
