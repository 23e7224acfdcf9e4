"""
LeadIntel FastAPI application entry point.

Flow: companies → fit score / intent / engagement → combined ranking → pivot alerts / cross-sell
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from leadintel import __version__
from leadintel.config import get_settings
from leadintel.db.session import check_db_connection, engine

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("LeadIntel starting")
    try:
        try:
            check_db_connection()
            logger.info("Database connection verified")
        except Exception as e:
            logger.critical("Database unreachable: %s", e)
            raise

        # A bad rules file (syntax error, missing file, schema violation) stops startup.
        try:
            from leadintel.scoring_rules.loader import load_scoring_rules

            load_scoring_rules()
            logger.info("Scoring rules validated")
        except Exception as e:
            logger.critical("Scoring rules validation failed at startup: %s", e)
            raise

        yield
    finally:
        logger.info("LeadIntel shutting down")
        engine.dispose()
        logger.info("Database connection pool closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Mount API routes
    from leadintel.api.catalog import clients_router, products_router
    from leadintel.api.companies import router as companies_router
    from leadintel.api.engagement import calls_router
    from leadintel.api.engagement import router as engagement_router
    from leadintel.api.projects import cross_sell_router, pivot_alerts_router
    from leadintel.api.projects import router as projects_router

    app.include_router(clients_router, prefix="/api/clients", tags=["clients"])
    app.include_router(products_router, prefix="/api/products", tags=["products"])
    app.include_router(companies_router, prefix="/api/companies", tags=["companies"])
    app.include_router(engagement_router, prefix="/api/engagement", tags=["engagement"])
    app.include_router(calls_router, prefix="/api/calls", tags=["calls"])
    app.include_router(projects_router, prefix="/api/projects", tags=["projects"])
    app.include_router(pivot_alerts_router, prefix="/api/pivot-alerts", tags=["pivot-alerts"])
    app.include_router(cross_sell_router, prefix="/api/cross-sell", tags=["cross-sell"])

    # Internal job endpoints for cron/scripts (token-authenticated)
    from leadintel.api.internal import router as internal_router

    app.include_router(internal_router, tags=["internal"])

    @app.get("/health")
    def health() -> dict:
        """Health check endpoint. Confirms DB connectivity."""
        from sqlalchemy import text

        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return {
                "status": "ok",
                "version": __version__,
                "database": "connected",
            }
        except Exception:
            from fastapi.responses import JSONResponse

            return JSONResponse(
                status_code=503,
                content={
                    "status": "unhealthy",
                    "version": __version__,
                    "database": "disconnected",
                },
            )

    return app


app = create_app()
