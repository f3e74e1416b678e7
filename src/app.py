"""Warehouse FastAPI application.

Serves the product and analytics endpoints over one in-memory warehouse.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from warehouse.api import analytics_router, product_router, register_exception_handlers
from warehouse.domain import create_analyzer, create_warehouse, logger


def create_app(warehouse=None, analyzer=None) -> FastAPI:
    """Build the application around ``warehouse``, creating one when omitted."""
    warehouse = warehouse if warehouse is not None else create_warehouse()
    analyzer = analyzer if analyzer is not None else create_analyzer(warehouse)

    application = FastAPI(
        title="Warehouse API",
        description="In-memory product inventory with analytics",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.state.warehouse = warehouse
    application.state.analyzer = analyzer

    application.include_router(product_router)
    application.include_router(analytics_router)
    register_exception_handlers(application)

    # ---------------------------------------------------------------------------
    # Health / root
    # ---------------------------------------------------------------------------
    @application.get("/health")
    async def health():
        return JSONResponse(
            content={
                "status": "ok",
                "warehouse": {"name": warehouse.name, "products": len(warehouse)},
            }
        )

    logger.info("app_created", warehouse=warehouse.name)
    return application


app = create_app()
