from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tempero.api import analytics, customer, expense, sale, supplier
from tempero.common.error_handlers import register_error_handlers
from tempero.core.config import Settings, settings as default_settings
from tempero.core.store import MemoryStore
from tempero.logger_config import logger, set_log_level
from tempero.seed import seed_store


def create_app(store: Optional[MemoryStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the API around one record store (a fresh one unless given)."""
    settings = settings or default_settings
    set_log_level(settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)
    app.state.store = store if store is not None else MemoryStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Register API routers
    prefix = settings.API_PREFIX
    app.include_router(customer.router, prefix=f"{prefix}/customers", tags=["customers"])
    app.include_router(supplier.router, prefix=f"{prefix}/suppliers", tags=["suppliers"])
    app.include_router(sale.router, prefix=f"{prefix}/sales", tags=["sales"])
    app.include_router(expense.router, prefix=f"{prefix}/expenses", tags=["expenses"])
    app.include_router(analytics.router, prefix=f"{prefix}/analytics", tags=["analytics"])

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    if settings.SEED_DEMO_DATA:
        seed_store(
            app.state.store,
            customers=settings.SEED_CUSTOMERS,
            suppliers=settings.SEED_SUPPLIERS,
            sales=settings.SEED_SALES,
            expenses=settings.SEED_EXPENSES,
        )

    logger.info(f"{settings.APP_NAME} API ready ({settings.APP_ENV})")
    return app


app = create_app()
