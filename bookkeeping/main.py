"""
Bookkeeping Engine: FastAPI Application.

This is the entry point for the application.
All routers are registered here.
"""

from fastapi import FastAPI

from bookkeeping.config import get_settings
from bookkeeping.logging_config import configure_logging
from bookkeeping.api.health import router as health_router
from bookkeeping.api.accounts import router as accounts_router
from bookkeeping.api.ledger import router as ledger_router
from bookkeeping.api.reports import router as reports_router

settings = get_settings()

configure_logging("DEBUG" if settings.DEBUG else settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="A double-entry bookkeeping engine",
)

# Register routers
app.include_router(health_router)
app.include_router(accounts_router)
app.include_router(ledger_router)
app.include_router(reports_router)
