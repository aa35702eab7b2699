from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.v1.router import api_router
from app.core.config import settings
from app.core.logging_config import setup_logging
from app.services.employee_service import EmployeeService
from app.services.employee_store import EmployeeStore
from app.services.enrichment_service import EnrichmentService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    setup_logging(settings.LOG_LEVEL)

    enrichment = EnrichmentService()
    try:
        await enrichment.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize EnrichmentService; continuing without enrichment")

    store = EmployeeStore()
    application.state.employee_service = EmployeeService(store, enrichment)
    logger.info("Employee store ready")
    yield
    await enrichment.close()
    store.clear()


app = FastAPI(
    title="Employee Records API",
    description="In-memory employee records with best-effort enrichment",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)
app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Employee Records API"}
