"""
Production FastAPI Application

Wires dependency injection, ensures the schema, seeds the default admin and
serves the API.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.db_setting import create_db_and_tables, dispose_engine, get_engine
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig
from src.service.event_registration.app.command.seed_admin_use_case import SeedAdminUseCase
from src.service.event_registration.driven_adapter import model  # noqa: F401  (registers tables)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Gowra Events] Starting up...')

    tracing = TracingConfig(service_name='gowra-events')
    tracing.setup()
    Logger.base.info('📊 [Gowra Events] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Gowra Events] Dependency injection wired')

    tracing.instrument_sqlalchemy(engine=get_engine())
    await create_db_and_tables()
    Logger.base.info('🗄️ [Gowra Events] Database engine ready + instrumented')

    await SeedAdminUseCase(
        uow=container.unit_of_work(), password_hasher=container.password_hasher()
    ).execute(
        email=settings.DEFAULT_ADMIN_EMAIL,
        password=settings.DEFAULT_ADMIN_PASSWORD,
        name=settings.DEFAULT_ADMIN_NAME,
        admin_emails=settings.ADMIN_EMAILS,
    )

    Logger.base.info('✅ [Gowra Events] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Gowra Events] Shutting down...')

    await dispose_engine()
    Logger.base.info('🗄️ [Gowra Events] Database engine disposed')

    tracing.shutdown()
    container.unwire()

    Logger.base.info('👋 [Gowra Events] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
