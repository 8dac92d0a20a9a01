"""
Production FastAPI Application

The backing store connection is established lazily by the first request that needs
it; startup only attempts a best-effort warmup.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.exception.exceptions import ConfigurationError
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Event Booking] Starting up...')

    tracing = TracingConfig(service_name='event-booking')
    tracing.setup()
    Logger.base.info('📊 [Event Booking] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Event Booking] Dependency injection wired')

    # Warmup: a failure here is not fatal, the next request retries the connection
    try:
        connection_manager = container.connection_manager()
        engine = await connection_manager.acquire_connection()
        tracing.instrument_sqlalchemy(engine=engine)
        Logger.base.info('🗄️  [Event Booking] Database engine ready + instrumented')
    except ConfigurationError:
        raise
    except Exception as e:
        Logger.base.warning(f'⚠️ [Event Booking] Database warmup failed, will retry lazily: {e}')

    Logger.base.info('✅ [Event Booking] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Event Booking] Shutting down...')

    await container.connection_manager().dispose()

    tracing.shutdown()
    Logger.base.info('📊 [Event Booking] Tracing shutdown complete')

    container.unwire()

    Logger.base.info('👋 [Event Booking] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
