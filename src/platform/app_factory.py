"""
Shared FastAPI App Factory

Production (src/main.py) and tests build the app here so routes, handlers and
middleware never drift apart.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from pathlib import Path
from typing import Any, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import BOOKING_PREFIX, EVENT_PREFIX
from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.observability.tracing import TracingConfig
from src.service.eventbook.driving_adapter.http_controller.booking_controller import (
    router as booking_router,
)
from src.service.eventbook.driving_adapter.http_controller.event_controller import (
    router as event_router,
)


def create_app(
    *,
    lifespan: Optional[Callable[[FastAPI], AbstractAsyncContextManager[Any]]] = None,
    title_suffix: str = '',
    service_name: str = 'event-booking',
) -> FastAPI:
    """
    Args:
        lifespan: startup/shutdown hook; tests usually pass none
        title_suffix: e.g. " (Test)"
        service_name: service.name on exported spans
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description='Event discovery and booking',
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Instrument before routes are added
    TracingConfig(service_name=service_name).instrument_fastapi(app=app)

    _add_middleware(app)
    register_exception_handlers(app)
    _mount_static(app)

    app.include_router(event_router, prefix=EVENT_PREFIX, tags=['event'])
    app.include_router(booking_router, prefix=BOOKING_PREFIX, tags=['booking'])
    _add_operational_routes(app)

    return app


def _add_middleware(app: FastAPI) -> None:
    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )


def _mount_static(app: FastAPI) -> None:
    static_dir = Path(settings.STATIC_DIR)
    static_dir.mkdir(parents=True, exist_ok=True)
    app.mount('/static', StaticFiles(directory=static_dir), name='static')


def _add_operational_routes(app: FastAPI) -> None:
    @app.get('/health', include_in_schema=False)
    async def health_check() -> dict[str, str]:
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}

    @app.get('/metrics', include_in_schema=False)
    async def get_metrics() -> PlainTextResponse:
        """Prometheus scrape endpoint."""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
