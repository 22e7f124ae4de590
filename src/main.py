"""
Production FastAPI Application

Serve with: granian --interface asgi src.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from src.platform.exception.exceptions import StoreUnavailableError
from src.platform.logging.loguru_io import Logger
from src.service.hotel.app.command.preload_rooms_use_case import PreloadRoomsUseCase


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Hotel Service] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Hotel Service] Dependency injection wired')

    event_sink = container.event_sink()

    # Initialize database schema. An unreachable store is reported, not fatal:
    # requests will answer 500 until it comes back.
    try:
        await create_db_and_tables()
        Logger.base.info('🗄️  [Hotel Service] Database tables ready')
    except StoreUnavailableError as e:
        await event_sink.emit(
            level='error', message='Error creating tables', metadata={'error': e.detail}
        )
    else:
        if settings.PRELOAD_ROOMS:
            preload_use_case = PreloadRoomsUseCase(
                uow_factory=container.unit_of_work, event_sink=event_sink
            )
            await preload_use_case.preload()

    Logger.base.info('✅ [Hotel Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Hotel Service] Shutting down...')

    # Flush in-flight sink deliveries and close the HTTP client
    await event_sink.aclose()

    await dispose_engine()
    Logger.base.info('🗄️  [Hotel Service] Database engine disposed')

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Hotel Service] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(lifespan=lifespan)
