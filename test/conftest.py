"""
Test Configuration and Fixtures

This module provides:
- Environment setup (SQLite database file, dummy Elasticsearch URL) before any
  application module reads settings at import time
- A recording event sink and an in-memory unit of work for unit tests
- A test FastAPI app and TestClient backed by a fresh SQLite catalog

Architecture:
- Unit tests (test/**/unit/): use mocks and fakes only
- Integration tests (test/**/integration/): real SQLAlchemy stack on SQLite
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are instantiated at import time of src.platform.config.core_setting
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    db_dir = Path(tempfile.mkdtemp(prefix=f'hotel_test_{worker_id}_'))
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{db_dir / "hotel_test.db"}'
    os.environ['ELASTIC_URL'] = 'http://elasticsearch.test:9200'
    os.environ['PRELOAD_ROOMS'] = 'false'
    os.environ['REQUIRE_RESERVED_FOR_PAYMENT'] = 'false'

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncGenerator, AsyncIterator, Generator  # noqa: E402
from contextlib import asynccontextmanager  # noqa: E402
from typing import Any, Mapping  # noqa: E402
from unittest.mock import AsyncMock  # noqa: E402

from dependency_injector import providers  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import delete  # noqa: E402

from src.platform.app_factory import create_app  # noqa: E402
from src.platform.config.di import container  # noqa: E402
from src.platform.config.wire_modules import WIRE_MODULES  # noqa: E402
from src.platform.database.orm_db_setting import (  # noqa: E402
    Database,
    create_db_and_tables,
    dispose_engine,
)
from src.platform.database.unit_of_work import AbstractUnitOfWork  # noqa: E402
from src.platform.logging.loguru_io import Logger  # noqa: E402
from src.service.hotel.app.interface.i_event_sink import IEventSink  # noqa: E402
from src.service.hotel.driven_adapter.model.payment_model import PaymentModel  # noqa: E402
from src.service.hotel.driven_adapter.model.room_model import RoomModel  # noqa: E402


# =============================================================================
# Fakes
# =============================================================================
class RecordingEventSink(IEventSink):
    """Keeps every emitted event in memory instead of shipping it"""

    def __init__(self) -> None:
        self.events: list[dict[str, Any]] = []
        self.closed = False

    async def emit(
        self, *, level: str, message: str, metadata: Mapping[str, Any] | None = None
    ) -> None:
        self.events.append({'level': level, 'message': message, **dict(metadata or {})})

    async def aclose(self) -> None:
        self.closed = True

    def actions(self) -> list[str]:
        return [event['action'] for event in self.events if 'action' in event]


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """Unit of work with AsyncMock repositories; records commit/rollback calls"""

    def __init__(self) -> None:
        self.room_command_repo = AsyncMock()
        self.payment_ledger_repo = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def _commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True


@pytest.fixture
def recording_sink() -> RecordingEventSink:
    return RecordingEventSink()


@pytest.fixture
def fake_uow() -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork()


# =============================================================================
# Database
# =============================================================================
async def _reset_tables() -> None:
    await create_db_and_tables()
    async with Database().session() as session:
        await session.execute(delete(PaymentModel))
        await session.execute(delete(RoomModel))
        await session.commit()


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Empty catalog and ledger on the test SQLite file, engine disposed afterwards"""
    await _reset_tables()
    yield Database()
    await dispose_engine()


# =============================================================================
# Test App
# =============================================================================
@asynccontextmanager
async def lifespan_for_tests(app: FastAPI) -> AsyncIterator[None]:
    """
    Minimal lifespan for testing.

    Only initializes essential resources:
    - Dependency injection
    - Database tables, emptied so every test starts from a blank catalog
    """
    Logger.base.info('🧪 [Test App] Starting up...')

    await _reset_tables()
    Logger.base.info('🗄️  [Test App] Database tables created and emptied')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Test App] Dependency injection wired')

    yield

    Logger.base.info('🛑 [Test App] Shutting down...')
    await container.event_sink().aclose()
    await dispose_engine()
    container.unwire()
    Logger.base.info('👋 [Test App] Shutdown complete')


@pytest.fixture
def app() -> FastAPI:
    return create_app(lifespan=lifespan_for_tests, title_suffix=' (Test)')


@pytest.fixture
def client(
    app: FastAPI, recording_sink: RecordingEventSink
) -> Generator[TestClient, None, None]:
    """TestClient whose event sink records instead of calling Elasticsearch"""
    with container.event_sink.override(providers.Object(recording_sink)):
        with TestClient(app, raise_server_exceptions=False) as test_client:
            yield test_client
