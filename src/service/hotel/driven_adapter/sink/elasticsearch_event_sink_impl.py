"""
Elasticsearch Event Sink Implementation

Ships one document per business event to `{ELASTIC_URL}/{index}/_doc`.

Fire-and-forget: emit() logs the event locally, schedules the HTTP delivery as
a background task and returns immediately. A failed delivery raises
SinkUnavailableError inside the task, where it is logged as a warning and
dropped. aclose() waits for in-flight deliveries before closing the client.
"""

import asyncio
from datetime import datetime, timezone
from typing import Any, Mapping

import httpx
import orjson

from src.platform.exception.exceptions import SinkUnavailableError
from src.platform.logging.loguru_io import Logger
from src.service.hotel.app.interface.i_event_sink import IEventSink


_LOG_LEVELS = frozenset({'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL'})


class ElasticsearchEventSinkImpl(IEventSink):
    def __init__(
        self,
        *,
        base_url: str,
        index: str = 'backend-logs',
        username: str = '',
        password: str = '',
        timeout: float = 2.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._index = index
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip('/'),
            auth=(username, password) if username else None,
            timeout=timeout,
            transport=transport,
        )
        self._pending: set[asyncio.Task[None]] = set()

    async def emit(
        self, *, level: str, message: str, metadata: Mapping[str, Any] | None = None
    ) -> None:
        meta = dict(metadata or {})
        log_level = level.upper() if level.upper() in _LOG_LEVELS else 'INFO'
        Logger.base.log(log_level, f'{message} {meta}' if meta else message)

        document = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'message': message,
            **meta,
        }
        task = asyncio.create_task(self._deliver(document))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _deliver(self, document: dict[str, Any]) -> None:
        try:
            await self._index_document(document)
        except SinkUnavailableError as e:
            Logger.base.warning(f'⚠️ [SINK] Error sending log to Elasticsearch: {e.message}')

    async def _index_document(self, document: dict[str, Any]) -> None:
        try:
            response = await self._client.post(
                f'/{self._index}/_doc',
                content=orjson.dumps(document, default=str),
                headers={'Content-Type': 'application/json'},
            )
        except httpx.HTTPError as e:
            raise SinkUnavailableError(f'{type(e).__name__}: {e}') from e

        if response.is_error:
            raise SinkUnavailableError(
                f'Elasticsearch responded {response.status_code}: {response.text[:200]}'
            )

    async def flush(self) -> None:
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def aclose(self) -> None:
        await self.flush()
        await self._client.aclose()
        Logger.base.info('📤 [SINK] Elasticsearch sink closed')
