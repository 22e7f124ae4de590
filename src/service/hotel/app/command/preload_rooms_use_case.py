"""
Catalog preload

Replaces the whole catalog with the demo rooms. Runs at application startup
(when PRELOAD_ROOMS is set) and from script/seed_data.py.
"""

from typing import Any, Callable, List

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import StoreUnavailableError
from src.platform.logging.loguru_io import Logger
from src.service.hotel.app.interface.i_event_sink import IEventSink
from src.service.hotel.domain.domain_event.room_events import RoomsPreloadedEvent
from src.service.hotel.domain.entity.room_entity import Room


DEMO_ROOMS: List[dict[str, Any]] = [
    {
        'number': 101,
        'type': 'personal',
        'description': 'Habitación individual',
        'price': 50,
        'capacity': 1,
    },
    {
        'number': 102,
        'type': 'doble',
        'description': 'Habitación doble con WiFi',
        'price': 100,
        'capacity': 2,
    },
    {
        'number': 103,
        'type': 'matrimonial',
        'description': 'Habitación matrimonial con cama king size',
        'price': 150,
        'capacity': 2,
    },
    {
        'number': 104,
        'type': 'quin',
        'description': 'Habitación para 5 personas, ideal para familia',
        'price': 200,
        'capacity': 5,
    },
]


class PreloadRoomsUseCase:
    def __init__(
        self,
        *,
        uow_factory: Callable[[], AbstractUnitOfWork],
        event_sink: IEventSink,
    ) -> None:
        self.uow_factory = uow_factory
        self.event_sink = event_sink

    @Logger.io
    async def preload(self) -> List[Room]:
        """
        Reset the catalog to DEMO_ROOMS

        A store failure is logged and reported to the event sink, then an
        empty list is returned: startup must go on without the demo data.
        """
        rooms = [Room.create(**fields) for fields in DEMO_ROOMS]

        try:
            async with self.uow_factory() as uow:
                preloaded = await uow.room_command_repo.replace_all(rooms=rooms)
                await uow.commit()
        except StoreUnavailableError as e:
            Logger.base.error(f'❌ [PRELOAD] Error loading rooms: {e.detail}')
            await self.event_sink.emit(
                level='error',
                message='Error loading rooms',
                metadata={'action': 'preload_failed', 'error': e.detail},
            )
            return []

        Logger.base.info(f'✅ [PRELOAD] Loaded {len(preloaded)} demo rooms')
        await self.event_sink.publish(event=RoomsPreloadedEvent(count=len(preloaded)))
        return preloaded
