"""Event Sink Interface (Port)

Receives one event per business outcome. Delivery is best-effort: emit() must
never raise, whatever happens to the backing store.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from src.service.hotel.domain.domain_event.room_events import RoomDomainEvent


class IEventSink(ABC):
    @abstractmethod
    async def emit(
        self, *, level: str, message: str, metadata: Mapping[str, Any] | None = None
    ) -> None:
        pass

    async def publish(self, *, event: RoomDomainEvent) -> None:
        await self.emit(level=event.level, message=event.message, metadata=event.metadata())

    async def aclose(self) -> None:
        """Flush pending deliveries and release resources"""
        return None
