from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.service.hotel.domain.entity.payment_entity import Payment


class IPaymentLedgerRepo(ABC):
    """Append-only payment ledger: no update or delete"""

    @abstractmethod
    async def append(self, *, payment: Payment) -> Payment:
        pass

    @abstractmethod
    async def list_by_room(self, *, room_id: UUID) -> List[Payment]:
        pass
