from datetime import datetime, timezone
import math
from uuid import UUID

import attrs
from uuid_utils.compat import uuid7

from src.platform.exception.exceptions import ValidationError


@attrs.frozen
class Payment:
    """Ledger entry. Immutable once created."""

    id: UUID
    room_id: UUID
    amount: float
    date: datetime

    @classmethod
    def create(cls, *, room_id: UUID, amount: float) -> 'Payment':
        if isinstance(amount, bool) or not math.isfinite(amount):
            raise ValidationError('amount must be a finite number')
        return cls(
            id=uuid7(),
            room_id=room_id,
            amount=amount,
            date=datetime.now(timezone.utc),
        )
