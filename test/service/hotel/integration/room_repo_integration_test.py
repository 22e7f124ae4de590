"""
Integration tests for the room catalog and payment ledger on SQLite

Test Focus:
1. Query repo lists rooms in insertion order, repeatably
2. Conditional status update is atomic: N concurrent reserves -> exactly one winner
3. replace_all resets the catalog; ledger entries are persisted with UTC dates
4. Uncommitted unit-of-work writes are rolled back
"""

import asyncio
from datetime import datetime, timezone

from uuid_utils.compat import uuid7

import pytest

from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.platform.exception.exceptions import InvalidStateError, NotFoundError
from src.service.hotel.app.command.reserve_room_use_case import ReserveRoomUseCase
from src.service.hotel.domain.entity.payment_entity import Payment
from src.service.hotel.domain.entity.room_entity import Room
from src.service.hotel.domain.enum.room_status import RoomStatus
from src.service.hotel.driven_adapter.repo.room_query_repo_impl import RoomQueryRepoImpl


async def _create_room(database, **fields) -> Room:
    room = Room.create(**({'number': 101, 'type': 'personal', 'price': 50, 'capacity': 1} | fields))
    async with SqlAlchemyUnitOfWork(database) as uow:
        created = await uow.room_command_repo.create(room=room)
        await uow.commit()
    return created


@pytest.mark.integration
class TestRoomRepositories:
    async def test_list_all_in_insertion_order(self, database):
        for number in (103, 101, 102):
            await _create_room(database, number=number)
        query_repo = RoomQueryRepoImpl(session_factory=database.session)

        first = await query_repo.list_all()
        second = await query_repo.list_all()

        assert [room.number for room in first] == [103, 101, 102]
        assert first == second
        assert all(room.status == RoomStatus.FREE for room in first)

    async def test_get_by_id(self, database):
        created = await _create_room(database, description='Habitación individual')

        async with SqlAlchemyUnitOfWork(database) as uow:
            found = await uow.room_command_repo.get_by_id(room_id=created.id)
            missing = await uow.room_command_repo.get_by_id(room_id=uuid7())

        assert found == created
        assert missing is None

    async def test_update_status_if_equals(self, database):
        created = await _create_room(database)

        async with SqlAlchemyUnitOfWork(database) as uow:
            reserved = await uow.room_command_repo.update_status_if_equals(
                room_id=created.id, expected=RoomStatus.FREE, next_status=RoomStatus.RESERVED
            )
            mismatch = await uow.room_command_repo.update_status_if_equals(
                room_id=created.id, expected=RoomStatus.FREE, next_status=RoomStatus.RESERVED
            )
            await uow.commit()

        assert reserved is not None
        assert reserved.status == RoomStatus.RESERVED
        assert mismatch is None

    async def test_update_missing_room_raises_not_found(self, database):
        ghost = Room.create(number=999, type='ghost', price=1, capacity=1)

        with pytest.raises(NotFoundError):
            async with SqlAlchemyUnitOfWork(database) as uow:
                await uow.room_command_repo.update(room=ghost)

    async def test_replace_all(self, database):
        await _create_room(database, number=999)
        rooms = [
            Room.create(number=101, type='personal', price=50, capacity=1),
            Room.create(number=102, type='doble', price=100, capacity=2),
        ]

        async with SqlAlchemyUnitOfWork(database) as uow:
            await uow.room_command_repo.replace_all(rooms=rooms)
            await uow.commit()

        listed = await RoomQueryRepoImpl(session_factory=database.session).list_all()
        assert [room.number for room in listed] == [101, 102]

    async def test_uncommitted_writes_are_rolled_back(self, database):
        room = Room.create(number=101, type='personal', price=50, capacity=1)

        async with SqlAlchemyUnitOfWork(database) as uow:
            await uow.room_command_repo.create(room=room)
            # no commit

        assert await RoomQueryRepoImpl(session_factory=database.session).list_all() == []

    async def test_payment_ledger_append_and_list(self, database):
        created = await _create_room(database)
        before = datetime.now(timezone.utc)

        async with SqlAlchemyUnitOfWork(database) as uow:
            await uow.payment_ledger_repo.append(
                payment=Payment.create(room_id=created.id, amount=50)
            )
            await uow.commit()

        async with SqlAlchemyUnitOfWork(database) as uow:
            payments = await uow.payment_ledger_repo.list_by_room(room_id=created.id)

        assert len(payments) == 1
        assert payments[0].amount == 50
        assert payments[0].date.tzinfo is not None
        assert payments[0].date >= before


@pytest.mark.integration
class TestConcurrentReservation:
    async def test_exactly_one_concurrent_reserve_wins(self, database, recording_sink):
        created = await _create_room(database)
        use_case = ReserveRoomUseCase(
            uow_factory=lambda: SqlAlchemyUnitOfWork(database), event_sink=recording_sink
        )

        results = await asyncio.gather(
            *(use_case.reserve(room_id=created.id) for _ in range(5)),
            return_exceptions=True,
        )

        winners = [result for result in results if isinstance(result, Room)]
        losers = [result for result in results if isinstance(result, InvalidStateError)]
        assert len(winners) == 1
        assert len(losers) == 4
        assert recording_sink.actions() == ['reserved']

        rooms = await RoomQueryRepoImpl(session_factory=database.session).list_all()
        assert [room.id for room in rooms] == [created.id]
        assert rooms[0].status == RoomStatus.RESERVED
