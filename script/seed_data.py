#!/usr/bin/env python3
"""
Database Seed Script
Reset the room catalog to the demo rooms

Features:
1. Create tables if missing
2. Replace every room with the demo rooms (101 personal, 102 doble,
   103 matrimonial, 104 quin) through the same use case as startup preload

Usage:
    python -m script.seed_data
"""

import asyncio

from src.platform.config.di import container
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from src.service.hotel.app.command.preload_rooms_use_case import PreloadRoomsUseCase


async def verify_data() -> int:
    print('🔍 Verifying seeded data...')
    rooms = await container.room_query_repo().list_all()
    for room in rooms:
        print(
            f'   Room {room.number}: type={room.type}, price={room.price}, '
            f'capacity={room.capacity}, status={room.status.value}'
        )
    print(f'   ✅ Rooms count: {len(rooms)}')
    return len(rooms)


async def main() -> None:
    print('🌱 Starting data seeding...')
    print('=' * 50)

    event_sink = container.event_sink()
    try:
        await create_db_and_tables()

        use_case = PreloadRoomsUseCase(uow_factory=container.unit_of_work, event_sink=event_sink)
        rooms = await use_case.preload()
        if not rooms:
            print('❌ Seeding failed: rooms could not be loaded (see log above)')
            exit(1)

        await verify_data()

        print()
        print('=' * 50)
        print('🌱 Data seeding completed!')

    finally:
        await event_sink.aclose()
        await dispose_engine()


if __name__ == '__main__':
    asyncio.run(main())
