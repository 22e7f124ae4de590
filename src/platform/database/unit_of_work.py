"""
Unit of Work Pattern - one database session and transaction per operation

Architecture:
- UoW owns the session lifecycle and commit/rollback
- Command repositories share the UoW session and never commit on their own
- Use cases open a fresh UoW per operation, so catalog and ledger writes of
  one request land in a single transaction or not at all
"""

from __future__ import annotations

import abc
from contextlib import AbstractAsyncContextManager
from types import TracebackType
from typing import TYPE_CHECKING, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import Database


if TYPE_CHECKING:
    from src.service.hotel.app.interface.i_payment_ledger_repo import IPaymentLedgerRepo
    from src.service.hotel.app.interface.i_room_command_repo import IRoomCommandRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the hotel service

    Usage:
        async with uow_factory() as uow:
            room = await uow.room_command_repo.create(room=...)
            await uow.commit()

    Leaving the block without commit() rolls everything back.
    """

    room_command_repo: IRoomCommandRepo
    payment_ledger_repo: IPaymentLedgerRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(self, database: Database) -> None:
        self._database = database
        self._session_cm: Optional[AbstractAsyncContextManager[AsyncSession]] = None
        self.session: Optional[AsyncSession] = None

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        from src.service.hotel.driven_adapter.repo.payment_ledger_repo_impl import (
            PaymentLedgerRepoImpl,
        )
        from src.service.hotel.driven_adapter.repo.room_command_repo_impl import (
            RoomCommandRepoImpl,
        )

        self._session_cm = self._database.session()
        self.session = await self._session_cm.__aenter__()

        # Repositories share the UoW session
        self.room_command_repo = RoomCommandRepoImpl(session=self.session)
        self.payment_ledger_repo = PaymentLedgerRepoImpl(session=self.session)

        await super().__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        assert self._session_cm is not None
        session_cm, self._session_cm = self._session_cm, None
        try:
            await self.rollback()
        except (SQLAlchemyError, OSError) as rollback_error:
            if exc is None:
                exc_type, exc, tb = (
                    type(rollback_error),
                    rollback_error,
                    rollback_error.__traceback__,
                )
        finally:
            self.session = None

        # Store failures from the body or the rollback are translated by the session context
        await session_cm.__aexit__(exc_type, exc, tb)

    async def _commit(self) -> None:
        assert self.session is not None
        await self.session.commit()

    async def rollback(self) -> None:
        assert self.session is not None
        await self.session.rollback()
