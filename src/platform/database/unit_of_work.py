"""
Unit of Work Pattern - one database session and one transaction per business operation

Architecture:
- UoW owns the session lifecycle (open on enter, close on exit)
- UoW owns commit/rollback; repositories attached to it never commit
- Leaving the block without commit() rolls everything back

Usage:
    async with uow:
        event = await uow.event_query_repo.get_by_id(event_id=..., for_update=True)
        await uow.registration_command_repo.create(registration=...)
        await uow.commit()
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, AsyncContextManager, Callable

from sqlalchemy.ext.asyncio import AsyncSession


if TYPE_CHECKING:
    from src.service.event_registration.app.interface.i_admin_user_command_repo import (
        IAdminUserCommandRepo,
    )
    from src.service.event_registration.app.interface.i_event_command_repo import (
        IEventCommandRepo,
    )
    from src.service.event_registration.app.interface.i_event_query_repo import IEventQueryRepo
    from src.service.event_registration.app.interface.i_payment_command_repo import (
        IPaymentCommandRepo,
    )
    from src.service.event_registration.app.interface.i_payment_query_repo import (
        IPaymentQueryRepo,
    )
    from src.service.event_registration.app.interface.i_principal_query_repo import (
        IPrincipalQueryRepo,
    )
    from src.service.event_registration.app.interface.i_registration_command_repo import (
        IRegistrationCommandRepo,
    )
    from src.service.event_registration.app.interface.i_registration_query_repo import (
        IRegistrationQueryRepo,
    )
    from src.service.event_registration.app.interface.i_user_command_repo import (
        IUserCommandRepo,
    )


class AbstractUnitOfWork(abc.ABC):
    # Identity
    principal_query_repo: IPrincipalQueryRepo
    user_command_repo: IUserCommandRepo
    admin_user_command_repo: IAdminUserCommandRepo

    # Events
    event_command_repo: IEventCommandRepo
    event_query_repo: IEventQueryRepo

    # Registrations
    registration_command_repo: IRegistrationCommandRepo
    registration_query_repo: IRegistrationQueryRepo

    # Payments
    payment_command_repo: IPaymentCommandRepo
    payment_query_repo: IPaymentQueryRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args: Any) -> None:
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
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory
        self._session_context: AsyncContextManager[AsyncSession] | None = None
        self.session: AsyncSession | None = None

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        from src.service.event_registration.driven_adapter.repo.admin_user_command_repo_impl import (
            AdminUserCommandRepoImpl,
        )
        from src.service.event_registration.driven_adapter.repo.event_command_repo_impl import (
            EventCommandRepoImpl,
        )
        from src.service.event_registration.driven_adapter.repo.event_query_repo_impl import (
            EventQueryRepoImpl,
        )
        from src.service.event_registration.driven_adapter.repo.payment_command_repo_impl import (
            PaymentCommandRepoImpl,
        )
        from src.service.event_registration.driven_adapter.repo.payment_query_repo_impl import (
            PaymentQueryRepoImpl,
        )
        from src.service.event_registration.driven_adapter.repo.principal_query_repo_impl import (
            PrincipalQueryRepoImpl,
        )
        from src.service.event_registration.driven_adapter.repo.registration_command_repo_impl import (
            RegistrationCommandRepoImpl,
        )
        from src.service.event_registration.driven_adapter.repo.registration_query_repo_impl import (
            RegistrationQueryRepoImpl,
        )
        from src.service.event_registration.driven_adapter.repo.user_command_repo_impl import (
            UserCommandRepoImpl,
        )

        self._session_context = self.session_factory()
        self.session = await self._session_context.__aenter__()

        # Every repository shares the UoW session
        self.principal_query_repo = PrincipalQueryRepoImpl(session=self.session)
        self.user_command_repo = UserCommandRepoImpl(session=self.session)
        self.admin_user_command_repo = AdminUserCommandRepoImpl(session=self.session)
        self.event_command_repo = EventCommandRepoImpl(session=self.session)
        self.event_query_repo = EventQueryRepoImpl(session=self.session)
        self.registration_command_repo = RegistrationCommandRepoImpl(session=self.session)
        self.registration_query_repo = RegistrationQueryRepoImpl(session=self.session)
        self.payment_command_repo = PaymentCommandRepoImpl(session=self.session)
        self.payment_query_repo = PaymentQueryRepoImpl(session=self.session)

        await super().__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        try:
            await super().__aexit__(*args)
        finally:
            if self._session_context is not None:
                await self._session_context.__aexit__(*args)
            self._session_context = None
            self.session = None

    async def _commit(self) -> None:
        if self.session is None:
            raise RuntimeError('Unit of work used outside of its context')
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
