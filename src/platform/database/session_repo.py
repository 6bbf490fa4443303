from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable

from sqlalchemy.ext.asyncio import AsyncSession


SessionFactory = Callable[..., AsyncContextManager[AsyncSession]]


class SessionRepo:
    """
    Base for SQLAlchemy repositories.

    A repository either owns a `session_factory` (query repos held by the
    container, one short session per call) or gets a `session` injected by the
    Unit of Work, in which case every call joins the UoW transaction and the
    repository never commits on its own.
    """

    def __init__(
        self,
        session_factory: SessionFactory | None = None,
        *,
        session: AsyncSession | None = None,
    ) -> None:
        self.session_factory = session_factory
        self.session = session

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')
