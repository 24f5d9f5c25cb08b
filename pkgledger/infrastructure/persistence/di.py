from typing import AsyncIterable

from dishka import provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from pkgledger.config import Config
from pkgledger.domain.package.port.repository import PackageRepository
from pkgledger.domain.shared.port.event_repository import EventRepository
from pkgledger.domain.shared.uow import UnitOfWork
from pkgledger.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
)
from pkgledger.infrastructure.persistence.repository.event import (
    SQLAlchemyEventRepository,
)
from pkgledger.infrastructure.persistence.repository.package import (
    SQLAlchemyPackageRepository,
)
from pkgledger.infrastructure.persistence.uow import SQLAlchemyUnitOfWork
from pkgledger.util.di.base import Provider
from pkgledger.util.di.scope import Scope


class StoreProvider(Provider):
    """Record store and event repository; pick an implementation with get_provider."""

    __mock_component__ = "persistence"


class PersistenceProvider(StoreProvider):
    # APP-scoped factories
    @provide(scope=Scope.APP)
    async def get_engine(self, config: Config) -> AsyncIterable[AsyncEngine]:
        engine = create_db_engine(config.database)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    # UOW-scoped session (one per unit of work)
    @provide(scope=Scope.UOW)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterable[AsyncSession]:
        # Uncommitted work is rolled back when the session closes
        async with session_factory() as session:
            yield session

    # UOW-scoped repositories
    package_repo = provide(
        SQLAlchemyPackageRepository, scope=Scope.UOW, provides=PackageRepository
    )
    event_repo = provide(SQLAlchemyEventRepository, scope=Scope.UOW, provides=EventRepository)
    uow = provide(SQLAlchemyUnitOfWork, scope=Scope.UOW, provides=UnitOfWork)
