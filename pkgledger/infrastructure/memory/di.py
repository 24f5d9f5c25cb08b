from dishka import provide

from pkgledger.domain.package.port.repository import PackageRepository
from pkgledger.domain.shared.port.event_repository import EventRepository
from pkgledger.domain.shared.uow import UnitOfWork
from pkgledger.infrastructure.memory.repository import (
    InMemoryEventRepository,
    InMemoryPackageRepository,
)
from pkgledger.infrastructure.memory.uow import InMemoryUnitOfWork
from pkgledger.infrastructure.persistence.di import StoreProvider
from pkgledger.util.di.scope import Scope


class MemoryPersistenceProvider(StoreProvider):
    """Process-local stores; state lives as long as the container."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_package_repo(self) -> PackageRepository:
        return InMemoryPackageRepository()

    @provide(scope=Scope.APP)
    def get_event_repo(self) -> EventRepository:
        return InMemoryEventRepository()

    @provide(scope=Scope.UOW)
    def get_uow(self) -> UnitOfWork:
        return InMemoryUnitOfWork()
