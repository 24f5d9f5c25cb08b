import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from dishka import AsyncContainer, from_context, make_async_container
from sqlalchemy.ext.asyncio import AsyncEngine

from pkgledger.config import Config
from pkgledger.domain.package.util.di import PackageProvider
from pkgledger.domain.shared.uow import UnitOfWork
from pkgledger.infrastructure.event import EventProvider
from pkgledger.infrastructure.memory import MemoryPersistenceProvider  # noqa: F401  # registers the memory store
from pkgledger.infrastructure.persistence import StoreProvider
from pkgledger.infrastructure.persistence.database import ensure_schema
from pkgledger.util.di.base import Provider, get_provider
from pkgledger.util.di.scope import Scope

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConfigProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    if config is None:
        config = Config()  # type: ignore[call-arg]

    store_provider = get_provider(StoreProvider, use_mock=config.database.backend == "memory")
    logger.debug("Using %s for backend %r", store_provider.__name__, config.database.backend)

    return make_async_container(
        ConfigProvider(),
        store_provider(),
        EventProvider(),
        PackageProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )


async def prepare_storage(container: AsyncContainer, config: Config) -> None:
    """Create missing tables for the SQL backend when auto_migrate is on."""
    if config.database.backend != "sql" or not config.database.auto_migrate:
        return
    engine = await container.get(AsyncEngine)
    await ensure_schema(engine)


async def run_unit_of_work(
    container: AsyncContainer, work: Callable[[AsyncContainer], Awaitable[T]]
) -> T:
    """Run ``work`` in a fresh UOW scope; commit if it returns, roll back if it raises."""
    async with container(scope=Scope.UOW) as scoped:
        async with await scoped.get(UnitOfWork):
            return await work(scoped)
