from .di import MemoryPersistenceProvider
from .repository import InMemoryEventRepository, InMemoryPackageRepository
from .uow import InMemoryUnitOfWork

__all__ = [
    "InMemoryEventRepository",
    "InMemoryPackageRepository",
    "InMemoryUnitOfWork",
    "MemoryPersistenceProvider",
]
