from abc import ABC, abstractmethod
from types import TracebackType


class UnitOfWork(ABC):
    """Transaction boundary around one registry transition or query.

    Used as an async context manager: commits on clean exit, rolls back when
    the body raised, so a record and its change event land together or not
    at all.
    """

    @abstractmethod
    async def commit(self) -> None: ...

    @abstractmethod
    async def rollback(self) -> None: ...

    async def __aenter__(self) -> "UnitOfWork":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc is not None:
            await self.rollback()
        else:
            await self.commit()
