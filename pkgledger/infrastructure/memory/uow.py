from pkgledger.domain.shared.uow import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """No transaction to manage; every in-memory write is applied immediately."""

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass
