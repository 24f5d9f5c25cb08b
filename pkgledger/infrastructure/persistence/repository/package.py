"""SQLAlchemy adapter implementing PackageRepository."""

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from pkgledger.domain.package.model import Authority, PackageAddress, PackageRecord
from pkgledger.domain.package.port.repository import PackageRepository
from pkgledger.domain.shared.error import ConflictError, StorageUnavailableError
from pkgledger.infrastructure.persistence.mappers.package import (
    record_to_row,
    row_to_record,
)
from pkgledger.infrastructure.persistence.tables import packages_table


class SQLAlchemyPackageRepository(PackageRepository):
    """Record store over the ``packages`` table.

    The address primary key is what makes creation create-only: a concurrent
    insert for the same slot loses at commit or at the constraint, never
    silently overwrites.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, address: PackageAddress) -> PackageRecord | None:
        stmt = select(packages_table).where(packages_table.c.address == str(address))
        try:
            result = await self._session.execute(stmt)
        except OperationalError as e:
            raise StorageUnavailableError(f"Record store unavailable: {e}") from e
        row = result.first()
        return row_to_record(row) if row is not None else None

    async def create(self, record: PackageRecord) -> None:
        stmt = insert(packages_table).values(**record_to_row(record))
        try:
            # SAVEPOINT keeps the surrounding unit of work usable after a conflict
            async with self._session.begin_nested():
                await self._session.execute(stmt)
        except IntegrityError as e:
            raise ConflictError(f"Package already exists: {record.qualified_id}") from e
        except OperationalError as e:
            raise StorageUnavailableError(f"Record store unavailable: {e}") from e

    async def swap_authority(
        self, address: PackageAddress, expected: Authority, new: Authority
    ) -> bool:
        stmt = (
            update(packages_table)
            .where(packages_table.c.address == str(address))
            .where(packages_table.c.authority == str(expected))
            .values(authority=str(new))
        )
        try:
            result = await self._session.execute(stmt)
        except OperationalError as e:
            raise StorageUnavailableError(f"Record store unavailable: {e}") from e
        return result.rowcount == 1
