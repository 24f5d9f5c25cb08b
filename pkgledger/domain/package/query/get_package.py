"""GetPackage query handler - read access to a published version."""

from datetime import datetime

from pkgledger.domain.package.model import Authority, Dependency, PackageAddress
from pkgledger.domain.package.service import RegistryService
from pkgledger.domain.shared.query import Query, QueryHandler, Result


class GetPackage(Query):
    name: str
    version: str


class PackageDetail(Result):
    address: PackageAddress
    name: str
    version: str
    authority: Authority
    content_id: str
    description: str
    dependencies: list[Dependency]
    created_at: datetime


class GetPackageHandler(QueryHandler[GetPackage, PackageDetail]):
    registry_service: RegistryService

    async def run(self, cmd: GetPackage) -> PackageDetail:
        record = await self.registry_service.get(cmd.name, cmd.version)
        return PackageDetail(
            address=record.address,
            name=record.name,
            version=record.version,
            authority=record.authority,
            content_id=record.content_id,
            description=record.description,
            dependencies=list(record.dependencies),
            created_at=record.created_at,
        )
