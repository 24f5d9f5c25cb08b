from datetime import datetime

from pkgledger.domain.package.model import Authority, Dependency, PackageAddress
from pkgledger.domain.package.service import RegistryService
from pkgledger.domain.shared.command import Command, CommandHandler, Result


class PublishPackage(Command):
    name: str
    version: str
    content_id: str
    description: str = ""
    dependencies: list[Dependency] = []
    signer: Authority


class PackagePublishedResult(Result):
    name: str
    version: str
    address: PackageAddress
    authority: Authority
    created_at: datetime


class PublishPackageHandler(CommandHandler[PublishPackage, PackagePublishedResult]):
    registry_service: RegistryService

    async def run(self, cmd: PublishPackage) -> PackagePublishedResult:
        record = await self.registry_service.publish(
            name=cmd.name,
            version=cmd.version,
            content_id=cmd.content_id,
            description=cmd.description,
            dependencies=cmd.dependencies,
            signer=cmd.signer,
        )
        return PackagePublishedResult(
            name=record.name,
            version=record.version,
            address=record.address,
            authority=record.authority,
            created_at=record.created_at,
        )
