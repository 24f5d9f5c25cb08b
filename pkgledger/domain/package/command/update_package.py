from datetime import datetime

from pkgledger.domain.package.model import Authority, Dependency, PackageAddress
from pkgledger.domain.package.service import RegistryService
from pkgledger.domain.shared.command import Command, CommandHandler, Result


class UpdatePackage(Command):
    name: str
    current_version: str
    new_version: str
    content_id: str
    description: str = ""
    dependencies: list[Dependency] = []
    signer: Authority


class PackageUpdatedResult(Result):
    name: str
    old_version: str
    new_version: str
    address: PackageAddress
    authority: Authority
    created_at: datetime


class UpdatePackageHandler(CommandHandler[UpdatePackage, PackageUpdatedResult]):
    registry_service: RegistryService

    async def run(self, cmd: UpdatePackage) -> PackageUpdatedResult:
        record = await self.registry_service.update(
            name=cmd.name,
            current_version=cmd.current_version,
            new_version=cmd.new_version,
            content_id=cmd.content_id,
            description=cmd.description,
            dependencies=cmd.dependencies,
            signer=cmd.signer,
        )
        return PackageUpdatedResult(
            name=record.name,
            old_version=cmd.current_version,
            new_version=record.version,
            address=record.address,
            authority=record.authority,
            created_at=record.created_at,
        )
