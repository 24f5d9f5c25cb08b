from pkgledger.domain.package.model import Authority
from pkgledger.domain.package.service import RegistryService
from pkgledger.domain.shared.command import Command, CommandHandler, Result


class TransferAuthority(Command):
    name: str
    version: str
    new_authority: Authority
    signer: Authority


class AuthorityTransferredResult(Result):
    name: str
    version: str
    previous_authority: Authority
    new_authority: Authority


class TransferAuthorityHandler(CommandHandler[TransferAuthority, AuthorityTransferredResult]):
    registry_service: RegistryService

    async def run(self, cmd: TransferAuthority) -> AuthorityTransferredResult:
        record = await self.registry_service.transfer_authority(
            name=cmd.name,
            version=cmd.version,
            new_authority=cmd.new_authority,
            signer=cmd.signer,
        )
        return AuthorityTransferredResult(
            name=record.name,
            version=record.version,
            previous_authority=cmd.signer,
            new_authority=record.authority,
        )
