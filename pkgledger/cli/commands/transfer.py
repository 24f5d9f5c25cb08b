"""Transfer command - hand a package version to another authority."""

import cyclopts

from pkgledger.cli.console import get_console
from pkgledger.cli.runtime import parse_authority, run
from pkgledger.domain.package.command import TransferAuthority, TransferAuthorityHandler

app = cyclopts.App(name="transfer", help="Transfer authority over a package version")


@app.default
def transfer(name: str, version: str, new_authority: str, /, *, signer: str) -> None:
    """Make NEW_AUTHORITY the authority of NAME@VERSION.

    Args:
        name: Package name.
        version: Published version.
        new_authority: Base58 public key of the receiving authority.
        signer: Base58 public key of the current authority.
    """
    cmd = TransferAuthority(
        name=name,
        version=version,
        new_authority=parse_authority(new_authority, "new authority"),
        signer=parse_authority(signer, "--signer"),
    )

    async def work(uow):
        handler = await uow.get(TransferAuthorityHandler)
        return await handler.run(cmd)

    result = run(work)
    get_console().success(
        f"{result.name}@{result.version}: {result.previous_authority} -> {result.new_authority}"
    )
