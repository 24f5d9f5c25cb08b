"""Publish command - create the first record of a package version."""

import cyclopts

from pkgledger.cli.console import get_console
from pkgledger.cli.runtime import parse_authority, parse_dependencies, run
from pkgledger.domain.package.command import PublishPackage, PublishPackageHandler

app = cyclopts.App(name="publish", help="Publish a new package version")


@app.default
def publish(
    name: str,
    version: str,
    content_id: str,
    /,
    *,
    signer: str,
    description: str = "",
    dep: list[str] | None = None,
) -> None:
    """Publish NAME at VERSION pointing at CONTENT_ID.

    Args:
        name: Package name (lowercase, digits, hyphens).
        version: MAJOR.MINOR.PATCH version.
        content_id: Content identifier of the package payload (Qm... or bafy...).
        signer: Base58 public key of the publishing authority.
        description: Free-text description.
        dep: Dependency as name@version; repeat for several.
    """
    cmd = PublishPackage(
        name=name,
        version=version,
        content_id=content_id,
        description=description,
        dependencies=parse_dependencies(dep),
        signer=parse_authority(signer, "--signer"),
    )

    async def work(uow):
        handler = await uow.get(PublishPackageHandler)
        return await handler.run(cmd)

    result = run(work)
    console = get_console()
    console.success(f"Published {result.name}@{result.version}")
    console.info(f"address {result.address}")
