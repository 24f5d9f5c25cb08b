"""Update command - publish a successor version under the same authority."""

import cyclopts

from pkgledger.cli.console import get_console
from pkgledger.cli.runtime import parse_authority, parse_dependencies, run
from pkgledger.domain.package.command import UpdatePackage, UpdatePackageHandler

app = cyclopts.App(name="update", help="Publish a newer version of an existing package")


@app.default
def update(
    name: str,
    current_version: str,
    new_version: str,
    content_id: str,
    /,
    *,
    signer: str,
    description: str = "",
    dep: list[str] | None = None,
) -> None:
    """Add NEW_VERSION after CURRENT_VERSION of NAME.

    Args:
        name: Package name.
        current_version: An already published version owned by the signer.
        new_version: Strictly greater MAJOR.MINOR.PATCH version.
        content_id: Content identifier of the new payload.
        signer: Base58 public key; must match the current version's authority.
        description: Free-text description.
        dep: Dependency as name@version; repeat for several.
    """
    cmd = UpdatePackage(
        name=name,
        current_version=current_version,
        new_version=new_version,
        content_id=content_id,
        description=description,
        dependencies=parse_dependencies(dep),
        signer=parse_authority(signer, "--signer"),
    )

    async def work(uow):
        handler = await uow.get(UpdatePackageHandler)
        return await handler.run(cmd)

    result = run(work)
    get_console().success(f"Updated {result.name} {result.old_version} -> {result.new_version}")
