"""Show command for viewing a package record."""

import cyclopts

from pkgledger.cli.console import get_console
from pkgledger.cli.runtime import run
from pkgledger.domain.package.query import GetPackage, GetPackageHandler

app = cyclopts.App(name="show", help="Show a published package version")


@app.default
def show(name: str, version: str, /) -> None:
    """Show the record stored for NAME@VERSION."""
    query = GetPackage(name=name, version=version)

    async def work(uow):
        handler = await uow.get(GetPackageHandler)
        return await handler.run(query)

    detail = run(work)
    get_console().package_detail(
        {
            "Address": detail.address,
            "Authority": detail.authority,
            "Content": detail.content_id,
            "Description": detail.description or "-",
            "Dependencies": ", ".join(str(d) for d in detail.dependencies) or "-",
            "Created": detail.created_at.isoformat(),
        },
        title=f"{detail.name}@{detail.version}",
    )
