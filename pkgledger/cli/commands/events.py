"""Events command - view the change feed."""

import cyclopts

from pkgledger.cli.console import get_console
from pkgledger.cli.runtime import parse_event_id, run
from pkgledger.domain.package.query import ListEvents, ListEventsHandler

app = cyclopts.App(name="events", help="View the change feed")


@app.default
def events(
    limit: int = 20,
    types: list[str] | None = None,
    after: str | None = None,
    oldest_first: bool = False,
) -> None:
    """Show events from the change feed (newest first unless --oldest-first).

    Args:
        limit: Number of events to show.
        types: Filter by event types (e.g., PackagePublished).
        after: Continue from this event id.
        oldest_first: Walk the feed in commit order, as a replaying indexer would.
    """
    query = ListEvents(
        limit=limit,
        after=parse_event_id(after) if after is not None else None,
        event_types=types,
        newest_first=not oldest_first,
    )

    async def work(uow):
        handler = await uow.get(ListEventsHandler)
        return await handler.run(query)

    page = run(work)
    console = get_console()
    if not page.events:
        console.info("No events found")
        return

    console.table(
        [
            {
                "id": e.id,
                "type": e.type,
                "package": f"{e.payload.get('name')}",
                "created": e.created_at.strftime("%Y-%m-%d %H:%M:%S"),
            }
            for e in page.events
        ],
        [("id", "Id"), ("type", "Type"), ("package", "Package"), ("created", "Created")],
        title="Events",
    )
    console.info(f"Showing {len(page.events)} of {page.total}")
    if page.has_more:
        console.info(f"More available: --after {page.events[-1].id}")
