"""ListEvents query handler - paginated view of the change feed."""

from datetime import datetime
from typing import Any

from pkgledger.domain.shared.event import EventId
from pkgledger.domain.shared.event_log import EventLog
from pkgledger.domain.shared.query import Query, QueryHandler, Result


class ListEvents(Query):
    limit: int = 50
    after: EventId | None = None
    event_types: list[str] | None = None
    newest_first: bool = False


class EventSummary(Result):
    id: EventId
    type: str
    created_at: datetime
    payload: dict[str, Any]


class EventPage(Result):
    events: list[EventSummary]
    has_more: bool
    total: int


class ListEventsHandler(QueryHandler[ListEvents, EventPage]):
    event_log: EventLog

    async def run(self, cmd: ListEvents) -> EventPage:
        # Fetch one extra to learn whether another page exists
        events = await self.event_log.list_events(
            limit=cmd.limit + 1,
            after=cmd.after,
            event_types=cmd.event_types,
            newest_first=cmd.newest_first,
        )
        page = events[: cmd.limit]
        return EventPage(
            events=[
                EventSummary(
                    id=e.id,
                    type=type(e).__name__,
                    created_at=e.created_at,
                    payload=e.model_dump(mode="json", exclude={"id", "created_at"}),
                )
                for e in page
            ],
            has_more=len(events) > cmd.limit,
            total=await self.event_log.count(event_types=cmd.event_types),
        )
