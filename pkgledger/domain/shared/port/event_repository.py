"""EventRepository port - pure CRUD for event persistence."""

from typing import Protocol

from pkgledger.domain.shared.event import Event, EventId


class EventRepository(Protocol):
    """Repository for domain events - pure data access.

    Implementations assign every saved event a position in a single global
    order; ``list_events`` walks that order so consumers can replay the feed
    from the beginning. Delivery semantics (pending/delivered) are
    handled by the Outbox service.
    """

    async def save(self, event: Event, status: str = "pending") -> None:
        """Persist an event with initial status."""
        ...

    async def get(self, event_id: EventId) -> Event | None:
        """Get an event by ID."""
        ...

    async def update_status(self, event_id: EventId, status: str) -> None:
        """Update an event's delivery status."""
        ...

    async def find_pending(self, limit: int = 100) -> list[Event]:
        """Find events with pending status, oldest first."""
        ...

    async def list_events(
        self,
        limit: int = 50,
        after: EventId | None = None,
        event_types: list[str] | None = None,
        newest_first: bool = False,
    ) -> list[Event]:
        """List events with cursor-based pagination.

        Args:
            limit: Maximum number of events to return.
            after: Cursor - return events positioned after this event ID.
                   Raises NotFoundError when no stored event has this ID.
            event_types: Filter by event type names (e.g., ["PackagePublished"]).
            newest_first: If True, return newest events first (for the CLI).
                         If False, return oldest first (for replay).

        Returns:
            List of Events.
        """
        ...

    async def count(self, event_types: list[str] | None = None) -> int:
        """Count events, optionally filtered by types."""
        ...
