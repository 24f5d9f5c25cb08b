"""Outbox - domain service for reliable event delivery."""

from pkgledger.domain.shared.event import Event, EventId
from pkgledger.domain.shared.port.event_repository import EventRepository
from pkgledger.domain.shared.service import Service


class Outbox(Service):
    """Domain service for reliable event delivery via the transactional outbox pattern.

    Wraps EventRepository with delivery semantics. The registry appends one event
    per admitted transition inside the same unit of work as the record write, so
    both commit or neither does. Consumers (e.g. an external indexer) fetch
    pending events and acknowledge them; an event that is never acknowledged is
    handed out again, giving at-least-once delivery.
    """

    _repo: EventRepository

    async def append(self, event: Event) -> None:
        """Add an event to the outbox for delivery."""
        await self._repo.save(event, status="pending")

    async def fetch_pending(self, limit: int = 100) -> list[Event]:
        """Fetch events awaiting delivery, in commit order."""
        return await self._repo.find_pending(limit)

    async def mark_delivered(self, event_id: EventId) -> None:
        """Mark an event as successfully delivered."""
        await self._repo.update_status(event_id, status="delivered")
