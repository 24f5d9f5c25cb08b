"""In-memory adapters for the record store and the event repository.

State lives in plain dicts and lists owned by the adapter instance. Each
method completes without awaiting anything else, so under a single event loop
every call is applied atomically with respect to other transitions.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from pkgledger.domain.package.model import Authority, PackageAddress, PackageRecord
from pkgledger.domain.package.port.repository import PackageRepository
from pkgledger.domain.shared.error import ConflictError, NotFoundError
from pkgledger.domain.shared.event import Event, EventId
from pkgledger.domain.shared.port.event_repository import EventRepository


class InMemoryPackageRepository(PackageRepository):
    def __init__(self) -> None:
        self._records: dict[PackageAddress, PackageRecord] = {}

    async def get(self, address: PackageAddress) -> PackageRecord | None:
        return self._records.get(address)

    async def create(self, record: PackageRecord) -> None:
        address = record.address
        if address in self._records:
            raise ConflictError(f"Package already exists: {record.qualified_id}")
        self._records[address] = record

    async def swap_authority(
        self, address: PackageAddress, expected: Authority, new: Authority
    ) -> bool:
        record = self._records.get(address)
        if record is None or record.authority != expected:
            return False
        self._records[address] = record.with_authority(new)
        return True

    def __len__(self) -> int:
        return len(self._records)


@dataclass
class _StoredEvent:
    event: Event
    status: str
    delivered_at: datetime | None = None


class InMemoryEventRepository(EventRepository):
    """Event log backed by a list; list index is the global position."""

    def __init__(self) -> None:
        self._log: list[_StoredEvent] = []
        self._positions: dict[EventId, int] = {}

    async def save(self, event: Event, status: str = "pending") -> None:
        self._positions[event.id] = len(self._log)
        self._log.append(_StoredEvent(event=event, status=status))

    async def get(self, event_id: EventId) -> Event | None:
        position = self._positions.get(event_id)
        return None if position is None else self._log[position].event

    async def update_status(self, event_id: EventId, status: str) -> None:
        position = self._positions.get(event_id)
        if position is None:
            return
        stored = self._log[position]
        stored.status = status
        stored.delivered_at = datetime.now(UTC)

    async def find_pending(self, limit: int = 100) -> list[Event]:
        return [s.event for s in self._log if s.status == "pending"][:limit]

    async def list_events(
        self,
        limit: int = 50,
        after: EventId | None = None,
        event_types: list[str] | None = None,
        newest_first: bool = False,
    ) -> list[Event]:
        entries = self._log
        if after is not None:
            position = self._positions.get(after)
            if position is None:
                raise NotFoundError(f"Unknown event cursor: {after}")
            entries = entries[:position] if newest_first else entries[position + 1 :]
        events = [s.event for s in entries]
        if event_types:
            events = [e for e in events if type(e).__name__ in event_types]
        if newest_first:
            events.reverse()
        return events[:limit]

    async def count(self, event_types: list[str] | None = None) -> int:
        if not event_types:
            return len(self._log)
        return sum(1 for s in self._log if type(s.event).__name__ in event_types)
