"""SQLAlchemy adapter implementing EventRepository."""

import logging
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pkgledger.domain.shared.error import NotFoundError
from pkgledger.domain.shared.event import Event, EventId
from pkgledger.domain.shared.port.event_repository import EventRepository
from pkgledger.infrastructure.persistence.tables import events_table

logger = logging.getLogger(__name__)


class SQLAlchemyEventRepository(EventRepository):
    """SQLAlchemy-backed event repository.

    Events are stored in an append-only log ordered by an autoincrement
    position. Delivery status lives on the same row.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, event: Event, status: str = "pending") -> None:
        stmt = insert(events_table).values(
            id=str(event.id),
            event_type=type(event).__name__,
            payload=event.model_dump(mode="json"),
            created_at=event.created_at,
            delivery_status=status,
        )
        await self._session.execute(stmt)

    async def get(self, event_id: EventId) -> Event | None:
        stmt = select(
            events_table.c.event_type,
            events_table.c.payload,
        ).where(events_table.c.id == str(event_id))

        result = await self._session.execute(stmt)
        row = result.first()
        if row is None:
            return None

        event_type, payload = row
        return self._deserialize(event_type, payload)

    async def update_status(self, event_id: EventId, status: str) -> None:
        stmt = (
            update(events_table)
            .where(events_table.c.id == str(event_id))
            .values(delivery_status=status, delivered_at=datetime.now(UTC))
        )
        await self._session.execute(stmt)

    async def find_pending(self, limit: int = 100) -> list[Event]:
        stmt = (
            select(events_table.c.event_type, events_table.c.payload)
            .where(events_table.c.delivery_status == "pending")
            .order_by(events_table.c.position.asc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return self._deserialize_rows(result.fetchall())

    async def list_events(
        self,
        limit: int = 50,
        after: EventId | None = None,
        event_types: list[str] | None = None,
        newest_first: bool = False,
    ) -> list[Event]:
        """List events with cursor-based pagination."""
        stmt = select(
            events_table.c.event_type,
            events_table.c.payload,
        )

        if newest_first:
            stmt = stmt.order_by(events_table.c.position.desc())
        else:
            stmt = stmt.order_by(events_table.c.position.asc())

        if after is not None:
            cursor_stmt = select(events_table.c.position).where(events_table.c.id == str(after))
            cursor_result = await self._session.execute(cursor_stmt)
            cursor_row = cursor_result.first()
            if cursor_row is None:
                raise NotFoundError(f"Unknown event cursor: {after}")
            if newest_first:
                stmt = stmt.where(events_table.c.position < cursor_row[0])
            else:
                stmt = stmt.where(events_table.c.position > cursor_row[0])

        if event_types:
            stmt = stmt.where(events_table.c.event_type.in_(event_types))

        stmt = stmt.limit(limit)

        result = await self._session.execute(stmt)
        return self._deserialize_rows(result.fetchall())

    async def count(self, event_types: list[str] | None = None) -> int:
        """Count events, optionally filtered by types."""
        stmt = select(func.count()).select_from(events_table)

        if event_types:
            stmt = stmt.where(events_table.c.event_type.in_(event_types))

        result = await self._session.execute(stmt)
        return result.scalar() or 0

    def _deserialize_rows(self, rows: Any) -> list[Event]:
        events: list[Event] = []
        for event_type, payload in rows:
            event = self._deserialize(event_type, payload)
            if event is not None:
                events.append(event)
        return events

    def _deserialize(self, event_type: str, payload: dict | str) -> Event | None:
        """Deserialize an event from stored data."""
        event_cls = Event.resolve(event_type)
        if event_cls is None:
            logger.warning(f"Unknown event type '{event_type}' - skipping")
            return None

        if isinstance(payload, str):
            return event_cls.model_validate_json(payload)
        return event_cls.model_validate(payload)
