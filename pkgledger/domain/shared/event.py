"""Domain events and the name registry used to rebuild them from storage."""

from datetime import UTC, datetime
from typing import Any, ClassVar, NewType, TypeVar
from uuid import UUID, uuid4

from pydantic import ConfigDict, Field

from pkgledger.domain.shared.model.entity import Entity

EventId = NewType("EventId", UUID)

E = TypeVar("E", bound="Event")


def _utc_now() -> datetime:
    return datetime.now(UTC)


def new_event_id() -> EventId:
    return EventId(uuid4())


class Event(Entity):
    """Base class for domain events.

    Events are immutable once emitted. Subclasses are automatically registered
    by name in Event._registry so repositories can deserialize stored payloads.
    """

    model_config = ConfigDict(frozen=True)

    id: EventId = Field(default_factory=new_event_id)
    created_at: datetime = Field(default_factory=_utc_now)

    # Auto-populated registry of all Event subclasses
    _registry: ClassVar[dict[str, type["Event"]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._registry[cls.__name__] = cls

    @classmethod
    def resolve(cls, event_type: str) -> type["Event"] | None:
        """Look up a registered event class by its type name."""
        return cls._registry.get(event_type)
