"""Dependency injection provider for the change notifier."""

from dishka import provide

from pkgledger.domain.shared.event_log import EventLog
from pkgledger.domain.shared.outbox import Outbox
from pkgledger.domain.shared.port.event_repository import EventRepository
from pkgledger.util.di.base import Provider
from pkgledger.util.di.scope import Scope


class EventProvider(Provider):
    """Outbox (write side) and EventLog (read side), fresh per unit of work."""

    @provide(scope=Scope.UOW)
    def get_outbox(self, repo: EventRepository) -> Outbox:
        return Outbox(repo)

    @provide(scope=Scope.UOW)
    def get_event_log(self, repo: EventRepository) -> EventLog:
        return EventLog(repo)
