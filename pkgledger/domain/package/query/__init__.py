"""Package domain queries."""

from .get_package import GetPackage, GetPackageHandler, PackageDetail
from .list_events import EventPage, EventSummary, ListEvents, ListEventsHandler

__all__ = [
    "EventPage",
    "EventSummary",
    "GetPackage",
    "GetPackageHandler",
    "ListEvents",
    "ListEventsHandler",
    "PackageDetail",
]
