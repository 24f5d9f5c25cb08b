"""Unit tests for package command and query handlers."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from pkgledger.domain.package.command import (
    PublishPackage,
    PublishPackageHandler,
    TransferAuthority,
    TransferAuthorityHandler,
    UpdatePackage,
    UpdatePackageHandler,
)
from pkgledger.domain.package.model import Authority, Dependency, derive_address
from pkgledger.domain.package.query import (
    GetPackage,
    GetPackageHandler,
    ListEvents,
    ListEventsHandler,
)
from pkgledger.domain.package.service import RegistryService
from pkgledger.domain.shared.error import NotFoundError
from pkgledger.domain.shared.event import EventId
from pkgledger.domain.shared.event_log import EventLog
from pkgledger.infrastructure.memory import InMemoryEventRepository

CID = "QmTest123456789abcdefghijklmnopqrstuvwxyz"
CID_2 = "QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG"


class TestCommandHandlers:
    async def test_publish_returns_address(self, registry: RegistryService, alice: Authority):
        handler = PublishPackageHandler(registry_service=registry)

        result = await handler.run(
            PublishPackage(
                name="pkg",
                version="1.0.0",
                content_id=CID,
                dependencies=[Dependency(name="dep", version="0.1.0")],
                signer=alice,
            )
        )

        assert result.address == derive_address("pkg", "1.0.0")
        assert result.authority == alice

    async def test_update_and_transfer(
        self, registry: RegistryService, alice: Authority, bob: Authority
    ):
        await PublishPackageHandler(registry_service=registry).run(
            PublishPackage(name="pkg", version="1.0.0", content_id=CID, signer=alice)
        )

        updated = await UpdatePackageHandler(registry_service=registry).run(
            UpdatePackage(
                name="pkg",
                current_version="1.0.0",
                new_version="1.1.0",
                content_id=CID_2,
                signer=alice,
            )
        )
        assert (updated.old_version, updated.new_version) == ("1.0.0", "1.1.0")

        transferred = await TransferAuthorityHandler(registry_service=registry).run(
            TransferAuthority(name="pkg", version="1.1.0", new_authority=bob, signer=alice)
        )
        assert transferred.previous_authority == alice
        assert transferred.new_authority == bob

    async def test_handler_delegates_to_service(self, alice: Authority):
        service = AsyncMock(spec=RegistryService)
        handler = TransferAuthorityHandler(registry_service=service)
        service.transfer_authority.return_value.name = "pkg"
        service.transfer_authority.return_value.version = "1.0.0"
        service.transfer_authority.return_value.authority = Authority("C" * 32)

        await handler.run(
            TransferAuthority(
                name="pkg", version="1.0.0", new_authority=Authority("C" * 32), signer=alice
            )
        )

        service.transfer_authority.assert_awaited_once_with(
            name="pkg", version="1.0.0", new_authority=Authority("C" * 32), signer=alice
        )


class TestGetPackageHandler:
    async def test_returns_detail(self, registry: RegistryService, alice: Authority):
        await registry.publish("pkg", "1.0.0", CID, "desc", [], alice)

        detail = await GetPackageHandler(registry_service=registry).run(
            GetPackage(name="pkg", version="1.0.0")
        )

        assert detail.content_id == CID
        assert detail.description == "desc"
        assert detail.authority == alice

    async def test_missing_raises_not_found(self, registry: RegistryService):
        with pytest.raises(NotFoundError):
            await GetPackageHandler(registry_service=registry).run(
                GetPackage(name="pkg", version="9.9.9")
            )


class TestListEventsHandler:
    async def test_pages_through_feed(
        self, registry: RegistryService, event_repo: InMemoryEventRepository, alice: Authority
    ):
        await registry.publish("pkg", "1.0.0", CID, "", [], alice)
        await registry.publish("pkg", "2.0.0", CID, "", [], alice)
        await registry.publish("pkg", "3.0.0", CID, "", [], alice)
        handler = ListEventsHandler(event_log=EventLog(event_repo))

        first = await handler.run(ListEvents(limit=2))
        assert first.has_more is True
        assert [e.payload["version"] for e in first.events] == ["1.0.0", "2.0.0"]

        second = await handler.run(ListEvents(limit=2, after=first.events[-1].id))
        assert second.has_more is False
        assert [e.payload["version"] for e in second.events] == ["3.0.0"]
        assert first.total == second.total == 3

    async def test_total_counts_filtered_types(
        self, registry: RegistryService, event_repo: InMemoryEventRepository, alice: Authority
    ):
        await registry.publish("pkg", "1.0.0", CID, "", [], alice)
        await registry.update("pkg", "1.0.0", "1.1.0", CID_2, "", [], alice)
        handler = ListEventsHandler(event_log=EventLog(event_repo))

        page = await handler.run(ListEvents(limit=1, event_types=["PackageUpdated"]))

        assert page.total == 1
        assert page.has_more is False

    async def test_unknown_cursor_raises_not_found(
        self, registry: RegistryService, event_repo: InMemoryEventRepository, alice: Authority
    ):
        await registry.publish("pkg", "1.0.0", CID, "", [], alice)
        handler = ListEventsHandler(event_log=EventLog(event_repo))

        with pytest.raises(NotFoundError):
            await handler.run(ListEvents(after=EventId(uuid4())))

    async def test_summary_shape(
        self, registry: RegistryService, event_repo: InMemoryEventRepository, alice: Authority
    ):
        await registry.publish("pkg", "1.0.0", CID, "", [], alice)

        page = await ListEventsHandler(event_log=EventLog(event_repo)).run(ListEvents())

        summary = page.events[0]
        assert summary.type == "PackagePublished"
        assert summary.payload["kind"] == "Published"
        assert "id" not in summary.payload
