"""Unit tests for RegistryService transitions against the in-memory store."""

import pytest

from pkgledger.domain.package.event import AuthorityTransferred, PackagePublished, PackageUpdated
from pkgledger.domain.package.model import Authority, Dependency, derive_address
from pkgledger.domain.package.service import RegistryService
from pkgledger.domain.shared.error import (
    AuthorizationError,
    ConflictError,
    ErrorKind,
    FieldValidationError,
    NotFoundError,
    VersionOrderError,
)
from pkgledger.infrastructure.memory import InMemoryEventRepository, InMemoryPackageRepository

CID = "QmTest123456789abcdefghijklmnopqrstuvwxyz"
CID_2 = "QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG"
CID_3 = "bafybeigdyrzt5sfp7udm7hu76uh7y26nf3efuylqabf3oclgtqy55fbzdi"


async def publish(registry: RegistryService, signer: Authority, **overrides):
    params = dict(
        name="pkg",
        version="1.0.0",
        content_id=CID,
        description="desc",
        dependencies=[],
        signer=signer,
    )
    params.update(overrides)
    return await registry.publish(**params)


async def update(registry: RegistryService, signer: Authority, **overrides):
    params = dict(
        name="pkg",
        current_version="1.0.0",
        new_version="1.1.0",
        content_id=CID_2,
        description="desc",
        dependencies=[],
        signer=signer,
    )
    params.update(overrides)
    return await registry.update(**params)


class TestPublish:
    async def test_publish_then_fetch(self, registry: RegistryService, alice: Authority):
        created = await publish(registry, alice)

        fetched = await registry.get("pkg", "1.0.0")
        assert fetched == created
        assert fetched.name == "pkg"
        assert fetched.version == "1.0.0"
        assert fetched.content_id == CID
        assert fetched.description == "desc"
        assert fetched.dependencies == ()
        assert fetched.authority == alice

    async def test_publish_stores_dependencies(self, registry: RegistryService, alice: Authority):
        deps = [Dependency(name="left-pad", version="1.3.0")]
        record = await publish(registry, alice, dependencies=deps)
        assert record.dependencies == tuple(deps)

    async def test_second_publish_conflicts_and_leaves_record_unchanged(
        self, registry: RegistryService, alice: Authority, bob: Authority
    ):
        first = await publish(registry, alice)
        before = first.model_dump_json()

        with pytest.raises(ConflictError) as exc_info:
            await publish(registry, bob, content_id=CID_2, description="hijack")

        assert exc_info.value.code == ErrorKind.ALREADY_EXISTS.value
        after = await registry.get("pkg", "1.0.0")
        assert after.model_dump_json() == before

    async def test_boundary_name_length(self, registry: RegistryService, alice: Authority):
        await publish(registry, alice, name="a" * 32)

        with pytest.raises(FieldValidationError) as exc_info:
            await publish(registry, alice, name="a" * 33)
        assert exc_info.value.kind == ErrorKind.NAME_TOO_LONG

    async def test_boundary_description_length(
        self, registry: RegistryService, alice: Authority
    ):
        await publish(registry, alice, version="1.0.0", description="x" * 256)

        with pytest.raises(FieldValidationError) as exc_info:
            await publish(registry, alice, version="1.0.1", description="x" * 257)
        assert exc_info.value.kind == ErrorKind.DESCRIPTION_TOO_LONG

    async def test_invalid_dependency_name(self, registry: RegistryService, alice: Authority):
        with pytest.raises(FieldValidationError) as exc_info:
            await publish(
                registry, alice, dependencies=[Dependency(name="Bad_Name", version="1.0.0")]
            )
        assert exc_info.value.kind == ErrorKind.INVALID_DEPENDENCY_NAME

    async def test_too_many_dependencies(self, registry: RegistryService, alice: Authority):
        deps = [Dependency(name=f"dep-{i}", version="1.0.0") for i in range(11)]
        with pytest.raises(FieldValidationError) as exc_info:
            await publish(registry, alice, dependencies=deps)
        assert exc_info.value.kind == ErrorKind.TOO_MANY_DEPENDENCIES

    async def test_rejection_writes_nothing(
        self,
        registry: RegistryService,
        package_repo: InMemoryPackageRepository,
        event_repo: InMemoryEventRepository,
        alice: Authority,
    ):
        with pytest.raises(FieldValidationError):
            await publish(registry, alice, content_id="invalid-cid")

        assert len(package_repo) == 0
        assert await event_repo.count() == 0

    async def test_emits_published_event(
        self, registry: RegistryService, event_repo: InMemoryEventRepository, alice: Authority
    ):
        await publish(registry, alice)

        events = await event_repo.list_events()
        assert len(events) == 1
        event = events[0]
        assert isinstance(event, PackagePublished)
        assert event.kind == "Published"
        assert (event.name, event.version) == ("pkg", "1.0.0")
        assert event.authority == alice


class TestUpdate:
    async def test_update_adds_new_version_and_keeps_old(
        self, registry: RegistryService, alice: Authority
    ):
        original = await publish(registry, alice)
        before = original.model_dump_json()

        new = await update(registry, alice)

        assert new.version == "1.1.0"
        assert new.content_id == CID_2
        assert new.authority == alice
        assert (await registry.get("pkg", "1.1.0")) == new
        assert (await registry.get("pkg", "1.0.0")).model_dump_json() == before

    async def test_update_to_lower_version_fails(
        self, registry: RegistryService, alice: Authority
    ):
        await publish(registry, alice)
        await update(registry, alice)

        with pytest.raises(VersionOrderError) as exc_info:
            await update(
                registry, alice, current_version="1.1.0", new_version="0.9.0", content_id=CID_3
            )
        assert exc_info.value.code == ErrorKind.VERSION_NOT_GREATER.value

    @pytest.mark.parametrize("new_version", ["1.0.0", "0.9.9", "0.99.99"])
    async def test_non_increasing_versions_fail(
        self, registry: RegistryService, alice: Authority, new_version: str
    ):
        await publish(registry, alice)
        with pytest.raises(VersionOrderError):
            await update(registry, alice, new_version=new_version)

    @pytest.mark.parametrize("new_version", ["1.0.1", "1.1.0", "2.0.0", "1.0.10"])
    async def test_increasing_versions_succeed(
        self, registry: RegistryService, alice: Authority, new_version: str
    ):
        await publish(registry, alice)
        await update(registry, alice, new_version=new_version)
        assert (await registry.find("pkg", "1.0.0")) is not None
        assert (await registry.find("pkg", new_version)) is not None

    async def test_update_by_other_signer_fails(
        self, registry: RegistryService, alice: Authority, mallory: Authority
    ):
        await publish(registry, alice)

        with pytest.raises(AuthorizationError) as exc_info:
            await update(registry, mallory)
        assert exc_info.value.code == ErrorKind.UNAUTHORIZED_AUTHORITY.value
        assert await registry.find("pkg", "1.1.0") is None

    async def test_update_missing_predecessor_is_not_found(
        self, registry: RegistryService, alice: Authority
    ):
        with pytest.raises(NotFoundError):
            await update(registry, alice)

    async def test_update_with_same_content_id_fails(
        self, registry: RegistryService, alice: Authority
    ):
        await publish(registry, alice)

        with pytest.raises(FieldValidationError) as exc_info:
            await update(registry, alice, content_id=CID)
        assert exc_info.value.kind == ErrorKind.SAME_CID_AS_EXISTING

    async def test_update_onto_existing_version_conflicts(
        self, registry: RegistryService, alice: Authority
    ):
        await publish(registry, alice)
        await publish(registry, alice, version="2.0.0", content_id=CID_3)

        with pytest.raises(ConflictError):
            await update(registry, alice, new_version="2.0.0")

    async def test_update_validates_new_fields(
        self, registry: RegistryService, alice: Authority
    ):
        await publish(registry, alice)

        with pytest.raises(FieldValidationError) as exc_info:
            await update(registry, alice, new_version="1.1.0.0")
        assert exc_info.value.kind == ErrorKind.INVALID_VERSION_FORMAT

    async def test_oversized_name_reports_field_error(
        self, registry: RegistryService, alice: Authority
    ):
        with pytest.raises(FieldValidationError) as exc_info:
            await update(registry, alice, name="a" * 100)
        assert exc_info.value.kind == ErrorKind.NAME_TOO_LONG

    async def test_new_record_inherits_authority_after_transfer(
        self, registry: RegistryService, alice: Authority, bob: Authority
    ):
        await publish(registry, alice)
        await registry.transfer_authority("pkg", "1.0.0", new_authority=bob, signer=alice)

        new = await update(registry, bob)
        assert new.authority == bob

    async def test_emits_updated_event(
        self, registry: RegistryService, event_repo: InMemoryEventRepository, alice: Authority
    ):
        await publish(registry, alice)
        await update(registry, alice)

        events = await event_repo.list_events()
        assert [type(e) for e in events] == [PackagePublished, PackageUpdated]
        updated = events[1]
        assert (updated.old_version, updated.new_version) == ("1.0.0", "1.1.0")


class TestTransferAuthority:
    async def test_transfer_by_authority(
        self, registry: RegistryService, alice: Authority, bob: Authority
    ):
        original = await publish(registry, alice)

        result = await registry.transfer_authority(
            "pkg", "1.0.0", new_authority=bob, signer=alice
        )

        stored = await registry.get("pkg", "1.0.0")
        assert result == stored
        assert stored.authority == bob
        # Every other field is untouched
        assert stored.model_dump(exclude={"authority"}) == original.model_dump(
            exclude={"authority"}
        )

    async def test_old_authority_loses_control(
        self, registry: RegistryService, alice: Authority, bob: Authority, mallory: Authority
    ):
        await publish(registry, alice)
        await update(registry, alice)
        await registry.transfer_authority("pkg", "1.1.0", new_authority=bob, signer=alice)

        with pytest.raises(AuthorizationError):
            await registry.transfer_authority("pkg", "1.1.0", new_authority=mallory, signer=alice)
        assert (await registry.get("pkg", "1.1.0")).authority == bob

    async def test_transfer_is_per_version(
        self, registry: RegistryService, alice: Authority, bob: Authority
    ):
        await publish(registry, alice)
        await update(registry, alice)
        await registry.transfer_authority("pkg", "1.1.0", new_authority=bob, signer=alice)

        assert (await registry.get("pkg", "1.0.0")).authority == alice

    async def test_transfer_missing_record(
        self, registry: RegistryService, alice: Authority, bob: Authority
    ):
        with pytest.raises(NotFoundError):
            await registry.transfer_authority("pkg", "1.0.0", new_authority=bob, signer=alice)

    async def test_emits_transfer_event(
        self,
        registry: RegistryService,
        event_repo: InMemoryEventRepository,
        alice: Authority,
        bob: Authority,
    ):
        await publish(registry, alice)
        await registry.transfer_authority("pkg", "1.0.0", new_authority=bob, signer=alice)

        event = (await event_repo.list_events(event_types=["AuthorityTransferred"]))[0]
        assert isinstance(event, AuthorityTransferred)
        assert event.previous_authority == alice
        assert event.new_authority == bob

    async def test_lost_race_reports_unauthorized(
        self,
        registry: RegistryService,
        package_repo: InMemoryPackageRepository,
        alice: Authority,
        bob: Authority,
        mallory: Authority,
    ):
        await publish(registry, alice)
        address = derive_address("pkg", "1.0.0")

        original_get = package_repo.get

        async def get_then_lose_race(addr):
            record = await original_get(addr)
            # A competing transfer lands between the read and the swap
            await package_repo.swap_authority(address, expected=alice, new=mallory)
            return record

        package_repo.get = get_then_lose_race  # type: ignore[method-assign]

        with pytest.raises(AuthorizationError):
            await registry.transfer_authority("pkg", "1.0.0", new_authority=bob, signer=alice)

        package_repo.get = original_get  # type: ignore[method-assign]
        assert (await registry.get("pkg", "1.0.0")).authority == mallory


class TestRead:
    async def test_find_missing_returns_none(self, registry: RegistryService):
        assert await registry.find("pkg", "1.0.0") is None

    async def test_find_malformed_key_returns_none(self, registry: RegistryService):
        assert await registry.find("a" * 100, "1.0.0") is None
        assert await registry.find("pkg", "latest") is None

    async def test_get_missing_raises(self, registry: RegistryService):
        with pytest.raises(NotFoundError) as exc_info:
            await registry.get("pkg", "1.0.0")
        assert exc_info.value.code == ErrorKind.NOT_FOUND.value


class TestScenario:
    async def test_full_lifecycle(
        self,
        registry: RegistryService,
        event_repo: InMemoryEventRepository,
        alice: Authority,
        bob: Authority,
    ):
        await publish(registry, alice)
        with pytest.raises(ConflictError):
            await publish(registry, alice)

        await update(registry, alice)
        with pytest.raises(VersionOrderError):
            await update(
                registry, alice, current_version="1.1.0", new_version="0.9.0", content_id=CID_3
            )

        await registry.transfer_authority("pkg", "1.1.0", new_authority=bob, signer=alice)
        with pytest.raises(AuthorizationError):
            await registry.transfer_authority("pkg", "1.1.0", new_authority=alice, signer=alice)

        kinds = [e.kind for e in await event_repo.list_events()]
        assert kinds == ["Published", "Updated", "AuthorityTransferred"]
