"""RegistryService - the publish/update/transfer state machine."""

import logging
from collections.abc import Sequence
from datetime import UTC, datetime

from pkgledger.domain.package.event import (
    AuthorityTransferred,
    PackagePublished,
    PackageUpdated,
)
from pkgledger.domain.package.model import (
    Authority,
    Dependency,
    PackageAddress,
    PackageRecord,
    Semver,
    derive_address,
)
from pkgledger.domain.package.port.repository import PackageRepository
from pkgledger.domain.package.validation import check_name, check_version, validate_fields
from pkgledger.domain.shared.error import (
    AuthorizationError,
    ConflictError,
    DomainError,
    ErrorKind,
    FieldValidationError,
    NotFoundError,
    VersionOrderError,
)
from pkgledger.domain.shared.outbox import Outbox
from pkgledger.domain.shared.service import Service

logger = logging.getLogger(__name__)


class RegistryService(Service):
    """Admits or rejects transitions against the append-only record store.

    Every transition validates and checks authorization before its first write,
    then performs exactly one store mutation followed by one outbox append.
    Callers run each transition inside a single unit of work so the record and
    its event commit together.
    """

    package_repo: PackageRepository
    outbox: Outbox

    async def find(self, name: str, version: str) -> PackageRecord | None:
        """Fetch a record, returning None when the slot is empty.

        Keys that fail field validation cannot have been published, so they
        resolve to None without touching the addressing scheme.
        """
        if check_name(name) is not None or check_version(version) is not None:
            return None
        return await self.package_repo.get(derive_address(name, version))

    async def get(self, name: str, version: str) -> PackageRecord:
        """Fetch a record by (name, version)."""
        record = await self.find(name, version)
        if record is None:
            raise NotFoundError(f"Package not found: {name}@{version}")
        return record

    async def publish(
        self,
        name: str,
        version: str,
        content_id: str,
        description: str,
        dependencies: Sequence[Dependency],
        signer: Authority,
    ) -> PackageRecord:
        """Create the first record for (name, version) with ``signer`` as authority."""
        try:
            validate_fields(name, version, content_id, description, dependencies)
            address = derive_address(name, version)
            await self._require_vacant(address, name, version)
        except DomainError as e:
            logger.debug("Publish %s@%s rejected: %s", name, version, e.code)
            raise

        record = PackageRecord(
            name=name,
            version=version,
            authority=signer,
            content_id=content_id,
            description=description,
            dependencies=tuple(dependencies),
            created_at=datetime.now(UTC),
        )
        await self.package_repo.create(record)
        await self.outbox.append(
            PackagePublished(
                name=name,
                version=version,
                authority=signer,
                content_id=content_id,
            )
        )

        logger.info("Package published: %s (authority %s)", record.qualified_id, signer)
        return record

    async def update(
        self,
        name: str,
        current_version: str,
        new_version: str,
        content_id: str,
        description: str,
        dependencies: Sequence[Dependency],
        signer: Authority,
    ) -> PackageRecord:
        """Add ``new_version`` after ``current_version``; the predecessor is never touched.

        The new record inherits the predecessor's authority.
        """
        try:
            existing = await self._require_authority(name, current_version, signer)
            validate_fields(name, new_version, content_id, description, dependencies)
            if not Semver(new_version) > Semver(current_version):
                raise VersionOrderError(
                    f"Version {new_version} is not greater than {current_version}"
                )
            if content_id == existing.content_id:
                raise FieldValidationError(
                    ErrorKind.SAME_CID_AS_EXISTING,
                    "content_id",
                    "Content id must differ from the previous version",
                )
            address = derive_address(name, new_version)
            await self._require_vacant(address, name, new_version)
        except DomainError as e:
            logger.debug(
                "Update %s@%s -> %s rejected: %s", name, current_version, new_version, e.code
            )
            raise

        record = PackageRecord(
            name=name,
            version=new_version,
            authority=existing.authority,
            content_id=content_id,
            description=description,
            dependencies=tuple(dependencies),
            created_at=datetime.now(UTC),
        )
        await self.package_repo.create(record)
        await self.outbox.append(
            PackageUpdated(
                name=name,
                old_version=current_version,
                new_version=new_version,
                authority=existing.authority,
                content_id=content_id,
            )
        )

        logger.info("Package updated: %s -> %s", existing.qualified_id, new_version)
        return record

    async def transfer_authority(
        self,
        name: str,
        version: str,
        new_authority: Authority,
        signer: Authority,
    ) -> PackageRecord:
        """Hand the record at (name, version) over to ``new_authority``."""
        try:
            existing = await self._require_authority(name, version, signer)
            swapped = await self.package_repo.swap_authority(
                existing.address, expected=signer, new=new_authority
            )
            if not swapped:
                raise AuthorizationError(
                    f"Authority of {name}@{version} changed before transfer was applied"
                )
        except DomainError as e:
            logger.debug("Transfer of %s@%s rejected: %s", name, version, e.code)
            raise

        await self.outbox.append(
            AuthorityTransferred(
                name=name,
                version=version,
                previous_authority=signer,
                new_authority=new_authority,
            )
        )

        logger.info(
            "Authority transferred: %s %s -> %s", existing.qualified_id, signer, new_authority
        )
        return existing.with_authority(new_authority)

    async def _require_vacant(self, address: PackageAddress, name: str, version: str) -> None:
        if await self.package_repo.get(address) is not None:
            raise ConflictError(f"Package already exists: {name}@{version}")

    async def _require_authority(
        self, name: str, version: str, signer: Authority
    ) -> PackageRecord:
        # Key shape first, so oversized names report NameTooLong, never an addressing error
        for field, kind in (("name", check_name(name)), ("version", check_version(version))):
            if kind is not None:
                raise FieldValidationError(kind, field)
        existing = await self.package_repo.get(derive_address(name, version))
        if existing is None:
            raise NotFoundError(f"Package not found: {name}@{version}")
        if existing.authority != signer:
            raise AuthorizationError(
                f"Only the package authority can modify {name}@{version}"
            )
        return existing
