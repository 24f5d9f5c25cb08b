from typing import Protocol

from pkgledger.domain.package.model.address import PackageAddress
from pkgledger.domain.package.model.aggregate import PackageRecord
from pkgledger.domain.package.model.value import Authority


class PackageRepository(Protocol):
    """Record store keyed by derived address.

    The store is append-only: there is no overwrite and no delete. The only
    in-place change is a compare-and-swap of the authority field. Implementations
    must apply each call atomically; the registry relies on the surrounding unit
    of work for ordering between calls.
    """

    async def get(self, address: PackageAddress) -> PackageRecord | None:
        """Fetch the record stored at an address."""
        ...

    async def create(self, record: PackageRecord) -> None:
        """Store a record at ``record.address`` if the slot is empty.

        Raises:
            ConflictError: If a record already occupies the slot.
        """
        ...

    async def swap_authority(
        self, address: PackageAddress, expected: Authority, new: Authority
    ) -> bool:
        """Replace the authority only if it still equals ``expected``.

        Returns:
            True if the swap was applied, False if the record is missing or
            its authority changed in the meantime.
        """
        ...
