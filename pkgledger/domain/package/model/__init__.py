"""Package domain models."""

from .address import ADDRESS_TAG, MAX_SEED_LENGTH, PackageAddress, derive_address
from .aggregate import PackageRecord
from .value import Authority, Dependency, Semver

__all__ = [
    "ADDRESS_TAG",
    "MAX_SEED_LENGTH",
    "Authority",
    "Dependency",
    "PackageAddress",
    "PackageRecord",
    "Semver",
    "derive_address",
]
