"""Package domain commands."""

from .publish_package import PackagePublishedResult, PublishPackage, PublishPackageHandler
from .transfer_authority import (
    AuthorityTransferredResult,
    TransferAuthority,
    TransferAuthorityHandler,
)
from .update_package import PackageUpdatedResult, UpdatePackage, UpdatePackageHandler

__all__ = [
    "AuthorityTransferredResult",
    "PackagePublishedResult",
    "PackageUpdatedResult",
    "PublishPackage",
    "PublishPackageHandler",
    "TransferAuthority",
    "TransferAuthorityHandler",
    "UpdatePackage",
    "UpdatePackageHandler",
]
