"""Package domain events."""

from .authority_transferred import AuthorityTransferred
from .package_published import PackagePublished
from .package_updated import PackageUpdated

__all__ = ["AuthorityTransferred", "PackagePublished", "PackageUpdated"]
