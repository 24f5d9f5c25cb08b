"""PackageUpdated event - emitted when a newer version is added under an existing name."""

from typing import Literal

from pkgledger.domain.package.model.value import Authority
from pkgledger.domain.shared.event import Event


class PackageUpdated(Event):
    """Emitted after Update creates the successor record.

    The predecessor (``old_version``) is left untouched; indexers should
    add ``new_version`` rather than replace the old row.
    """

    kind: Literal["Updated"] = "Updated"
    name: str
    old_version: str
    new_version: str
    authority: Authority
    content_id: str
