"""PackagePublished event - emitted when the first record of a version is created."""

from typing import Literal

from pkgledger.domain.package.model.value import Authority
from pkgledger.domain.shared.event import Event


class PackagePublished(Event):
    kind: Literal["Published"] = "Published"
    name: str
    version: str
    authority: Authority
    content_id: str
