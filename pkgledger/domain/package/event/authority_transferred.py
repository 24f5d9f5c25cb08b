"""AuthorityTransferred event - emitted when a record changes hands."""

from typing import Literal

from pkgledger.domain.package.model.value import Authority
from pkgledger.domain.shared.event import Event


class AuthorityTransferred(Event):
    kind: Literal["AuthorityTransferred"] = "AuthorityTransferred"
    name: str
    version: str
    previous_authority: Authority
    new_authority: Authority
