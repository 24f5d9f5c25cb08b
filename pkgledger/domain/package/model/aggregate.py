from datetime import datetime

from pydantic import ConfigDict

from pkgledger.domain.package.model.address import PackageAddress, derive_address
from pkgledger.domain.package.model.value import Authority, Dependency
from pkgledger.domain.shared.model.entity import Aggregate


class PackageRecord(Aggregate):
    """One published version of a package.

    Records are frozen. The only field that ever changes after creation is
    ``authority``, and that happens by the store swapping in a copy produced
    by ``with_authority``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    authority: Authority
    content_id: str
    description: str = ""
    dependencies: tuple[Dependency, ...] = ()
    created_at: datetime

    @property
    def address(self) -> PackageAddress:
        return derive_address(self.name, self.version)

    @property
    def qualified_id(self) -> str:
        return f"{self.name}@{self.version}"

    def with_authority(self, authority: Authority) -> "PackageRecord":
        return self.model_copy(update={"authority": authority})
