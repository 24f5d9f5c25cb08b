from dishka import provide

from pkgledger.domain.package.command.publish_package import PublishPackageHandler
from pkgledger.domain.package.command.transfer_authority import TransferAuthorityHandler
from pkgledger.domain.package.command.update_package import UpdatePackageHandler
from pkgledger.domain.package.port.repository import PackageRepository
from pkgledger.domain.package.query.get_package import GetPackageHandler
from pkgledger.domain.package.query.list_events import ListEventsHandler
from pkgledger.domain.package.service.registry import RegistryService
from pkgledger.domain.shared.outbox import Outbox
from pkgledger.util.di.base import Provider
from pkgledger.util.di.scope import Scope


class PackageProvider(Provider):
    @provide(scope=Scope.UOW)
    def get_registry_service(
        self,
        package_repo: PackageRepository,
        outbox: Outbox,
    ) -> RegistryService:
        return RegistryService(package_repo=package_repo, outbox=outbox)

    # Command Handlers
    publish_handler = provide(PublishPackageHandler, scope=Scope.UOW)
    update_handler = provide(UpdatePackageHandler, scope=Scope.UOW)
    transfer_handler = provide(TransferAuthorityHandler, scope=Scope.UOW)

    # Query Handlers
    get_package_handler = provide(GetPackageHandler, scope=Scope.UOW)
    list_events_handler = provide(ListEventsHandler, scope=Scope.UOW)
