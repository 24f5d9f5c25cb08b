from pkgledger.infrastructure.persistence.repository.event import SQLAlchemyEventRepository
from pkgledger.infrastructure.persistence.repository.package import SQLAlchemyPackageRepository

__all__ = ["SQLAlchemyEventRepository", "SQLAlchemyPackageRepository"]
