"""Global test fixtures."""

import os

import pytest

from pkgledger.domain.package.model import Authority
from pkgledger.domain.package.service import RegistryService
from pkgledger.domain.shared.outbox import Outbox
from pkgledger.infrastructure.memory import InMemoryEventRepository, InMemoryPackageRepository

# Keep tests away from a developer's real ~/.pkgledger and config files
os.environ.pop("PKGLEDGER_CONFIG_FILE", None)
os.environ.pop("PKGLEDGER_LOG_FILE", None)


@pytest.fixture
def package_repo() -> InMemoryPackageRepository:
    return InMemoryPackageRepository()


@pytest.fixture
def event_repo() -> InMemoryEventRepository:
    return InMemoryEventRepository()


@pytest.fixture
def outbox(event_repo: InMemoryEventRepository) -> Outbox:
    return Outbox(event_repo)


@pytest.fixture
def registry(package_repo: InMemoryPackageRepository, outbox: Outbox) -> RegistryService:
    return RegistryService(package_repo=package_repo, outbox=outbox)


@pytest.fixture
def alice() -> Authority:
    return Authority("A" * 32)


@pytest.fixture
def bob() -> Authority:
    return Authority("B" * 44)


@pytest.fixture
def mallory() -> Authority:
    return Authority("11111111111111111111111111111111")
