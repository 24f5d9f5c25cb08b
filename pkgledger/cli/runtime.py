"""Run one command or query inside a fresh container and unit of work."""

import asyncio
import sys
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar
from uuid import UUID

from pydantic import ValidationError as InputError

from pkgledger.application.di import create_container, prepare_storage, run_unit_of_work
from pkgledger.cli.console import get_console
from pkgledger.config import Config, configure_logging
from pkgledger.domain.package.model import Authority, Dependency
from pkgledger.domain.shared.error import InfrastructureError, RegistryError
from pkgledger.domain.shared.event import EventId

T = TypeVar("T")


async def _in_unit_of_work(
    work: Callable[[Any], Awaitable[T]], config: Config
) -> T:
    container = create_container(config)
    try:
        await prepare_storage(container, config)
        return await run_unit_of_work(container, work)
    finally:
        await container.close()


def run(work: Callable[[Any], Awaitable[T]]) -> T:
    """Execute ``work(uow_container)`` and exit 1 with the error code on failure."""
    console = get_console()
    config = Config()  # type: ignore[call-arg]
    configure_logging(config.logging)

    try:
        return asyncio.run(_in_unit_of_work(work, config))
    except InfrastructureError as e:
        console.error(f"{e.code}: {e}", hint="Check PKGLEDGER_DATABASE__URL")
        sys.exit(1)
    except RegistryError as e:
        console.error(f"{e.code}: {e}")
        sys.exit(1)


def parse_authority(value: str, option: str) -> Authority:
    try:
        return Authority(value)
    except InputError:
        get_console().error(
            f"Invalid {option}: {value!r}", hint="Expected a base58-encoded public key"
        )
        sys.exit(1)


def parse_dependencies(specs: list[str] | None) -> list[Dependency]:
    """Parse ``name@version`` pairs; field rules are applied later by the registry."""
    deps = []
    for spec in specs or []:
        name, sep, version = spec.rpartition("@")
        if not sep:
            get_console().error(f"Invalid dependency {spec!r}", hint="Use name@version")
            sys.exit(1)
        deps.append(Dependency(name=name, version=version))
    return deps


def parse_event_id(value: str) -> EventId:
    try:
        return EventId(UUID(value))
    except ValueError:
        get_console().error(f"Invalid event id: {value!r}", hint="Expected a UUID")
        sys.exit(1)
