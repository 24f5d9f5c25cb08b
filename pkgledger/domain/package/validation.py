"""Field validation for package records.

Each ``check_*`` function is a pure predicate: it returns the first violated
``ErrorKind`` or ``None`` when the value is admissible. ``validate_fields``
composes them in a fixed order and raises on the first failure, before any
store access happens.
"""

import re
from collections.abc import Sequence
from typing import Protocol

from pkgledger.domain.shared.error import ErrorKind, FieldValidationError

MAX_NAME_LENGTH = 32
MAX_VERSION_LENGTH = 16
MAX_CID_LENGTH = 64
MAX_DESCRIPTION_LENGTH = 256
MAX_DEPENDENCIES = 10

NAME_PATTERN = re.compile(r"[a-z0-9][a-z0-9-]*")
VERSION_PATTERN = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+")
# CIDv0 (base58 multihash, "Qm...") or CIDv1 (base32, "bafy...")
CID_PATTERN = re.compile(r"(Qm|bafy)[A-Za-z0-9]+")


class DependencyLike(Protocol):
    name: str
    version: str


def _byte_len(value: str) -> int:
    return len(value.encode("utf-8"))


def check_name(name: str) -> ErrorKind | None:
    if not name:
        return ErrorKind.NAME_EMPTY
    if _byte_len(name) > MAX_NAME_LENGTH:
        return ErrorKind.NAME_TOO_LONG
    if not NAME_PATTERN.fullmatch(name):
        return ErrorKind.INVALID_NAME_FORMAT
    return None


def check_version(version: str) -> ErrorKind | None:
    if not version:
        return ErrorKind.VERSION_EMPTY
    if _byte_len(version) > MAX_VERSION_LENGTH:
        return ErrorKind.VERSION_TOO_LONG
    if not VERSION_PATTERN.fullmatch(version):
        return ErrorKind.INVALID_VERSION_FORMAT
    return None


def check_content_id(content_id: str) -> ErrorKind | None:
    if not content_id:
        return ErrorKind.CID_EMPTY
    if _byte_len(content_id) > MAX_CID_LENGTH:
        return ErrorKind.CID_TOO_LONG
    if not CID_PATTERN.fullmatch(content_id):
        return ErrorKind.INVALID_CID_FORMAT
    return None


def check_description(description: str) -> ErrorKind | None:
    if _byte_len(description) > MAX_DESCRIPTION_LENGTH:
        return ErrorKind.DESCRIPTION_TOO_LONG
    return None


def check_dependencies(dependencies: Sequence[DependencyLike]) -> ErrorKind | None:
    if len(dependencies) > MAX_DEPENDENCIES:
        return ErrorKind.TOO_MANY_DEPENDENCIES
    for dep in dependencies:
        if check_name(dep.name) is not None:
            return ErrorKind.INVALID_DEPENDENCY_NAME
        if check_version(dep.version) is not None:
            return ErrorKind.INVALID_DEPENDENCY_VERSION
    return None


def validate_fields(
    name: str,
    version: str,
    content_id: str,
    description: str,
    dependencies: Sequence[DependencyLike],
) -> None:
    """Validate every field of a new record.

    Raises:
        FieldValidationError: On the first violated rule, carrying its kind.
    """
    checks = (
        ("name", lambda: check_name(name)),
        ("version", lambda: check_version(version)),
        ("content_id", lambda: check_content_id(content_id)),
        ("description", lambda: check_description(description)),
        ("dependencies", lambda: check_dependencies(dependencies)),
    )
    for field, check in checks:
        kind = check()
        if kind is not None:
            raise FieldValidationError(kind, field)
