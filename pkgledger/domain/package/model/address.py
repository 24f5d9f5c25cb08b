"""Deterministic storage addresses for package records.

A record's slot is the SHA-256 digest of a fixed domain tag followed by each
seed (name, version) as a 4-byte big-endian length prefix and its UTF-8 bytes.
The length prefixes make the encoding injective, so two different
``(name, version)`` pairs never hash the same input.

Each seed is capped at ``MAX_SEED_LENGTH`` bytes. The cap sits above the
validator's field maxima (32-byte names, 16-byte versions), so any transition
that validates its fields first never hits it.
"""

import hashlib
import re
from typing import ClassVar

from pydantic import field_validator

from pkgledger.domain.shared.error import AddressingError
from pkgledger.domain.shared.model.value import RootValueObject

ADDRESS_TAG = b"package"
MAX_SEED_LENGTH = 64


class PackageAddress(RootValueObject[str]):
    """Hex-encoded SHA-256 slot identifier."""

    _re: ClassVar[re.Pattern] = re.compile(r"[0-9a-f]{64}")

    @field_validator("root")
    @classmethod
    def _validate(cls, v: str) -> str:
        if not cls._re.fullmatch(v):
            raise ValueError("invalid PackageAddress (expected 64 hex chars)")
        return v


def _encode_seed(seed: str) -> bytes:
    raw = seed.encode("utf-8")
    if len(raw) > MAX_SEED_LENGTH:
        raise AddressingError(
            f"Max seed length exceeded ({len(raw)} > {MAX_SEED_LENGTH} bytes)"
        )
    return len(raw).to_bytes(4, "big") + raw


def derive_address(name: str, version: str) -> PackageAddress:
    """Map (name, version) to its storage slot.

    Raises:
        AddressingError: If either seed exceeds MAX_SEED_LENGTH bytes.
    """
    digest = hashlib.sha256(ADDRESS_TAG)
    digest.update(_encode_seed(name))
    digest.update(_encode_seed(version))
    return PackageAddress(digest.hexdigest())
