import re
from typing import ClassVar

from pydantic import field_validator

from pkgledger.domain.package.validation import check_version
from pkgledger.domain.shared.model.value import RootValueObject, ValueObject


class Dependency(ValueObject):
    """A (name, version) pair a package requires.

    Shape only; resolution is left to clients. Field rules are enforced by the
    validator so violations surface as InvalidDependencyName/Version.
    """

    name: str
    version: str

    def __str__(self) -> str:
        return f"{self.name}@{self.version}"


class Semver(RootValueObject[str]):
    """MAJOR.MINOR.PATCH version with numeric, component-wise ordering."""

    @field_validator("root")
    @classmethod
    def _validate(cls, v: str) -> str:
        kind = check_version(v)
        if kind is not None:
            raise ValueError(f"invalid Semver ({kind.value})")
        return v

    @property
    def parts(self) -> tuple[int, int, int]:
        major, minor, patch = self.root.split(".")
        return int(major), int(minor), int(patch)

    def __lt__(self, other: "Semver") -> bool:
        return self.parts < other.parts

    def __le__(self, other: "Semver") -> bool:
        return self.parts <= other.parts

    def __gt__(self, other: "Semver") -> bool:
        return self.parts > other.parts

    def __ge__(self, other: "Semver") -> bool:
        return self.parts >= other.parts


class Authority(RootValueObject[str]):
    """Identity allowed to extend or hand over a package: a base58 public key.

    Signatures are verified by the ledger before a transition reaches the
    registry; here the identity is only checked for shape.
    """

    _re: ClassVar[re.Pattern] = re.compile(
        r"[123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz]{32,44}"
    )

    @field_validator("root")
    @classmethod
    def _validate(cls, v: str) -> str:
        v = v.strip()
        if not cls._re.fullmatch(v):
            raise ValueError("invalid Authority (expected base58 public key)")
        return v
