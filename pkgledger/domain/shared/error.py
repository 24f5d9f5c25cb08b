"""Error hierarchy for pkgledger.

Error layers:
- RegistryError: Base class for all pkgledger errors
- DomainError: Rejected transitions. Deterministic in the input and current state,
  never retried by the core.
- InfrastructureError: Substrate failures (storage unavailable, misconfiguration)

Every error carries a ``code``. For field validation the code is the
``ErrorKind`` value, so callers can match on the verbatim kind name.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Named rejection kinds reported by the field validator and the state machine."""

    NAME_EMPTY = "NameEmpty"
    NAME_TOO_LONG = "NameTooLong"
    INVALID_NAME_FORMAT = "InvalidNameFormat"
    VERSION_EMPTY = "VersionEmpty"
    VERSION_TOO_LONG = "VersionTooLong"
    INVALID_VERSION_FORMAT = "InvalidVersionFormat"
    CID_EMPTY = "CidEmpty"
    CID_TOO_LONG = "CidTooLong"
    INVALID_CID_FORMAT = "InvalidCidFormat"
    DESCRIPTION_TOO_LONG = "DescriptionTooLong"
    TOO_MANY_DEPENDENCIES = "TooManyDependencies"
    INVALID_DEPENDENCY_NAME = "InvalidDependencyName"
    INVALID_DEPENDENCY_VERSION = "InvalidDependencyVersion"
    SAME_CID_AS_EXISTING = "SameCidAsExisting"
    VERSION_NOT_GREATER = "VersionNotGreater"
    UNAUTHORIZED_AUTHORITY = "UnauthorizedAuthority"
    ALREADY_EXISTS = "AlreadyExists"
    NOT_FOUND = "NotFound"
    MAX_SEED_LENGTH_EXCEEDED = "MaxSeedLengthExceeded"

    def __str__(self) -> str:
        return self.value


class RegistryError(Exception):
    """Base class for all pkgledger errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (rejected transitions)
# =============================================================================


class DomainError(RegistryError):
    """Base class for domain/business errors."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, code: str, field: str | None = None) -> None:
        super().__init__(message, code=code)
        self.field = field


class FieldValidationError(ValidationError):
    """A record field violated one of the fixed policy rules."""

    def __init__(self, kind: ErrorKind, field: str, message: str | None = None) -> None:
        super().__init__(message or f"{field}: {kind.value}", code=kind.value, field=field)
        self.kind = kind


class AuthorizationError(DomainError):
    """Signer is not the stored authority of the record."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message, code=code or ErrorKind.UNAUTHORIZED_AUTHORITY.value)


class VersionOrderError(DomainError):
    """New version is not strictly greater than the current one."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorKind.VERSION_NOT_GREATER.value)


class ConflictError(DomainError):
    """A record already exists at the target address."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorKind.ALREADY_EXISTS.value)


class NotFoundError(DomainError):
    """No record exists at the source address."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorKind.NOT_FOUND.value)


class AddressingError(DomainError):
    """Input exceeds the addressing scheme's per-seed length ceiling."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorKind.MAX_SEED_LENGTH_EXCEEDED.value)


# =============================================================================
# Infrastructure Errors (substrate failures)
# =============================================================================


class InfrastructureError(RegistryError):
    """Base class for infrastructure/system errors."""


class StorageUnavailableError(InfrastructureError):
    """Storage backend (database) is unavailable."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
