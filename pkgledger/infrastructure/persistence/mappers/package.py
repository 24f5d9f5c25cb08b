"""Row <-> PackageRecord mapping."""

from datetime import UTC, datetime
from typing import Any

from pkgledger.domain.package.model import Authority, Dependency, PackageRecord


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def record_to_row(record: PackageRecord) -> dict[str, Any]:
    return {
        "address": str(record.address),
        "name": record.name,
        "version": record.version,
        "authority": str(record.authority),
        "content_id": record.content_id,
        "description": record.description,
        "dependencies": [d.model_dump() for d in record.dependencies],
        "created_at": record.created_at,
    }


def row_to_record(row: Any) -> PackageRecord:
    return PackageRecord(
        name=row.name,
        version=row.version,
        authority=Authority(row.authority),
        content_id=row.content_id,
        description=row.description,
        dependencies=tuple(Dependency.model_validate(d) for d in row.dependencies),
        created_at=_as_utc(row.created_at),
    )
