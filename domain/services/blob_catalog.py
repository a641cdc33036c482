"""Helpers deriving display metadata for blob listings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import PurePosixPath

from domain.value_objects.blob_info import BlobInfo

_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


def format_file_size(size_bytes: int) -> str:
    """Render a byte count with 1024-based units and at most two decimals.

    >>> format_file_size(1536)
    '1.5 KB'
    """
    if size_bytes <= 0:
        return "0 B"

    value = float(size_bytes)
    exponent = 0
    while value >= 1024 and exponent < len(_SIZE_UNITS) - 1:
        value /= 1024
        exponent += 1
    return f"{round(value, 2):g} {_SIZE_UNITS[exponent]}"


def enrich_blob(
    name: str,
    size: int,
    content_type: str | None = None,
    last_modified: datetime | None = None,
    etag: str | None = None,
) -> BlobInfo:
    """Build a BlobInfo, splitting ``name`` into file name, directory and extension."""
    path = PurePosixPath(name)
    file_name = path.name
    directory = None if str(path.parent) == "." else str(path.parent)
    extension = file_name[file_name.rfind(".") :] if "." in file_name else None

    return BlobInfo(
        name=name,
        file_name=file_name,
        directory=directory,
        file_extension=extension,
        size=size,
        size_formatted=format_file_size(size),
        content_type=content_type,
        last_modified=last_modified or datetime.now(UTC),
        etag=etag,
    )


@dataclass(frozen=True)
class BlobSummary:
    blobs: list[BlobInfo]
    total_size: int

    @property
    def total_blobs(self) -> int:
        return len(self.blobs)

    @property
    def total_size_formatted(self) -> str:
        return format_file_size(self.total_size)


def summarize_blobs(blobs: list[BlobInfo]) -> BlobSummary:
    return BlobSummary(blobs=blobs, total_size=sum(blob.size for blob in blobs))
