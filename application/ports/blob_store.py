from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, BinaryIO, Protocol

if TYPE_CHECKING:
    from datetime import datetime


@dataclass(frozen=True)
class StoredBlob:
    key: str
    size_bytes: int
    sha256: str
    mime_type: str | None


@dataclass(frozen=True)
class BlobProperties:
    name: str
    """Path of the blob relative to its container."""

    size: int
    content_type: str | None = None
    last_modified: datetime | None = None
    etag: str | None = None


class BlobStore(Protocol):
    """Port for container-scoped blob persistence.

    Paths are container-relative and use ``/`` as separator.
    """

    def container_exists(self, container: str) -> bool: ...
    def create_container(self, container: str) -> None: ...
    def put_bytes(
        self,
        container: str,
        path: str,
        data: bytes,
        *,
        mime_type: str | None = None,
    ) -> StoredBlob: ...
    def put_stream(
        self,
        container: str,
        path: str,
        stream: BinaryIO,
        *,
        mime_type: str | None = None,
    ) -> StoredBlob: ...
    def get_bytes(self, container: str, path: str) -> bytes:
        """Return the blob content. Raises ``BlobNotFoundError`` when absent."""
        ...

    def get_properties(self, container: str, path: str) -> BlobProperties:
        """Return size, content type and timestamps. Raises ``BlobNotFoundError`` when absent."""
        ...

    def exists(self, container: str, path: str) -> bool: ...
    def delete(self, container: str, path: str) -> bool:
        """Delete the blob; return False when it did not exist."""
        ...

    def copy(self, container: str, source: str, destination: str) -> BlobProperties:
        """Copy a blob inside a container, keeping its content type."""
        ...

    def list_blobs(self, container: str, prefix: str | None = None) -> list[BlobProperties]:
        """Flat listing of every blob under ``prefix``, sorted by name."""
        ...

    def blob_url(self, container: str, path: str) -> str: ...
