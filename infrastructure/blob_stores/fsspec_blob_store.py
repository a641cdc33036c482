from __future__ import annotations

import hashlib
import io
import json
import mimetypes
import posixpath
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, BinaryIO

import fsspec
import structlog

from application.ports.blob_store import BlobProperties, BlobStore, StoredBlob
from domain.error_messages import ErrorMessages
from domain.exceptions import BlobNotFoundError, ContainerNotFoundError, InfrastructureError
from domain.value_objects.blob_path import normalize_blob_path
from domain.value_objects.mime_type import MimeType

if TYPE_CHECKING:
    from fsspec import AbstractFileSystem

logger = structlog.get_logger()

_CHUNK_SIZE = 1024 * 1024
_METADATA_DIR = ".metadata"


class FsspecBlobStore(BlobStore):
    """Blob store over any fsspec filesystem.

    Container ``c`` and path ``p`` live at ``{base_url}/c/p``. Content type and
    checksum are kept in a JSON sidecar under ``{base_url}/.metadata/c/p.json`` so
    they survive on backends without native object metadata.
    """

    def __init__(
        self,
        base_url: str,
        *,
        storage_options: dict | None = None,
        public_base_url: str | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.storage_options = storage_options or {}
        self.public_base_url = (public_base_url or self.base_url).rstrip("/")
        self.fs: AbstractFileSystem
        self.fs, root = fsspec.core.url_to_fs(self.base_url, **self.storage_options)
        self.root = root.rstrip("/")

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    @staticmethod
    def _container_name(container: str) -> str:
        name = container.strip().strip("/")
        if not name or "/" in name or name.startswith("."):
            msg = f"{ErrorMessages.CONTAINER_NOT_FOUND} Contenedor: '{container}'"
            raise ContainerNotFoundError(msg)
        return name

    def _container_root(self, container: str) -> str:
        return f"{self.root}/{self._container_name(container)}"

    def _blob_path(self, container: str, path: str) -> str:
        return f"{self._container_root(container)}/{normalize_blob_path(path)}"

    def _metadata_path(self, container: str, path: str) -> str:
        name = self._container_name(container)
        return f"{self.root}/{_METADATA_DIR}/{name}/{normalize_blob_path(path)}.json"

    def _ensure_parent(self, full_path: str) -> None:
        self.fs.makedirs(posixpath.dirname(full_path), exist_ok=True)

    def _require_container(self, container: str) -> str:
        root = self._container_root(container)
        if not self.fs.isdir(root):
            msg = f"{ErrorMessages.CONTAINER_NOT_FOUND} Contenedor: '{container}'"
            raise ContainerNotFoundError(msg)
        return root

    # ------------------------------------------------------------------
    # Metadata sidecar
    # ------------------------------------------------------------------

    def _write_metadata(self, container: str, path: str, metadata: dict[str, Any]) -> None:
        meta_path = self._metadata_path(container, path)
        self._ensure_parent(meta_path)
        with self.fs.open(meta_path, "w") as out:
            json.dump(metadata, out)

    def _read_metadata(self, container: str, path: str) -> dict[str, Any]:
        meta_path = self._metadata_path(container, path)
        try:
            with self.fs.open(meta_path, "r") as f:
                return json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError):
            logger.warning("blob_metadata_unreadable", container=container, path=path)
            return {}

    def _drop_metadata(self, container: str, path: str) -> None:
        meta_path = self._metadata_path(container, path)
        if self.fs.exists(meta_path):
            self.fs.rm(meta_path)

    def _discard(self, full_path: str) -> None:
        try:
            if self.fs.isfile(full_path):
                self.fs.rm(full_path)
        except OSError as exc:
            logger.warning("blob_partial_write_not_removed", path=full_path, error=str(exc))

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------

    def container_exists(self, container: str) -> bool:
        try:
            return self.fs.isdir(self._container_root(container))
        except ContainerNotFoundError:
            return False

    def create_container(self, container: str) -> None:
        self.fs.makedirs(self._container_root(container), exist_ok=True)

    # ------------------------------------------------------------------
    # Blobs
    # ------------------------------------------------------------------

    def put_stream(
        self,
        container: str,
        path: str,
        stream: BinaryIO,
        *,
        mime_type: str | None = None,
    ) -> StoredBlob:
        self._require_container(container)
        key = normalize_blob_path(path)
        full_path = self._blob_path(container, key)

        h = hashlib.sha256()
        size = 0

        try:
            self._ensure_parent(full_path)
            with self.fs.open(full_path, "wb") as out:
                while True:
                    chunk = stream.read(_CHUNK_SIZE)
                    if not chunk:
                        break
                    out.write(chunk)
                    h.update(chunk)
                    size += len(chunk)
            sha256 = h.hexdigest()
            self._write_metadata(container, key, {"content_type": mime_type, "sha256": sha256})
        except OSError as exc:
            self._discard(full_path)
            msg = f"{ErrorMessages.STORAGE_UNAVAILABLE} {exc}"
            raise InfrastructureError(msg) from exc

        return StoredBlob(key=key, size_bytes=size, sha256=sha256, mime_type=mime_type)

    def put_bytes(
        self,
        container: str,
        path: str,
        data: bytes,
        *,
        mime_type: str | None = None,
    ) -> StoredBlob:
        return self.put_stream(container, path, io.BytesIO(data), mime_type=mime_type)

    def get_bytes(self, container: str, path: str) -> bytes:
        full_path = self._blob_path(container, path)
        try:
            with self.fs.open(full_path, "rb") as f:
                return f.read()
        except (FileNotFoundError, IsADirectoryError) as exc:
            msg = f"{ErrorMessages.BLOB_NOT_FOUND} Ruta: '{path}'"
            raise BlobNotFoundError(msg) from exc
        except OSError as exc:
            msg = f"{ErrorMessages.STORAGE_UNAVAILABLE} {exc}"
            raise InfrastructureError(msg) from exc

    def get_properties(self, container: str, path: str) -> BlobProperties:
        key = normalize_blob_path(path)
        full_path = self._blob_path(container, key)
        try:
            info = self.fs.info(full_path)
        except FileNotFoundError as exc:
            msg = f"{ErrorMessages.BLOB_NOT_FOUND} Ruta: '{path}'"
            raise BlobNotFoundError(msg) from exc
        if info.get("type") == "directory":
            msg = f"{ErrorMessages.BLOB_NOT_FOUND} Ruta: '{path}'"
            raise BlobNotFoundError(msg)
        return self._to_properties(container, key, info)

    def exists(self, container: str, path: str) -> bool:
        return self.fs.isfile(self._blob_path(container, path))

    def delete(self, container: str, path: str) -> bool:
        key = normalize_blob_path(path)
        full_path = self._blob_path(container, key)
        if not self.fs.isfile(full_path):
            return False
        try:
            self.fs.rm(full_path)
        except FileNotFoundError:
            return False
        self._drop_metadata(container, key)
        return True

    def copy(self, container: str, source: str, destination: str) -> BlobProperties:
        source_key = normalize_blob_path(source)
        destination_key = normalize_blob_path(destination)
        source_path = self._blob_path(container, source_key)
        destination_path = self._blob_path(container, destination_key)

        if not self.fs.isfile(source_path):
            msg = f"{ErrorMessages.BLOB_NOT_FOUND} Ruta: '{source}'"
            raise BlobNotFoundError(msg)

        try:
            self._ensure_parent(destination_path)
            self.fs.copy(source_path, destination_path)
            metadata = self._read_metadata(container, source_key)
            if metadata:
                self._write_metadata(container, destination_key, metadata)
        except OSError as exc:
            msg = f"{ErrorMessages.STORAGE_UNAVAILABLE} {exc}"
            raise InfrastructureError(msg) from exc
        return self.get_properties(container, destination_key)

    def list_blobs(self, container: str, prefix: str | None = None) -> list[BlobProperties]:
        root = self._require_container(container)
        found = self.fs.find(root, detail=True)

        blobs = []
        for full_path, info in sorted(found.items()):
            key = self._relative_key(root, full_path)
            if prefix and not key.startswith(prefix):
                continue
            blobs.append(self._to_properties(container, key, info))
        return blobs

    def blob_url(self, container: str, path: str) -> str:
        name = self._container_name(container)
        return f"{self.public_base_url}/{name}/{normalize_blob_path(path)}"

    # ------------------------------------------------------------------
    # Info translation
    # ------------------------------------------------------------------

    def _relative_key(self, root: str, full_path: str) -> str:
        stripped = self.fs._strip_protocol(full_path)  # noqa: SLF001
        return stripped[len(root) :].lstrip("/") if stripped.startswith(root) else stripped

    def _to_properties(self, container: str, key: str, info: dict[str, Any]) -> BlobProperties:
        metadata = self._read_metadata(container, key)
        size = int(info.get("size") or 0)
        last_modified = _last_modified(info)
        content_type = (
            metadata.get("content_type")
            or info.get("ContentType")
            or info.get("content_type")
            or mimetypes.guess_type(key)[0]
            or MimeType.OCTET_STREAM.value
        )
        etag = info.get("ETag") or info.get("etag") or metadata.get("sha256")
        if not etag:
            stamp = last_modified.timestamp() if last_modified else ""
            etag = hashlib.md5(f"{key}:{size}:{stamp}".encode(), usedforsecurity=False).hexdigest()
        return BlobProperties(
            name=key,
            size=size,
            content_type=content_type,
            last_modified=last_modified,
            etag=str(etag).strip('"'),
        )


def _last_modified(info: dict[str, Any]) -> datetime | None:
    for field in ("LastModified", "last_modified", "mtime", "created"):
        value = info.get(field)
        if isinstance(value, datetime):
            return value if value.tzinfo else value.replace(tzinfo=UTC)
        if isinstance(value, int | float):
            return datetime.fromtimestamp(value, UTC)
    return None
