"""Tests for the fsspec blob store."""

from __future__ import annotations

import hashlib
import io
from pathlib import Path

import pytest

from domain.exceptions import (
    BlobNotFoundError,
    ContainerNotFoundError,
    InfrastructureError,
    ValidationError,
)
from domain.value_objects.mime_type import MimeType
from infrastructure.blob_stores.fsspec_blob_store import FsspecBlobStore
from tests.mocks import SidecarFailingBlobStore


class TestFsspecBlobStore:
    """Test FsspecBlobStore over the local filesystem."""

    def test_put_stream_returns_checksum(
        self,
        blob_store: FsspecBlobStore,
        pdf_bytes: bytes,
    ) -> None:
        stored = blob_store.put_stream(
            "uploads",
            "/documentos//a.pdf",
            io.BytesIO(pdf_bytes),
            mime_type="application/pdf",
        )

        assert stored.key == "documentos/a.pdf"
        assert stored.size_bytes == len(pdf_bytes)
        assert stored.sha256 == hashlib.sha256(pdf_bytes).hexdigest()
        assert stored.mime_type == "application/pdf"

    def test_blob_lives_under_container_directory(
        self,
        blob_store: FsspecBlobStore,
        tmp_path: Path,
    ) -> None:
        blob_store.put_bytes("uploads", "a/b.txt", b"hola", mime_type="text/plain")

        assert (tmp_path / "blobs" / "uploads" / "a" / "b.txt").read_bytes() == b"hola"

    def test_properties_use_stored_content_type(self, blob_store: FsspecBlobStore) -> None:
        blob_store.put_bytes("uploads", "datos.bin", b"1234", mime_type="application/pdf")

        properties = blob_store.get_properties("uploads", "datos.bin")

        assert properties.name == "datos.bin"
        assert properties.size == 4
        assert properties.content_type == "application/pdf"
        assert properties.etag == hashlib.sha256(b"1234").hexdigest()
        assert properties.last_modified is not None

    def test_properties_guess_content_type_without_metadata(
        self,
        blob_store: FsspecBlobStore,
        tmp_path: Path,
    ) -> None:
        (tmp_path / "blobs" / "uploads" / "manual.txt").write_bytes(b"x")

        properties = blob_store.get_properties("uploads", "manual.txt")

        assert properties.content_type == "text/plain"
        assert properties.etag

    def test_missing_blob(self, blob_store: FsspecBlobStore) -> None:
        assert not blob_store.exists("uploads", "nada.pdf")
        with pytest.raises(BlobNotFoundError):
            blob_store.get_bytes("uploads", "nada.pdf")
        with pytest.raises(BlobNotFoundError):
            blob_store.get_properties("uploads", "nada.pdf")

    def test_directory_is_not_a_blob(self, blob_store: FsspecBlobStore) -> None:
        blob_store.put_bytes("uploads", "carpeta/a.txt", b"a", mime_type="text/plain")

        assert not blob_store.exists("uploads", "carpeta")
        with pytest.raises(BlobNotFoundError):
            blob_store.get_properties("uploads", "carpeta")

    @pytest.mark.parametrize("path", ["", "/", "../fuera.txt", "a/./b.txt"])
    def test_invalid_paths_are_rejected(self, blob_store: FsspecBlobStore, path: str) -> None:
        with pytest.raises(ValidationError):
            blob_store.put_bytes("uploads", path, b"x")

    def test_container_lifecycle(self, blob_store: FsspecBlobStore) -> None:
        assert blob_store.container_exists("uploads")
        assert not blob_store.container_exists("facturas")

        blob_store.create_container("facturas")

        assert blob_store.container_exists("facturas")

    @pytest.mark.parametrize("name", ["", ".metadata", "a/b"])
    def test_invalid_container_names(self, blob_store: FsspecBlobStore, name: str) -> None:
        assert not blob_store.container_exists(name)
        with pytest.raises(ContainerNotFoundError):
            blob_store.create_container(name)

    def test_put_into_missing_container(self, blob_store: FsspecBlobStore) -> None:
        with pytest.raises(ContainerNotFoundError):
            blob_store.put_bytes("facturas", "a.pdf", b"x")

    def test_delete(self, blob_store: FsspecBlobStore) -> None:
        blob_store.put_bytes("uploads", "a.txt", b"a", mime_type="text/plain")

        assert blob_store.delete("uploads", "a.txt") is True
        assert not blob_store.exists("uploads", "a.txt")
        assert blob_store.delete("uploads", "a.txt") is False

    def test_copy_carries_metadata(self, blob_store: FsspecBlobStore) -> None:
        blob_store.put_bytes("uploads", "origen/a.dat", b"abc", mime_type="application/pdf")

        properties = blob_store.copy("uploads", "origen/a.dat", "destino/profundo/b.dat")

        assert properties.name == "destino/profundo/b.dat"
        assert properties.content_type == "application/pdf"
        assert blob_store.get_bytes("uploads", "origen/a.dat") == b"abc"

    def test_copy_missing_source(self, blob_store: FsspecBlobStore) -> None:
        with pytest.raises(BlobNotFoundError):
            blob_store.copy("uploads", "nada.pdf", "otro.pdf")

    def test_list_blobs_sorted_and_filtered(self, blob_store: FsspecBlobStore) -> None:
        blob_store.put_bytes("uploads", "z.txt", b"z", mime_type="text/plain")
        blob_store.put_bytes("uploads", "docs/b.pdf", b"bb", mime_type="application/pdf")
        blob_store.put_bytes("uploads", "docs/a.pdf", b"a", mime_type="application/pdf")
        blob_store.put_bytes("uploads", "docs2/c.pdf", b"c", mime_type="application/pdf")

        everything = blob_store.list_blobs("uploads")
        docs = blob_store.list_blobs("uploads", "docs/")

        assert [blob.name for blob in everything] == [
            "docs/a.pdf",
            "docs/b.pdf",
            "docs2/c.pdf",
            "z.txt",
        ]
        assert [blob.name for blob in docs] == ["docs/a.pdf", "docs/b.pdf"]
        assert docs[1].size == 2

    def test_list_blobs_missing_container(self, blob_store: FsspecBlobStore) -> None:
        with pytest.raises(ContainerNotFoundError):
            blob_store.list_blobs("facturas")

    def test_blob_url_uses_public_base(self, blob_store: FsspecBlobStore) -> None:
        assert blob_store.blob_url("uploads", "docs/a.pdf") == (
            "https://storage.example.com/uploads/docs/a.pdf"
        )

    def test_blob_url_defaults_to_base_url(self, tmp_path: Path) -> None:
        store = FsspecBlobStore(base_url=f"file://{tmp_path}/")

        assert store.blob_url("uploads", "a.pdf") == f"file://{tmp_path}/uploads/a.pdf"

    def test_memory_backend(self) -> None:
        store = FsspecBlobStore(base_url="memory://blob-store-test")
        store.create_container("uploads")
        store.put_bytes("uploads", "a/b.txt", b"memoria", mime_type="text/plain")

        assert store.get_bytes("uploads", "a/b.txt") == b"memoria"
        assert [blob.name for blob in store.list_blobs("uploads")] == ["a/b.txt"]
        assert store.delete("uploads", "a/b.txt")

    def test_container_name_is_trimmed_for_metadata(self, blob_store: FsspecBlobStore) -> None:
        blob_store.put_bytes(" uploads ", "datos.bin", b"1234", mime_type="application/pdf")

        properties = blob_store.get_properties("uploads", "datos.bin")

        assert properties.content_type == "application/pdf"
        assert blob_store.blob_url(" uploads", "datos.bin") == (
            "https://storage.example.com/uploads/datos.bin"
        )

    def test_default_content_type_is_octet_stream(
        self,
        blob_store: FsspecBlobStore,
        tmp_path: Path,
    ) -> None:
        (tmp_path / "blobs" / "uploads" / "datos.zzzunknown").write_bytes(b"x")

        properties = blob_store.get_properties("uploads", "datos.zzzunknown")

        assert properties.content_type == MimeType.OCTET_STREAM


class TestFsspecBlobStoreFailures:
    def test_sidecar_failure_is_infrastructure_error(self, tmp_path: Path) -> None:
        store = SidecarFailingBlobStore(base_url=f"file://{tmp_path / 'blobs'}")
        store.create_container("uploads")

        with pytest.raises(InfrastructureError):
            store.put_bytes("uploads", "docs/a.pdf", b"%PDF", mime_type="application/pdf")

        assert not store.exists("uploads", "docs/a.pdf")

    def test_write_below_existing_blob_is_infrastructure_error(
        self,
        blob_store: FsspecBlobStore,
    ) -> None:
        blob_store.put_bytes("uploads", "informe.pdf", b"%PDF", mime_type="application/pdf")

        with pytest.raises(InfrastructureError):
            blob_store.put_bytes("uploads", "informe.pdf/documento.pdf", b"%PDF")

        assert blob_store.get_bytes("uploads", "informe.pdf") == b"%PDF"
