"""Shared test fixtures and configuration."""

from __future__ import annotations

import base64
from pathlib import Path

import pytest

from application.dtos.blob_dtos import MoveBlobRequest, UploadBlobBase64Request
from infrastructure.blob_stores.fsspec_blob_store import FsspecBlobStore

PDF_BYTES = b"%PDF-1.4\n1 0 obj<<>>endobj\ntrailer<<>>\n%%EOF\n"


@pytest.fixture
def pdf_bytes() -> bytes:
    """Return a tiny PDF-looking payload."""
    return PDF_BYTES


@pytest.fixture
def pdf_base64() -> str:
    """Return the sample PDF payload Base64-encoded."""
    return base64.b64encode(PDF_BYTES).decode("ascii")


@pytest.fixture
def blob_store(tmp_path: Path) -> FsspecBlobStore:
    """Create a file-backed blob store with an ``uploads`` container."""
    store = FsspecBlobStore(
        base_url=f"file://{tmp_path / 'blobs'}",
        public_base_url="https://storage.example.com",
    )
    store.create_container("uploads")
    return store


@pytest.fixture
def sample_move_request() -> MoveBlobRequest:
    """Create a MoveBlobRequest with the documented example values."""
    return MoveBlobRequest(
        containerName="uploads",
        sourceBlobPath="temporal/documento.pdf",
        destinationBlobPath="documentos/2024/documento-final.pdf",
    )


@pytest.fixture
def sample_upload_request(pdf_base64: str) -> UploadBlobBase64Request:
    """Create an UploadBlobBase64Request for a PDF stored under a directory."""
    return UploadBlobBase64Request(
        containerName="uploads",
        blobName="documento.pdf",
        directory="documentos/2024",
        fileBase64=pdf_base64,
        mimeType="application/pdf",
    )
