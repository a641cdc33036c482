"""Tests for domain services."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from domain.error_messages import ErrorMessages
from domain.exceptions import ValidationError
from domain.services.blob_catalog import enrich_blob, format_file_size, summarize_blobs
from domain.services.file_validation_service import FileValidationService


class TestFormatFileSize:
    @pytest.mark.parametrize(
        ("size_bytes", "expected"),
        [
            (0, "0 B"),
            (512, "512 B"),
            (1024, "1 KB"),
            (1536, "1.5 KB"),
            (1048576, "1 MB"),
            (1288490189, "1.2 GB"),
            (1024**5, "1024 TB"),
        ],
    )
    def test_format_file_size(self, size_bytes: int, expected: str) -> None:
        assert format_file_size(size_bytes) == expected


class TestEnrichBlob:
    def test_splits_name_into_parts(self) -> None:
        modified = datetime(2024, 1, 2, tzinfo=UTC)
        info = enrich_blob(
            name="documentos/2024/reporte.final.pdf",
            size=2048,
            content_type="application/pdf",
            last_modified=modified,
            etag="abc",
        )
        assert info.file_name == "reporte.final.pdf"
        assert info.directory == "documentos/2024"
        assert info.file_extension == ".pdf"
        assert info.size_formatted == "2 KB"
        assert info.last_modified == modified
        assert info.etag == "abc"

    def test_root_blob_without_extension(self) -> None:
        info = enrich_blob(name="LEEME", size=0)
        assert info.directory is None
        assert info.file_extension is None
        assert info.size_formatted == "0 B"
        assert info.last_modified is not None

    def test_summarize_blobs_totals(self) -> None:
        summary = summarize_blobs([enrich_blob("a.txt", 1024), enrich_blob("b/c.txt", 512)])
        assert summary.total_blobs == 2
        assert summary.total_size == 1536
        assert summary.total_size_formatted == "1.5 KB"


class TestFileValidationService:
    """Test FileValidationService."""

    def setup_method(self) -> None:
        self.service = FileValidationService()

    def test_valid_base64_upload(self) -> None:
        self.service.validate_base64_upload("application/pdf", "documento.pdf")

    def test_mime_type_is_case_insensitive(self) -> None:
        self.service.validate_mime_type_and_extension("Application/PDF", "documento.pdf")

    def test_jpeg_accepts_jpg_extension(self) -> None:
        self.service.validate_base64_upload("image/jpeg", "foto.JPG")

    def test_blob_name_without_extension(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            self.service.validate_blob_name_extension("documento")
        assert str(exc_info.value).startswith(ErrorMessages.FILE_EXTENSION_MISSING.value)

    def test_blob_name_with_disallowed_extension(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            self.service.validate_blob_name_extension("programa.exe")
        assert str(exc_info.value).startswith(ErrorMessages.FILE_EXTENSION_NOT_ALLOWED.value)

    def test_unknown_mime_type(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            self.service.validate_mime_type_and_extension("application/x-msdownload", "doc.pdf")
        assert str(exc_info.value).startswith(ErrorMessages.MIME_TYPE_NOT_ALLOWED.value)

    def test_mime_type_extension_mismatch(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            self.service.validate_base64_upload("image/png", "documento.pdf")
        message = str(exc_info.value)
        assert message.startswith(ErrorMessages.FILE_EXTENSION_MISMATCH.value)
        assert ".png" in message

    def test_multipart_original_and_blob_extensions_must_match(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            self.service.validate_multipart_upload(
                original_file_name="scan.png",
                mime_type="application/pdf",
                blob_name="documento.pdf",
            )
        assert "'.png'" in str(exc_info.value)

    def test_multipart_original_without_extension(self) -> None:
        with pytest.raises(ValidationError):
            self.service.validate_multipart_upload(
                original_file_name="scan",
                mime_type="application/pdf",
                blob_name="documento.pdf",
            )

    def test_valid_multipart_upload(self) -> None:
        self.service.validate_multipart_upload(
            original_file_name="Informe.PDF",
            mime_type="application/pdf",
            blob_name="informe.pdf",
        )
