"""Domain service checking blob names, file extensions and MIME types before upload."""

from __future__ import annotations

from domain.error_messages import ErrorMessages
from domain.exceptions import ValidationError
from domain.value_objects.blob_path import file_extension
from domain.value_objects.mime_type import MIME_TYPE_EXTENSIONS, MimeType, allowed_extensions


class FileValidationService:
    """Validate that uploaded files carry an accepted extension and a coherent MIME type.

    All checks raise ``ValidationError`` whose message starts with the matching
    ``ErrorMessages`` text followed by a detail sentence.
    """

    @staticmethod
    def validate_mime_type_and_extension(mime_type: str, file_name: str) -> None:
        """Check that the extension of ``file_name`` is valid for ``mime_type``."""
        extension = file_extension(file_name)
        if not extension:
            msg = (
                f"{ErrorMessages.FILE_EXTENSION_MISSING} "
                f"El archivo '{file_name}' debe tener una extensión válida."
            )
            raise ValidationError(msg)

        try:
            normalized = MimeType(mime_type.lower())
        except ValueError:
            normalized = None

        valid_extensions = MIME_TYPE_EXTENSIONS.get(normalized) if normalized else None
        if not valid_extensions:
            msg = f"{ErrorMessages.MIME_TYPE_NOT_ALLOWED} Tipo MIME no soportado: {mime_type}"
            raise ValidationError(msg)

        if extension not in valid_extensions:
            msg = (
                f"{ErrorMessages.FILE_EXTENSION_MISMATCH} La extensión '{extension}' no coincide "
                f"con el tipo MIME '{mime_type}'. "
                f"Extensiones válidas: {', '.join(valid_extensions)}"
            )
            raise ValidationError(msg)

    @staticmethod
    def validate_blob_name_extension(blob_name: str) -> None:
        """Check that ``blob_name`` has one of the accepted extensions."""
        extension = file_extension(blob_name)
        if not extension:
            msg = (
                f"{ErrorMessages.FILE_EXTENSION_MISSING} "
                f"El nombre del blob '{blob_name}' debe incluir una extensión de archivo."
            )
            raise ValidationError(msg)

        valid_extensions = allowed_extensions()
        if extension not in valid_extensions:
            msg = (
                f"{ErrorMessages.FILE_EXTENSION_NOT_ALLOWED} La extensión '{extension}' no está "
                f"permitida. Extensiones válidas: {', '.join(valid_extensions)}"
            )
            raise ValidationError(msg)

    @staticmethod
    def validate_file_extension_match(original_file_name: str, blob_name: str) -> None:
        """Check that the uploaded file and the target blob share the same extension."""
        original_extension = file_extension(original_file_name)
        blob_extension = file_extension(blob_name)

        if not original_extension:
            msg = (
                f"{ErrorMessages.FILE_EXTENSION_MISSING} "
                f"El archivo original '{original_file_name}' debe tener una extensión."
            )
            raise ValidationError(msg)

        if not blob_extension:
            msg = (
                f"{ErrorMessages.FILE_EXTENSION_MISSING} "
                f"El nombre del blob '{blob_name}' debe incluir una extensión."
            )
            raise ValidationError(msg)

        if original_extension != blob_extension:
            msg = (
                f"{ErrorMessages.FILE_EXTENSION_MISMATCH} La extensión del archivo original "
                f"'{original_extension}' no coincide con la extensión del blob '{blob_extension}'."
            )
            raise ValidationError(msg)

    def validate_multipart_upload(
        self,
        original_file_name: str,
        mime_type: str,
        blob_name: str,
    ) -> None:
        self.validate_blob_name_extension(blob_name)
        self.validate_file_extension_match(original_file_name, blob_name)
        self.validate_mime_type_and_extension(mime_type, blob_name)

    def validate_base64_upload(self, mime_type: str, blob_name: str) -> None:
        self.validate_blob_name_extension(blob_name)
        self.validate_mime_type_and_extension(mime_type, blob_name)
