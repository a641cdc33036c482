import base64
import binascii
from typing import BinaryIO

import structlog
from returns.result import Failure, Result, Success

from application.dtos.blob_dtos import (
    BlobListResponse,
    DeleteBlobRequest,
    DeleteBlobResponse,
    DownloadBlobBase64Response,
    DownloadBlobRequest,
    DownloadedBlob,
    ListBlobsRequest,
    UploadBlobBase64Request,
    UploadBlobRequest,
    UploadBlobResponse,
)
from application.dtos.errors import AppError
from application.ports.blob_store import BlobStore
from domain.error_messages import ErrorMessages
from domain.exceptions import (
    BlobNotFoundError,
    ContainerNotFoundError,
    InfrastructureError,
    ValidationError,
)
from domain.services.blob_catalog import enrich_blob, summarize_blobs
from domain.services.file_validation_service import FileValidationService
from domain.value_objects.blob_path import BlobPath, directory_prefix
from domain.value_objects.mime_type import MimeType

logger = structlog.get_logger()


def _require_container(blob_store: BlobStore, container_name: str) -> None:
    if not blob_store.container_exists(container_name):
        msg = f"{ErrorMessages.CONTAINER_NOT_FOUND} Contenedor: '{container_name}'"
        raise ContainerNotFoundError(msg)


def _decode_base64(file_base64: str) -> bytes:
    """Strictly decode Base64 content, tolerating whitespace and missing padding."""
    compact = "".join(file_base64.split())
    padded = compact + "=" * (-len(compact) % 4)
    try:
        return base64.b64decode(padded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValidationError(str(ErrorMessages.BASE64_CONTENT_INVALID)) from exc


def _storage_failure(message: ErrorMessages) -> Result[object, AppError]:
    return Failure(AppError("storage_error", str(message)))


class UploadBlobUseCase:
    """Store a file received as multipart upload under ``directory/blob_name``."""

    def __init__(
        self,
        blob_store: BlobStore,
        file_validation_service: FileValidationService | None = None,
    ) -> None:
        self.blob_store = blob_store
        self.file_validation_service = file_validation_service or FileValidationService()

    async def execute(
        self,
        request: UploadBlobRequest,
        stream: BinaryIO | None,
        filename: str | None,
        content_type: str | None,
    ) -> Result[UploadBlobResponse, AppError]:
        """Validate and store an uploaded file.

        Args:
            request: Target container, optional directory and blob name
            stream: Binary stream of the uploaded file, None when no file was sent
            filename: Original filename reported by the client
            content_type: MIME type reported by the client

        Returns:
            Result containing the upload response or an error

        """
        try:
            if stream is None or not filename:
                return Failure(AppError("validation", str(ErrorMessages.FILE_MISSING)))

            mime_type = content_type or MimeType.OCTET_STREAM.value
            self.file_validation_service.validate_multipart_upload(
                original_file_name=filename,
                mime_type=mime_type,
                blob_name=request.blob_name,
            )

            location = BlobPath.from_parts(
                request.container_name,
                request.directory,
                request.blob_name,
            )
            _require_container(self.blob_store, location.container_name)
            stored = self.blob_store.put_stream(
                location.container_name,
                location.full_path,
                stream,
                mime_type=mime_type,
            )
            logger.info(
                "blob_uploaded",
                container=location.container_name,
                path=stored.key,
                size_bytes=stored.size_bytes,
                mime_type=mime_type,
            )

            return Success(
                UploadBlobResponse(
                    blob_url=self.blob_store.blob_url(location.container_name, stored.key),
                    container_name=location.container_name,
                    blob_name=request.blob_name,
                    full_path=stored.key,
                ),
            )
        except ValidationError as e:
            return Failure(AppError("validation", str(e)))
        except ContainerNotFoundError as e:
            return Failure(AppError("container_not_found", str(e)))
        except InfrastructureError as e:
            logger.exception("blob_upload_failed", blob_name=request.blob_name, error=str(e))
            return _storage_failure(ErrorMessages.STORAGE_UNAVAILABLE)


class UploadBlobBase64UseCase:
    """Decode Base64 content and store it as a blob."""

    def __init__(
        self,
        blob_store: BlobStore,
        file_validation_service: FileValidationService | None = None,
    ) -> None:
        self.blob_store = blob_store
        self.file_validation_service = file_validation_service or FileValidationService()

    async def execute(
        self,
        request: UploadBlobBase64Request,
    ) -> Result[UploadBlobResponse, AppError]:
        try:
            if not request.file_base64.strip():
                return Failure(AppError("validation", str(ErrorMessages.FILE_BASE64_MISSING)))
            if not request.mime_type.strip():
                return Failure(AppError("validation", str(ErrorMessages.MIME_TYPE_MISSING)))

            self.file_validation_service.validate_base64_upload(
                mime_type=request.mime_type,
                blob_name=request.blob_name,
            )

            content = _decode_base64(request.file_base64)
            if not content:
                return Failure(AppError("validation", str(ErrorMessages.BASE64_EMPTY_BUFFER)))

            location = BlobPath.from_parts(
                request.container_name,
                request.directory,
                request.blob_name,
            )
            _require_container(self.blob_store, location.container_name)
            stored = self.blob_store.put_bytes(
                location.container_name,
                location.full_path,
                content,
                mime_type=request.mime_type,
            )
            logger.info(
                "blob_uploaded_base64",
                container=location.container_name,
                path=stored.key,
                size_bytes=stored.size_bytes,
                base64_chars=len(request.file_base64),
            )

            return Success(
                UploadBlobResponse(
                    blob_url=self.blob_store.blob_url(location.container_name, stored.key),
                    container_name=location.container_name,
                    blob_name=request.blob_name,
                    full_path=stored.key,
                ),
            )
        except ValidationError as e:
            return Failure(AppError("validation", str(e)))
        except ContainerNotFoundError as e:
            return Failure(AppError("container_not_found", str(e)))
        except InfrastructureError as e:
            logger.exception(
                "blob_upload_base64_failed",
                blob_name=request.blob_name,
                error=str(e),
            )
            return _storage_failure(ErrorMessages.STORAGE_UNAVAILABLE)


class DownloadBlobUseCase:
    """Read a blob's bytes and content type."""

    def __init__(self, blob_store: BlobStore) -> None:
        self.blob_store = blob_store

    async def execute(self, request: DownloadBlobRequest) -> Result[DownloadedBlob, AppError]:
        try:
            location = BlobPath.from_parts(
                request.container_name,
                request.directory,
                request.blob_name,
            )
            properties = self.blob_store.get_properties(location.container_name, location.full_path)
            data = self.blob_store.get_bytes(location.container_name, location.full_path)
            logger.info(
                "blob_downloaded",
                container=location.container_name,
                path=location.full_path,
                size_bytes=len(data),
            )
            return Success(
                DownloadedBlob(
                    data=data,
                    content_type=properties.content_type or MimeType.OCTET_STREAM.value,
                    container_name=location.container_name,
                    blob_name=request.blob_name,
                    full_path=location.full_path,
                ),
            )
        except ValidationError as e:
            return Failure(AppError("validation", str(e)))
        except (BlobNotFoundError, ContainerNotFoundError):
            return Failure(AppError("not_found", str(ErrorMessages.BLOB_NOT_FOUND)))
        except InfrastructureError as e:
            logger.exception("blob_download_failed", blob_name=request.blob_name, error=str(e))
            return _storage_failure(ErrorMessages.STORAGE_UNAVAILABLE)


class DownloadBlobBase64UseCase:
    """Read a blob and return its content Base64-encoded."""

    def __init__(self, download_blob_use_case: DownloadBlobUseCase) -> None:
        self.download_blob_use_case = download_blob_use_case

    async def execute(
        self,
        request: DownloadBlobRequest,
    ) -> Result[DownloadBlobBase64Response, AppError]:
        result = await self.download_blob_use_case.execute(request)
        return result.map(_to_base64_response)


def _to_base64_response(blob: DownloadedBlob) -> DownloadBlobBase64Response:
    file_base64 = base64.b64encode(blob.data).decode("ascii")
    logger.debug("blob_encoded_base64", size_bytes=len(blob.data), base64_chars=len(file_base64))
    return DownloadBlobBase64Response(
        file_base64=file_base64,
        content_type=blob.content_type,
        container_name=blob.container_name,
        blob_name=blob.blob_name,
        full_path=blob.full_path,
        size=len(blob.data),
    )


class DeleteBlobUseCase:
    def __init__(self, blob_store: BlobStore) -> None:
        self.blob_store = blob_store

    async def execute(self, request: DeleteBlobRequest) -> Result[DeleteBlobResponse, AppError]:
        try:
            location = BlobPath.from_parts(
                request.container_name,
                request.directory,
                request.blob_name,
            )
            deleted = self.blob_store.container_exists(
                location.container_name,
            ) and self.blob_store.delete(location.container_name, location.full_path)
            if not deleted:
                return Failure(AppError("not_found", str(ErrorMessages.BLOB_NOT_FOUND)))

            logger.info("blob_deleted", container=location.container_name, path=location.full_path)
            return Success(
                DeleteBlobResponse(
                    container_name=location.container_name,
                    blob_name=request.blob_name,
                    full_path=location.full_path,
                ),
            )
        except ValidationError as e:
            return Failure(AppError("validation", str(e)))
        except InfrastructureError as e:
            logger.exception("blob_delete_failed", blob_name=request.blob_name, error=str(e))
            return _storage_failure(ErrorMessages.STORAGE_UNAVAILABLE)


class ListBlobsUseCase:
    """List every blob of a container, optionally restricted to a directory."""

    def __init__(self, blob_store: BlobStore) -> None:
        self.blob_store = blob_store

    async def execute(self, request: ListBlobsRequest) -> Result[BlobListResponse, AppError]:
        try:
            prefix = directory_prefix(request.directory)
            items = self.blob_store.list_blobs(request.container_name, prefix)
            summary = summarize_blobs(
                [
                    enrich_blob(
                        name=item.name,
                        size=item.size,
                        content_type=item.content_type,
                        last_modified=item.last_modified,
                        etag=item.etag,
                    )
                    for item in items
                ],
            )
            logger.info(
                "blobs_listed",
                container=request.container_name,
                prefix=prefix,
                total_blobs=summary.total_blobs,
            )
            return Success(
                BlobListResponse(
                    blobs=summary.blobs,
                    container_name=request.container_name,
                    directory=prefix.rstrip("/") if prefix else None,
                    total_blobs=summary.total_blobs,
                    total_size=summary.total_size,
                    total_size_formatted=summary.total_size_formatted,
                ),
            )
        except ValidationError as e:
            return Failure(AppError("validation", str(e)))
        except ContainerNotFoundError:
            return Failure(AppError("container_not_found", str(ErrorMessages.CONTAINER_NOT_FOUND)))
        except InfrastructureError as e:
            logger.exception("blob_list_failed", container=request.container_name, error=str(e))
            return _storage_failure(ErrorMessages.STORAGE_UNAVAILABLE)
