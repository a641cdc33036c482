"""Move and copy of blobs between two paths of the same container."""

from typing import Literal

import structlog
from returns.result import Failure, Result, Success

from application.dtos.blob_dtos import BlobOperationResponse, CopyBlobRequest, MoveBlobRequest
from application.dtos.errors import AppError
from application.ports.blob_store import BlobStore
from domain.error_messages import ErrorMessages
from domain.exceptions import (
    BlobNotFoundError,
    ContainerNotFoundError,
    InfrastructureError,
    ValidationError,
)
from domain.value_objects.blob_path import normalize_blob_path

logger = structlog.get_logger()

BlobOperation = Literal["move", "copy"]

_FAILED_MESSAGES: dict[str, ErrorMessages] = {
    "move": ErrorMessages.BLOB_MOVE_FAILED,
    "copy": ErrorMessages.BLOB_COPY_FAILED,
}
_SUCCESS_MESSAGES: dict[str, str] = {
    "move": "Blob moved successfully",
    "copy": "Blob copied successfully",
}


class _BlobOperationUseCase:
    operation: BlobOperation

    def __init__(self, blob_store: BlobStore) -> None:
        self.blob_store = blob_store

    async def _run(
        self,
        container_name: str,
        source_path: str,
        destination_path: str,
    ) -> Result[BlobOperationResponse, AppError]:
        try:
            source_path = normalize_blob_path(source_path)
            destination_path = normalize_blob_path(destination_path)
            if source_path == destination_path:
                return Failure(AppError("validation", str(ErrorMessages.BLOB_SAME_PATH)))

            if not self.blob_store.container_exists(container_name):
                return Failure(AppError("not_found", str(ErrorMessages.BLOB_NOT_FOUND)))
            if not self.blob_store.exists(container_name, source_path):
                return Failure(AppError("not_found", str(ErrorMessages.BLOB_NOT_FOUND)))

            self.blob_store.copy(container_name, source_path, destination_path)

            if self.operation == "move":
                self._delete_source(container_name, source_path)

            logger.info(
                f"blob_{self.operation}_completed",
                container=container_name,
                source=source_path,
                destination=destination_path,
            )
            return Success(
                BlobOperationResponse(
                    message=_SUCCESS_MESSAGES[self.operation],
                    container_name=container_name,
                    source_path=source_path,
                    destination_path=destination_path,
                ),
            )
        except ValidationError as e:
            return Failure(AppError("validation", str(e)))
        except (BlobNotFoundError, ContainerNotFoundError):
            return Failure(AppError("not_found", str(ErrorMessages.BLOB_NOT_FOUND)))
        except InfrastructureError as e:
            logger.exception(
                f"blob_{self.operation}_failed",
                container=container_name,
                source=source_path,
                destination=destination_path,
                error=str(e),
            )
            return Failure(AppError("storage_error", str(_FAILED_MESSAGES[self.operation])))

    def _delete_source(self, container_name: str, source_path: str) -> None:
        # Source cleanup failures are logged, never raised.
        try:
            if not self.blob_store.delete(container_name, source_path):
                logger.warning(
                    "blob_move_source_not_deleted",
                    container=container_name,
                    source=source_path,
                )
        except (InfrastructureError, OSError) as e:
            logger.warning(
                "blob_move_source_cleanup_failed",
                container=container_name,
                source=source_path,
                error=str(e),
            )


class MoveBlobUseCase(_BlobOperationUseCase):
    """Copy a blob to a new path and delete the original."""

    operation: BlobOperation = "move"

    async def execute(self, request: MoveBlobRequest) -> Result[BlobOperationResponse, AppError]:
        return await self._run(
            request.container_name,
            request.source_blob_path,
            request.destination_blob_path,
        )


class CopyBlobUseCase(_BlobOperationUseCase):
    """Copy a blob to a new path, keeping the original."""

    operation: BlobOperation = "copy"

    async def execute(self, request: CopyBlobRequest) -> Result[BlobOperationResponse, AppError]:
        return await self._run(
            request.container_name,
            request.source_blob_path,
            request.destination_blob_path,
        )
