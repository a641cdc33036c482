from lagom import Container

from application.ports.blob_store import BlobStore
from application.use_cases.blob_operation_use_cases import CopyBlobUseCase, MoveBlobUseCase
from application.use_cases.blob_use_cases import (
    DeleteBlobUseCase,
    DownloadBlobBase64UseCase,
    DownloadBlobUseCase,
    ListBlobsUseCase,
    UploadBlobBase64UseCase,
    UploadBlobUseCase,
)
from domain.services.file_validation_service import FileValidationService
from infrastructure.blob_stores.fsspec_blob_store import FsspecBlobStore
from infrastructure.config import settings


def create_container() -> Container:
    container = Container()

    # Blob storage (fsspec)
    blob_store_instance = FsspecBlobStore(
        base_url=settings.blob_base_url,
        storage_options=getattr(settings, "blob_storage_options", None),
        public_base_url=settings.blob_public_base_url,
    )
    container[BlobStore] = blob_store_instance

    # Domain services
    container[FileValidationService] = FileValidationService()

    # Use cases
    container[UploadBlobUseCase] = lambda c: UploadBlobUseCase(
        blob_store=c[BlobStore],
        file_validation_service=c[FileValidationService],
    )
    container[UploadBlobBase64UseCase] = lambda c: UploadBlobBase64UseCase(
        blob_store=c[BlobStore],
        file_validation_service=c[FileValidationService],
    )
    container[DownloadBlobUseCase] = lambda c: DownloadBlobUseCase(blob_store=c[BlobStore])
    container[DownloadBlobBase64UseCase] = lambda c: DownloadBlobBase64UseCase(
        download_blob_use_case=c[DownloadBlobUseCase],
    )
    container[DeleteBlobUseCase] = lambda c: DeleteBlobUseCase(blob_store=c[BlobStore])
    container[ListBlobsUseCase] = lambda c: ListBlobsUseCase(blob_store=c[BlobStore])
    container[MoveBlobUseCase] = lambda c: MoveBlobUseCase(blob_store=c[BlobStore])
    container[CopyBlobUseCase] = lambda c: CopyBlobUseCase(blob_store=c[BlobStore])

    return container
