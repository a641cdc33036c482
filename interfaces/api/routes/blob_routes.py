from typing import Annotated
from urllib.parse import quote

import structlog
from fastapi import APIRouter, File, Form, Query, Response, UploadFile, status

from application.dtos.base import ApiResponse, envelope
from application.dtos.blob_dtos import (
    BlobListResponse,
    BlobOperationResponse,
    CopyBlobRequest,
    DeleteBlobRequest,
    DeleteBlobResponse,
    DownloadBlobBase64Response,
    DownloadBlobRequest,
    DownloadedBlob,
    ListBlobsRequest,
    MoveBlobRequest,
    UploadBlobBase64Request,
    UploadBlobRequest,
    UploadBlobResponse,
)
from application.use_cases.blob_operation_use_cases import CopyBlobUseCase, MoveBlobUseCase
from application.use_cases.blob_use_cases import (
    DeleteBlobUseCase,
    DownloadBlobBase64UseCase,
    DownloadBlobUseCase,
    ListBlobsUseCase,
    UploadBlobBase64UseCase,
    UploadBlobUseCase,
)
from interfaces.api.middleware import handle_use_case_errors
from interfaces.dependencies import ContainerDep

logger = structlog.get_logger()

router = APIRouter(prefix="/blob", tags=["Blob Storage"])

DirectoryQuery = Annotated[
    str | None,
    Query(description="Directory path (optional)", examples=["documentos/2024"]),
]


@router.post("/upload", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def upload_blob(
    container: ContainerDep,
    container_name: Annotated[str, Form(alias="containerName")],
    blob_name: Annotated[str, Form(alias="blobName")],
    directory: Annotated[str | None, Form()] = None,
    file: Annotated[UploadFile | None, File()] = None,
) -> ApiResponse[UploadBlobResponse]:
    """Upload a file to a container, optionally inside a directory.

    Returns:
        200 OK: Blob uploaded
        400 Bad Request: Missing file, invalid extension/MIME type or unknown container
        500 Internal Server Error: Storage failure

    """
    use_case = container[UploadBlobUseCase]
    result = await use_case.execute(
        UploadBlobRequest(container_name=container_name, directory=directory, blob_name=blob_name),
        stream=file.file if file else None,
        filename=file.filename if file else None,
        content_type=file.content_type if file else None,
    )
    return result.map(envelope)


@router.post("/upload-base64", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def upload_blob_base64(
    request: UploadBlobBase64Request,
    container: ContainerDep,
) -> ApiResponse[UploadBlobResponse]:
    """Upload a Base64-encoded file to a container."""
    use_case = container[UploadBlobBase64UseCase]
    result = await use_case.execute(request)
    return result.map(envelope)


def _to_file_response(blob: DownloadedBlob) -> Response:
    return Response(
        content=blob.data,
        media_type=blob.content_type,
        headers={
            "Content-Disposition": f"attachment; filename*=UTF-8''{quote(blob.blob_name)}",
            "X-Request-Id": str(blob.request_id),
        },
    )


@router.get("/download/{container_name}/{blob_name}", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def download_blob(
    container_name: str,
    blob_name: str,
    container: ContainerDep,
    directory: DirectoryQuery = None,
) -> Response:
    """Download a blob as a binary attachment."""
    use_case = container[DownloadBlobUseCase]
    result = await use_case.execute(
        DownloadBlobRequest(
            container_name=container_name,
            blob_name=blob_name,
            directory=directory,
        ),
    )
    return result.map(_to_file_response)


@router.get("/download-base64/{container_name}/{blob_name}", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def download_blob_base64(
    container_name: str,
    blob_name: str,
    container: ContainerDep,
    directory: DirectoryQuery = None,
) -> ApiResponse[DownloadBlobBase64Response]:
    """Download a blob with its content Base64-encoded."""
    use_case = container[DownloadBlobBase64UseCase]
    result = await use_case.execute(
        DownloadBlobRequest(
            container_name=container_name,
            blob_name=blob_name,
            directory=directory,
        ),
    )
    return result.map(envelope)


@router.delete("/{container_name}/{blob_name}", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def delete_blob(
    container_name: str,
    blob_name: str,
    container: ContainerDep,
    directory: DirectoryQuery = None,
) -> ApiResponse[DeleteBlobResponse]:
    """Delete a blob.

    Returns:
        200 OK: Blob deleted
        206: Blob does not exist

    """
    use_case = container[DeleteBlobUseCase]
    result = await use_case.execute(
        DeleteBlobRequest(container_name=container_name, blob_name=blob_name, directory=directory),
    )
    return result.map(envelope)


@router.get(
    "/list/{container_name}",
    status_code=status.HTTP_200_OK,
    response_model_exclude_none=True,
)
@handle_use_case_errors
async def list_blobs(
    container_name: str,
    container: ContainerDep,
) -> ApiResponse[BlobListResponse]:
    """List every blob of a container."""
    use_case = container[ListBlobsUseCase]
    result = await use_case.execute(ListBlobsRequest(container_name=container_name))
    return result.map(envelope)


@router.get(
    "/list/{container_name}/directory",
    status_code=status.HTTP_200_OK,
    response_model_exclude_none=True,
)
@handle_use_case_errors
async def list_blobs_in_directory(
    container_name: str,
    directory: Annotated[
        str,
        Query(description="Directory path", examples=["documentos/2024"]),
    ],
    container: ContainerDep,
) -> ApiResponse[BlobListResponse]:
    """List the blobs stored under a directory of a container."""
    use_case = container[ListBlobsUseCase]
    result = await use_case.execute(
        ListBlobsRequest(container_name=container_name, directory=directory),
    )
    return result.map(envelope)


@router.post("/move", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def move_blob(
    request: MoveBlobRequest,
    container: ContainerDep,
) -> ApiResponse[BlobOperationResponse]:
    """Move a blob to another path of the same container."""
    logger.info(
        "move_blob_endpoint_called",
        container=request.container_name,
        source=request.source_blob_path,
        destination=request.destination_blob_path,
    )
    use_case = container[MoveBlobUseCase]
    result = await use_case.execute(request)
    return result.map(envelope)


@router.post("/copy", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def copy_blob(
    request: CopyBlobRequest,
    container: ContainerDep,
) -> ApiResponse[BlobOperationResponse]:
    """Copy a blob to another path of the same container."""
    use_case = container[CopyBlobUseCase]
    result = await use_case.execute(request)
    return result.map(envelope)
