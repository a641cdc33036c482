"""Request and response DTOs for the blob storage API.

Request DTOs are plain data holders: presence of the required fields is the
only rule they express. Path, extension and MIME checks happen in the use cases.
"""

from uuid import UUID, uuid4

from pydantic import Field

from application.dtos.base import ApiModel
from domain.value_objects.blob_info import BlobInfo

CONTAINER_NAME_FIELD = {"description": "Container name", "examples": ["uploads"]}
DIRECTORY_FIELD = {
    "description": "Directory path inside the container (optional, root when omitted)",
    "examples": ["documentos/2024"],
}


class MoveBlobRequest(ApiModel):
    """Request body for moving a blob to another path of the same container."""

    container_name: str = Field(..., **CONTAINER_NAME_FIELD)
    source_blob_path: str = Field(
        ...,
        description="Full path of the source blob (including directories)",
        examples=["temporal/documento.pdf"],
    )
    destination_blob_path: str = Field(
        ...,
        description="Full path of the destination blob (including directories)",
        examples=["documentos/2024/documento-final.pdf"],
    )


class CopyBlobRequest(ApiModel):
    """Request body for copying a blob to another path of the same container."""

    container_name: str = Field(..., **CONTAINER_NAME_FIELD)
    source_blob_path: str = Field(
        ...,
        description="Full path of the source blob (including directories)",
        examples=["documentos/2024/documento-original.pdf"],
    )
    destination_blob_path: str = Field(
        ...,
        description="Full path of the destination blob (including directories)",
        examples=["backup/documentos/documento-copia.pdf"],
    )


class UploadBlobBase64Request(ApiModel):
    """Request body for uploading a blob whose content travels Base64-encoded."""

    container_name: str = Field(..., **CONTAINER_NAME_FIELD)
    blob_name: str = Field(..., description="Blob (file) name", examples=["documento.pdf"])
    directory: str | None = Field(None, **DIRECTORY_FIELD)
    file_base64: str = Field(
        ...,
        description="File content encoded in Base64",
        examples=["JVBERi0xLj"],
    )
    mime_type: str = Field(..., description="MIME type of the file", examples=["application/pdf"])


class UploadBlobRequest(ApiModel):
    """Form fields accompanying a multipart upload."""

    container_name: str = Field(..., **CONTAINER_NAME_FIELD)
    directory: str | None = Field(None, **DIRECTORY_FIELD)
    blob_name: str = Field(..., description="Blob (file) name", examples=["archivo.pdf"])


class BlobLocationRequest(ApiModel):
    """Addresses a single blob by container, optional directory and name."""

    container_name: str = Field(..., **CONTAINER_NAME_FIELD)
    blob_name: str = Field(..., description="Blob (file) name", examples=["archivo.pdf"])
    directory: str | None = Field(None, **DIRECTORY_FIELD)


class DownloadBlobRequest(BlobLocationRequest):
    """Blob to download."""


class DeleteBlobRequest(BlobLocationRequest):
    """Blob to delete."""


class ListBlobsRequest(ApiModel):
    container_name: str = Field(..., **CONTAINER_NAME_FIELD)
    directory: str | None = Field(None, **DIRECTORY_FIELD)


def new_request_id() -> UUID:
    return uuid4()


class UploadBlobResponse(ApiModel):
    blob_url: str = Field(
        ...,
        description="URL of the stored blob",
        examples=["https://account.blob.core.windows.net/uploads/documentos/2024/documento.pdf"],
    )
    container_name: str = Field(..., **CONTAINER_NAME_FIELD)
    blob_name: str = Field(..., description="Blob (file) name", examples=["documento.pdf"])
    full_path: str = Field(
        ...,
        description="Path of the blob inside the container",
        examples=["documentos/2024/documento.pdf"],
    )
    request_id: UUID = Field(
        default_factory=new_request_id,
        description="Unique request identifier",
    )


class DownloadedBlob(ApiModel):
    """Raw download result; served as a binary response rather than JSON."""

    data: bytes
    content_type: str
    container_name: str
    blob_name: str
    full_path: str
    request_id: UUID = Field(default_factory=new_request_id)


class DownloadBlobBase64Response(ApiModel):
    file_base64: str = Field(..., description="File content encoded in Base64")
    content_type: str = Field(
        ...,
        description="MIME type of the blob",
        examples=["application/pdf"],
    )
    container_name: str = Field(..., **CONTAINER_NAME_FIELD)
    blob_name: str = Field(..., description="Blob (file) name", examples=["archivo.pdf"])
    full_path: str = Field(..., description="Path of the blob inside the container")
    size: int = Field(..., description="Size of the decoded content in bytes")
    request_id: UUID = Field(
        default_factory=new_request_id,
        description="Unique request identifier",
    )


class DeleteBlobResponse(ApiModel):
    container_name: str = Field(..., **CONTAINER_NAME_FIELD)
    blob_name: str = Field(..., description="Blob (file) name", examples=["archivo.pdf"])
    full_path: str = Field(..., description="Path of the deleted blob inside the container")
    request_id: UUID = Field(
        default_factory=new_request_id,
        description="Unique request identifier",
    )


class BlobOperationResponse(ApiModel):
    """Result of a move or copy."""

    message: str = Field(..., examples=["Blob moved successfully"])
    container_name: str = Field(..., **CONTAINER_NAME_FIELD)
    source_path: str = Field(..., examples=["temporal/documento.pdf"])
    destination_path: str = Field(..., examples=["documentos/2024/documento-final.pdf"])
    request_id: UUID = Field(
        default_factory=new_request_id,
        description="Unique request identifier",
    )


class BlobListResponse(ApiModel):
    blobs: list[BlobInfo] = Field(default_factory=list, description="Blobs found")
    container_name: str = Field(..., **CONTAINER_NAME_FIELD)
    directory: str | None = Field(None, description="Directory that was listed, when given")
    total_blobs: int = Field(..., description="Number of blobs found")
    total_size: int = Field(..., description="Total size in bytes")
    total_size_formatted: str = Field(
        ...,
        description="Total size in readable units",
        examples=["2.5 MB"],
    )
    request_id: UUID = Field(
        default_factory=new_request_id,
        description="Unique request identifier",
    )

