from .blob_info import BlobInfo
from .blob_path import (
    BlobPath,
    build_full_blob_path,
    directory_prefix,
    file_extension,
    normalize_blob_path,
)
from .mime_type import MIME_TYPE_EXTENSIONS, MimeType, allowed_extensions

__all__ = [
    "MIME_TYPE_EXTENSIONS",
    "BlobInfo",
    "BlobPath",
    "MimeType",
    "allowed_extensions",
    "build_full_blob_path",
    "directory_prefix",
    "file_extension",
    "normalize_blob_path",
]
