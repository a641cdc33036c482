"""Domain layer exports."""

from domain.error_messages import ErrorMessages
from domain.exceptions import (
    BlobNotFoundError,
    ContainerNotFoundError,
    DomainError,
    InfrastructureError,
    ValidationError,
)
from domain.value_objects import BlobInfo, BlobPath, MimeType

__all__ = [
    "BlobInfo",
    "BlobNotFoundError",
    "BlobPath",
    "ContainerNotFoundError",
    "DomainError",
    "ErrorMessages",
    "InfrastructureError",
    "MimeType",
    "ValidationError",
]
