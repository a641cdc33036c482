"""Domain exceptions for business rule violations."""


class DomainError(Exception):
    """Base exception for domain layer."""


class ValidationError(DomainError):
    """Raised when input validation fails."""


class BlobNotFoundError(DomainError):
    """Raised when a blob does not exist in its container."""


class ContainerNotFoundError(DomainError):
    """Raised when the target container does not exist."""


class InfrastructureError(DomainError):
    """Raised when infrastructure operations fail (storage backend, network, etc.)."""
