from fastapi import HTTPException, status

from application.dtos.errors import AppError

# Business errors (missing blobs) are reported with 206.
HTTP_206_BUSINESS_ERROR = status.HTTP_206_PARTIAL_CONTENT


def _map_app_error_to_http_exception(error: AppError) -> HTTPException:
    """Map application layer errors to appropriate HTTP exceptions."""
    if error.category in {"validation", "container_not_found"}:
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error.message,
        )
    if error.category == "not_found":
        return HTTPException(
            status_code=HTTP_206_BUSINESS_ERROR,
            detail=error.message,
        )
    if error.category == "storage_error":
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error.message,
        )
    # Unknown error category
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )
