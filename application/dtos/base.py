from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")

SUCCESS_DESCRIPTION = "Operación completada con éxito."


class ApiModel(BaseModel):
    """Base for API payloads: camelCase on the wire, snake_case in Python, immutable."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ApiStatus(ApiModel):
    status_code: int = Field(200, description="HTTP status code of the operation", examples=[200])
    status_description: str = Field(
        SUCCESS_DESCRIPTION,
        description="Human-readable outcome of the operation",
        examples=[SUCCESS_DESCRIPTION],
    )


class ApiResponse(ApiModel, Generic[DataT]):
    """Envelope wrapping every successful response."""

    status: ApiStatus = Field(default_factory=ApiStatus)
    data: DataT


class ApiErrorResponse(ApiModel):
    """Envelope returned for every failed request."""

    status: ApiStatus


def envelope(data: DataT) -> ApiResponse[DataT]:
    return ApiResponse(data=data)
