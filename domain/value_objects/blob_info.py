from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BlobInfo(BaseModel):
    """Value object describing one listed blob with derived display fields."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: str
    """Full path of the blob inside its container."""

    file_name: str
    directory: str | None = None
    file_extension: str | None = None

    size: int
    """Size in bytes."""

    size_formatted: str
    content_type: str | None = None
    last_modified: datetime
    etag: str | None = None
