from pydantic import BaseModel, ConfigDict

from domain.error_messages import ErrorMessages
from domain.exceptions import ValidationError


def normalize_blob_path(path: str) -> str:
    """Return ``path`` relative to its container with empty segments collapsed.

    ``/a//b.pdf`` becomes ``a/b.pdf``. Raises ``ValidationError`` for an empty
    path or one containing ``.`` or ``..`` segments.
    """
    parts = [part for part in path.strip().split("/") if part]
    if not parts or any(part in {".", ".."} for part in parts):
        msg = f"{ErrorMessages.BLOB_PATH_INVALID} Ruta recibida: '{path}'"
        raise ValidationError(msg)
    return "/".join(parts)


def build_full_blob_path(directory: str | None, blob_name: str) -> str:
    """Join an optional directory and a blob name into a container-relative path.

    A missing or blank directory means the container root.
    """
    if directory and directory.strip():
        prefix = directory if directory.endswith("/") else f"{directory}/"
        return f"{prefix}{blob_name}"
    return blob_name


def directory_prefix(directory: str | None) -> str | None:
    """Return the normalized listing prefix for a directory, always ending in ``/``.

    Blank directories, ``/`` included, mean the whole container.
    """
    if not directory or not directory.strip("/ "):
        return None
    return f"{normalize_blob_path(directory)}/"


def file_extension(file_name: str) -> str:
    """Return the lowercased extension including the dot, or ``""`` when there is none.

    A trailing dot counts as no extension.
    """
    last_dot = file_name.rfind(".")
    if last_dot == -1 or last_dot == len(file_name) - 1:
        return ""
    return file_name[last_dot:].lower()


class BlobPath(BaseModel):
    """Value object locating a blob inside a container."""

    model_config = ConfigDict(frozen=True)

    container_name: str
    full_path: str

    @classmethod
    def from_parts(cls, container_name: str, directory: str | None, blob_name: str) -> "BlobPath":
        return cls(
            container_name=container_name,
            full_path=build_full_blob_path(directory, blob_name),
        )
