from enum import Enum


class ErrorMessages(str, Enum):
    """User-facing error texts returned in the response envelope."""

    FILE_MISSING = "No se proporcionó archivo para cargar."
    FILE_BASE64_MISSING = "No se proporcionó el contenido del archivo en Base64."
    MIME_TYPE_MISSING = "No se proporcionó el tipo MIME del archivo."
    BASE64_CONTENT_INVALID = "El contenido Base64 proporcionado no es válido."
    BASE64_EMPTY_BUFFER = "El contenido Base64 no contiene datos."

    FILE_EXTENSION_MISSING = "El archivo no tiene extensión."
    FILE_EXTENSION_NOT_ALLOWED = "La extensión del archivo no está permitida."
    FILE_EXTENSION_MISMATCH = "La extensión del archivo no coincide."
    MIME_TYPE_NOT_ALLOWED = "El tipo MIME no está permitido."

    CONTAINER_NOT_FOUND = "El contenedor especificado no existe."
    BLOB_NOT_FOUND = "El archivo especificado no existe."
    BLOB_PATH_INVALID = "La ruta del archivo no es válida."
    BLOB_SAME_PATH = "La ruta de origen y la ruta de destino no pueden ser iguales."
    BLOB_MOVE_FAILED = "Error al mover el archivo."
    BLOB_COPY_FAILED = "Error al copiar el archivo."

    STORAGE_UNAVAILABLE = "Error interno al acceder al almacenamiento."

    def __str__(self) -> str:
        return self.value
