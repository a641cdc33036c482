from enum import Enum


class MimeType(str, Enum):
    """Represent MIME types accepted for stored blobs."""

    PDF = "application/pdf"
    DOC = "application/msword"
    DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    XLS = "application/vnd.ms-excel"
    XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    PPT = "application/vnd.ms-powerpoint"
    PPTX = "application/vnd.openxmlformats-officedocument.presentationml.presentation"
    TXT = "text/plain"
    CSV = "text/csv"

    JPEG = "image/jpeg"
    JPG = "image/jpg"
    PNG = "image/png"
    GIF = "image/gif"
    BMP = "image/bmp"
    WEBP = "image/webp"
    SVG = "image/svg+xml"

    MPEG = "audio/mpeg"
    WAV = "audio/wav"
    MP3 = "audio/mp3"

    MP4 = "video/mp4"
    AVI = "video/avi"
    QUICKTIME = "video/quicktime"

    ZIP = "application/zip"
    RAR = "application/x-rar-compressed"
    SEVEN_ZIP = "application/x-7z-compressed"

    JSON = "application/json"
    XML = "application/xml"
    TEXT_XML = "text/xml"

    OCTET_STREAM = "application/octet-stream"


MIME_TYPE_EXTENSIONS: dict[MimeType, tuple[str, ...]] = {
    MimeType.PDF: (".pdf",),
    MimeType.DOC: (".doc",),
    MimeType.DOCX: (".docx",),
    MimeType.XLS: (".xls",),
    MimeType.XLSX: (".xlsx",),
    MimeType.PPT: (".ppt",),
    MimeType.PPTX: (".pptx",),
    MimeType.TXT: (".txt",),
    MimeType.CSV: (".csv",),
    MimeType.JPEG: (".jpg", ".jpeg"),
    MimeType.JPG: (".jpg", ".jpeg"),
    MimeType.PNG: (".png",),
    MimeType.GIF: (".gif",),
    MimeType.BMP: (".bmp",),
    MimeType.WEBP: (".webp",),
    MimeType.SVG: (".svg",),
    MimeType.MPEG: (".mp3",),
    MimeType.WAV: (".wav",),
    MimeType.MP3: (".mp3",),
    MimeType.MP4: (".mp4",),
    MimeType.AVI: (".avi",),
    MimeType.QUICKTIME: (".mov",),
    MimeType.ZIP: (".zip",),
    MimeType.RAR: (".rar",),
    MimeType.SEVEN_ZIP: (".7z",),
    MimeType.JSON: (".json",),
    MimeType.XML: (".xml",),
    MimeType.TEXT_XML: (".xml",),
}
"""Valid file extensions per accepted MIME type. OCTET_STREAM is a fallback only."""


def allowed_extensions() -> list[str]:
    """Return every accepted extension once, in table order."""
    seen: dict[str, None] = {}
    for extensions in MIME_TYPE_EXTENSIONS.values():
        for extension in extensions:
            seen.setdefault(extension, None)
    return list(seen)
