import logging
import logging.handlers
import sys

import structlog
from structlog.typing import EventDict, WrappedLogger

from infrastructure.config import settings

# Third-party loggers that only need to surface problems
QUIET_LOGGERS = ("fsspec", "multipart", "python_multipart")


def add_service_context(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    """Tag every event with the service name and environment."""
    event_dict.setdefault("service", settings.app_name)
    event_dict.setdefault("env", settings.app_env)
    return event_dict


def setup_logging() -> None:
    """Configure unified logging for structlog, uvicorn, and standard library."""
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    log_file = settings.log_dir / f"{settings.app_env}.log"
    development = settings.app_env == "development"

    if development:
        exception_processor = structlog.processors.format_exc_info
        renderer = structlog.dev.ConsoleRenderer()
    else:
        # JSON logs keep tracebacks as structured fields
        exception_processor = structlog.processors.dict_tracebacks
        renderer = structlog.processors.JSONRenderer()

    common_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        add_service_context,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        exception_processor,
    ]

    structlog.configure(
        processors=[
            *common_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=common_processors,
        processor=renderer,
    )

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    file_handler = logging.handlers.TimedRotatingFileHandler(
        log_file,
        when="midnight",
        backupCount=7,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [stream_handler, file_handler]
    root_logger.setLevel(settings.log_level.upper())

    # Uvicorn keeps its own handlers unless they are replaced
    for logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        server_logger = logging.getLogger(logger_name)
        server_logger.handlers = [stream_handler, file_handler]
        server_logger.propagate = False

    for logger_name in QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
