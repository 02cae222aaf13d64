"""Structured logging configuration using structlog.

Every event passes through ``redact_credentials`` before rendering, so an
API key, secret or request signature bound to a log call never reaches
the output.
"""

import logging

import structlog

# Event keys whose values are replaced before rendering
SENSITIVE_KEYS = frozenset({"key", "secret", "sign", "api_key", "api_secret", "signature"})
REDACTED = "***"

# Third-party loggers that log every HTTP request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def redact_credentials(
    logger: object, method_name: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """structlog processor masking credential-bearing fields."""
    for name in SENSITIVE_KEYS.intersection(event_dict):
        if event_dict[name]:
            event_dict[name] = REDACTED
    return event_dict


def setup_logging(log_level: str = "INFO", log_format: str = "console") -> None:
    """Configure structlog over stdlib logging.

    ``log_format`` is "json" for machine-readable output or "console"
    (default) for human-readable output; AppSettings reads it from
    LOG_FORMAT.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        redact_credentials,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]

    if log_format.lower() == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger with the given name."""
    return structlog.get_logger(name)
