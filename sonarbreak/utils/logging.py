import logging
import sys
import structlog


def setup_logging(log_level="INFO", json_logs=False):
    """
    Configures structlog and the stdlib root logger for the command line.

    Log lines go to stderr so that stdout stays reserved for the gate outcome.
    """
    shared_processors = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.format_exc_info,
    ]

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    log_level_value = getattr(logging, str(log_level).upper(), logging.INFO)
    logging.basicConfig(stream=sys.stderr, format="%(message)s")
    logging.getLogger().setLevel(log_level_value)


def get_logger(name):
    return structlog.get_logger(name)
