import logging
import sys

import structlog


def configure_logging(level: str = "INFO", json: bool = True) -> None:
    """JSON lines for deployed environments, coloured key/value output locally."""
    resolved = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=resolved,
    )
    # RequestIdMiddleware writes the access line
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(resolved),
        cache_logger_on_first_use=True,
    )
