"""
Structured logging infrastructure for coinmarketcap-client.
Provides consistent, machine-readable logs across the client layers.

Log Structure:
    {
        "app": "coinmarketcap-client",  # Application identifier
        "layer": "cache",                # Architectural layer
        "component": "memoize",          # Specific component
        "module": "...",                 # Python module (optional)
        "event": "cache_hit",            # What happened
        ...
    }

Architectural Layers:
    - cache: Cache stores and the memoizing retrieval wrapper
    - ingestion: Transport, accessors and page scraping
    - processing: Field transforms and normalization
    - client: The public facade
"""

import logging
import sys
from typing import Any, Literal

import structlog
from structlog.types import EventDict

Layer = Literal["cache", "ingestion", "processing", "client"]


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add the application identifier to every log entry."""
    event_dict["app"] = "coinmarketcap-client"
    return event_dict


def add_severity_level(
    logger: Any, method_name: str, event_dict: EventDict
) -> EventDict:
    """
    Add severity level for cloud logging compatibility.
    Maps Python log levels to standard severity levels.
    """
    level = event_dict.get("level")
    if level:
        severity_map = {
            "debug": "DEBUG",
            "info": "INFO",
            "warning": "WARNING",
            "error": "ERROR",
            "critical": "CRITICAL",
        }
        event_dict["severity"] = severity_map.get(level, "INFO")
    return event_dict


def setup_logging(
    level: str = "INFO",
    json_logs: bool = True,
    include_timestamp: bool = True,
) -> None:
    """
    Configure structured logging for the client.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, output JSON. If False, use human-readable format.
        include_timestamp: Whether to include ISO timestamps in logs

    Usage:
        >>> from coinmarketcap_client.infrastructure.observability import setup_logging
        >>> setup_logging(level="DEBUG", json_logs=False)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        add_app_context,
        structlog.stdlib.add_log_level,
        add_severity_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(
    name: str | None = None,
    layer: Layer | None = None,
    component: str | None = None,
    **initial_context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance with architectural context bound.

    Args:
        name: Logger name (typically __name__ of the calling module)
        layer: Architectural layer (cache, ingestion, processing, client)
        component: Specific component within the layer
        **initial_context: Additional context key-value pairs to bind

    Usage:
        >>> log = get_logger(__name__, layer="cache", component="expiring-cache")
        >>> log.debug("entry_stale", key="assets:all")
    """
    logger = structlog.get_logger(name)

    context = {}

    if layer:
        context["layer"] = layer

    if component:
        context["component"] = component

    if name:
        context["module"] = name

    context.update(initial_context)

    if context:
        logger = logger.bind(**context)

    return logger


# ============================================================================
# Layer-Specific Logger Factories
# ============================================================================


def get_cache_logger(component: str, **context: Any) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for the cache layer (stores, memoization).

    Usage:
        >>> log = get_cache_logger("memoize", group="assets")
        >>> log.debug("cache_miss", key="assets:all")
    """
    return get_logger("cache", layer="cache", component=component, **context)


def get_ingestion_logger(
    component: str,
    endpoint: str | None = None,
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for the ingestion layer (transport, accessors, scrapers).

    Args:
        component: Component name (e.g., "fetch", "asset-page-scraper")
        endpoint: Upstream endpoint or URL - optional
        **context: Additional context (asset_id, attempt, etc.)
    """
    ctx = {}
    if endpoint:
        ctx["endpoint"] = endpoint
    ctx.update(context)

    return get_logger("ingestion", layer="ingestion", component=component, **ctx)


def get_processing_logger(
    component: str, **context: Any
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for the processing layer (field transforms, normalizers).

    Usage:
        >>> log = get_processing_logger("ticker-normalizer")
        >>> log.warning("row_skipped", index=3)
    """
    return get_logger("processing", layer="processing", component=component, **context)


def get_client_logger(
    component: str = "facade", **context: Any
) -> structlog.stdlib.BoundLogger:
    """Get a logger for the public client facade."""
    return get_logger("client", layer="client", component=component, **context)
