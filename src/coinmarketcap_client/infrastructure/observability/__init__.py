"""
Observability for the client: structlog setup and layer-specific logger factories.
"""

from .logging import (
    # Base logger factory
    get_logger,
    # Layer-specific logger factories
    get_cache_logger,
    get_client_logger,
    get_ingestion_logger,
    get_processing_logger,
    # Setup
    setup_logging,
)

__all__ = [
    # Setup
    "setup_logging",
    # Base
    "get_logger",
    # Layer-specific
    "get_cache_logger",
    "get_client_logger",
    "get_ingestion_logger",
    "get_processing_logger",
]
