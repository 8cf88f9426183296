"""Shared domain models."""

from coinmarketcap_client.shared.models.assets import (
    Asset,
    AssetPage,
    GlobalStats,
    Link,
    Market,
    PageSection,
)

__all__ = [
    "Asset",
    "AssetPage",
    "GlobalStats",
    "Link",
    "Market",
    "PageSection",
]
