"""Derived lookups over the normalized asset list."""

from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

from coinmarketcap_client.shared.models import Asset

T = TypeVar("T")

# Unranked assets sort after every ranked one
_UNRANKED = float("inf")


def group_by_key(items: Iterable[T], key: Callable[[T], Hashable]) -> dict[Hashable, list[T]]:
    """Group ``items`` by ``key``, keeping input order inside each group."""
    groups: dict[Hashable, list[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def _rank_order(asset: Asset) -> float:
    return asset.rank if asset.rank is not None else _UNRANKED


class AssetIndex:
    """
    Asset list with ticker and id lookups.

    One ticker may map to several assets. Each ticker group is sorted by rank
    (stable, so provider order breaks ties), which makes the first entry the
    asset with the biggest market cap.

    The index is cached and shared between callers, so assets and ticker
    groups are held as tuples and lookups hand out fresh lists.
    """

    def __init__(self, assets: Iterable[Asset]):
        self.assets: tuple[Asset, ...] = tuple(assets)
        self._by_ticker = {
            ticker: tuple(sorted(group, key=_rank_order))
            for ticker, group in group_by_key(self.assets, lambda a: a.ticker.upper()).items()
        }
        self._by_id = {asset.id: asset for asset in self.assets}

    def by_ticker(self, ticker: str) -> list[Asset] | None:
        """All assets listed under ``ticker`` (case-insensitive), rank first."""
        group = self._by_ticker.get(ticker.upper())
        return list(group) if group is not None else None

    def by_id(self, asset_id: str) -> Asset | None:
        return self._by_id.get(asset_id)

    def __len__(self) -> int:
        return len(self.assets)

    def __repr__(self) -> str:
        return f"AssetIndex(assets={len(self.assets)}, tickers={len(self._by_ticker)})"
