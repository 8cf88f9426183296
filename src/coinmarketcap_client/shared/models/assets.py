# coinmarketcap_client/shared/models/assets.py

from decimal import Decimal
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class Asset(BaseModel):
    """
    Normalized ticker entry for one crypto asset.

    Monetary, supply and percentage fields are Decimal (never float) and are
    None when the provider has no data, e.g. uncapped max supply.
    Percent changes are fractions: 9.84% is stored as Decimal("0.0984").
    """

    model_config = ConfigDict(frozen=True)

    # ========== IDENTIFIERS (Required) ==========
    id: str = Field(..., min_length=1, description="Lowercase URL slug")
    name: str | None = Field(default=None)
    ticker: str = Field(..., min_length=1, description="Uppercase symbol")
    rank: int | None = Field(default=None, gt=0)

    # ========== PRICES ==========
    price_usd: Decimal | None = Field(default=None)
    price_btc: Decimal | None = Field(default=None)
    volume_usd_24h: Decimal | None = Field(default=None)
    market_cap_usd: Decimal | None = Field(default=None)

    # ========== SUPPLY ==========
    available_supply: Decimal | None = Field(default=None)
    total_supply: Decimal | None = Field(default=None)
    max_supply: Decimal | None = Field(default=None)

    # ========== CHANGES (fractions) ==========
    percent_change_1h: Decimal | None = Field(default=None)
    percent_change_24h: Decimal | None = Field(default=None)
    percent_change_7d: Decimal | None = Field(default=None)

    last_updated: int | None = Field(
        default=None, gt=0, description="Unix seconds of the provider update"
    )


class Market(BaseModel):
    """One exchange listing of an asset, scraped from its detail page."""

    model_config = ConfigDict(frozen=True)

    exchange: str = Field(..., min_length=1)
    pair: str = Field(..., min_length=1, description='Trading pair, e.g. "BTC/USD"')
    url: str
    volume_usd: Decimal
    price_usd: Decimal
    volume_percent: Decimal = Field(..., description="Share of 24h volume, fraction")

    @property
    def base(self) -> str:
        return self.pair.split("/", 1)[0]

    @property
    def quote(self) -> str | None:
        parts = self.pair.split("/", 1)
        return parts[1] if len(parts) == 2 else None


class Link(BaseModel):
    """External reference listed on an asset page (website, explorer...)."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)

    @model_validator(mode="after")
    def check_label_is_not_url(self):
        if self.label == self.url:
            raise ValueError(f"link label same as URL: {self.label!r}")
        return self


class GlobalStats(BaseModel):
    """Aggregate market snapshot."""

    model_config = ConfigDict(frozen=True)

    total_market_cap_usd: Decimal
    total_volume_usd_24h: Decimal
    bitcoin_dominance: Decimal = Field(..., description="Fraction of total market cap")
    active_currencies: int | None = Field(default=None)
    active_assets: int | None = Field(default=None)
    active_markets: int | None = Field(default=None)
    last_updated: int | None = Field(default=None, gt=0)


ItemT = TypeVar("ItemT")


class PageSection(BaseModel, Generic[ItemT]):
    """
    Result of parsing one section of an asset page.

    ``parsed`` with empty ``items`` means the section exists but lists
    nothing; ``error`` set means the markup could not be parsed.
    """

    model_config = ConfigDict(frozen=True)

    items: tuple[ItemT, ...] = Field(default=())
    error: str | None = Field(default=None)

    @computed_field
    @property
    def parsed(self) -> bool:
        return self.error is None


class AssetPage(BaseModel):
    """Everything scraped from one asset detail page."""

    model_config = ConfigDict(frozen=True)

    asset_id: str
    markets: PageSection[Market]
    links: PageSection[Link]
