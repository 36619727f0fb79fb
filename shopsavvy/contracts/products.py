"""
Product and offer contracts.

Field names follow the API payload: ``title`` is the product name,
``shopsavvy`` the internal product id, ``amazon`` the ASIN and ``images``
the list of image URLs.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class OutputFormat(str, Enum):
    JSON = "json"
    CSV = "csv"


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------

class ProductDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    shopsavvy: str
    brand: Optional[str] = None
    category: Optional[str] = None
    images: Optional[List[str]] = None
    barcode: Optional[str] = None
    amazon: Optional[str] = None
    model: Optional[str] = None
    mpn: Optional[str] = None
    color: Optional[str] = None


class PriceHistoryEntry(BaseModel):
    """Single price point in history."""

    model_config = ConfigDict(frozen=True)

    date: str                            # YYYY-MM-DD
    price: float
    availability: str


# ---------------------------------------------------------------------------
# Offers
# ---------------------------------------------------------------------------

class _OfferFields(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    retailer: Optional[str] = None
    price: Optional[float] = None
    currency: Optional[str] = None
    availability: Optional[str] = None
    condition: Optional[str] = None
    url: Optional[str] = Field(default=None, alias="URL")
    seller: Optional[str] = None
    timestamp: Optional[str] = None


class Offer(_OfferFields):
    """Offer from one retailer, optionally with its embedded history."""

    history: Optional[List[PriceHistoryEntry]] = None


class OfferWithHistory(_OfferFields):
    """Offer returned by the price history endpoint."""

    price_history: List[PriceHistoryEntry]


class ProductWithOffers(ProductDetails):
    """Product with nested offers (returned by the offers endpoint)."""

    offers: List[Offer]
