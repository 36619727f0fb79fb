"""
ShopSavvy Data API SDK.

Access product data, pricing information and price history across retailers:

    from shopsavvy import ShopSavvyClient

    async with ShopSavvyClient("ss_live_your_api_key_here") as client:
        offers = await client.get_current_offers("012345678901")
        for offer in offers.data[0].offers:
            print(offer.retailer, offer.price)
"""

__version__ = "1.0.1"

from .client import ShopSavvyClient
from .contracts import (
    ApiMeta,
    ApiResponse,
    MonitoringFrequency,
    Offer,
    OfferWithHistory,
    OutputFormat,
    PaginationInfo,
    PriceHistoryEntry,
    ProductDetails,
    ProductSearchResult,
    ProductWithOffers,
    RemoveBatchResponse,
    RemoveResponse,
    ScheduleBatchResponse,
    ScheduledProduct,
    ScheduleResponse,
    UsageInfo,
    UsagePeriod,
)
from .errors import (
    APIError,
    AuthenticationError,
    ConfigError,
    InvalidApiKeyError,
    JSONError,
    MissingApiKeyError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    RequestTimeoutError,
    ShopSavvyError,
    ValidationError,
)
from .utils.config_loader import Config, load_config

Client = ShopSavvyClient

__all__ = [
    "__version__",
    # client
    "Client", "ShopSavvyClient", "Config", "load_config",
    # contracts
    "ApiMeta", "ApiResponse", "PaginationInfo", "ProductSearchResult",
    "OutputFormat", "ProductDetails", "PriceHistoryEntry", "Offer",
    "ProductWithOffers", "OfferWithHistory",
    "MonitoringFrequency", "ScheduleResponse", "ScheduleBatchResponse",
    "RemoveResponse", "RemoveBatchResponse", "ScheduledProduct",
    "UsagePeriod", "UsageInfo",
    # errors
    "ShopSavvyError", "MissingApiKeyError", "InvalidApiKeyError",
    "AuthenticationError", "NotFoundError", "ValidationError",
    "RateLimitError", "APIError", "NetworkError", "RequestTimeoutError",
    "JSONError", "ConfigError",
]
