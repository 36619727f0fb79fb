"""
Contracts (data models).

Typed shapes of every ShopSavvy Data API response:
- envelopes.py: the generic metadata envelope and the paginated search envelope
- products.py: products, offers and price history
- monitoring.py: scheduling and usage payloads

All models are frozen; a decoded response is never mutated.
"""

from .envelopes import ApiMeta, ApiResponse, PaginationInfo, ProductSearchResult
from .monitoring import (
    MonitoringFrequency,
    RemoveBatchResponse,
    RemoveResponse,
    ScheduleBatchResponse,
    ScheduledProduct,
    ScheduleResponse,
    UsageInfo,
    UsagePeriod,
)
from .products import (
    Offer,
    OfferWithHistory,
    OutputFormat,
    PriceHistoryEntry,
    ProductDetails,
    ProductWithOffers,
)

__all__ = [
    # envelopes
    "ApiMeta", "ApiResponse", "PaginationInfo", "ProductSearchResult",
    # products
    "OutputFormat", "ProductDetails", "PriceHistoryEntry", "Offer",
    "ProductWithOffers", "OfferWithHistory",
    # monitoring
    "MonitoringFrequency", "ScheduleResponse", "ScheduleBatchResponse",
    "RemoveResponse", "RemoveBatchResponse", "ScheduledProduct",
    "UsagePeriod", "UsageInfo",
]
