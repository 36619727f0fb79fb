"""
Endpoint table and request parameter builders.

Each API operation is data: an HTTP verb, a path and the envelope model its
response decodes into. Client methods only assemble params/bodies and look
the operation up here.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type, Union

from pydantic import BaseModel

from shopsavvy.contracts import (
    ApiResponse,
    MonitoringFrequency,
    OfferWithHistory,
    OutputFormat,
    ProductDetails,
    ProductSearchResult,
    ProductWithOffers,
    RemoveBatchResponse,
    RemoveResponse,
    ScheduleBatchResponse,
    ScheduledProduct,
    ScheduleResponse,
    UsageInfo,
)

Identifiers = Union[str, Iterable[str]]
QueryParams = List[Tuple[str, str]]


@dataclass(frozen=True)
class Endpoint:
    method: str
    path: str
    response_model: Type[BaseModel]


ENDPOINTS: Dict[str, Endpoint] = {
    "search_products": Endpoint("GET", "/products/search", ProductSearchResult),
    "get_product_details": Endpoint("GET", "/products", ApiResponse[List[ProductDetails]]),
    "get_product_details_batch": Endpoint("GET", "/products", ApiResponse[List[ProductDetails]]),
    "get_current_offers": Endpoint("GET", "/products/offers", ApiResponse[List[ProductWithOffers]]),
    "get_current_offers_batch": Endpoint("GET", "/products/offers", ApiResponse[List[ProductWithOffers]]),
    "get_price_history": Endpoint("GET", "/products/offers/history", ApiResponse[List[OfferWithHistory]]),
    "schedule_product_monitoring": Endpoint("POST", "/products/schedule", ApiResponse[ScheduleResponse]),
    "schedule_product_monitoring_batch": Endpoint(
        "POST", "/products/schedule", ApiResponse[List[ScheduleBatchResponse]]
    ),
    "get_scheduled_products": Endpoint("GET", "/products/scheduled", ApiResponse[List[ScheduledProduct]]),
    "remove_product_from_schedule": Endpoint("DELETE", "/products/schedule", ApiResponse[RemoveResponse]),
    "remove_products_from_schedule": Endpoint(
        "DELETE", "/products/schedule", ApiResponse[List[RemoveBatchResponse]]
    ),
    "get_usage": Endpoint("GET", "/usage", ApiResponse[UsageInfo]),
}


def join_identifiers(identifiers: Identifiers) -> str:
    """Comma-join identifiers for batch calls; a single string passes through."""
    if isinstance(identifiers, str):
        joined = identifiers
    else:
        joined = ",".join(identifiers)
    if not joined:
        raise ValueError("At least one product identifier is required")
    return joined


def output_format(value: Optional[Union[OutputFormat, str]]) -> Optional[OutputFormat]:
    return None if value is None else OutputFormat(value)


def monitoring_frequency(value: Union[MonitoringFrequency, str]) -> MonitoringFrequency:
    return MonitoringFrequency(value)


def _encode(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def build_params(*pairs: Tuple[str, Any]) -> QueryParams:
    """Ordered query params; pairs whose value is None are left out entirely."""
    return [(key, _encode(value)) for key, value in pairs if value is not None]


def build_body(**fields: Any) -> Dict[str, Any]:
    """JSON body with the same omission rule as build_params."""
    return {key: _encode(value) for key, value in fields.items() if value is not None}
