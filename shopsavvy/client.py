"""
ShopSavvy Data API client.

Purpose:
- Validates the API key before any network use
- Sends every API call through one request pipeline (_request)
- Decodes responses into the envelopes defined in shopsavvy/contracts
- Maps HTTP and transport failures onto shopsavvy.errors

Usage:
    async with ShopSavvyClient("ss_live_your_api_key_here") as client:
        product = await client.get_product_details("012345678901")
        print(product.data[0].title)

Important:
- No retries, no caching: one request/response exchange per call.
- The client holds no mutable state, so concurrent calls may share it.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from shopsavvy import __version__
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
from shopsavvy.endpoints import (
    ENDPOINTS,
    Identifiers,
    QueryParams,
    build_body,
    build_params,
    join_identifiers,
    monitoring_frequency,
    output_format,
)
from shopsavvy.errors import (
    InvalidApiKeyError,
    JSONError,
    MissingApiKeyError,
    NetworkError,
    RequestTimeoutError,
    error_from_status,
    extract_error_message,
)
from shopsavvy.utils.config_loader import Config

logger = logging.getLogger(__name__)

API_KEY_PATTERN = re.compile(r"^ss_(live|test)_[a-zA-Z0-9]+$")
USER_AGENT = f"ShopSavvy-Python-SDK/{__version__}"

M = TypeVar("M", bound=BaseModel)
DateLike = Union[str, date]
Format = Optional[Union[OutputFormat, str]]


def validate_api_key(api_key: str) -> None:
    if not api_key:
        raise MissingApiKeyError()
    if not API_KEY_PATTERN.fullmatch(api_key):
        raise InvalidApiKeyError()


class ShopSavvyClient:
    def __init__(
        self,
        config: Union[Config, str],
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if isinstance(config, str):
            config = Config.new(config)
        validate_api_key(config.api_key)

        self._config = config
        self._base_url = config.base_url.rstrip("/")
        self._headers: Dict[str, str] = {
            "Authorization": f"Bearer {config.api_key}",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }
        self._http = httpx.AsyncClient(
            headers=self._headers,
            timeout=config.timeout,
            transport=transport,
        )

    @property
    def config(self) -> Config:
        return self._config

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "ShopSavvyClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Request pipeline
    # ------------------------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        response_model: Type[M],
        params: Optional[QueryParams] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> M:
        url = f"{self._base_url}{path}"
        logger.debug(
            "%s %s params=%s body=%s",
            method,
            path,
            [key for key, _ in params or []],
            sorted(body) if body else None,
        )

        try:
            response = await self._http.request(method, url, params=params or None, json=body)
        except httpx.TimeoutException as exc:
            logger.error("Request to %s timed out after %ss", path, self._config.timeout)
            raise RequestTimeoutError() from exc
        except httpx.HTTPError as exc:
            logger.error("Request error connecting to ShopSavvy API (%s): %s", path, exc)
            raise NetworkError(str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            message = extract_error_message(response.text)
            logger.warning("ShopSavvy API returned %s for %s %s: %s", response.status_code, method, path, message)
            raise error_from_status(response.status_code, message)

        try:
            return response_model.model_validate_json(response.text)
        except PydanticValidationError as exc:
            logger.error("Could not decode %s response from %s: %s", response_model.__name__, path, exc)
            raise JSONError(str(exc), status_code=response.status_code) from exc

    async def _call(
        self,
        operation: str,
        params: Optional[QueryParams] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        endpoint = ENDPOINTS[operation]
        return await self._request(endpoint.method, endpoint.path, endpoint.response_model, params, body)

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    async def search_products(
        self, query: str, limit: Optional[int] = None, offset: Optional[int] = None
    ) -> ProductSearchResult:
        """Search for products by keyword."""
        params = build_params(("q", query), ("limit", limit), ("offset", offset))
        return await self._call("search_products", params=params)

    async def get_product_details(
        self, identifier: str, format: Format = None
    ) -> ApiResponse[List[ProductDetails]]:
        """
        Look up product details by identifier.

        Args:
            identifier: Barcode, ASIN, URL, model number or ShopSavvy product ID
            format: Optional output format (json or csv)
        """
        params = build_params(("ids", identifier), ("format", output_format(format)))
        return await self._call("get_product_details", params=params)

    async def get_product_details_batch(
        self, identifiers: Identifiers, format: Format = None
    ) -> ApiResponse[List[ProductDetails]]:
        params = build_params(("ids", join_identifiers(identifiers)), ("format", output_format(format)))
        return await self._call("get_product_details_batch", params=params)

    # ------------------------------------------------------------------
    # Offers
    # ------------------------------------------------------------------

    async def get_current_offers(
        self, identifier: str, retailer: Optional[str] = None, format: Format = None
    ) -> ApiResponse[List[ProductWithOffers]]:
        """Get current offers for a product, optionally limited to one retailer."""
        params = build_params(
            ("ids", identifier),
            ("retailer", retailer),
            ("format", output_format(format)),
        )
        return await self._call("get_current_offers", params=params)

    async def get_current_offers_batch(
        self, identifiers: Identifiers, retailer: Optional[str] = None, format: Format = None
    ) -> ApiResponse[List[ProductWithOffers]]:
        params = build_params(
            ("ids", join_identifiers(identifiers)),
            ("retailer", retailer),
            ("format", output_format(format)),
        )
        return await self._call("get_current_offers_batch", params=params)

    async def get_price_history(
        self,
        identifier: str,
        start_date: DateLike,
        end_date: DateLike,
        retailer: Optional[str] = None,
        format: Format = None,
    ) -> ApiResponse[List[OfferWithHistory]]:
        """
        Get price history for a product.

        Dates are YYYY-MM-DD strings or ``datetime.date`` values.
        """
        params = build_params(
            ("ids", identifier),
            ("start_date", start_date),
            ("end_date", end_date),
            ("retailer", retailer),
            ("format", output_format(format)),
        )
        return await self._call("get_price_history", params=params)

    # ------------------------------------------------------------------
    # Monitoring
    # ------------------------------------------------------------------

    async def schedule_product_monitoring(
        self,
        identifier: str,
        frequency: Union[MonitoringFrequency, str],
        retailer: Optional[str] = None,
    ) -> ApiResponse[ScheduleResponse]:
        body = build_body(identifier=identifier, frequency=monitoring_frequency(frequency), retailer=retailer)
        return await self._call("schedule_product_monitoring", body=body)

    async def schedule_product_monitoring_batch(
        self,
        identifiers: Identifiers,
        frequency: Union[MonitoringFrequency, str],
        retailer: Optional[str] = None,
    ) -> ApiResponse[List[ScheduleBatchResponse]]:
        body = build_body(
            identifiers=join_identifiers(identifiers),
            frequency=monitoring_frequency(frequency),
            retailer=retailer,
        )
        return await self._call("schedule_product_monitoring_batch", body=body)

    async def get_scheduled_products(self) -> ApiResponse[List[ScheduledProduct]]:
        return await self._call("get_scheduled_products")

    async def remove_product_from_schedule(self, identifier: str) -> ApiResponse[RemoveResponse]:
        return await self._call("remove_product_from_schedule", body=build_body(identifier=identifier))

    async def remove_products_from_schedule(
        self, identifiers: Identifiers
    ) -> ApiResponse[List[RemoveBatchResponse]]:
        body = build_body(identifiers=join_identifiers(identifiers))
        return await self._call("remove_products_from_schedule", body=body)

    # ------------------------------------------------------------------
    # Usage
    # ------------------------------------------------------------------

    async def get_usage(self) -> ApiResponse[UsageInfo]:
        """Get API usage and credit information for the current billing period."""
        return await self._call("get_usage")
