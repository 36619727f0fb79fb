"""Pytest fixtures for ShopSavvy client tests."""

import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from shopsavvy import Config, ShopSavvyClient

VALID_KEY = "ss_test_abc123"
BASE_URL = "https://api.example.test/v1"


class FakeAPI:
    """Records every request and answers with a canned response."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.body: Any = {"success": True, "data": []}
        self.raw_text: Optional[str] = None
        self.exception: Optional[Exception] = None

    def reply(self, status_code: int = 200, body: Any = None, text: Optional[str] = None) -> None:
        self.status_code = status_code
        self.body = body
        self.raw_text = text

    def fail_with(self, exc: Exception) -> None:
        self.exception = exc

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exception is not None:
            raise self.exception
        if self.raw_text is not None:
            return httpx.Response(self.status_code, text=self.raw_text)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_params(self) -> List[tuple]:
        return list(self.last.url.params.multi_items())

    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.last.content)


@pytest.fixture
def fake_api():
    return FakeAPI()


@pytest.fixture
def make_client(fake_api) -> Callable[..., ShopSavvyClient]:
    def _make(config: Optional[Config] = None) -> ShopSavvyClient:
        config = config or Config.new(VALID_KEY).with_base_url(BASE_URL)
        return ShopSavvyClient(config, transport=httpx.MockTransport(fake_api.handler))

    return _make


@pytest.fixture
def product_payload():
    return {
        "title": "Apple iPhone 15 Pro 128GB",
        "shopsavvy": "ss-prod-1",
        "brand": "Apple",
        "category": "Phones",
        "images": ["https://img.example.test/1.jpg", "https://img.example.test/2.jpg"],
        "barcode": "012345678901",
        "amazon": "B0CHX1W1XY",
        "model": "A2848",
        "mpn": "MTUV3LL/A",
        "color": "Natural Titanium",
    }
