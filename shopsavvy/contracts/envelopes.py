"""
Response envelopes.

The API wraps payloads in two different outer shapes:
- ApiResponse[T]: ``success``, ``data``, optional ``message`` and a ``meta``
  object with credit usage
- ProductSearchResult: search only; ``pagination`` instead of ``message``

They mirror two distinct upstream shapes and are kept separate on purpose.
"""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from .products import ProductDetails

T = TypeVar("T")


class ApiMeta(BaseModel):
    """Credit usage reported with a response."""

    model_config = ConfigDict(frozen=True)

    credits_used: int
    credits_remaining: int
    rate_limit_remaining: Optional[int] = None


class _Envelope(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    meta: Optional[ApiMeta] = None

    @property
    def credits_used(self) -> int:
        return self.meta.credits_used if self.meta else 0

    @property
    def credits_remaining(self) -> int:
        return self.meta.credits_remaining if self.meta else 0


class ApiResponse(_Envelope, Generic[T]):
    data: T
    message: Optional[str] = None


class PaginationInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int
    limit: int
    offset: int
    returned: int


class ProductSearchResult(_Envelope):
    """Search results with pagination."""

    data: List[ProductDetails]
    pagination: Optional[PaginationInfo] = None
