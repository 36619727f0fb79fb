"""
Monitoring and usage contracts.

Scheduling responses come in single and batch variants; batch variants pair
each submitted identifier with its own outcome.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class MonitoringFrequency(str, Enum):
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"


# ---------------------------------------------------------------------------
# Scheduling
# ---------------------------------------------------------------------------

class ScheduleResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    scheduled: bool
    product_id: str


class ScheduleBatchResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    identifier: str
    scheduled: bool
    product_id: str


class RemoveResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    removed: bool


class RemoveBatchResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    identifier: str
    removed: bool


class ScheduledProduct(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: str
    identifier: str
    frequency: str
    retailer: Optional[str] = None
    created_at: str
    last_refreshed: Optional[str] = None


# ---------------------------------------------------------------------------
# Usage
# ---------------------------------------------------------------------------

class UsagePeriod(BaseModel):
    """Current billing period."""

    model_config = ConfigDict(frozen=True)

    start_date: str
    end_date: str
    credits_used: int
    credits_limit: int
    credits_remaining: int
    requests_made: int


class UsageInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_period: UsagePeriod
    usage_percentage: float
