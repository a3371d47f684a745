"""Planhat licence records, as embedded in companies."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from planhat.core.models import DATETIME, JSONModel, json_field, nested


@dataclass
class Currency(JSONModel):
    id: str | None = json_field("_id")
    symbol: str | None = json_field("symbol")
    rate: float | None = json_field("rate")
    is_base: bool | None = json_field("isBase")
    overrides: dict[str, Any] | None = json_field("overrides")


@dataclass
class License(JSONModel):
    """A licence (recurring revenue item) belonging to a company."""
    id: str | None = json_field("_id")
    external_id: str | None = json_field("externalId")
    value: float | None = json_field("value")
    currency: Currency | None = json_field("_currency", codec=nested(Currency))
    from_date: datetime | None = json_field("fromDate", codec=DATETIME)
    to_date: datetime | None = json_field("toDate", codec=DATETIME)
    product: str | None = json_field("product")
    company_id: str | None = json_field("companyId")
    company_name: str | None = json_field("companyName")
    custom: dict[str, Any] | None = json_field("custom")
    status: str | None = json_field("status")
    renewal_status: str | None = json_field("renewalStatus")
    fixed_period: bool | None = json_field("fixedPeriod")
    to_date_included: bool | None = json_field("toDateIncluded")
    length: float | None = json_field("length")
    mrr: float | None = json_field("mrr")
    renewal_period: float | None = json_field("renewalPeriod")
    renewal_unit: str | None = json_field("renewalUnit")
    renewal_date: datetime | None = json_field("renewalDate", codec=DATETIME)
    renewal_days_from_now: int | None = json_field("renewalDaysFromNow")
    notice_period: float | None = json_field("noticePeriod")
    notice_unit: str | None = json_field("noticeUnit")
    is_overdue: bool | None = json_field("isOverdue")
