"""Planhat companies: records, owner references and the company service."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Union

from planhat.core.models import Codec, DATETIME, JSONModel, json_field, nested_list
from planhat.core.query import ListOptions, query_field
from .base import RecordService
from .licenses import License


@dataclass(frozen=True)
class OwnerID:
    """Owner sent as a bare user id (single-company responses)."""
    id: str


@dataclass(frozen=True)
class OwnerProfile:
    """Owner sent as an object with id and nickname (list responses)."""
    id: str
    nickname: str | None = None


Owner = Union[OwnerID, OwnerProfile]


def decode_owner(value: Any) -> Owner:
    """
    Decode an owner reference by inspecting its JSON shape.

    Args:
        value: Either a user id string or an object with "_id" and "nickName"

    Returns:
        OwnerID or OwnerProfile

    Raises:
        TypeError: If the value matches neither shape
    """
    if isinstance(value, str):
        return OwnerID(value)
    if isinstance(value, dict) and isinstance(value.get("_id"), str):
        return OwnerProfile(id=value["_id"], nickname=value.get("nickName"))
    raise TypeError(f"unrecognised owner reference: {value!r}")


def encode_owner(owner: Owner) -> Any:
    """Convert an owner reference back to the shape it was received in."""
    if isinstance(owner, OwnerProfile):
        data = {"_id": owner.id}
        if owner.nickname is not None:
            data["nickName"] = owner.nickname
        return data
    return owner.id


OWNER = Codec(decode=decode_owner, encode=encode_owner)


@dataclass
class CompanyListOptions(ListOptions):
    """Optional parameters for listing companies."""
    limit: int | None = None
    offset: int | None = None
    # Prefix the property with "-" to reverse the order
    sort: str | None = None


@dataclass
class LeanCompanyListOptions(ListOptions):
    """Filters for the lean company list."""
    external_id: str | None = query_field("externalId")
    source_id: str | None = query_field("sourceId")
    status: str | None = None


@dataclass
class LeanCompany(JSONModel):
    """Lightweight company entry used to match against your own ids."""
    id: str | None = json_field("_id")
    name: str | None = json_field("name")
    external_id: str | None = json_field("externalId")
    source_id: str | None = json_field("sourceId")
    slug: str | None = json_field("slug")


@dataclass
class Company(JSONModel):
    """A Planhat company."""
    id: str | None = json_field("_id")
    name: str | None = json_field("name")
    external_id: str | None = json_field("externalId")
    source_id: str | None = json_field("sourceId")
    owner: Owner | None = json_field("owner", codec=OWNER)
    co_owner: Owner | None = json_field("coOwner", codec=OWNER)
    csm_score: int | None = json_field("csmScore")
    custom: dict[str, Any] | None = json_field("custom")
    customer_from: datetime | None = json_field("customerFrom", codec=DATETIME)
    customer_to: datetime | None = json_field("customerTo", codec=DATETIME)
    h: int | None = json_field("h")
    last_renewal: datetime | None = json_field("lastRenewal", codec=DATETIME)
    # Shape varies upstream; kept as raw JSON
    last_touch: Any = json_field("lastTouch")
    last_touch_type: Any = json_field("lastTouchType")
    licenses: list[License] | None = json_field("licenses", codec=nested_list(License))
    mr: float | None = json_field("mr")
    mrr: float | None = json_field("mrr")
    mrr_total: float | None = json_field("mrrTotal")
    mr_total: float | None = json_field("mrTotal")
    nrr30: int | None = json_field("nrr30")
    nrr_total: int | None = json_field("nrrTotal")
    phase: str | None = json_field("phase")
    phase_since: datetime | None = json_field("phaseSince", codec=DATETIME)
    products: list[str] | None = json_field("products")
    renewal_date: datetime | None = json_field("renewalDate", codec=DATETIME)
    renewal_days_from_now: int | None = json_field("renewalDaysFromNow")
    status: str | None = json_field("status")


class CompanyService(RecordService[Company]):
    """Company endpoints."""

    record_cls = Company

    @property
    def resource(self) -> str:
        return "companies"

    def list(self, options: CompanyListOptions | None = None, *, cancel=None, timeout=None) -> list[Company]:
        """
        List companies.

        There is no "has more" marker; page with limit/offset until an
        empty list comes back.

        Args:
            options: Optional limit, offset and sort

        Returns:
            List of Company records
        """
        return self._list(options, cancel=cancel, timeout=timeout)

    def lean_list(self, options: LeanCompanyListOptions | None = None, *, cancel=None,
                  timeout=None) -> list[LeanCompany]:
        """
        Return a lightweight list of every company.

        Args:
            options: Optional externalId, sourceId and status filters

        Returns:
            List of LeanCompany records
        """
        return self._list(options, record_cls=LeanCompany, path="leancompanies",
                          cancel=cancel, timeout=timeout)
