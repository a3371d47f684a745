"""Planhat assets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from planhat.core.models import JSONModel, json_field
from planhat.core.query import ListOptions
from .base import RecordService


@dataclass
class AssetListOptions(ListOptions):
    """Optional parameters for listing assets."""
    limit: int | None = None
    offset: int | None = None
    # Prefix the property with "-" to reverse the order
    sort: str | None = None
    # Comma separated, case sensitive Planhat property names, e.g. "companyId,name"
    select: str | None = None


@dataclass
class Asset(JSONModel):
    """
    A Planhat asset.

    Creating an asset requires a name and a valid company_id.
    """
    id: str | None = json_field("_id")
    name: str | None = json_field("name")
    company_id: str | None = json_field("companyId")
    external_id: str | None = json_field("externalId")
    source_id: str | None = json_field("sourceId")
    custom: dict[str, Any] | None = json_field("custom")


class AssetService(RecordService[Asset]):
    """Asset endpoints."""

    record_cls = Asset

    @property
    def resource(self) -> str:
        return "assets"

    def list(self, options: AssetListOptions | None = None, *, cancel=None, timeout=None) -> list[Asset]:
        """
        List assets.

        Args:
            options: Optional limit, offset, sort and select

        Returns:
            List of Asset records
        """
        return self._list(options, cancel=cancel, timeout=timeout)
