"""Planhat metrics (dimension data)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Sequence

from planhat.core.errors import MissingTenantIDError
from planhat.core.models import DATETIME, JSONModel, json_field
from planhat.core.query import ListOptions, query_field
from .base import Service

logger = logging.getLogger(__name__)


@dataclass
class MetricsListOptions(ListOptions):
    """
    Optional parameters for listing metrics.

    ``from_day`` and ``to_day`` are day numbers since the Unix epoch.
    """
    cid: str | None = None
    dimid: str | None = None
    from_day: int | None = query_field("from")
    to_day: int | None = query_field("to")
    limit: int | None = None
    offset: int | None = None


@dataclass
class Metric(JSONModel):
    """A metric value to push to Planhat."""
    # No spaces or special characters, e.g. "activeusershare"
    dimension_id: str | None = json_field("dimensionId")
    value: float | None = json_field("value")
    # External id of the model object the value belongs to
    external_id: str | None = json_field("externalId")
    # Company (default), EndUser, Asset or Project
    model: str | None = json_field("model")
    # ISO date of the event; Planhat uses the receive time when unset
    date: str | None = json_field("date")


@dataclass
class DimensionData(JSONModel):
    """A stored metric value returned by the list endpoint."""
    id: str | None = json_field("_id")
    dimension_id: str | None = json_field("dimensionId")
    time: datetime | None = json_field("time", codec=DATETIME)
    value: float | None = json_field("value")
    model: str | None = json_field("model")
    parent_id: str | None = json_field("parentId")
    company_id: str | None = json_field("companyId")
    company_name: str | None = json_field("companyName")


@dataclass
class UpsertMetricsResponse(JSONModel):
    """Result of pushing metrics to the analytics endpoint."""
    processed: int = json_field("processed", default=0)
    errors: list[Any] = json_field("errors", default_factory=list)


class MetricsService(Service):
    """Metrics endpoints."""

    @property
    def resource(self) -> str:
        return "dimensiondata"

    def list(self, options: MetricsListOptions | None = None, *, cancel=None,
             timeout=None) -> list[DimensionData]:
        """
        List stored metric values.

        Args:
            options: Optional company, dimension, day range and paging filters

        Returns:
            List of DimensionData records
        """
        url = self._url(options=options)
        data = self._call("GET", url, decode=DimensionData.from_list, cancel=cancel, timeout=timeout)
        return data if data is not None else []

    def bulk_upsert(self, metrics: Sequence[Metric], *, cancel=None, timeout=None) -> UpsertMetricsResponse:
        """
        Push metric values for the configured tenant.

        Requires the tenant UUID (Developer module, Tokens section) to be
        set on the client.

        Raises:
            MissingTenantIDError: If no tenant UUID is configured; no
                request is made
        """
        tenant_uuid = self.client.tenant_uuid
        if not tenant_uuid:
            raise MissingTenantIDError()

        url = f"{self.client.metrics_url.rstrip('/')}/{tenant_uuid}"
        payload = [metric.to_dict() for metric in metrics]
        logger.debug(f"Pushing {len(payload)} metrics")

        response = self._call("POST", url, payload=payload, decode=UpsertMetricsResponse.from_dict,
                              cancel=cancel, timeout=timeout)
        return response if response is not None else UpsertMetricsResponse()
