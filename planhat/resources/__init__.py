"""Resource services and records for the Planhat API."""

from .base import BULK_UPSERT_LIMIT, RecordService, Service, external_key, source_key
from .licenses import Currency, License
from .companies import (
    Company,
    CompanyListOptions,
    CompanyService,
    LeanCompany,
    LeanCompanyListOptions,
    Owner,
    OwnerID,
    OwnerProfile,
    decode_owner,
    encode_owner,
)
from .assets import Asset, AssetListOptions, AssetService
from .users import GettingStartedSteps, User, UserImage, UserService
from .metrics import (
    DimensionData,
    Metric,
    MetricsListOptions,
    MetricsService,
    UpsertMetricsResponse,
)

__all__ = [
    "BULK_UPSERT_LIMIT",
    "RecordService",
    "Service",
    "external_key",
    "source_key",
    "Currency",
    "License",
    "Company",
    "CompanyListOptions",
    "CompanyService",
    "LeanCompany",
    "LeanCompanyListOptions",
    "Owner",
    "OwnerID",
    "OwnerProfile",
    "decode_owner",
    "encode_owner",
    "Asset",
    "AssetListOptions",
    "AssetService",
    "GettingStartedSteps",
    "User",
    "UserImage",
    "UserService",
    "DimensionData",
    "Metric",
    "MetricsListOptions",
    "MetricsService",
    "UpsertMetricsResponse",
]
