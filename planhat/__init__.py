"""
Planhat API client.

Construct a Client, then use its services to reach each part of the API:

    >>> client = Client(api_key, region="eu3")
    >>> companies = client.companies.list(CompanyListOptions(limit=10, offset=0))
    >>> client.close()

Pagination is left to the caller: increase ``offset`` by ``limit`` until
an empty list comes back.
"""

from .client import Client
from .core import (
    APIError,
    BadRequestError,
    ClientConfig,
    ConfigError,
    DecodeError,
    DeleteResponse,
    ErrorKind,
    ForbiddenError,
    InternalError,
    MissingTenantIDError,
    NotFoundError,
    PlanhatError,
    RateLimiter,
    RequestCancelledError,
    UnauthorizedError,
    UnknownError,
    UpsertResponse,
    load_config,
)
from .resources import (
    Asset,
    AssetListOptions,
    Company,
    CompanyListOptions,
    DimensionData,
    LeanCompany,
    LeanCompanyListOptions,
    License,
    Metric,
    MetricsListOptions,
    OwnerID,
    OwnerProfile,
    UpsertMetricsResponse,
    User,
)

__all__ = [
    "Client",
    "APIError",
    "BadRequestError",
    "ClientConfig",
    "ConfigError",
    "DecodeError",
    "DeleteResponse",
    "ErrorKind",
    "ForbiddenError",
    "InternalError",
    "MissingTenantIDError",
    "NotFoundError",
    "PlanhatError",
    "RateLimiter",
    "RequestCancelledError",
    "UnauthorizedError",
    "UnknownError",
    "UpsertResponse",
    "load_config",
    "Asset",
    "AssetListOptions",
    "Company",
    "CompanyListOptions",
    "DimensionData",
    "LeanCompany",
    "LeanCompanyListOptions",
    "License",
    "Metric",
    "MetricsListOptions",
    "OwnerID",
    "OwnerProfile",
    "UpsertMetricsResponse",
    "User",
]
