"""Core components shared by the Planhat client and its resource services."""

from .errors import (
    ErrorKind,
    PlanhatError,
    ConfigError,
    RequestCancelledError,
    DecodeError,
    APIError,
    BadRequestError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    InternalError,
    UnknownError,
    MissingTenantIDError,
    error_for_status,
)
from .ratelimit import RateLimiter
from .query import ListOptions, add_options, query_field
from .config import (
    ClientConfig,
    METRICS_URL,
    base_url_for_region,
    load_config,
)
from .models import JSONModel, UpsertResponse, DeleteResponse

__all__ = [
    "ErrorKind",
    "PlanhatError",
    "ConfigError",
    "RequestCancelledError",
    "DecodeError",
    "APIError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "InternalError",
    "UnknownError",
    "MissingTenantIDError",
    "error_for_status",
    "RateLimiter",
    "ListOptions",
    "add_options",
    "query_field",
    "ClientConfig",
    "METRICS_URL",
    "base_url_for_region",
    "load_config",
    "JSONModel",
    "UpsertResponse",
    "DeleteResponse",
]
