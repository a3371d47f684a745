"""Error taxonomy for the Planhat client."""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of API error kinds. Each value is the kind's message."""
    BAD_REQUEST = "planhat: bad request"
    UNAUTHORIZED = "planhat: unauthorized request"
    FORBIDDEN = "planhat: forbidden"
    NOT_FOUND = "planhat: not found"
    INTERNAL_ERROR = "planhat: internal error"
    UNKNOWN = "planhat: unexpected error occurred"
    MISSING_TENANT_ID = "planhat: missing required tenant uuid for this request"


class PlanhatError(Exception):
    """Base class for every error raised by the client itself."""
    pass


class ConfigError(PlanhatError):
    """Raised when the client cannot be configured (e.g. missing API key)."""
    pass


class RequestCancelledError(PlanhatError):
    """Raised when a call is cancelled or its deadline passes before sending."""
    pass


class DecodeError(PlanhatError):
    """Raised when a response body cannot be decoded into the expected record."""
    pass


class APIError(PlanhatError):
    """
    An error identified only by its kind.

    The message is the kind's static text. Instances compare equal when
    their kinds match, and also compare equal to the ErrorKind itself.
    """

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, status_code: int | None = None):
        super().__init__(self.kind.value)
        self.status_code = status_code

    def __eq__(self, other):
        if isinstance(other, APIError):
            return self.kind is other.kind
        if isinstance(other, ErrorKind):
            return self.kind is other
        return NotImplemented

    def __hash__(self):
        return hash(self.kind)


class BadRequestError(APIError):
    kind = ErrorKind.BAD_REQUEST


class UnauthorizedError(APIError):
    """Also returned when the client is pointed at the wrong region."""
    kind = ErrorKind.UNAUTHORIZED


class ForbiddenError(APIError):
    kind = ErrorKind.FORBIDDEN


class NotFoundError(APIError):
    kind = ErrorKind.NOT_FOUND


class InternalError(APIError):
    kind = ErrorKind.INTERNAL_ERROR


class UnknownError(APIError):
    kind = ErrorKind.UNKNOWN


class MissingTenantIDError(APIError):
    """Raised before any metrics push when no tenant UUID is configured."""
    kind = ErrorKind.MISSING_TENANT_ID


_STATUS_ERRORS: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    500: InternalError,
}


def error_for_status(status_code: int, strict_not_found: bool = False) -> APIError | None:
    """
    Map an HTTP status code to an APIError.

    Args:
        status_code: Numeric HTTP status of the response
        strict_not_found: Route 404 to NotFoundError instead of UnknownError

    Returns:
        None for statuses in [200, 399], otherwise the matching error
    """
    if 200 <= status_code < 400:
        return None

    if status_code == 404 and strict_not_found:
        return NotFoundError(status_code)

    error_cls = _STATUS_ERRORS.get(status_code, UnknownError)
    return error_cls(status_code)
