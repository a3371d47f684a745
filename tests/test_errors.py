"""Tests for status-code mapping and the error taxonomy."""

import pytest

from planhat.core.errors import (
    APIError,
    BadRequestError,
    ErrorKind,
    ForbiddenError,
    InternalError,
    MissingTenantIDError,
    NotFoundError,
    PlanhatError,
    UnauthorizedError,
    UnknownError,
    error_for_status,
)


@pytest.mark.parametrize("status_code,error_cls,kind", [
    (400, BadRequestError, ErrorKind.BAD_REQUEST),
    (401, UnauthorizedError, ErrorKind.UNAUTHORIZED),
    (403, ForbiddenError, ErrorKind.FORBIDDEN),
    (500, InternalError, ErrorKind.INTERNAL_ERROR),
])
def test_known_statuses(status_code, error_cls, kind):
    """Test that documented statuses map to their own kind."""
    error = error_for_status(status_code)

    assert isinstance(error, error_cls)
    assert error.kind is kind
    assert error.status_code == status_code


@pytest.mark.parametrize("status_code", [100, 199, 402, 404, 409, 429, 501, 502, 503])
def test_other_statuses_are_unknown(status_code):
    """Test that any other failing status maps to UnknownError."""
    error = error_for_status(status_code)

    assert isinstance(error, UnknownError)
    assert error.kind is ErrorKind.UNKNOWN


@pytest.mark.parametrize("status_code", [200, 201, 204, 301, 399])
def test_success_range_has_no_error(status_code):
    """Test that statuses in [200, 399] are not errors."""
    assert error_for_status(status_code) is None


def test_404_routes_to_not_found_when_strict():
    """Test strict mode maps 404 to NotFoundError."""
    error = error_for_status(404, strict_not_found=True)

    assert isinstance(error, NotFoundError)
    assert error.kind is ErrorKind.NOT_FOUND


def test_strict_mode_leaves_other_statuses_alone():
    """Test strict mode only changes 404."""
    assert isinstance(error_for_status(403, strict_not_found=True), ForbiddenError)
    assert isinstance(error_for_status(410, strict_not_found=True), UnknownError)


def test_error_message_is_static():
    """Test that the message is the kind's text with no extra context."""
    assert str(BadRequestError(400)) == "planhat: bad request"
    assert str(UnauthorizedError()) == "planhat: unauthorized request"
    assert str(MissingTenantIDError()) == (
        "planhat: missing required tenant uuid for this request"
    )


def test_errors_compare_by_kind():
    """Test equality is by kind only."""
    assert ForbiddenError(403) == ForbiddenError()
    assert ForbiddenError() == ErrorKind.FORBIDDEN
    assert ForbiddenError() != UnknownError()
    assert ForbiddenError() != ErrorKind.UNKNOWN


def test_hierarchy():
    """Test every API error is catchable as PlanhatError."""
    for error_cls in (BadRequestError, UnauthorizedError, ForbiddenError, NotFoundError,
                      InternalError, UnknownError, MissingTenantIDError):
        assert issubclass(error_cls, APIError)
        assert issubclass(error_cls, PlanhatError)


def test_error_kinds_are_closed():
    """Test the set of kinds."""
    assert {kind.name for kind in ErrorKind} == {
        "BAD_REQUEST",
        "UNAUTHORIZED",
        "FORBIDDEN",
        "NOT_FOUND",
        "INTERNAL_ERROR",
        "UNKNOWN",
        "MISSING_TENANT_ID",
    }
