"""Tests for the service-error to HTTP translation."""

import pytest
from app.core.errors import (
    GENERIC_UNAUTHENTICATED,
    APIError,
    Conflict,
    Forbidden,
    InvalidReference,
    NotFound,
    Unauthorized,
    translate_service_error,
)
from app.services._shared.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    InvalidReferenceError,
    NotFoundError,
    ServiceError,
)


@pytest.mark.parametrize(
    "exc, expected_type, status, code",
    [
        (AuthenticationError("Invalid email or password"), Unauthorized, 401, "unauthorized"),
        (AuthorizationError("nope"), Forbidden, 403, "forbidden"),
        (NotFoundError("Business", 3), NotFound, 404, "not_found"),
        (InvalidReferenceError("Service", 9), InvalidReference, 400, "invalid_reference"),
        (ConflictError("Employee", "email taken"), Conflict, 409, "conflict"),
        (ServiceError("bad price"), APIError, 400, "bad_request"),
    ],
)
def test_translation_table(exc, expected_type, status, code):
    err = translate_service_error(exc)
    assert type(err) is expected_type
    assert err.status_code == status
    assert err.code == code


def test_messages_are_carried_over():
    assert translate_service_error(InvalidReferenceError("Service", 9)).message == (
        "Service with id 9 does not exist"
    )
    assert translate_service_error(NotFoundError("Business", 3)).message == "Business not found: 3"


def test_empty_authentication_message_falls_back_to_generic():
    assert translate_service_error(AuthenticationError()).message == GENERIC_UNAUTHENTICATED


def test_problem_payload_shape(app):
    with app.test_request_context("/api/v1/things"):
        problem = Conflict("Duplicate").to_problem()

    assert problem["status"] == 409
    assert problem["title"] == "Conflict"
    assert problem["detail"] == "Duplicate"
    assert problem["instance"] == "/api/v1/things"
    assert problem["code"] == "conflict"
    assert problem["request_id"]
