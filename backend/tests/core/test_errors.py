"""Error Hierarchy: status codes, envelope shape, shared login-failure message."""

from app.core.errors import (
    AccountDisabledError, AccountServiceError, ConflictError,
    CurrentPasswordMismatchError, DatabaseError, ErrorCategory,
    InvalidCredentialsError, ResourceNotFoundError,
)


def test_status_codes_follow_taxonomy():
    assert InvalidCredentialsError().http_status == 401
    assert AccountDisabledError().http_status == 401
    assert CurrentPasswordMismatchError().http_status == 401
    assert ResourceNotFoundError("x").http_status == 404
    assert ConflictError("x").http_status == 409
    assert DatabaseError("x", "op").http_status == 500


def test_all_errors_share_base():
    for exc in (
        InvalidCredentialsError(), AccountDisabledError(),
        ConflictError("x"), DatabaseError("x", "op"),
    ):
        assert isinstance(exc, AccountServiceError)


def test_to_response_is_failure_envelope():
    assert ConflictError("taken").to_response() == {
        "success": False,
        "message": "taken",
        "code": "CONFLICT",
    }


def test_detail_only_included_when_set():
    assert "detail" not in DatabaseError("boom", "op").to_response()
    body = DatabaseError("boom", "op", detail="refused").to_response()
    assert body["detail"] == "refused"


def test_database_error_keeps_operation_out_of_message():
    exc = DatabaseError("Error creating user", "create_user")
    assert exc.message == "Error creating user"
    assert exc.operation == "create_user"
    assert exc.category is ErrorCategory.DATABASE


def test_credential_failures_share_one_message():
    assert InvalidCredentialsError().message == InvalidCredentialsError().message
    assert AccountDisabledError().message != InvalidCredentialsError().message
