"""Auth Request Records: presence and length rules, aliases, email normalization."""

import pytest
from pydantic import ValidationError

from app.schemas import REQUEST_CONTRACT_ERROR
from app.schemas.auth import (
    ChangePasswordRequest, LoginRequest, RegisterRequest, ResetPasswordRequest,
)


def _contract_message(exc_info) -> str:
    errors = exc_info.value.errors()
    assert errors[0]["type"] == REQUEST_CONTRACT_ERROR
    return errors[0]["msg"]


def test_login_requires_both_fields():
    with pytest.raises(ValidationError) as exc_info:
        LoginRequest(username="alice", password="")
    assert _contract_message(exc_info) == "Username and password are required"


def test_register_email_optional_and_blank_normalized():
    assert RegisterRequest(username="a", password="p", name="n").email is None
    assert RegisterRequest(username="a", password="p", name="n", email="").email is None
    assert RegisterRequest(
        username="a", password="p", name="n", email="e@x.com",
    ).email == "e@x.com"


def test_register_requires_name():
    with pytest.raises(ValidationError) as exc_info:
        RegisterRequest(username="a", password="p")
    assert "required" in _contract_message(exc_info)


def test_password_requests_read_camel_case():
    req = ChangePasswordRequest.model_validate({
        "userId": 3, "newPassword": "abcdef", "currentPassword": "old",
    })
    assert req.user_id == 3
    assert req.new_password == "abcdef"
    assert req.current_password == "old"


def test_current_password_is_optional():
    req = ChangePasswordRequest.model_validate({"userId": 3, "newPassword": "abcdef"})
    assert req.current_password is None


@pytest.mark.parametrize("model", [ChangePasswordRequest, ResetPasswordRequest])
def test_short_password_rejected(model):
    with pytest.raises(ValidationError) as exc_info:
        model.model_validate({"userId": 1, "newPassword": "abc"})
    assert "at least 6" in _contract_message(exc_info)


@pytest.mark.parametrize("model", [ChangePasswordRequest, ResetPasswordRequest])
def test_zero_user_id_counts_as_missing(model):
    with pytest.raises(ValidationError) as exc_info:
        model.model_validate({"userId": 0, "newPassword": "abcdef"})
    assert _contract_message(exc_info) == "User ID and new password are required"


@pytest.mark.parametrize("model", [ChangePasswordRequest, ResetPasswordRequest])
def test_boolean_user_id_rejected(model):
    with pytest.raises(ValidationError):
        model.model_validate({"userId": True, "newPassword": "abcdef"})


def test_numeric_string_user_id_still_accepted():
    req = ResetPasswordRequest.model_validate({"userId": "12", "newPassword": "abcdef"})
    assert req.user_id == 12
