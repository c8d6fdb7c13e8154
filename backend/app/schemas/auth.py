"""Auth Schemas: login, registration, profile and password records.

Invariants:
    - "Required" follows truthiness: empty strings and userId=0 count as missing
    - userId accepts integers and numeric strings, never JSON booleans
    - Password routes check presence first, then minimum length
    - Public account records never carry the password

Design Decisions:
    - All request fields Optional at the type level: presence is a contract rule with
      its own message, not a generic "field required" error
    - camelCase aliases on the wire (userId, newPassword), snake_case in Python
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from app.core.credentials import MIN_PASSWORD_LENGTH, password_too_short
from app.schemas import REQUEST_CONTRACT_ERROR


def _contract_error(message: str) -> PydanticCustomError:
    return PydanticCustomError(REQUEST_CONTRACT_ERROR, message)


# --- Requests -----------------------------------------------------------------

class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None

    @model_validator(mode="after")
    def require_credentials(self):
        if not self.username or not self.password:
            raise _contract_error("Username and password are required")
        return self


class RegisterRequest(BaseModel):
    """Registration: username, password, name required; email optional."""
    username: str | None = None
    password: str | None = None
    name: str | None = None
    email: str | None = None

    @model_validator(mode="after")
    def require_fields(self):
        if not self.username or not self.password or not self.name:
            raise _contract_error("Username, password and name are required")
        if not self.email:
            self.email = None
        return self


class _PasswordUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: int | None = Field(None, alias="userId")
    new_password: str | None = Field(None, alias="newPassword")

    @field_validator("user_id", mode="before")
    @classmethod
    def reject_boolean_id(cls, v):
        # bool is an int subclass; lax mode would read true as id 1
        if isinstance(v, bool):
            raise ValueError("userId must be an integer")
        return v

    @model_validator(mode="after")
    def check_new_password(self):
        if not self.user_id or not self.new_password:
            raise _contract_error("User ID and new password are required")
        if password_too_short(self.new_password):
            raise _contract_error(
                f"New password must be at least {MIN_PASSWORD_LENGTH} characters long",
            )
        return self


class ChangePasswordRequest(_PasswordUpdate):
    """Change password: currentPassword checked only when supplied."""
    current_password: str | None = Field(None, alias="currentPassword")


class ResetPasswordRequest(_PasswordUpdate):
    """Reset password: no current-password check."""


# --- Responses ----------------------------------------------------------------

class AccountPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    name: str
    email: str | None = None


class AccountProfile(AccountPublic):
    created_at: datetime
    last_login: datetime | None = None


class AccountRef(BaseModel):
    id: int
    username: str


class LoginResponse(BaseModel):
    success: bool = True
    message: str = "Login successful"
    user: AccountPublic


class RegisterResponse(BaseModel):
    success: bool = True
    message: str = "User registered successfully"
    user: AccountPublic


class ProfileResponse(BaseModel):
    success: bool = True
    user: AccountProfile


class ChangePasswordResponse(BaseModel):
    success: bool = True
    message: str = "Password updated successfully"
    username: str


class ResetPasswordResponse(BaseModel):
    success: bool = True
    message: str = "Password reset successfully"
    user: AccountRef
