"""Pydantic schemas for registration and login endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from vrishti.domain.entities import UserRole


class RegisterRequest(BaseModel):
    """Request body for account registration."""

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., min_length=1, description="User's password")
    role: UserRole = Field(..., description="farmer or company")


class RegisterResponse(BaseModel):
    """Response for a successful registration."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    account_id: str = Field(..., alias="accountId", description="New account ID")


class LoginRequest(BaseModel):
    """Request body for login."""

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., min_length=1, description="User's password")


class AccountResponse(BaseModel):
    """Account information returned by login. Never includes the digest."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(..., description="Account ID")
    name: str | None = Field(None, description="Display name")
    email: str = Field(..., description="User's email address")
    role: UserRole = Field(..., description="farmer or company")
    created_at: datetime | None = Field(None, alias="createdAt")


class LoginResponse(BaseModel):
    """Response for a successful login."""

    message: str
    account: AccountResponse
