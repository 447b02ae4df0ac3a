"""API Schemas for request/response validation."""

from vrishti.infrastructure.api.schemas.auth_schemas import (
    AccountResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from vrishti.infrastructure.api.schemas.waste_schemas import (
    ErrorResponse,
    MessageResponse,
    WasteCreatedResponse,
    WasteCreateRequest,
    WasteResponse,
    WasteUpdateRequest,
)

__all__ = [
    "AccountResponse",
    "ErrorResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "RegisterRequest",
    "RegisterResponse",
    "WasteCreateRequest",
    "WasteCreatedResponse",
    "WasteResponse",
    "WasteUpdateRequest",
]
