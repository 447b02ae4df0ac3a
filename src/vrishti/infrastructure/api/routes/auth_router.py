"""Authentication API routes.

Provides endpoints for account registration and login. No token or
session is issued: callers resubmit credentials when they need to.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from vrishti.domain.exceptions import (
    AccountNotFoundError,
    DuplicateAccountError,
    InvalidCredentialsError,
    PersistenceError,
)
from vrishti.infrastructure.api.dependencies import AccountServiceDep
from vrishti.infrastructure.api.schemas import (
    AccountResponse,
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)

router = APIRouter()


@router.post(
    "/register",
    response_model=RegisterResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Email already registered or invalid body"},
        500: {"model": ErrorResponse, "description": "Store failure"},
    },
)
async def register(
    request: RegisterRequest,
    accounts: AccountServiceDep,
) -> RegisterResponse | JSONResponse:
    """Register a farmer or company account."""
    try:
        user = await accounts.register(
            name=request.name,
            email=request.email,
            password=request.password,
            role=request.role,
        )
    except DuplicateAccountError:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "User already exists"},
        )
    except PersistenceError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Registration failed"},
        )

    return RegisterResponse(message="Registered successfully", account_id=user.id)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Unknown email or invalid body"},
        401: {"model": ErrorResponse, "description": "Incorrect password"},
        500: {"model": ErrorResponse, "description": "Store failure"},
    },
)
async def login(
    request: LoginRequest,
    accounts: AccountServiceDep,
) -> LoginResponse | JSONResponse:
    """Check credentials and return the account (without its password digest)."""
    try:
        user = await accounts.login(email=request.email, password=request.password)
    except AccountNotFoundError:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "User not found"},
        )
    except InvalidCredentialsError:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": "Incorrect password"},
        )
    except PersistenceError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Login failed"},
        )

    return LoginResponse(
        message="Login successful",
        account=AccountResponse.model_validate(user),
    )
