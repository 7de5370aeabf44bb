"""
API v1 routes.

Defines the REST endpoint for the registration API.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from src.adapters.directory.memory import InMemoryUserDirectory
from src.api.dependencies import get_registration_service, get_user_directory
from src.api.models import ErrorResponse, RegisterRequest, RegisterResponse
from src.domain.exceptions import RegistrationError
from src.domain.ports import RegistrationOutcome
from src.domain.registration import RegistrationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["v1"])

# Rejection outcome -> (status code, detail)
_REJECTIONS: dict[RegistrationOutcome, tuple[int, str]] = {
    RegistrationOutcome.ALREADY_REGISTERED: (
        status.HTTP_409_CONFLICT,
        "Email already registered",
    ),
    RegistrationOutcome.WRONG_DOMAIN: (
        status.HTTP_400_BAD_REQUEST,
        "Email domain not allowed",
    ),
    RegistrationOutcome.TOO_MANY_REGISTRATIONS_TODAY: (
        status.HTTP_429_TOO_MANY_REQUESTS,
        "Too many registrations today",
    ),
}


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"model": ErrorResponse, "description": "Email already registered"},
        400: {"model": ErrorResponse, "description": "Email domain not allowed"},
        429: {"model": ErrorResponse, "description": "Daily registration quota exceeded"},
        503: {"model": ErrorResponse, "description": "Collaborator unavailable"},
    },
    summary="Register a new user",
    description="Submit an email address to register. "
    "A welcome email is sent when registration is accepted.",
)
async def register(
    request_data: RegisterRequest,
    service: RegistrationService = Depends(get_registration_service),
    directory: InMemoryUserDirectory = Depends(get_user_directory),
) -> RegisterResponse:
    """
    Register a new user and send a welcome email.

    - **email**: Email address to register

    Accepted registrations are recorded in the user directory.
    """
    try:
        outcome = service.register(request_data.email)
    except RegistrationError:
        logger.exception("Registration collaborator failure")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Registration temporarily unavailable",
        ) from None

    if outcome != RegistrationOutcome.OK:
        status_code, detail = _REJECTIONS[outcome]
        raise HTTPException(status_code=status_code, detail=detail)

    # The caller owns recording; the domain service only reads the directory
    if not directory.record_registration(request_data.email):
        logger.warning(
            "Welcome email sent but %s was already recorded (concurrent registration)",
            request_data.email,
        )
    return RegisterResponse(
        message="Welcome email sent",
        email=request_data.email,
        outcome=outcome,
    )
