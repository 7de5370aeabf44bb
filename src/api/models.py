"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from pydantic import BaseModel, Field

from src.domain.ports import RegistrationOutcome


class RegisterRequest(BaseModel):
    """Request model for user registration."""

    # Plain str: malformed addresses are rejected by the domain rule, not by schema validation
    email: str = Field(..., description="Email address to register")


class RegisterResponse(BaseModel):
    """Response model for successful registration."""

    message: str
    email: str
    outcome: RegistrationOutcome


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
