"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Field content is deliberately unconstrained here: every rule lives in the
domain rule engine so that failures come back as localized validationErrors.
"""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Request model for user registration. Absent fields behave like null."""

    username: str | None = Field(default=None, description="4 to 32 characters")
    email: str | None = Field(default=None, description="Unused, valid email address")
    password: str | None = Field(
        default=None,
        description="At least 6 characters with a lowercase, an uppercase letter and a digit",
    )


class RegisterResponse(BaseModel):
    """Response model for successful registration."""

    message: str


class ValidationErrorResponse(BaseModel):
    """Response model for rejected registration, one message per failing field."""

    validationErrors: dict[str, str]
