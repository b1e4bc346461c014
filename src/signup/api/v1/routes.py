"""
API v1 routes.

Defines REST endpoints for the user registration API.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from signup.api.dependencies import get_locale, get_registration_service
from signup.api.models import RegisterRequest, RegisterResponse, ValidationErrorResponse
from signup.domain.registration import RegistrationService
from signup.domain.validation import RegistrationRequest

router = APIRouter(tags=["v1"])


@router.post(
    "/users",
    response_model=RegisterResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ValidationErrorResponse, "description": "One or more fields failed validation"},
    },
    summary="Register a new user",
    description="Submit username, email and password. Every field is validated; "
    "failures are reported per field in the language selected by Accept-Language.",
)
async def create_user(
    request_data: RegisterRequest,
    locale: str = Depends(get_locale),
    service: RegistrationService = Depends(get_registration_service),
) -> RegisterResponse | JSONResponse:
    """
    Register a new user.

    - **username**: 4 to 32 characters
    - **email**: Valid email address not used by another account
    - **password**: At least 6 characters, with lowercase, uppercase and a digit

    Returns a localized success message, or 400 with localized validationErrors.
    """
    result = await service.register(
        RegistrationRequest(
            username=request_data.username,
            email=request_data.email,
            password=request_data.password,
        ),
        locale,
    )

    if not result.success:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"validationErrors": result.validation_errors},
        )
    return RegisterResponse(message=result.message)
