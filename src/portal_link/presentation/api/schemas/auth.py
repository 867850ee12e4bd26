"""Sign-up / sign-in schemas for request/response models."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class SignUpRequest(BaseModel):
    """Request schema for user registration."""

    name: str = Field(..., max_length=255, description="Display name (1-255)")
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        description="Password: at least 8 characters with a letter and a digit",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "John Doe",
                "email": "john@example.com",
                "password": "password123",
            },
        },
    )


class SignInRequest(BaseModel):
    """Request schema for user sign-in."""

    email: EmailStr
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "john@example.com",
                "password": "password123",
            },
        },
    )


class AccessTokenResponse(BaseModel):
    """Response schema carrying a bearer access token."""

    access_token: str = Field(..., description="Send as 'Authorization: Bearer'")
