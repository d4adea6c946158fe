from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Schema for email/password login."""
    email: str
    password: str


class RegisterRequest(BaseModel):
    """Schema for account registration."""
    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=8)
    first_name: str = Field(alias="firstName", min_length=1, max_length=100)
    last_name: str | None = Field(default=None, alias="lastName", max_length=100)
