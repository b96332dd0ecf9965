from __future__ import annotations

from pydantic import BaseModel, Field

# Fields default to "" so missing values reach the service-level checks,
# which answer with the form's own messages.


class SignUpRequest(BaseModel):
    name: str = Field(default="", max_length=150)
    email: str = Field(default="", max_length=254)
    password: str = Field(default="", max_length=128)
    confirm_password: str | None = Field(default=None, max_length=128)


class SignInRequest(BaseModel):
    email: str = Field(default="", max_length=254)
    password: str = Field(default="", max_length=128)
    from_: str | None = Field(
        default=None,
        alias="from",
        description="Location to return to after sign-in",
        max_length=512,
    )

    model_config = {"populate_by_name": True}


class ForgotPasswordRequest(BaseModel):
    email: str = Field(default="", max_length=254)
