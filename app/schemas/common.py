# app/schemas/common.py
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    detail: str = Field(description="Error message")

    model_config = {"json_schema_extra": {"examples": [{"detail": "Not Found"}]}}


class OkResponse(BaseModel):
    ok: bool = Field(description="Always true")

    model_config = {"json_schema_extra": {"examples": [{"ok": True}]}}


class RedirectHint(BaseModel):
    to: str = Field(description="Where to sign in")
    from_: str = Field(alias="from", description="Location to return to after sign-in")

    model_config = {"populate_by_name": True}


class LoginRequiredResponse(BaseModel):
    detail: str
    redirect: RedirectHint

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "detail": "You need to login to rent equipment",
                    "redirect": {"to": "/login", "from": "/equipment/1"},
                }
            ]
        }
    }
