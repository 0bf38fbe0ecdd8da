from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SignupRequestDTO(BaseModel):
    """Signup payload; emptiness is checked by the use case, not here."""

    model_config = ConfigDict(extra="ignore")

    username: str = ""
    email: str = ""
    password: str = ""

    @field_validator("username", "email", "password", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("username", "email")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()


class LoginRequestDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: str = ""
    password: str = ""

    @field_validator("email", "password", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("email")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()


class SignupSuccessDTO(BaseModel):
    success: bool = True
    message: str = "User registered successfully"
    user_id: int = Field(serialization_alias="userId")


class LoginSuccessDTO(BaseModel):
    success: bool = True
    message: str = "Login successful"
    username: str


class LogoutSuccessDTO(BaseModel):
    success: bool = True
    message: str = "Logged out successfully"
