"""
Pydantic schemas for customer records.

A customer has a server‑assigned UUID ``id``, a ``name``, an
``email`` and a free‑form ``telephone``.  Update requests replace the
three editable fields wholesale, so create and update bodies share the
same shape and rules.
"""

import re
from typing import Any

from pydantic import BaseModel, Field, field_validator


# ``local@domain.tld``: one ``@``, no whitespace, and a domain made of at
# least two non‑empty dot‑separated labels.
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@.]+(?:\.[^\s@.]+)+$")


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(value))


class CustomerCreate(BaseModel):
    """Schema for creating a customer."""

    name: str = Field(..., description="Customer name", examples=["John Doe"])
    email: str = Field(..., description="Contact email address", examples=["john.doe@example.com"])
    telephone: str = Field(
        "",
        description="Free‑form telephone number; stored exactly as sent",
        examples=["+1-555-0123"],
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be empty")
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("email must not be empty")
        if not is_valid_email(v):
            raise ValueError("email must be a valid email address")
        return v

    @field_validator("telephone", mode="before")
    @classmethod
    def default_telephone(cls, v: Any) -> Any:
        # An explicit null is treated like an absent field.
        return "" if v is None else v


class CustomerUpdate(CustomerCreate):
    """Schema for updating a customer.

    Updates are full replacements: ``name`` and ``email`` are required
    and an omitted ``telephone`` resets the stored number to ``""``.
    """


class CustomerRead(BaseModel):
    """A stored customer record as returned by the API."""

    id: str = Field(..., examples=["123e4567-e89b-12d3-a456-426614174000"])
    name: str
    email: str
    telephone: str = ""

    # Records are replaced, never mutated in place.
    model_config = {
        "frozen": True,
    }


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    service: str
