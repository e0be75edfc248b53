from __future__ import annotations

import re
from datetime import date
from enum import StrEnum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class CustomerStatus(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class CustomerTier(StrEnum):
    ENTERPRISE = "enterprise"
    GROWTH = "growth"
    STARTUP = "startup"


class ContactStatus(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class DealStage(StrEnum):
    QUALIFICATION = "qualification"
    PROPOSAL = "proposal"
    NEGOTIATION = "negotiation"
    CLOSED_WON = "closed-won"
    CLOSED_LOST = "closed-lost"


class DealStatus(StrEnum):
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"


class ActivityType(StrEnum):
    DEAL_WON = "deal_won"
    DEAL_CREATED = "deal_created"
    MEETING = "meeting"
    EMAIL = "email"
    CALL = "call"
    CONTACT_ADDED = "contact_added"
    OTHER = "other"


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"


class CustomerSortField(StrEnum):
    NAME = "name"
    INDUSTRY = "industry"
    REVENUE = "revenue"
    HEALTH_SCORE = "health_score"
    CREATED_AT = "created_at"


class CamelModel(BaseModel):
    """Serializes with camelCase keys, accepts either spelling on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecordModel(CamelModel):
    """A stored entity: immutable once built, replaced wholesale on update."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str
    created_at: date
    updated_at: date


class Address(CamelModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = "USA"


class DeleteResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    detail: str
    error_code: str | None = None
    errors: dict[str, str] | None = None


def require_text(value: str | None, message: str) -> str:
    if value is None or not value.strip():
        raise ValueError(message)
    return value


def check_email(value: str | None, *, required: bool = False) -> str | None:
    if value is None or not value.strip():
        if required:
            raise ValueError("Email is required")
        return value
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Please enter a valid email address")
    return value
