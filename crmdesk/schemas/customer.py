from __future__ import annotations

from datetime import date

from pydantic import ConfigDict, Field, field_validator

from .common import (
    Address,
    CamelModel,
    CustomerStatus,
    CustomerTier,
    RecordModel,
    check_email,
    require_text,
)


class Customer(RecordModel):
    name: str
    email: str | None = None
    phone: str | None = None
    industry: str | None = None
    status: CustomerStatus = CustomerStatus.ACTIVE
    tier: CustomerTier | None = None
    revenue: int | None = None
    employees: int | None = None
    website: str | None = None
    logo: str | None = None
    health_score: int | None = None
    last_contact: date | None = None
    address: Address | None = None


class AddressForm(CamelModel):
    """Address as submitted by the customer form: city and state are required."""

    model_config = ConfigDict(validate_default=True)

    street: str | None = None
    city: str = ""
    state: str = ""
    zip_code: str | None = None
    country: str | None = "USA"

    @field_validator("city")
    @classmethod
    def city_required(cls, v: str) -> str:
        return require_text(v, "City is required")

    @field_validator("state")
    @classmethod
    def state_required(cls, v: str) -> str:
        return require_text(v, "State is required")


class CustomerCreate(CamelModel):
    model_config = ConfigDict(validate_default=True)

    name: str = ""
    email: str = ""
    phone: str = ""
    industry: str = ""
    address: AddressForm = Field(default_factory=dict)  # type: ignore[arg-type]
    status: CustomerStatus | None = None
    tier: CustomerTier | None = None
    revenue: int | None = Field(default=None, ge=0)
    employees: int | None = Field(default=None, ge=0)
    website: str | None = None
    logo: str | None = None
    health_score: int | None = Field(default=None, ge=0, le=100)
    last_contact: date | None = None

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        return require_text(v, "Company name is required")

    @field_validator("email")
    @classmethod
    def email_valid(cls, v: str) -> str:
        return check_email(v, required=True) or ""

    @field_validator("phone")
    @classmethod
    def phone_required(cls, v: str) -> str:
        return require_text(v, "Phone number is required")

    @field_validator("industry")
    @classmethod
    def industry_required(cls, v: str) -> str:
        return require_text(v, "Industry is required")


class CustomerUpdate(CamelModel):
    """Partial update; only supplied fields are checked and merged."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    industry: str | None = None
    address: AddressForm | None = None
    status: CustomerStatus | None = None
    tier: CustomerTier | None = None
    revenue: int | None = Field(default=None, ge=0)
    employees: int | None = Field(default=None, ge=0)
    website: str | None = None
    logo: str | None = None
    health_score: int | None = Field(default=None, ge=0, le=100)
    last_contact: date | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str | None) -> str | None:
        return v if v is None else require_text(v, "Company name is required")

    @field_validator("email")
    @classmethod
    def email_valid(cls, v: str | None) -> str | None:
        return v if v is None else check_email(v, required=True)

    @field_validator("phone")
    @classmethod
    def phone_not_blank(cls, v: str | None) -> str | None:
        return v if v is None else require_text(v, "Phone number is required")

    @field_validator("industry")
    @classmethod
    def industry_not_blank(cls, v: str | None) -> str | None:
        return v if v is None else require_text(v, "Industry is required")


class CustomerSummary(CamelModel):
    total: int
    active: int
    enterprise: int
    avg_health: int
