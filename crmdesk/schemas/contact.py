from __future__ import annotations

from datetime import date

from pydantic import field_validator

from .common import CamelModel, ContactStatus, RecordModel, check_email


class Contact(RecordModel):
    customer_id: str | None = None
    first_name: str
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    title: str | None = None
    department: str | None = None
    status: ContactStatus = ContactStatus.ACTIVE
    avatar: str | None = None
    last_contact: date | None = None


class ContactCreate(CamelModel):
    customer_id: str | None = None
    first_name: str
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    title: str | None = None
    department: str | None = None
    status: ContactStatus | None = None
    avatar: str | None = None
    last_contact: date | None = None

    @field_validator("email")
    @classmethod
    def email_valid(cls, v: str | None) -> str | None:
        return check_email(v)


class ContactUpdate(CamelModel):
    customer_id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    title: str | None = None
    department: str | None = None
    status: ContactStatus | None = None
    avatar: str | None = None
    last_contact: date | None = None

    @field_validator("email")
    @classmethod
    def email_valid(cls, v: str | None) -> str | None:
        return check_email(v)
