from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import Field, model_validator

from .common import CamelModel, DealStage, DealStatus, RecordModel


class Deal(RecordModel):
    customer_id: str | None = None
    contact_id: str | None = None
    title: str
    value: float
    stage: DealStage = DealStage.QUALIFICATION
    probability: int | None = None
    expected_close_date: date | None = None
    actual_close_date: date | None = None
    status: DealStatus = DealStatus.ACTIVE
    description: str | None = None

    @model_validator(mode="before")
    @classmethod
    def stamp_close_date(cls, data: Any) -> Any:
        # A deal that is won or lost without a close date closed on its last update
        if not isinstance(data, dict) or data.get("actual_close_date") is not None:
            return data
        status = data.get("status")
        if status is not None and status != DealStatus.ACTIVE:
            return {**data, "actual_close_date": data.get("updated_at")}
        return data


class DealCreate(CamelModel):
    customer_id: str
    contact_id: str | None = None
    title: str = Field(min_length=1)
    value: float = Field(gt=0)
    stage: DealStage = DealStage.QUALIFICATION
    probability: int | None = Field(default=None, ge=0, le=100)
    expected_close_date: date | None = None
    status: DealStatus | None = None
    description: str | None = None


class DealUpdate(CamelModel):
    customer_id: str | None = None
    contact_id: str | None = None
    title: str | None = Field(default=None, min_length=1)
    value: float | None = Field(default=None, gt=0)
    stage: DealStage | None = None
    probability: int | None = Field(default=None, ge=0, le=100)
    expected_close_date: date | None = None
    actual_close_date: date | None = None
    status: DealStatus | None = None
    description: str | None = None
