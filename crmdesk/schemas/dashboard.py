from __future__ import annotations

from .common import CamelModel, CustomerTier
from .deal import Deal


class PipelineStage(CamelModel):
    deals: list[Deal]
    count: int
    value: float


class Pipeline(CamelModel):
    qualification: PipelineStage
    proposal: PipelineStage
    negotiation: PipelineStage


class TopCustomer(CamelModel):
    id: str
    name: str
    industry: str | None = None
    tier: CustomerTier | None = None
    deal_value: float


class MonthlyRevenue(CamelModel):
    month: str
    value: float


class DashboardStats(CamelModel):
    total_customers: int
    active_customers: int
    total_contacts: int
    total_deals: int
    active_deals: int
    won_deals: int
    lost_deals: int
    active_deal_value: float
    won_deal_value: float
    total_revenue: int
    conversion_rate: float
    average_health_score: float
    pipeline: Pipeline
    top_customers: list[TopCustomer]
    monthly_revenue: list[MonthlyRevenue]
