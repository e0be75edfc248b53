"""Dashboard aggregation over the current store contents.

Everything here is a pure function of the records passed in; the caller
fetches fresh lists on every request, so nothing is cached.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence

from crmdesk.schemas import (
    Contact,
    Customer,
    CustomerStatus,
    DashboardStats,
    Deal,
    DealStage,
    DealStatus,
    MonthlyRevenue,
    Pipeline,
    PipelineStage,
    TopCustomer,
)

DEFAULT_TOP_CUSTOMERS = 5

# Sample series shown on the revenue chart. It is not derived from deals.
MONTHLY_REVENUE_SAMPLE: tuple[tuple[str, float], ...] = (
    ("Jan", 185000),
    ("Feb", 220000),
    ("Mar", 198000),
    ("Apr", 265000),
    ("May", 310000),
    ("Jun", 342000),
)


def conversion_rate(won: int, lost: int) -> float:
    """Percentage of closed deals that were won; 0 when nothing has closed."""
    closed = won + lost
    if closed == 0:
        return 0.0
    return won / closed * 100


def average_health_score(customers: Sequence[Customer]) -> float:
    if not customers:
        return 0.0
    total = sum(c.health_score or 0 for c in customers)
    return round(total / len(customers), 1)


def _stage_bucket(deals: Sequence[Deal], stage: DealStage) -> PipelineStage:
    members = [d for d in deals if d.stage == stage]
    return PipelineStage(
        deals=members,
        count=len(members),
        value=sum(d.value for d in members),
    )


def build_pipeline(deals: Sequence[Deal]) -> Pipeline:
    active = [d for d in deals if d.status == DealStatus.ACTIVE]
    return Pipeline(
        qualification=_stage_bucket(active, DealStage.QUALIFICATION),
        proposal=_stage_bucket(active, DealStage.PROPOSAL),
        negotiation=_stage_bucket(active, DealStage.NEGOTIATION),
    )


def top_customers(
    customers: Sequence[Customer],
    deals: Sequence[Deal],
    limit: int = DEFAULT_TOP_CUSTOMERS,
) -> list[TopCustomer]:
    """Customers ranked by the value of their won deals.

    Customers without any won value are left out. Equal sums are ordered by
    customer id so the ranking is deterministic.
    """
    won_by_customer: dict[str, float] = defaultdict(float)
    for deal in deals:
        if deal.status == DealStatus.WON and deal.customer_id is not None:
            won_by_customer[deal.customer_id] += deal.value

    ranked = [
        TopCustomer(
            id=c.id,
            name=c.name,
            industry=c.industry,
            tier=c.tier,
            deal_value=won_by_customer[c.id],
        )
        for c in customers
        if won_by_customer.get(c.id, 0) > 0
    ]
    ranked.sort(key=lambda t: (-t.deal_value, t.id))
    return ranked[:limit]


def build_dashboard_stats(
    customers: Sequence[Customer],
    contacts: Sequence[Contact],
    deals: Sequence[Deal],
    top_n: int = DEFAULT_TOP_CUSTOMERS,
) -> DashboardStats:
    active_deals = [d for d in deals if d.status == DealStatus.ACTIVE]
    won_deals = [d for d in deals if d.status == DealStatus.WON]
    lost_deals = [d for d in deals if d.status == DealStatus.LOST]

    return DashboardStats(
        total_customers=len(customers),
        active_customers=sum(1 for c in customers if c.status == CustomerStatus.ACTIVE),
        total_contacts=len(contacts),
        total_deals=len(deals),
        active_deals=len(active_deals),
        won_deals=len(won_deals),
        lost_deals=len(lost_deals),
        active_deal_value=sum(d.value for d in active_deals),
        won_deal_value=sum(d.value for d in won_deals),
        total_revenue=sum(c.revenue or 0 for c in customers),
        conversion_rate=conversion_rate(len(won_deals), len(lost_deals)),
        average_health_score=average_health_score(customers),
        pipeline=build_pipeline(deals),
        top_customers=top_customers(customers, deals, top_n),
        monthly_revenue=[
            MonthlyRevenue(month=month, value=value)
            for month, value in MONTHLY_REVENUE_SAMPLE
        ],
    )
