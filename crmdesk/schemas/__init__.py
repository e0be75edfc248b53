from __future__ import annotations

from .activity import Activity
from .common import (
    ActivityType,
    Address,
    CamelModel,
    ContactStatus,
    CustomerSortField,
    CustomerStatus,
    CustomerTier,
    DealStage,
    DealStatus,
    DeleteResponse,
    ErrorResponse,
    RecordModel,
    SortOrder,
)
from .contact import Contact, ContactCreate, ContactUpdate
from .customer import (
    AddressForm,
    Customer,
    CustomerCreate,
    CustomerSummary,
    CustomerUpdate,
)
from .dashboard import (
    DashboardStats,
    MonthlyRevenue,
    Pipeline,
    PipelineStage,
    TopCustomer,
)
from .deal import Deal, DealCreate, DealUpdate
from .health import DependencyHealth, HealthCheckResponse

__all__ = [
    # common
    "ActivityType",
    "Address",
    "CamelModel",
    "ContactStatus",
    "CustomerSortField",
    "CustomerStatus",
    "CustomerTier",
    "DealStage",
    "DealStatus",
    "DeleteResponse",
    "ErrorResponse",
    "RecordModel",
    "SortOrder",
    # health
    "DependencyHealth",
    "HealthCheckResponse",
    # customer
    "AddressForm",
    "Customer",
    "CustomerCreate",
    "CustomerSummary",
    "CustomerUpdate",
    # contact
    "Contact",
    "ContactCreate",
    "ContactUpdate",
    # deal
    "Deal",
    "DealCreate",
    "DealUpdate",
    # activity
    "Activity",
    # dashboard
    "DashboardStats",
    "MonthlyRevenue",
    "Pipeline",
    "PipelineStage",
    "TopCustomer",
]
