"""Demo records loaded at startup when ``seed_demo_data`` is enabled."""

from __future__ import annotations

from datetime import UTC, date, datetime

from crmdesk.schemas import Activity, Contact, Customer, Deal
from crmdesk.store.memory import Clock, IdFactory, InMemoryCRMStore, uuid_id

DEMO_CUSTOMERS: list[dict[str, object]] = [
    {
        "id": "1",
        "name": "Acme Corporation",
        "email": "contact@acme.com",
        "phone": "+1-555-0123",
        "industry": "Technology",
        "status": "active",
        "tier": "enterprise",
        "revenue": 12500000,
        "employees": 850,
        "website": "https://acme.com",
        "health_score": 92,
        "last_contact": date(2024, 3, 1),
        "address": {
            "street": "123 Main St",
            "city": "San Francisco",
            "state": "CA",
            "zip_code": "94105",
            "country": "USA",
        },
        "created_at": date(2024, 1, 15),
        "updated_at": date(2024, 1, 15),
    },
    {
        "id": "2",
        "name": "Global Industries",
        "email": "info@global.com",
        "phone": "+1-555-0456",
        "industry": "Manufacturing",
        "status": "active",
        "tier": "growth",
        "revenue": 4800000,
        "employees": 320,
        "website": "https://global.com",
        "health_score": 78,
        "last_contact": date(2024, 2, 20),
        "address": {
            "street": "456 Oak Ave",
            "city": "New York",
            "state": "NY",
            "zip_code": "10001",
            "country": "USA",
        },
        "created_at": date(2024, 1, 20),
        "updated_at": date(2024, 1, 20),
    },
    {
        "id": "3",
        "name": "Nimbus Labs",
        "email": "hello@nimbuslabs.io",
        "phone": "+1-555-0789",
        "industry": "Software",
        "status": "inactive",
        "tier": "startup",
        "revenue": 650000,
        "employees": 24,
        "website": "https://nimbuslabs.io",
        "health_score": 54,
        "last_contact": date(2024, 1, 5),
        "address": {
            "street": "9 Harbor Rd",
            "city": "Austin",
            "state": "TX",
            "zip_code": "73301",
            "country": "USA",
        },
        "created_at": date(2024, 1, 25),
        "updated_at": date(2024, 2, 2),
    },
]

DEMO_CONTACTS: list[dict[str, object]] = [
    {
        "id": "1",
        "customer_id": "1",
        "first_name": "John",
        "last_name": "Smith",
        "email": "john.smith@acme.com",
        "phone": "+1-555-0124",
        "title": "CEO",
        "department": "Executive",
        "status": "active",
        "created_at": date(2024, 1, 15),
        "updated_at": date(2024, 1, 15),
    },
    {
        "id": "2",
        "customer_id": "1",
        "first_name": "Sarah",
        "last_name": "Johnson",
        "email": "sarah.johnson@acme.com",
        "phone": "+1-555-0125",
        "title": "CTO",
        "department": "Technology",
        "status": "active",
        "created_at": date(2024, 1, 16),
        "updated_at": date(2024, 1, 16),
    },
    {
        "id": "3",
        "customer_id": "2",
        "first_name": "Mike",
        "last_name": "Wilson",
        "email": "mike.wilson@global.com",
        "phone": "+1-555-0457",
        "title": "Operations Manager",
        "department": "Operations",
        "status": "active",
        "created_at": date(2024, 1, 20),
        "updated_at": date(2024, 1, 20),
    },
]

DEMO_DEALS: list[dict[str, object]] = [
    {
        "id": "1",
        "customer_id": "1",
        "contact_id": "1",
        "title": "Enterprise Software License",
        "value": 50000,
        "stage": "proposal",
        "probability": 75,
        "expected_close_date": date(2024, 3, 15),
        "status": "active",
        "description": "Annual enterprise software license renewal",
        "created_at": date(2024, 1, 15),
        "updated_at": date(2024, 1, 15),
    },
    {
        "id": "2",
        "customer_id": "2",
        "contact_id": "3",
        "title": "Manufacturing Equipment",
        "value": 125000,
        "stage": "negotiation",
        "probability": 60,
        "expected_close_date": date(2024, 4, 30),
        "status": "active",
        "description": "New manufacturing equipment purchase",
        "created_at": date(2024, 1, 20),
        "updated_at": date(2024, 1, 20),
    },
    {
        "id": "3",
        "customer_id": "1",
        "contact_id": "2",
        "title": "Cloud Migration",
        "value": 180000,
        "stage": "closed-won",
        "probability": 100,
        "expected_close_date": date(2024, 2, 1),
        "actual_close_date": date(2024, 2, 3),
        "status": "won",
        "description": "Move on-premise workloads to the cloud",
        "created_at": date(2023, 11, 10),
        "updated_at": date(2024, 2, 3),
    },
    {
        "id": "4",
        "customer_id": "2",
        "contact_id": None,
        "title": "Support Contract",
        "value": 36000,
        "stage": "closed-won",
        "probability": 100,
        "expected_close_date": date(2024, 1, 31),
        "actual_close_date": date(2024, 1, 29),
        "status": "won",
        "description": "Two-year premium support",
        "created_at": date(2023, 12, 1),
        "updated_at": date(2024, 1, 29),
    },
    {
        "id": "5",
        "customer_id": "3",
        "contact_id": None,
        "title": "Analytics Pilot",
        "value": 15000,
        "stage": "closed-lost",
        "probability": 0,
        "expected_close_date": date(2024, 1, 15),
        "actual_close_date": date(2024, 1, 18),
        "status": "lost",
        "description": "Pilot did not proceed past evaluation",
        "created_at": date(2023, 12, 12),
        "updated_at": date(2024, 1, 18),
    },
    {
        "id": "6",
        "customer_id": "3",
        "contact_id": None,
        "title": "Starter Onboarding",
        "value": 8000,
        "stage": "qualification",
        "probability": 20,
        "expected_close_date": date(2024, 5, 31),
        "status": "active",
        "description": "Onboarding package for the starter plan",
        "created_at": date(2024, 2, 2),
        "updated_at": date(2024, 2, 2),
    },
]

DEMO_ACTIVITIES: list[dict[str, object]] = [
    {
        "id": "1",
        "type": "deal_won",
        "title": "Deal closed: Cloud Migration",
        "description": "Acme Corporation signed the cloud migration contract",
        "value": 180000,
        "timestamp": datetime(2024, 2, 3, 15, 30, tzinfo=UTC),
        "created_at": date(2024, 2, 3),
        "updated_at": date(2024, 2, 3),
        "user_id": "u1",
        "related_id": "3",
    },
    {
        "id": "2",
        "type": "meeting",
        "title": "Quarterly review with Global Industries",
        "description": "Reviewed equipment rollout timeline",
        "timestamp": datetime(2024, 2, 20, 10, 0, tzinfo=UTC),
        "created_at": date(2024, 2, 20),
        "updated_at": date(2024, 2, 20),
        "user_id": "u1",
        "related_id": "2",
    },
    {
        "id": "3",
        "type": "deal_created",
        "title": "New deal: Starter Onboarding",
        "description": "Opportunity opened with Nimbus Labs",
        "value": 8000,
        "timestamp": datetime(2024, 2, 2, 9, 15, tzinfo=UTC),
        "created_at": date(2024, 2, 2),
        "updated_at": date(2024, 2, 2),
        "user_id": "u2",
        "related_id": "6",
    },
    {
        "id": "4",
        "type": "email",
        "title": "Proposal sent to Acme Corporation",
        "description": "Enterprise license proposal emailed to John Smith",
        "timestamp": datetime(2024, 3, 1, 14, 45, tzinfo=UTC),
        "created_at": date(2024, 3, 1),
        "updated_at": date(2024, 3, 1),
        "user_id": "u2",
        "related_id": "1",
    },
    {
        "id": "5",
        "type": "call",
        "title": "Call with Mike Wilson",
        "description": "Discussed negotiation terms",
        "timestamp": datetime(2024, 2, 27, 16, 0, tzinfo=UTC),
        "created_at": date(2024, 2, 27),
        "updated_at": date(2024, 2, 27),
        "user_id": "u1",
        "related_id": "3",
    },
    {
        "id": "6",
        "type": "contact_added",
        "title": "New contact: Sarah Johnson",
        "description": "CTO at Acme Corporation",
        "timestamp": datetime(2024, 1, 16, 11, 20, tzinfo=UTC),
        "created_at": date(2024, 1, 16),
        "updated_at": date(2024, 1, 16),
        "user_id": "u2",
        "related_id": "2",
    },
]


def build_demo_store(
    *,
    id_factory: IdFactory = uuid_id,
    clock: Clock = date.today,
) -> InMemoryCRMStore:
    """Return a fresh store holding copies of the demo records."""
    return InMemoryCRMStore(
        id_factory=id_factory,
        clock=clock,
        customers=[Customer.model_validate(c) for c in DEMO_CUSTOMERS],
        contacts=[Contact.model_validate(c) for c in DEMO_CONTACTS],
        deals=[Deal.model_validate(d) for d in DEMO_DEALS],
        activities=[Activity.model_validate(a) for a in DEMO_ACTIVITIES],
    )
