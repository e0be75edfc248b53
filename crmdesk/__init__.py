"""Async CRM backend: customers, contacts, deals, activities and a dashboard."""

__version__ = "0.1.0"
