"""Domain models for the subscriber base."""

from iptv_manager.models.customer import Customer, DashboardStats
from iptv_manager.models.enums import MessageIntent, PaymentStatus, Platform, View

__all__ = [
    "Customer",
    "DashboardStats",
    "MessageIntent",
    "PaymentStatus",
    "Platform",
    "View",
]
