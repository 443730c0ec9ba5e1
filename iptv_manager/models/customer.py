"""Subscriber entity and dashboard aggregate."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from iptv_manager.models.enums import PaymentStatus, Platform


@dataclass
class Customer:
    """IPTV subscriber record.

    ``id`` is the internal primary key, assigned once when the record is
    created. ``customer_id`` is the identifier typed in by the operator
    (the panel login, usually) and is not guaranteed to be unique.
    """

    id: str
    customer_id: str
    name: str
    phone: str
    platform: Platform
    payment_status: PaymentStatus
    plan_price: Decimal
    discount: Decimal
    screen_count: int
    app_name: str
    bonus: str
    signup_date: date
    due_date: date

    @property
    def effective_revenue(self) -> Decimal:
        """Monthly amount actually charged (plan price minus discount)."""
        return self.plan_price - self.discount

    @property
    def is_active(self) -> bool:
        return self.payment_status == PaymentStatus.ADIMPLENTE


@dataclass(frozen=True)
class DashboardStats:
    """Metrics shown on the overview. Derived, never persisted."""

    total_customers: int
    active_customers: int
    inactive_customers: int
    total_revenue: Decimal
    expiring_soon: int
