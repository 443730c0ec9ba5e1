"""Dashboard metrics over the customer collection."""

import math
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Iterable

from iptv_manager.models import Customer, DashboardStats, PaymentStatus

EXPIRING_WINDOW_DAYS = 5


def days_until_due(customer: Customer, now: datetime | date) -> int:
    """Whole days from ``now`` to the start of the customer's due date, rounded up.

    Due later today gives 0, due yesterday gives -1.
    """
    now = _as_datetime(now)
    due = datetime.combine(customer.due_date, time(), tzinfo=now.tzinfo)
    return math.ceil((due - now) / timedelta(days=1))


def is_expiring_soon(customer: Customer, now: datetime | date) -> bool:
    """True when the due date falls within the next five days, today included."""
    return 0 <= days_until_due(customer, now) <= EXPIRING_WINDOW_DAYS


def compute_stats(customers: Iterable[Customer], now: datetime | date | None = None) -> DashboardStats:
    """Compute the overview metrics in a single pass.

    Payment status partitions the collection into active and inactive.
    Revenue only counts active customers. ``expiring_soon`` looks at every
    customer regardless of payment status.
    """
    now = _as_datetime(now if now is not None else datetime.now())

    total = active = inactive = expiring = 0
    revenue = Decimal("0")
    for customer in customers:
        total += 1
        if customer.payment_status == PaymentStatus.ADIMPLENTE:
            active += 1
            revenue += customer.effective_revenue
        else:
            inactive += 1
        if is_expiring_soon(customer, now):
            expiring += 1

    return DashboardStats(
        total_customers=total,
        active_customers=active,
        inactive_customers=inactive,
        total_revenue=revenue,
        expiring_soon=expiring,
    )


def _as_datetime(value: datetime | date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time())
