"""Free-text search over the customer collection."""

from typing import Iterable

from iptv_manager.models import Customer


def matches(customer: Customer, query: str) -> bool:
    """Name is matched case-insensitively; customer id and phone as typed."""
    return (
        query.casefold() in customer.name.casefold()
        or query in customer.customer_id
        or query in customer.phone
    )


def filter_customers(customers: Iterable[Customer], query: str) -> list[Customer]:
    """Return the customers matching ``query``, keeping their order.

    An empty query returns every customer. The input is never modified.
    """
    if not query:
        return list(customers)
    return [c for c in customers if matches(c, query)]
