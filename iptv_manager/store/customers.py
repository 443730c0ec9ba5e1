"""In-memory customer collection with write-through persistence."""

import logging
from dataclasses import replace
from typing import Protocol, Sequence

from iptv_manager.exceptions import CustomerNotFoundError, DuplicateCustomerError
from iptv_manager.models import Customer

logger = logging.getLogger(__name__)


class Repository(Protocol):
    def load(self) -> list[Customer]: ...

    def save(self, customers: Sequence[Customer]) -> None: ...


class CustomerStore:
    """Authoritative collection of customers.

    Every mutation writes the whole new collection through the repository
    and only then replaces the in-memory list, so a rejected or failed
    mutation leaves the collection as it was. Lookups are by internal ``id``.
    """

    def __init__(self, repository: Repository) -> None:
        self.repository = repository
        self._customers: list[Customer] = []
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def customers(self) -> list[Customer]:
        """Shallow copy of the collection in its current order."""
        return list(self._customers)

    def __len__(self) -> int:
        return len(self._customers)

    def __contains__(self, customer_id: object) -> bool:
        return any(c.id == customer_id for c in self._customers)

    def load(self) -> None:
        """Replace the collection with the persisted one."""
        self._customers = list(self.repository.load())
        self._loaded = True

    def save(self) -> None:
        """Persist the whole collection."""
        self.repository.save(self._customers)

    def get(self, customer_id: str) -> Customer:
        """Return a copy of the customer with the given internal id."""
        return replace(self._customers[self._index_of(customer_id)])

    def add(self, customer: Customer) -> None:
        """Append a new customer."""
        if customer.id in self:
            raise DuplicateCustomerError(f"Customer {customer.id} already exists")
        self._commit([*self._customers, customer])
        logger.info("Added customer %s (%s)", customer.id, customer.name, extra={"customer": customer.id})

    def update(self, customer: Customer) -> None:
        """Replace the stored customer that has the same ``id``."""
        idx = self._index_of(customer.id)
        updated = list(self._customers)
        updated[idx] = customer
        self._commit(updated)
        logger.info("Updated customer %s (%s)", customer.id, customer.name, extra={"customer": customer.id})

    def remove(self, customer_id: str) -> Customer:
        """Remove the customer with the given internal id and return it."""
        idx = self._index_of(customer_id)
        remaining = list(self._customers)
        removed = remaining.pop(idx)
        self._commit(remaining)
        logger.info("Removed customer %s (%s)", removed.id, removed.name, extra={"customer": removed.id})
        return removed

    def _commit(self, customers: list[Customer]) -> None:
        # Persist first so a failed write leaves the collection as it was.
        self.repository.save(customers)
        self._customers = customers

    def _index_of(self, customer_id: str) -> int:
        for idx, customer in enumerate(self._customers):
            if customer.id == customer_id:
                return idx
        raise CustomerNotFoundError(f"Customer {customer_id} not found")
