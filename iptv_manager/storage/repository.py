"""Whole-collection persistence for customer records."""

import json
import logging
from typing import Iterable, Protocol

from iptv_manager.exceptions import StorageError
from iptv_manager.models import Customer
from iptv_manager.storage.serialization import customer_from_dict, customer_to_dict

logger = logging.getLogger(__name__)

STORAGE_KEY = "iptv_customers"


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class CustomerRepository:
    """Read and write the full customer collection under one key."""

    def __init__(self, kv: KeyValueStore, key: str = STORAGE_KEY) -> None:
        self.kv = kv
        self.key = key

    def load(self) -> list[Customer]:
        """Load every stored customer.

        Missing data yields an empty list. Corrupt data is logged and
        also yields an empty list, so startup never fails on it.
        """
        try:
            raw = self.kv.get(self.key)
        except StorageError:
            logger.exception("Failed to read customer storage")
            return []

        if raw is None:
            logger.info("No stored customers under key %r", self.key)
            return []

        try:
            payload = json.loads(raw)
            if not isinstance(payload, list):
                raise StorageError(f"expected a list, got {type(payload).__name__}")
            customers = [customer_from_dict(item) for item in payload]
        except (json.JSONDecodeError, StorageError) as e:
            logger.error("Failed to parse customers under key %r: %s", self.key, e)
            return []

        logger.info("Loaded %d customers", len(customers))
        return customers

    def save(self, customers: Iterable[Customer]) -> None:
        """Overwrite the stored collection with ``customers``."""
        data = [customer_to_dict(c) for c in customers]
        self.kv.set(self.key, json.dumps(data, ensure_ascii=False))
        logger.debug("Saved %d customers", len(data))
