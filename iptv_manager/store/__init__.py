"""In-memory store owning the customer collection."""

from iptv_manager.store.customers import CustomerStore

__all__ = ["CustomerStore"]
