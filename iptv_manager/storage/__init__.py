"""Persistence adapter for the customer collection."""

from iptv_manager.storage.kv_file import KeyValueFile
from iptv_manager.storage.repository import STORAGE_KEY, CustomerRepository

__all__ = ["CustomerRepository", "KeyValueFile", "STORAGE_KEY"]
