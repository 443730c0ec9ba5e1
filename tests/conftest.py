"""Pytest configuration and fixtures."""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable

import pytest

from iptv_manager.models import Customer, PaymentStatus, Platform
from iptv_manager.storage import CustomerRepository
from iptv_manager.store import CustomerStore


class MemoryKeyValue:
    """Dict-backed stand-in for the key-value file."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.writes = 0
        self.error: Exception | None = None

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.error is not None:
            raise self.error
        self.data[key] = value
        self.writes += 1


class FakeGenerator:
    """Text generator returning a canned reply and recording prompts."""

    def __init__(self, reply: str | None = "Olá! Sua mensagem.", configured: bool = True) -> None:
        self.reply = reply
        self.configured = configured
        self.prompts: list[str] = []
        self.error: Exception | None = None

    @property
    def is_configured(self) -> bool:
        return self.configured

    def generate(self, prompt: str) -> str | None:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def now() -> datetime:
    """Fixed reference time for date arithmetic."""
    return datetime(2026, 3, 10, 14, 30)


@pytest.fixture
def today(now: datetime) -> date:
    return now.date()


@pytest.fixture
def make_customer(today: date) -> Callable[..., Customer]:
    """Factory for customers with sensible defaults."""
    counter = {"n": 0}

    def _make(**overrides: Any) -> Customer:
        counter["n"] += 1
        n = counter["n"]
        fields: dict[str, Any] = dict(
            id=f"uuid-{n:03d}",
            customer_id=f"{1000 + n}",
            name=f"Cliente {n}",
            phone=f"(11) 9{n:04d}-0000",
            platform=Platform.KRON,
            payment_status=PaymentStatus.ADIMPLENTE,
            plan_price=Decimal("29.90"),
            discount=Decimal("0.00"),
            screen_count=1,
            app_name="IBO Player",
            bonus="",
            signup_date=today,
            due_date=today,
        )
        fields.update(overrides)
        return Customer(**fields)

    return _make


@pytest.fixture
def kv() -> MemoryKeyValue:
    return MemoryKeyValue()


@pytest.fixture
def repository(kv: MemoryKeyValue) -> CustomerRepository:
    return CustomerRepository(kv)


@pytest.fixture
def store(repository: CustomerRepository) -> CustomerStore:
    """Loaded, empty store."""
    s = CustomerStore(repository)
    s.load()
    return s


@pytest.fixture
def generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by setup_logging."""
    root = logging.getLogger()
    package = logging.getLogger("iptv_manager")
    handlers, level, package_level = root.handlers[:], root.level, package.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    package.setLevel(package_level)
