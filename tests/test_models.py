"""Tests for domain models."""

from decimal import Decimal

import pytest

from iptv_manager.models import DashboardStats, MessageIntent, PaymentStatus, Platform, View


class TestEnums:
    """Closed enumerations keep their stored values."""

    def test_platform_values(self) -> None:
        assert [p.value for p in Platform] == ["KRON", "VOLT"]

    def test_payment_status_values(self) -> None:
        assert [s.value for s in PaymentStatus] == ["ADIMPLENTE", "INADIMPLENTE"]

    def test_str_enum_compares_to_value(self) -> None:
        assert Platform.VOLT == "VOLT"
        assert PaymentStatus("INADIMPLENTE") is PaymentStatus.INADIMPLENTE

    def test_unknown_platform_rejected(self) -> None:
        with pytest.raises(ValueError):
            Platform("SKY")

    def test_intents_and_views(self) -> None:
        assert {i.value for i in MessageIntent} == {"REMINDER", "WELCOME", "PROMO"}
        assert {v.value for v in View} == {"OVERVIEW", "RECORDS", "ABOUT"}


class TestCustomer:
    """Tests for Customer."""

    def test_effective_revenue(self, make_customer) -> None:
        customer = make_customer(plan_price=Decimal("50.00"), discount=Decimal("10.00"))
        assert customer.effective_revenue == Decimal("40.00")

    def test_is_active(self, make_customer) -> None:
        assert make_customer().is_active
        assert not make_customer(payment_status=PaymentStatus.INADIMPLENTE).is_active

    def test_equality_by_fields(self, make_customer) -> None:
        a = make_customer(id="same", customer_id="1")
        b = make_customer(id="same", customer_id="1", name=a.name, phone=a.phone)
        assert a == b


class TestDashboardStats:
    def test_frozen(self) -> None:
        stats = DashboardStats(1, 1, 0, Decimal("10"), 0)
        with pytest.raises(AttributeError):
            stats.total_customers = 2  # type: ignore[misc]
