"""Tests for the sample customer generator."""

from datetime import date
from decimal import Decimal

from iptv_manager.generators import SampleCustomerGenerator
from iptv_manager.models import Customer, PaymentStatus, Platform
from iptv_manager.storage.serialization import customer_from_dict, customer_to_dict


class TestSampleCustomerGenerator:
    """Tests for SampleCustomerGenerator."""

    def test_generate(self, today: date) -> None:
        customer = SampleCustomerGenerator(seed=42, today=today).generate()
        assert isinstance(customer, Customer)
        assert customer.name
        assert customer.phone
        assert customer.customer_id
        assert customer.platform in Platform

    def test_batch_invariants(self, today: date) -> None:
        customers = list(SampleCustomerGenerator(seed=7, today=today).generate_batch(200))
        assert len(customers) == 200
        assert len({c.id for c in customers}) == 200
        for c in customers:
            assert c.plan_price > 0
            assert Decimal("0") <= c.discount <= c.plan_price
            assert c.screen_count >= 1
            assert c.signup_date <= today
            if c.payment_status == PaymentStatus.INADIMPLENTE:
                assert c.due_date < today
            else:
                assert c.due_date >= today

    def test_mix_of_statuses(self, today: date) -> None:
        customers = list(SampleCustomerGenerator(seed=1, today=today).generate_batch(200))
        statuses = {c.payment_status for c in customers}
        assert statuses == {PaymentStatus.ADIMPLENTE, PaymentStatus.INADIMPLENTE}

    def test_reproducible(self, today: date) -> None:
        a = list(SampleCustomerGenerator(seed=42, today=today).generate_batch(5))
        b = list(SampleCustomerGenerator(seed=42, today=today).generate_batch(5))
        assert a == b

    def test_serializable(self, today: date) -> None:
        for customer in SampleCustomerGenerator(seed=3, today=today).generate_batch(20):
            assert customer_from_dict(customer_to_dict(customer)) == customer
