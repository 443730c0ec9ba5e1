"""Sample subscriber generator."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from typing import Iterator

from iptv_manager.generators.base import BaseGenerator
from iptv_manager.models import Customer, PaymentStatus, Platform

PLAN_PRICES = [Decimal("25.00"), Decimal("29.90"), Decimal("35.00"), Decimal("39.90"), Decimal("59.90")]
PLAN_WEIGHTS = [0.15, 0.40, 0.20, 0.15, 0.10]

APPS = ["IBO Player", "Smarters Pro", "XCIPTV", "TiviMate", "SS IPTV", "Duplex Play"]
BONUSES = ["", "", "", "1 mês grátis", "Tela extra", "Canais adultos liberados"]


class SampleCustomerGenerator(BaseGenerator):
    """Generate realistic subscriber records for demos and tests."""

    PLATFORMS = list(Platform)
    PLATFORM_WEIGHTS = [0.65, 0.35]

    DELINQUENT_RATE = 0.2

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "pt_BR",
        today: date | None = None,
    ) -> None:
        super().__init__(seed, locale)
        self.today = today or date.today()

    def generate(self) -> Customer:
        """Generate a single customer."""
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[Customer]:
        """Generate ``count`` customers.

        Yields
        ------
        Customer
            Generated customers.
        """
        for _ in range(count):
            yield self._generate_one()

    def _generate_one(self) -> Customer:
        rnd = self.random
        delinquent = rnd.random() < self.DELINQUENT_RATE

        signup_date = self.today - timedelta(days=rnd.randint(0, 2 * 365))
        # Delinquent subscribers are past due; the rest renew within the month.
        if delinquent:
            due_date = self.today - timedelta(days=rnd.randint(1, 20))
        else:
            due_date = self.today + timedelta(days=rnd.randint(0, 30))

        plan_price = rnd.choices(PLAN_PRICES, weights=PLAN_WEIGHTS, k=1)[0]
        discount = rnd.choice([Decimal("0.00"), Decimal("0.00"), Decimal("5.00"), Decimal("10.00")])

        return Customer(
            id=self.fake.uuid4(),
            customer_id=str(rnd.randint(1000, 99999)),
            name=self.fake.name(),
            phone=self.fake.cellphone_number(),
            platform=rnd.choices(self.PLATFORMS, weights=self.PLATFORM_WEIGHTS, k=1)[0],
            payment_status=PaymentStatus.INADIMPLENTE if delinquent else PaymentStatus.ADIMPLENTE,
            plan_price=plan_price,
            discount=min(discount, plan_price),
            screen_count=rnd.choices([1, 2, 3, 4], weights=[0.55, 0.30, 0.10, 0.05], k=1)[0],
            app_name=rnd.choice(APPS),
            bonus=rnd.choice(BONUSES),
            signup_date=signup_date,
            due_date=due_date,
        )
