"""Conversion between Customer records and their stored JSON form.

Stored keys keep the camelCase names used by the browser build so an
exported ``iptv_customers`` payload loads without migration.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from iptv_manager.exceptions import StorageError
from iptv_manager.models import Customer, PaymentStatus, Platform

CENTS = Decimal("0.01")

# attribute name -> stored key
FIELD_KEYS: dict[str, str] = {
    "id": "id",
    "customer_id": "customerId",
    "name": "name",
    "phone": "phone",
    "platform": "platform",
    "payment_status": "paymentStatus",
    "plan_price": "planPrice",
    "discount": "discount",
    "screen_count": "screenCount",
    "app_name": "appName",
    "bonus": "bonus",
    "signup_date": "signupDate",
    "due_date": "dueDate",
}

# Keys the browser build could leave out of older records.
OPTIONAL_DEFAULTS: dict[str, Any] = {
    "appName": "",
    "bonus": "",
    "discount": 0,
}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return float(value.quantize(CENTS))
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.date().isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value


def customer_to_dict(customer: Customer) -> dict[str, Any]:
    """Convert a customer to its stored dictionary."""
    return {key: serialize_value(getattr(customer, attr)) for attr, key in FIELD_KEYS.items()}


def customer_from_dict(data: Any) -> Customer:
    """Build a customer from its stored dictionary.

    Raises
    ------
    StorageError
        If the payload is not a mapping or a field is missing or malformed.
    """
    if not isinstance(data, dict):
        raise StorageError(f"Customer record must be an object, got {type(data).__name__}")

    raw = {**OPTIONAL_DEFAULTS, **data}
    missing = [key for key in FIELD_KEYS.values() if key not in raw]
    if missing:
        raise StorageError(f"Customer record missing keys: {', '.join(missing)}")

    try:
        return Customer(
            id=_text(raw["id"]),
            customer_id=_text(raw["customerId"]),
            name=_text(raw["name"]),
            phone=_text(raw["phone"]),
            platform=Platform(raw["platform"]),
            payment_status=PaymentStatus(raw["paymentStatus"]),
            plan_price=_money(raw["planPrice"]),
            discount=_money(raw["discount"]),
            screen_count=_count(raw["screenCount"]),
            app_name=_text(raw["appName"]),
            bonus=_text(raw["bonus"]),
            signup_date=_date(raw["signupDate"]),
            due_date=_date(raw["dueDate"]),
        )
    except (TypeError, ValueError, InvalidOperation) as e:
        raise StorageError(f"Malformed customer record {raw.get('id')!r}: {e}") from e


def _text(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, (str, int)):
        raise TypeError(f"expected text, got {type(value).__name__}")
    return str(value)


def _money(value: Any) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise TypeError(f"expected number, got {value!r}")
    amount = Decimal(str(value))
    if not amount.is_finite() or amount < 0:
        raise ValueError(f"expected a non-negative amount, got {value!r}")
    return amount.quantize(CENTS)


def _count(value: Any) -> int:
    if isinstance(value, bool) or value is None:
        raise TypeError(f"expected whole number, got {value!r}")
    number = Decimal(str(value))
    if not number.is_finite() or number != number.to_integral_value() or number < 1:
        raise ValueError(f"expected a whole number of at least 1, got {value!r}")
    return int(number)


def _date(value: Any) -> date:
    if not isinstance(value, str):
        raise TypeError(f"expected ISO date string, got {type(value).__name__}")
    # The browser build stored plain YYYY-MM-DD, but accept full timestamps too.
    return date.fromisoformat(value[:10])
