"""Create/edit form for customer records.

The editor keeps a draft ``Customer`` and accepts raw text for each
field, the way a form input would deliver it. Every value is parsed
when it is set; unparsable or out-of-range input is rejected with
``InvalidFieldError`` and the draft keeps its previous value.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

from iptv_manager.exceptions import InvalidFieldError, MissingFieldsError, ValidationError
from iptv_manager.models import Customer, PaymentStatus, Platform
from iptv_manager.storage.serialization import CENTS, FIELD_KEYS
from iptv_manager.store import CustomerStore

logger = logging.getLogger(__name__)

DEFAULT_PLAN_PRICE = Decimal("29.90")
REQUIRED_FIELDS = ("name", "customer_id", "phone")

# camelCase form names -> attribute names
_ALIASES = {key: attr for attr, key in FIELD_KEYS.items()}


def parse_decimal(field: str, raw: Any) -> Decimal:
    """Parse a non-negative currency amount. Accepts ``,`` as decimal separator."""
    if isinstance(raw, Decimal):
        value = raw
    else:
        text = str(raw).strip().replace(",", ".")
        if not text:
            raise InvalidFieldError(field, raw, "empty")
        try:
            value = Decimal(text)
        except InvalidOperation:
            raise InvalidFieldError(field, raw, "not a number") from None
    if not value.is_finite():
        raise InvalidFieldError(field, raw, "not a number")
    if value < 0:
        raise InvalidFieldError(field, raw, "must not be negative")
    return value.quantize(CENTS)


def parse_int(field: str, raw: Any, minimum: int = 1) -> int:
    """Parse a whole number no smaller than ``minimum``."""
    if isinstance(raw, bool):
        raise InvalidFieldError(field, raw, "not a whole number")
    if isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(str(raw).strip())
        except ValueError:
            raise InvalidFieldError(field, raw, "not a whole number") from None
    if value < minimum:
        raise InvalidFieldError(field, raw, f"must be at least {minimum}")
    return value


def parse_platform(raw: Any) -> Platform:
    if isinstance(raw, Platform):
        return raw
    try:
        return Platform(str(raw).strip().upper())
    except ValueError:
        choices = ", ".join(p.value for p in Platform)
        raise InvalidFieldError("platform", raw, f"expected one of {choices}") from None


def parse_payment_status(raw: Any) -> PaymentStatus:
    if isinstance(raw, PaymentStatus):
        return raw
    try:
        return PaymentStatus(str(raw).strip().upper())
    except ValueError:
        choices = ", ".join(s.value for s in PaymentStatus)
        raise InvalidFieldError("payment_status", raw, f"expected one of {choices}") from None


def parse_date(field: str, raw: Any) -> date:
    """Parse ``YYYY-MM-DD`` or the Brazilian ``DD/MM/YYYY``."""
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    text = str(raw).strip()
    for fmt in ("%Y-%m-%d", "%d/%m/%Y"):
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise InvalidFieldError(field, raw, "expected YYYY-MM-DD or DD/MM/YYYY")


def _parse_text(raw: Any) -> str:
    return "" if raw is None else str(raw)


_PARSERS: dict[str, Callable[[Any], Any]] = {
    "customer_id": _parse_text,
    "name": _parse_text,
    "phone": _parse_text,
    "app_name": _parse_text,
    "bonus": _parse_text,
    "platform": parse_platform,
    "payment_status": parse_payment_status,
    "plan_price": lambda raw: parse_decimal("plan_price", raw),
    "discount": lambda raw: parse_decimal("discount", raw),
    "screen_count": lambda raw: parse_int("screen_count", raw),
    "signup_date": lambda raw: parse_date("signup_date", raw),
    "due_date": lambda raw: parse_date("due_date", raw),
}


def new_customer(today: date | None = None) -> Customer:
    """Blank record with a fresh id and the form defaults."""
    today = today or date.today()
    return Customer(
        id=str(uuid.uuid4()),
        customer_id="",
        name="",
        phone="",
        platform=Platform.KRON,
        payment_status=PaymentStatus.ADIMPLENTE,
        plan_price=DEFAULT_PLAN_PRICE,
        discount=Decimal("0.00"),
        screen_count=1,
        app_name="",
        bonus="",
        signup_date=today,
        due_date=today,
    )


class CustomerEditor:
    """Form state for creating or editing one customer.

    Parameters
    ----------
    initial : Customer | None
        Record to edit. When None the editor works in create mode with a
        freshly generated id and default values.
    today : date | None
        Date used for the default signup and due dates.
    """

    def __init__(self, initial: Customer | None = None, today: date | None = None) -> None:
        self._edit_mode = initial is not None
        self._draft = replace(initial) if initial is not None else new_customer(today)
        self._open = True

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def is_edit_mode(self) -> bool:
        return self._edit_mode

    @property
    def draft(self) -> Customer:
        """Copy of the record as currently filled in."""
        return replace(self._draft)

    def set_field(self, name: str, raw: Any) -> None:
        """Parse ``raw`` and store it on the draft."""
        self._ensure_open()
        attr = _ALIASES.get(name, name)
        parser = _PARSERS.get(attr)
        if parser is None:
            raise ValidationError(f"Field {name!r} cannot be edited")
        setattr(self._draft, attr, parser(raw))

    def update(self, **fields: Any) -> None:
        """Set several fields. Stops at the first invalid one."""
        for name, raw in fields.items():
            self.set_field(name, raw)

    def validate(self) -> list[str]:
        """Names of required fields that are still empty."""
        return [f for f in REQUIRED_FIELDS if not getattr(self._draft, f).strip()]

    def submit(self, store: CustomerStore) -> Customer:
        """Hand the record to ``store`` and close the editor.

        Inserts in create mode, replaces by id in edit mode. Raises
        ``MissingFieldsError`` and leaves the store untouched when a
        required field is empty.
        """
        self._ensure_open()
        missing = self.validate()
        if missing:
            raise MissingFieldsError(missing)

        customer = replace(self._draft)
        if self._edit_mode:
            store.update(customer)
        else:
            store.add(customer)
        self._close()
        return customer

    def cancel(self) -> None:
        """Discard the draft without touching the store."""
        logger.debug("Editor for %s cancelled", self._draft.id)
        self._close()

    def _close(self) -> None:
        self._open = False
        self._edit_mode = False

    def _ensure_open(self) -> None:
        if not self._open:
            raise ValidationError("Editor is closed")
