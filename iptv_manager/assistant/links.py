"""Outbound hand-off links for generated messages."""

import re
from urllib.parse import quote

WHATSAPP_BASE_URL = "https://wa.me/"


def phone_digits(phone: str) -> str:
    """Strip everything but digits from a phone number."""
    return re.sub(r"\D", "", phone)


def whatsapp_link(phone: str, message: str) -> str:
    """WhatsApp deep link opening a chat with ``message`` pre-filled."""
    return f"{WHATSAPP_BASE_URL}{phone_digits(phone)}?text={quote(message, safe='')}"
