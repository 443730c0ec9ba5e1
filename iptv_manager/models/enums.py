"""Enumeration types for the subscriber domain."""

from enum import Enum


class Platform(str, Enum):
    KRON = "KRON"
    VOLT = "VOLT"


class PaymentStatus(str, Enum):
    ADIMPLENTE = "ADIMPLENTE"  # payment current
    INADIMPLENTE = "INADIMPLENTE"  # payment delinquent


class MessageIntent(str, Enum):
    REMINDER = "REMINDER"
    WELCOME = "WELCOME"
    PROMO = "PROMO"


class View(str, Enum):
    OVERVIEW = "OVERVIEW"
    RECORDS = "RECORDS"
    ABOUT = "ABOUT"
