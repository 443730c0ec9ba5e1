"""Message drafting on top of the generation client.

Callers always get a ``MessageResult``; nothing raised by the
generation service leaves ``MessagingAssistant.generate_message``.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from iptv_manager.assistant.prompts import build_prompt
from iptv_manager.models import Customer, MessageIntent

logger = logging.getLogger(__name__)

CONFIGURATION_MISSING_TEXT = (
    "Erro: Chave de API não configurada. Por favor, configure a IPTV_AI_API_KEY no ambiente."
)
EMPTY_RESPONSE_TEXT = "Não foi possível gerar a mensagem."
TRANSPORT_FAILURE_TEXT = "Erro ao conectar com a Inteligência Artificial."
BUSY_TEXT = "Já existe uma mensagem sendo gerada para este cliente."


class TextGenerator(Protocol):
    @property
    def is_configured(self) -> bool: ...

    def generate(self, prompt: str) -> str | None: ...


class MessageOutcome(str, Enum):
    SUCCESS = "SUCCESS"
    CONFIGURATION_MISSING = "CONFIGURATION_MISSING"
    TRANSPORT_FAILURE = "TRANSPORT_FAILURE"
    BUSY = "BUSY"


@dataclass(frozen=True)
class MessageResult:
    """Outcome of one message request."""

    outcome: MessageOutcome
    generated: str | None = None
    error: str | None = None

    @classmethod
    def success(cls, text: str | None) -> MessageResult:
        return cls(MessageOutcome.SUCCESS, generated=text or None)

    @classmethod
    def configuration_missing(cls) -> MessageResult:
        return cls(MessageOutcome.CONFIGURATION_MISSING)

    @classmethod
    def transport_failure(cls, error: BaseException) -> MessageResult:
        return cls(MessageOutcome.TRANSPORT_FAILURE, error=f"{type(error).__name__}: {error}")

    @classmethod
    def busy(cls) -> MessageResult:
        return cls(MessageOutcome.BUSY)

    @property
    def ok(self) -> bool:
        return self.outcome == MessageOutcome.SUCCESS and self.generated is not None

    @property
    def text(self) -> str:
        """Text to show the operator: the generated message or a fixed notice."""
        if self.outcome == MessageOutcome.SUCCESS:
            return self.generated or EMPTY_RESPONSE_TEXT
        if self.outcome == MessageOutcome.CONFIGURATION_MISSING:
            return CONFIGURATION_MISSING_TEXT
        if self.outcome == MessageOutcome.BUSY:
            return BUSY_TEXT
        return TRANSPORT_FAILURE_TEXT


class MessagingAssistant:
    """Draft outreach messages for customers.

    At most one request per customer is in flight; a repeated request for
    a customer that is still pending returns ``MessageResult.busy()``
    without contacting the service. The pending set is guarded by a lock,
    so the guard holds when requests arrive from several threads.
    """

    def __init__(self, generator: TextGenerator) -> None:
        self.generator = generator
        self._pending: set[str] = set()
        self._lock = threading.Lock()

    def is_pending(self, customer_id: str) -> bool:
        with self._lock:
            return customer_id in self._pending

    def generate_message(self, customer: Customer, intent: MessageIntent) -> MessageResult:
        """Generate a message of kind ``intent`` for ``customer``."""
        intent = MessageIntent(intent)
        context = {"customer": customer.id, "intent": intent.value}
        if not self.generator.is_configured:
            logger.warning("Generation service has no API key configured", extra=context)
            return MessageResult.configuration_missing()

        with self._lock:
            busy = customer.id in self._pending
            if not busy:
                self._pending.add(customer.id)
        if busy:
            logger.info("Message for customer %s already in progress", customer.id, extra=context)
            return MessageResult.busy()

        try:
            text = self.generator.generate(build_prompt(customer, intent))
        except Exception as e:
            logger.error(
                "Error generating %s message for %s: %s", intent.value, customer.id, e, exc_info=True, extra=context
            )
            return MessageResult.transport_failure(e)
        finally:
            with self._lock:
                self._pending.discard(customer.id)

        if not text:
            logger.warning("Generation service returned no text for customer %s", customer.id, extra=context)
        else:
            logger.info("Generated %s message for customer %s", intent.value, customer.id, extra=context)
        return MessageResult.success(text)
