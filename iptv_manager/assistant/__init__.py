"""Outreach message drafting through an external text-generation service."""

from iptv_manager.assistant.client import GenerationClient
from iptv_manager.assistant.links import whatsapp_link
from iptv_manager.assistant.prompts import build_prompt
from iptv_manager.assistant.service import MessageOutcome, MessageResult, MessagingAssistant

__all__ = [
    "GenerationClient",
    "MessageOutcome",
    "MessageResult",
    "MessagingAssistant",
    "build_prompt",
    "whatsapp_link",
]
