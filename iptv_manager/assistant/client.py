"""Client for the external text-generation service."""

import logging

from openai import OpenAI

from iptv_manager.config import AssistantConfig

logger = logging.getLogger(__name__)


class GenerationClient:
    """Single-shot chat completion against an OpenAI-compatible endpoint.

    No retries: the underlying client is built with ``max_retries=0`` so
    every failure surfaces on the first attempt.
    """

    def __init__(self, config: AssistantConfig, client: OpenAI | None = None) -> None:
        self.config = config
        self._client = client

    @property
    def is_configured(self) -> bool:
        return self.config.is_configured

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            self._client = OpenAI(
                api_key=self.config.api_key,
                base_url=self.config.base_url,
                max_retries=0,
            )
        return self._client

    def generate(self, prompt: str) -> str | None:
        """Send ``prompt`` and return the generated text, if any.

        Transport and API errors propagate to the caller.
        """
        kwargs = {}
        if self.config.temperature is not None:
            kwargs["temperature"] = self.config.temperature

        logger.debug("Requesting completion from %s (model=%s)", self.config.base_url, self.config.model)
        response = self.client.chat.completions.create(
            model=self.config.model,
            messages=[{"role": "user", "content": prompt}],
            **kwargs,
        )
        if not response.choices:
            return None
        return response.choices[0].message.content
