"""Placeholder image service client."""

from __future__ import annotations

import logging

import httpx

from src.utils.constants import (
    DEFAULT_HTTP_TIMEOUT,
    PLACEHOLDER_BG,
    PLACEHOLDER_FG,
    PLACEHOLDER_FONT,
    PLACEHOLDER_URL,
)

logger = logging.getLogger("dicebot.placeholder")


def placeholder_url(label: str, value: int | str) -> str:
    return PLACEHOLDER_URL.format(
        bg=PLACEHOLDER_BG,
        fg=PLACEHOLDER_FG,
        label=label,
        value=value,
        font=PLACEHOLDER_FONT,
    )


class PlaceholderClient:
    """Fetches generated text-on-color images."""

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
    ) -> None:
        self._client = client or httpx.Client(timeout=timeout)

    def fetch(self, label: str, value: int) -> bytes:
        """Return the image bytes verbatim. Raises on a non-2xx response."""
        url = placeholder_url(label, value)
        logger.info("Fetching placeholder image %s", url)
        response = self._client.get(url)
        response.raise_for_status()
        return response.content

    def close(self) -> None:
        self._client.close()
