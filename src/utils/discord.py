"""Discord REST client using httpx."""

from __future__ import annotations

import json
import logging

import httpx

from src.utils.constants import DEFAULT_HTTP_TIMEOUT, DISCORD_API_BASE

logger = logging.getLogger("dicebot.discord")


class DiscordClient:
    """Synchronous wrapper for the interaction webhook endpoints."""

    def __init__(
        self,
        application_id: str,
        bot_token: str,
        api_base: str = DISCORD_API_BASE,
        client: httpx.Client | None = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
    ) -> None:
        self._application_id = application_id
        self._headers = {"Authorization": f"Bot {bot_token}"}
        self._base = api_base.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout)

    def send_followup(
        self,
        interaction_token: str,
        payload: dict,
        file_name: str,
        file_bytes: bytes,
        content_type: str = "image/jpeg",
    ) -> dict:
        """Post a follow-up message with one attached file.

        Raises httpx.HTTPStatusError on a non-2xx response.
        """
        url = f"{self._base}/webhooks/{self._application_id}/{interaction_token}"
        response = self._client.post(
            url,
            headers=self._headers,
            data={"payload_json": json.dumps(payload, ensure_ascii=False)},
            files={"files[0]": (file_name, file_bytes, content_type)},
        )
        if response.is_error:
            logger.error(
                "Discord API error on followup: %s %s",
                response.status_code,
                response.text,
            )
        response.raise_for_status()
        if not response.content:
            return {}
        data: dict = response.json()
        return data

    def close(self) -> None:
        self._client.close()
