"""Gemini generateContent estimator implementation."""
from __future__ import annotations

import re
from typing import Optional

import httpx

from travel_fx.config import EstimatorSettings
from travel_fx.data_collection.providers.base import BaseRateEstimator
from travel_fx.utils.errors import RateLimitError, RemoteError
from travel_fx.utils.logging import get_logger


logger = get_logger(__name__)

PROMPT_TEMPLATE = (
    "Convert 1 {base} to {quote}. "
    "Just provide the numerical exchange rate, no text or explanation."
)

_NON_NUMERIC = re.compile(r"[^0-9.]")
_LEADING_NUMBER = re.compile(r"\d*\.?\d+|\d+\.?")


def parse_rate_text(text: str) -> float:
    """Extract a rate from free text: drop everything except digits and dots, then read the leading number."""
    cleaned = _NON_NUMERIC.sub("", text or "")
    match = _LEADING_NUMBER.match(cleaned)
    if match is None:
        raise RemoteError(
            f"Failed to parse exchange rate from response text: {text!r}",
            reason="parse_error",
        )
    return float(match.group())


class GeminiRateEstimator(BaseRateEstimator):
    NAME = "gemini"

    def __init__(self, settings: Optional[EstimatorSettings] = None) -> None:
        self.settings = settings or EstimatorSettings()
        self.api_key: str = self.settings.api_key

    @property
    def url(self) -> str:
        return f"{self.settings.base_url}/models/{self.settings.model}:generateContent"

    async def estimate_rate(self, base: str, quote: str) -> float:
        self.validate_currency_code(base)
        self.validate_currency_code(quote)

        payload = {
            "contents": [
                {"role": "user", "parts": [{"text": PROMPT_TEMPLATE.format(base=base, quote=quote)}]}
            ]
        }

        try:
            async with httpx.AsyncClient(timeout=self.settings.timeout) as client:
                response = await client.post(
                    self.url,
                    params={"key": self.api_key},
                    headers={"Content-Type": "application/json"},
                    json=payload,
                )
        except httpx.TimeoutException as e:
            logger.error(f"Gemini request timed out: {e}")
            raise RemoteError(f"Request timed out: {e}", reason="transport_error")
        except httpx.HTTPError as e:
            logger.error(f"Gemini request failed: {e}")
            raise RemoteError(str(e), reason="transport_error")

        if response.status_code == 429:
            logger.warning(f"Gemini rate limit hit for {base}/{quote}")
            raise RateLimitError("Gemini rate limit exceeded")
        if response.status_code != 200:
            logger.error(f"Gemini API error {response.status_code}: {response.text}")
            raise RemoteError(f"API error {response.status_code}", reason="http_error")

        try:
            data = response.json() or {}
        except ValueError:
            raise RemoteError("Response body is not JSON", reason="parse_error")

        text = self._extract_text(data)
        if text is None:
            logger.error(f"Gemini response carried no candidate text for {base}/{quote}")
            raise RemoteError("No exchange rate found in API response", reason="empty_response")

        return parse_rate_text(text)

    @staticmethod
    def _extract_text(data) -> Optional[str]:
        # {"candidates": [{"content": {"parts": [{"text": "1300.5"}]}}]}
        try:
            candidates = data.get("candidates") or []
            if not candidates:
                return None
            content = candidates[0].get("content") or {}
            parts = content.get("parts") or []
            if not parts:
                return None
            text = parts[0].get("text")
        except (AttributeError, TypeError, KeyError) as e:
            raise RemoteError(f"Unexpected response structure: {e}", reason="parse_error")
        if text is not None and not isinstance(text, str):
            raise RemoteError(f"Unexpected candidate text: {text!r}", reason="parse_error")
        return text
