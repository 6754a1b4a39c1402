from __future__ import annotations

import logging
from typing import Optional, Protocol

import requests

from ..core.constants import INSIGHT_FALLBACK_TEXT, INSIGHT_TIMEOUT_SECONDS
from .model import InsightRequest

logger = logging.getLogger(__name__)


class InsightGateway(Protocol):
    def generate(self, request: InsightRequest) -> str:
        raise NotImplementedError


class DisabledInsightGateway:
    """Used when no narrative endpoint is configured."""

    def __init__(self, fallback: str = INSIGHT_FALLBACK_TEXT):
        self._fallback = fallback

    def generate(self, request: InsightRequest) -> str:
        logger.info("Insight endpoint not configured; returning fallback for %s", request.batch_name)
        return self._fallback


class HttpInsightGateway:
    """POSTs the summary as JSON and expects ``{"text": ...}`` back.

    Every failure (network, timeout, HTTP status, bad JSON, empty text)
    collapses into the fallback narrative.
    """

    def __init__(
        self,
        url: str,
        *,
        api_key: str = "",
        timeout: float = INSIGHT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
        fallback: str = INSIGHT_FALLBACK_TEXT,
    ):
        self._url = url
        self._api_key = api_key
        self._timeout = float(timeout)
        self._session = session or requests.Session()
        self._fallback = fallback

    def _headers(self) -> dict[str, str]:
        h = {"Accept": "application/json", "Content-Type": "application/json"}
        if self._api_key:
            h["Authorization"] = f"Bearer {self._api_key}"
        return h

    def generate(self, request: InsightRequest) -> str:
        try:
            r = self._session.post(self._url, headers=self._headers(), json=request.to_payload(), timeout=self._timeout)
            r.raise_for_status()
            body = r.json()
        except requests.HTTPError as e:
            status = getattr(e.response, "status_code", "")
            logger.error("Insight POST %s failed: %s", self._url, status)
            return self._fallback
        except requests.RequestException as e:
            logger.error("Insight POST %s failed: %s", self._url, e)
            return self._fallback
        except ValueError:
            logger.error("Insight response from %s is not JSON", self._url)
            return self._fallback

        text = body.get("text") if isinstance(body, dict) else None
        if not isinstance(text, str) or not text.strip():
            logger.warning("Insight response from %s has no text", self._url)
            return self._fallback
        return text.strip()
