"""Vendor-Specific Adapters — protocol-level handling for each LLM vendor.

Each adapter translates a (prompt, system prompt, model) triple into the
vendor's HTTP protocol, sends it, and returns the single text payload.
The outward contract is identical across vendors: the same inputs, the
same ``ProviderCallResult`` on success and the same failure vocabulary
(see ``llm_compare.gateway.errors``).

Vendor-specific behaviors:
  - OpenAI: Bearer auth, system prompt as the first chat message
  - Anthropic: x-api-key + anthropic-version headers, top-level ``system``,
    mandatory ``max_tokens``
  - Google: API key in the ``key`` query parameter, ``systemInstruction``
    separate from ``contents``, model id in the URL path
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import quote

import httpx

from llm_compare.core.config import settings
from llm_compare.gateway.errors import (
    NETWORK_ERROR,
    NO_CONTENT,
    EmptyContentError,
    NetworkError,
    ProviderTimeoutError,
    error_for_status,
)
from llm_compare.gateway.types import ProviderCallResult, ProviderId

logger = logging.getLogger(__name__)


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def _json_or_empty(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return {}


class BaseProviderAdapter(ABC):
    """Base class for all provider adapters.

    Subclasses describe their wire format; the HTTP exchange, timeout
    handling and error classification live here so every vendor fails
    the same way.
    """

    provider: ProviderId
    vendor_name: str

    def __init__(self, timeout: float | None = None, validation_timeout: float | None = None):
        self.timeout = settings.api_timeout_seconds if timeout is None else timeout
        self.validation_timeout = (
            settings.validation_timeout_seconds if validation_timeout is None else validation_timeout
        )

    # -- wire format -------------------------------------------------------

    @abstractmethod
    def _validation_request(self, secret: str) -> tuple[str, dict[str, str], dict[str, str]]:
        """Return (url, headers, query params) for the lightweight credential check."""
        ...

    @abstractmethod
    def _generation_request(
        self,
        prompt: str,
        system_prompt: str,
        secret: str,
        model_id: str,
    ) -> tuple[str, dict[str, str], dict[str, str], dict[str, Any]]:
        """Return (url, headers, query params, JSON payload) for generation."""
        ...

    @abstractmethod
    def _extract_content(self, data: Any) -> Any:
        """Pull the single text payload out of the vendor's response body."""
        ...

    # -- capability set ----------------------------------------------------

    async def validate_credential(self, secret: str) -> bool:
        """Check a credential with a side-effect-free "list models" request.

        Never raises: network failures, timeouts and non-2xx statuses all
        come back as ``False``.
        """
        try:
            url, headers, params = self._validation_request(secret)
            async with httpx.AsyncClient(timeout=self.validation_timeout) as client:
                resp = await client.get(url, headers=headers, params=params)
        except httpx.TimeoutException:
            logger.info(
                "%s credential check timed out after %ss",
                self.vendor_name,
                self.validation_timeout,
                extra={"provider": self.provider.value},
            )
            return False
        except Exception as e:
            logger.info(
                "%s credential check failed: %s",
                self.vendor_name,
                type(e).__name__,
                extra={"provider": self.provider.value},
            )
            return False

        valid = _is_success(resp.status_code)
        logger.debug(
            "%s credential check -> HTTP %d",
            self.vendor_name,
            resp.status_code,
            extra={"provider": self.provider.value},
        )
        return valid

    async def generate(
        self,
        prompt: str,
        system_prompt: str,
        secret: str,
        model_id: str,
    ) -> ProviderCallResult:
        """Send one generation request and return its text.

        Raises a ``ProviderError`` subclass on timeout, transport failure,
        non-success status or an empty payload.
        """
        url, headers, params, payload = self._generation_request(prompt, system_prompt, secret, model_id)
        log_extra = {"provider": self.provider.value, "model_id": model_id}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.post(url, json=payload, headers=headers, params=params)
        except httpx.TimeoutException as e:
            logger.warning(
                "%s timeout after %ss for model=%s", self.vendor_name, self.timeout, model_id, extra=log_extra
            )
            raise ProviderTimeoutError(f"Request timed out after {self.timeout:g} seconds.") from e
        except httpx.RequestError as e:
            logger.warning(
                "%s network failure for model=%s: %s",
                self.vendor_name,
                model_id,
                type(e).__name__,
                extra=log_extra,
            )
            raise NetworkError(NETWORK_ERROR) from e

        if not _is_success(resp.status_code):
            error = error_for_status(resp.status_code, _json_or_empty(resp), self.vendor_name)
            logger.warning(
                "%s API %d for model=%s: %s",
                self.vendor_name,
                resp.status_code,
                model_id,
                error.message,
                extra=log_extra,
            )
            raise error

        try:
            data = resp.json()
        except ValueError as e:
            logger.warning("%s returned a non-JSON body for model=%s", self.vendor_name, model_id, extra=log_extra)
            raise EmptyContentError(NO_CONTENT) from e

        content = self._extract_content(data)
        if not isinstance(content, str) or not content:
            logger.warning("%s returned no text for model=%s", self.vendor_name, model_id, extra=log_extra)
            raise EmptyContentError(NO_CONTENT)

        return ProviderCallResult(content=content)


# ---------------------------------------------------------------------------
# OpenAI Adapter
# ---------------------------------------------------------------------------


class OpenAIAdapter(BaseProviderAdapter):
    """OpenAI Chat Completions adapter."""

    provider = ProviderId.OPENAI
    vendor_name = "OpenAI"
    models_url = "https://api.openai.com/v1/models"
    api_url = "https://api.openai.com/v1/chat/completions"

    def _validation_request(self, secret):
        return self.models_url, {"Authorization": f"Bearer {secret}"}, {}

    def _generation_request(self, prompt, system_prompt, secret, model_id):
        headers = {
            "Authorization": f"Bearer {secret}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": model_id,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
        }
        return self.api_url, headers, {}, payload

    def _extract_content(self, data):
        try:
            return data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return None


# ---------------------------------------------------------------------------
# Anthropic Adapter
# ---------------------------------------------------------------------------


class AnthropicAdapter(BaseProviderAdapter):
    """Anthropic Messages API adapter."""

    provider = ProviderId.ANTHROPIC
    vendor_name = "Anthropic"
    api_version = "2023-06-01"
    models_url = "https://api.anthropic.com/v1/models"
    api_url = "https://api.anthropic.com/v1/messages"

    def __init__(self, max_tokens: int | None = None, **kwargs):
        super().__init__(**kwargs)
        self.max_tokens = settings.default_max_tokens if max_tokens is None else max_tokens

    def _auth_headers(self, secret: str) -> dict[str, str]:
        return {"x-api-key": secret, "anthropic-version": self.api_version}

    def _validation_request(self, secret):
        return self.models_url, self._auth_headers(secret), {}

    def _generation_request(self, prompt, system_prompt, secret, model_id):
        headers = {**self._auth_headers(secret), "Content-Type": "application/json"}
        payload = {
            "model": model_id,
            "max_tokens": self.max_tokens,
            "system": system_prompt,
            "messages": [{"role": "user", "content": prompt}],
        }
        return self.api_url, headers, {}, payload

    def _extract_content(self, data):
        try:
            return data["content"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return None


# ---------------------------------------------------------------------------
# Google Adapter (Gemini)
# ---------------------------------------------------------------------------


class GoogleAdapter(BaseProviderAdapter):
    """Google Gemini generateContent adapter."""

    provider = ProviderId.GOOGLE
    vendor_name = "Google"
    base_url = "https://generativelanguage.googleapis.com/v1beta"

    def _validation_request(self, secret):
        return f"{self.base_url}/models", {}, {"key": secret}

    def _generation_request(self, prompt, system_prompt, secret, model_id):
        url = f"{self.base_url}/models/{quote(model_id, safe='')}:generateContent"
        payload = {
            # System instruction is separate from contents in the Gemini API
            "systemInstruction": {"parts": [{"text": system_prompt}]},
            "contents": [{"parts": [{"text": prompt}]}],
        }
        return url, {"Content-Type": "application/json"}, {"key": secret}, payload

    def _extract_content(self, data):
        try:
            return data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return None


# ---------------------------------------------------------------------------
# Adapter table
# ---------------------------------------------------------------------------

ADAPTER_CLASSES: dict[ProviderId, type[BaseProviderAdapter]] = {
    ProviderId.OPENAI: OpenAIAdapter,
    ProviderId.ANTHROPIC: AnthropicAdapter,
    ProviderId.GOOGLE: GoogleAdapter,
}
