# Best-effort remote humanize/analyze through an OpenRouter chat-completions endpoint.
#
# Kept apart from the analyzer and rewriter, which never touch the network.
# Every failure surfaces as a VibeRemoverError subclass with a readable message.

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import httpx
from pydantic import BaseModel, Field

from data_designer_vibe_remover.prompts import (
    ANALYZE_SYSTEM_PROMPT,
    HumanizeRequest,
    build_humanize_prompt,
)

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "openai/gpt-4o-mini"
DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
_ERROR_BODY_CHARS = 300

# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class VibeRemoverError(Exception):
    """Base class for errors raised by the remote layer."""


class ConfigurationError(VibeRemoverError):
    """No usable credential or setting for the remote service."""


class RemoteServiceError(VibeRemoverError):
    """The remote service failed, was unreachable, or returned nothing."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class LLMSettings(BaseModel):
    """Connection settings for the remote completion endpoint."""

    api_key: str | None = Field(default=None, description="OpenRouter API key")
    model: str = Field(default=DEFAULT_MODEL, description="Model identifier sent with each request")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API root, without the /chat/completions suffix")
    timeout: float = Field(default=60.0, gt=0, description="Request timeout in seconds")
    app_title: str = Field(default="AI Vibe Remover", description="Value of the X-Title header")

    @classmethod
    def from_env(cls) -> LLMSettings:
        return cls(
            api_key=os.getenv("OPENROUTER_API_KEY") or None,
            model=os.getenv("OPENROUTER_MODEL", DEFAULT_MODEL),
            base_url=os.getenv("OPENROUTER_BASE_URL", DEFAULT_BASE_URL),
            timeout=float(os.getenv("OPENROUTER_TIMEOUT", "60")),
        )


@dataclass(frozen=True)
class ModelParams:
    temperature: float
    max_tokens: int
    model: str | None = None


HUMANIZE_PARAMS = ModelParams(temperature=0.4, max_tokens=2000)
ANALYZE_PARAMS = ModelParams(temperature=1.0, max_tokens=500)

# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


class LLMClient:
    """Minimal chat-completions client: one system prompt, one user message, one reply."""

    def __init__(self, settings: LLMSettings | None = None, transport: httpx.BaseTransport | None = None):
        self.settings = settings or LLMSettings.from_env()
        self._transport = transport

    def complete(self, system_prompt: str, user_text: str, params: ModelParams | None = None) -> str:
        """Send one completion request and return the stripped reply text.

        Raises:
            ConfigurationError: No API key is configured.
            RemoteServiceError: Non-2xx status, transport failure, or empty completion.
        """
        if not self.settings.api_key:
            raise ConfigurationError("Missing OPENROUTER_API_KEY. Set it in the environment and try again.")
        params = params or HUMANIZE_PARAMS
        model = params.model or self.settings.model
        payload = {
            "model": model,
            "temperature": params.temperature,
            "max_tokens": params.max_tokens,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_text},
            ],
        }
        headers = {
            "Authorization": f"Bearer {self.settings.api_key}",
            "X-Title": self.settings.app_title,
        }

        logger.debug(f"requesting completion from {model!r}")
        try:
            with httpx.Client(
                base_url=self.settings.base_url, timeout=self.settings.timeout, transport=self._transport
            ) as client:
                response = client.post("/chat/completions", json=payload, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning(f"completion request failed: {exc}")
            raise RemoteServiceError(f"Could not reach the model service: {exc}") from exc

        if not response.is_success:
            logger.warning(f"completion request returned HTTP {response.status_code}")
            raise RemoteServiceError(
                f"OpenRouter error ({response.status_code}): {response.text[:_ERROR_BODY_CHARS]}",
                status_code=response.status_code,
            )

        content = _extract_content(response)
        if not content:
            raise RemoteServiceError("The model did not return any text. Try again or adjust options.")
        return content


def _extract_content(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return ""
    choices = data.get("choices") if isinstance(data, dict) else None
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return ""
    message = choices[0].get("message")
    if not isinstance(message, dict):
        return ""
    content = message.get("content")
    return content.strip() if isinstance(content, str) else ""


# ---------------------------------------------------------------------------
# Features
# ---------------------------------------------------------------------------


def humanize_remote(client: LLMClient, text: str, request: HumanizeRequest | None = None) -> str:
    """Rewrite ``text`` with the remote model."""
    text = (text or "").strip()
    if not text:
        raise ValueError("Please paste some text to humanize.")
    return client.complete(build_humanize_prompt(request or HumanizeRequest()), text, HUMANIZE_PARAMS)


def explain_remote(client: LLMClient, text: str) -> str:
    """Ask the remote model for a prose assessment of the AI-like traits in ``text``."""
    text = (text or "").strip()
    if not text:
        raise ValueError("Please paste some text to analyze.")
    return client.complete(ANALYZE_SYSTEM_PROMPT, text, ANALYZE_PARAMS)
