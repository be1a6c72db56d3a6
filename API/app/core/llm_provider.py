import asyncio
from abc import ABC, abstractmethod

import httpx

from app.core.logging import DOMAIN_LLM, get_domain_logger
from app.core.resilience import retry_with_backoff
from app.core.settings import settings

logger = get_domain_logger(__name__, DOMAIN_LLM)


class LLMError(Exception):
    """Base class for failures of the outbound generative-text call."""


class LLMNotConfiguredError(LLMError):
    pass


class LLMTimeoutError(LLMError):
    pass


class LLMNetworkError(LLMError):
    pass


class LLMStatusError(LLMError):
    def __init__(self, status: int, body: str):
        super().__init__(f"LLM API error {status}: {body[:200]}")
        self.status = status
        self.body = body


class LLMClientError(LLMStatusError):
    pass


class LLMServerError(LLMStatusError):
    pass


class LLMMalformedResponseError(LLMError):
    pass


class LLMContentPolicyError(LLMError):
    pass


# Client errors, malformed bodies and policy rejections are deterministic; never retried.
RETRYABLE_LLM_ERRORS: tuple[type[Exception], ...] = (LLMTimeoutError, LLMNetworkError, LLMServerError)


def _estimate_tokens(text: str) -> int:
    # Lightweight deterministic estimate used for observability without provider-specific token APIs.
    return max(1, len((text or "").strip()) // 4)


class BaseLLMProvider(ABC):
    provider_name: str

    @abstractmethod
    async def chat(self, messages: list[dict], temperature: float = 0.7) -> str:
        raise NotImplementedError


class OpenRouterLLMProvider(BaseLLMProvider):
    provider_name = "openrouter"

    def __init__(
        self,
        model_name: str | None = None,
        api_key: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.model_name = model_name or settings.llm_model
        self.api_key = settings.openrouter_api_key if api_key is None else api_key
        self._transport = transport

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": settings.llm_http_referer,
            "X-Title": settings.llm_app_title,
        }

    @staticmethod
    def _extract_content(data) -> str:
        if not isinstance(data, dict):
            raise LLMMalformedResponseError("Response body is not a JSON object")
        if data.get("error"):
            raise LLMContentPolicyError(f"Provider rejected the request: {data['error']}")
        choices = data.get("choices") or []
        if not choices or not isinstance(choices[0], dict):
            raise LLMMalformedResponseError("Invalid response format from AI API")
        if choices[0].get("finish_reason") == "content_filter":
            raise LLMContentPolicyError("Completion blocked by content filter")
        message = choices[0].get("message") or {}
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str) or not content.strip():
            raise LLMMalformedResponseError("Invalid response format from AI API")
        return content

    async def chat(self, messages: list[dict], temperature: float = 0.7) -> str:
        if not self.api_key:
            raise LLMNotConfiguredError("OpenRouter API key not configured")

        timeout = float(settings.llm_timeout_seconds)
        payload = {
            "model": self.model_name,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": settings.llm_max_tokens,
        }

        async def _call() -> str:
            try:
                async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
                    response = await asyncio.wait_for(
                        client.post(settings.openrouter_url, json=payload, headers=self._headers()),
                        timeout=timeout,
                    )
            except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
                raise LLMTimeoutError(f"AI service did not respond within {timeout:.0f}s") from exc
            except httpx.TransportError as exc:
                raise LLMNetworkError(str(exc) or type(exc).__name__) from exc
            except httpx.HTTPError as exc:
                raise LLMMalformedResponseError(f"AI API request failed ({type(exc).__name__}: {exc})") from exc

            if 400 <= response.status_code < 500:
                raise LLMClientError(response.status_code, response.text)
            if response.status_code >= 500:
                raise LLMServerError(response.status_code, response.text)
            try:
                data = response.json()
            except ValueError as exc:
                raise LLMMalformedResponseError(
                    f"AI API returned a non-JSON body (status {response.status_code})"
                ) from exc
            return self._extract_content(data)

        text = await retry_with_backoff(
            _call,
            max_retries=settings.llm_max_retries,
            base_delay_seconds=settings.llm_retry_base_delay_seconds,
            retryable_errors=RETRYABLE_LLM_ERRORS,
        )
        prompt_text = " ".join(str(m.get("content", "")) for m in messages)
        logger.info(
            "LLM call ok provider=%s model=%s prompt_tokens~%d completion_tokens~%d",
            self.provider_name,
            self.model_name,
            _estimate_tokens(prompt_text),
            _estimate_tokens(text),
        )
        return text


class NullLLMProvider(BaseLLMProvider):
    provider_name = "none"

    async def chat(self, messages: list[dict], temperature: float = 0.7) -> str:
        raise LLMNotConfiguredError("No LLM provider configured")


def get_llm_provider() -> BaseLLMProvider:
    provider = (settings.llm_provider or "").lower()
    if provider == "openrouter":
        return OpenRouterLLMProvider()
    return NullLLMProvider()
