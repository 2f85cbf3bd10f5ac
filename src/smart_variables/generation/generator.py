"""Name generator – asks a language model for candidate identifiers.

The generator talks to any **OpenAI-compatible** ``/chat/completions``
endpoint.  It handles HTTP transport, retries, timeouts and response
caching; every failure surfaces as a :class:`GenerationError` carrying a
human-readable message and a :class:`GenerationErrorCategory`.
"""

from __future__ import annotations

import re
import time
from typing import Any

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from smart_variables.config import settings
from smart_variables.generation.cache import LRUCache
from smart_variables.generation.prompting import build_prompt
from smart_variables.models import GenerationContext, GenerationErrorCategory, NamingStyle
from smart_variables.utils.logging import get_logger, truncate_for_log

logger = get_logger(__name__)

_LIST_MARKER = re.compile(r"^(?:[-*•]\s*|\d+[.)]\s*)")
_IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$]*$")

# Global cache shared by all generators
_response_cache = LRUCache(max_size=200, ttl_secs=settings.cache_ttl_secs)


class GenerationError(Exception):
    """Raised when the model cannot produce candidates."""

    def __init__(
        self,
        message: str,
        category: GenerationErrorCategory = GenerationErrorCategory.UNKNOWN,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.category = category


def _is_retryable(exc: BaseException) -> bool:
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        return status == 429 or status >= 500
    return isinstance(exc, (httpx.ConnectError, httpx.ReadTimeout))


def parse_candidates(raw: str, count: int) -> list[str]:
    """Turn the model's reply into at most *count* unique identifiers.

    One candidate per line; list markers, quotes, backticks and a trailing
    ``()`` are stripped, and lines that are not a single identifier
    (preambles, explanations) are dropped.
    """
    candidates: list[str] = []
    for line in raw.strip().splitlines():
        name = _LIST_MARKER.sub("", line.strip())
        name = name.strip("`'\" ").removesuffix("()").strip()
        if not name or not _IDENTIFIER.match(name):
            continue
        if name not in candidates:
            candidates.append(name)
    return candidates[: max(count, 0)]


class NameGenerator:
    """Thin async wrapper around an OpenAI-compatible chat endpoint."""

    def __init__(
        self,
        base_url: str,
        model: str,
        api_key: str = "",
        *,
        max_retries: int | None = None,
        retry_backoff_secs: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.llm_base_url).rstrip("/")
        self.model = model
        self.api_key = api_key
        self.max_retries = settings.max_retries if max_retries is None else max_retries
        self.retry_backoff_secs = (
            settings.retry_backoff_secs if retry_backoff_secs is None else retry_backoff_secs
        )

        headers: dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        if "openrouter.ai" in self.base_url:
            headers["HTTP-Referer"] = "https://github.com/smart-variables"
            headers["X-Title"] = "Smart Variables"

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(settings.request_timeout_secs, connect=10.0),
            headers=headers or None,
            transport=transport,
        )

    # ── public API ───────────────────────────────────────────────────

    async def generate(
        self,
        meaning: str,
        style: NamingStyle,
        count: int = 6,
        context: GenerationContext | None = None,
        use_cache: bool = True,
    ) -> list[str]:
        """Return up to *count* candidate names for *meaning* in *style*."""
        if not self.api_key:
            raise GenerationError(
                "API key is not set; configure 'api_key' (or LLM_API_KEY).",
                GenerationErrorCategory.MISSING_API_KEY,
            )
        if not self.model:
            raise GenerationError(
                "Model is not set; configure 'model_id' (or LLM_MODEL).",
                GenerationErrorCategory.MISSING_MODEL,
            )

        prompt = build_prompt(meaning, style, count, context)
        caching = use_cache and settings.enable_request_cache

        if caching:
            cached = _response_cache.get(self.model, prompt)
            if cached is not None:
                logger.info("generation.cache_hit", hash=cached.request_hash)
                return list(cached.candidates)

        if settings.log_llm_io:
            logger.info(
                "generation.prompt",
                model=self.model,
                endpoint=self.base_url,
                prompt=truncate_for_log(prompt, settings.log_max_chars),
            )

        t0 = time.perf_counter()
        try:
            raw, usage = await self._call_model(prompt)
        except httpx.TimeoutException as exc:
            logger.error("generation.timeout", model=self.model)
            raise GenerationError(
                "API request failed: request timed out", GenerationErrorCategory.TIMEOUT
            ) from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.error("generation.http_error", model=self.model, status=status)
            category = (
                GenerationErrorCategory.RATE_LIMITED if status == 429 else GenerationErrorCategory.API_ERROR
            )
            raise GenerationError(f"API request failed: HTTP {status}", category) from exc
        except httpx.HTTPError as exc:
            logger.error("generation.transport_error", model=self.model, error=str(exc))
            raise GenerationError(
                f"API request failed: {exc}", GenerationErrorCategory.API_ERROR
            ) from exc

        if settings.log_llm_io:
            logger.info("generation.output", output=truncate_for_log(raw, settings.log_max_chars))

        if not raw.strip():
            raise GenerationError(
                "The model returned an empty response", GenerationErrorCategory.EMPTY_RESPONSE
            )

        candidates = parse_candidates(raw, count)
        if not candidates:
            raise GenerationError(
                "The model response contained no usable names", GenerationErrorCategory.EMPTY_RESPONSE
            )

        logger.info(
            "generation.completed",
            model=self.model,
            style=style.value,
            candidates=len(candidates),
            secs=round(time.perf_counter() - t0, 2),
            tokens=usage,
        )
        if caching:
            _response_cache.set(self.model, prompt, candidates)
        return candidates

    # ── internal transport ───────────────────────────────────────────

    async def _call_model(self, prompt: str) -> tuple[str, dict[str, Any]]:
        """Send a chat-completion request with retries and return (text, usage)."""
        result: tuple[str, dict[str, Any]] = ("", {})
        async for attempt in AsyncRetrying(
            retry=retry_if_exception(_is_retryable),
            stop=stop_after_attempt(self.max_retries + 1),
            wait=wait_exponential(multiplier=self.retry_backoff_secs, min=0, max=15),
            reraise=True,
        ):
            with attempt:
                result = await self._post(prompt)
        return result

    async def _post(self, prompt: str) -> tuple[str, dict[str, Any]]:
        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": 0.5,
            "max_tokens": 200,
        }
        resp = await self._client.post("/chat/completions", json=payload)
        resp.raise_for_status()
        try:
            body = resp.json()
            content = body["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise GenerationError(
                "The model returned a malformed response", GenerationErrorCategory.EMPTY_RESPONSE
            ) from exc
        usage: dict[str, Any] = body.get("usage") or {}
        return content or "", usage

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "NameGenerator":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()


def clear_cache() -> None:
    """Drop every cached candidate list."""
    _response_cache.clear()
