import asyncio

from app.core.logging import DOMAIN_LLM, get_domain_logger

logger = get_domain_logger(__name__, DOMAIN_LLM)


async def retry_with_backoff(
    async_func,
    *,
    max_retries: int = 2,
    base_delay_seconds: float = 2.0,
    retryable_errors: tuple[type[Exception], ...] = (TimeoutError, ConnectionError, asyncio.TimeoutError),
):
    """Call ``async_func`` up to ``max_retries + 1`` times.

    Only ``retryable_errors`` trigger another attempt; the wait before retry ``n`` (1-based)
    is ``n * base_delay_seconds``. Anything else propagates from the first failure.
    """
    attempts = max(0, int(max_retries)) + 1
    for attempt in range(1, attempts + 1):
        try:
            return await async_func()
        except retryable_errors as exc:  # type: ignore[misc]
            if attempt == attempts:
                raise
            delay = base_delay_seconds * attempt
            logger.info(
                "Attempt %d/%d failed (%s), retrying in %.1fs",
                attempt,
                attempts,
                type(exc).__name__,
                delay,
            )
            await asyncio.sleep(delay)
