"""Retry decorator for GitHub API calls that hit rate limits.

Only rate limit responses are retried. Every other failure, including
transient network errors, propagates to the caller unchanged so that the
outer scheduler can apply its own redelivery policy.
"""

import asyncio
import functools
import time
from typing import Any, Callable, Mapping, TypeVar

import structlog
from github import GithubException, RateLimitExceededException

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _header(headers: Mapping[str, str] | None, name: str) -> str | None:
    """Look up a response header regardless of its case."""
    for key, value in (headers or {}).items():
        if key.lower() == name:
            return value
    return None


def _is_rate_limited(exc: GithubException) -> bool:
    """Return True when a failed request was rejected because of rate limiting."""
    if isinstance(exc, RateLimitExceededException) or exc.status == 429:
        return True
    return exc.status == 403 and "rate limit" in str(exc).lower()


def _wait_time_from_headers(exc: GithubException, default: float, function_name: str) -> float:
    """Derive how long to wait from the retry-after or x-ratelimit-reset headers."""
    retry_after = _header(exc.headers, "retry-after")
    if retry_after:
        try:
            return float(retry_after)
        except ValueError:
            logger.warning("Invalid retry-after header value", retry_after=retry_after, function=function_name)
            return default

    rate_limit_reset = _header(exc.headers, "x-ratelimit-reset")
    if rate_limit_reset:
        try:
            reset_timestamp = int(rate_limit_reset)
        except ValueError:
            logger.warning("Invalid x-ratelimit-reset header value", rate_limit_reset=rate_limit_reset, function=function_name)
            return default
        now = int(time.time())
        if reset_timestamp > now:
            return float(reset_timestamp - now + 1)
    return default


def retry_on_rate_limit(
    max_retries: int = 10,
    initial_delay: float = 10.0,
    max_delay: float = 300.0,
    exponential_base: float = 2.0,
) -> Callable[[F], F]:
    """Decorator for retrying async functions when they encounter GitHub rate limits.

    Args:
        max_retries: Maximum number of retry attempts (default: 10)
        initial_delay: Initial delay in seconds between retries (default: 10.0)
        max_delay: Maximum delay in seconds between retries (default: 300.0)
        exponential_base: Base for exponential backoff calculation (default: 2.0)

    Returns:
        Decorated function with retry logic

    Example:
        @retry_on_rate_limit()
        async def get_release(tag_name: str):
            return await asyncio.to_thread(repository.get_release, tag_name)
    """

    def decorator(func: F) -> F:
        if not asyncio.iscoroutinefunction(func):
            raise TypeError(f"Function {func.__name__} decorated with @retry_on_rate_limit must be async.")

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            delay = initial_delay
            for attempt in range(max_retries + 1):
                try:
                    return await func(*args, **kwargs)
                except GithubException as exc:
                    if not _is_rate_limited(exc):
                        raise
                    if attempt == max_retries:
                        logger.error(
                            "Max retries reached for GitHub rate limit error",
                            function=func.__name__,
                            attempt=attempt + 1,
                            status_code=exc.status,
                        )
                        raise
                    wait_time = min(_wait_time_from_headers(exc, delay, func.__name__), max_delay)

                logger.warning(
                    "GitHub rate limit hit, retrying",
                    function=func.__name__,
                    attempt=attempt + 1,
                    max_retries=max_retries,
                    wait_time=wait_time,
                )
                await asyncio.sleep(wait_time)
                delay = min(delay * exponential_base, max_delay)

        return wrapper  # type: ignore

    return decorator
