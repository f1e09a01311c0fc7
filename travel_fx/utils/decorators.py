"""Utility decorators for error handling and resilience."""
import asyncio
import functools
import random
import time
from typing import Awaitable, Callable, Optional, Tuple, Type
from travel_fx.utils.logging import get_logger

logger = get_logger(__name__)


def retry(
    max_attempts: int = 3,
    delay: float = 1.0,
    backoff: float = 2.0,
    jitter: float = 0.0,
    exceptions: Tuple[Type[Exception], ...] = (Exception,),
    on_exhausted: Optional[Callable[[Exception, int], Exception]] = None,
    sleep: Optional[Callable[[float], Awaitable[None]]] = None,
    rng: Optional[random.Random] = None,
):
    """
    Retry decorator for coroutines with exponential backoff and jitter.

    The wait before retry k (k starting at 1) is
    ``delay * backoff ** (k - 1) + uniform(0, jitter)``. Exceptions not listed
    in ``exceptions`` propagate on the first occurrence.

    Args:
        max_attempts: Total number of attempts, including the first one
        delay: Initial delay between retries in seconds
        backoff: Backoff multiplier for delay
        jitter: Upper bound of the uniform random delay added to each wait
        exceptions: Tuple of exceptions to catch and retry
        on_exhausted: Builds the exception raised after the final attempt,
            given the last error and the attempt count; the last error is
            re-raised when omitted
        sleep: Awaitable sleep function, ``asyncio.sleep`` by default
        rng: Random source for jitter

    Example:
        @retry(max_attempts=4, delay=1.0, jitter=1.0, exceptions=(RateLimitError,))
        async def fetch_data():
            ...
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    jitter_source = rng or random.Random()

    def decorator(func: Callable):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            do_sleep = sleep or asyncio.sleep

            for attempt in range(1, max_attempts + 1):
                try:
                    return await func(*args, **kwargs)
                except exceptions as e:
                    if attempt == max_attempts:
                        logger.error(
                            f"Function {func.__name__} failed after {max_attempts} attempts",
                            extra={"error": str(e), "attempts": attempt}
                        )
                        if on_exhausted is None:
                            raise
                        raise on_exhausted(e, attempt) from e

                    wait = delay * backoff ** (attempt - 1)
                    if jitter > 0:
                        wait += jitter_source.uniform(0, jitter)
                    logger.warning(
                        f"Function {func.__name__} failed (attempt {attempt}/{max_attempts}), "
                        f"retrying in {wait:.2f}s",
                        extra={"error": str(e), "delay": wait}
                    )
                    await do_sleep(wait)

        return wrapper

    return decorator


def log_execution(log_args: bool = True, log_result: bool = False):
    """
    Decorator to log coroutine execution with timing.

    Args:
        log_args: Whether to log function arguments
        log_result: Whether to log function result
    """
    def decorator(func: Callable):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            start_time = time.time()
            func_name = func.__name__

            extra = {"function": func_name}
            if log_args:
                extra["function_args"] = str(args)[:100]  # Truncate long args
                extra["function_kwargs"] = str(kwargs)[:100]

            logger.info(f"Starting {func_name}", extra=extra)

            try:
                result = await func(*args, **kwargs)
                execution_time = (time.time() - start_time) * 1000  # ms

                log_extra = {"function": func_name, "execution_time_ms": round(execution_time, 2)}
                if log_result:
                    log_extra["result"] = str(result)[:100]

                logger.info(f"Completed {func_name}", extra=log_extra)
                return result
            except Exception as e:
                execution_time = (time.time() - start_time) * 1000
                logger.error(
                    f"Failed {func_name}",
                    extra={"function": func_name, "execution_time_ms": round(execution_time, 2), "error": str(e)}
                )
                raise

        return wrapper

    return decorator
