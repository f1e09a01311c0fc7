"""Tests for decorator utilities."""
import random

import pytest
from travel_fx.utils.decorators import retry, log_execution


class FixedRandom(random.Random):
    def random(self):
        return 0.25


@pytest.mark.asyncio
async def test_retry_success(sleep_recorder):
    """Test retry decorator with successful execution."""
    call_count = 0

    @retry(max_attempts=3, delay=0.1, sleep=sleep_recorder)
    async def flaky_function():
        nonlocal call_count
        call_count += 1
        if call_count < 2:
            raise ValueError("Temporary error")
        return "success"

    result = await flaky_function()
    assert result == "success"
    assert call_count == 2
    assert sleep_recorder.delays == [0.1]


@pytest.mark.asyncio
async def test_retry_failure(sleep_recorder):
    """Test retry decorator with persistent failure."""
    @retry(max_attempts=3, delay=0.1, sleep=sleep_recorder)
    async def always_fails():
        raise ValueError("Persistent error")

    with pytest.raises(ValueError, match="Persistent error"):
        await always_fails()
    assert len(sleep_recorder.delays) == 2


@pytest.mark.asyncio
async def test_retry_backoff_with_jitter(sleep_recorder):
    @retry(max_attempts=4, delay=1.0, backoff=2.0, jitter=1.0, sleep=sleep_recorder, rng=FixedRandom())
    async def always_fails():
        raise ValueError("nope")

    with pytest.raises(ValueError):
        await always_fails()
    # uniform(0, 1.0) with random() == 0.25 yields 0.25
    assert sleep_recorder.delays == pytest.approx([1.25, 2.25, 4.25])


@pytest.mark.asyncio
async def test_retry_ignores_unlisted_exceptions(sleep_recorder):
    calls = 0

    @retry(max_attempts=5, exceptions=(KeyError,), sleep=sleep_recorder)
    async def wrong_error():
        nonlocal calls
        calls += 1
        raise ValueError("not retryable")

    with pytest.raises(ValueError):
        await wrong_error()
    assert calls == 1
    assert sleep_recorder.delays == []


@pytest.mark.asyncio
async def test_retry_on_exhausted_builds_final_error(sleep_recorder):
    class GaveUp(Exception):
        pass

    @retry(
        max_attempts=2,
        delay=0.0,
        exceptions=(ValueError,),
        on_exhausted=lambda err, attempts: GaveUp(f"{attempts}: {err}"),
        sleep=sleep_recorder,
    )
    async def always_fails():
        raise ValueError("busy")

    with pytest.raises(GaveUp, match="2: busy") as exc_info:
        await always_fails()
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_retry_rejects_zero_attempts():
    with pytest.raises(ValueError):
        retry(max_attempts=0)


@pytest.mark.asyncio
async def test_log_execution():
    """Test log_execution decorator."""
    @log_execution(log_args=True, log_result=True)
    async def logged_function(x, y):
        return x + y

    result = await logged_function(2, 3)
    assert result == 5


@pytest.mark.asyncio
async def test_log_execution_reraises():
    @log_execution()
    async def broken():
        raise RuntimeError("bad")

    with pytest.raises(RuntimeError, match="bad"):
        await broken()
