"""
Anchor-rate fetching with bounded retry on rate limits.
"""
import math
import random
from typing import Awaitable, Callable, Optional

from travel_fx.config import RetryPolicy
from travel_fx.data_collection.providers.base import BaseRateEstimator
from travel_fx.utils.decorators import log_execution, retry
from travel_fx.utils.errors import InvalidArgument, RateLimitError, RemoteError
from travel_fx.utils.logging import get_logger

logger = get_logger(__name__)


def _retries_exhausted(error: Exception, attempts: int) -> RemoteError:
    return RemoteError(
        f"Rate limited on all {attempts} attempts: {error}",
        reason="retries_exhausted",
    )


class ResilientFetcher:
    """
    Fetches a single anchor rate from a remote estimator.

    Only rate-limit failures are retried, following ``policy``; every other
    remote failure and any non-finite or non-positive result fails at once
    with ``RemoteError``.
    """

    def __init__(
        self,
        estimator: BaseRateEstimator,
        policy: Optional[RetryPolicy] = None,
        sleep: Optional[Callable[[float], Awaitable[None]]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.estimator = estimator
        self.policy = policy or RetryPolicy()
        self._estimate_with_retry = retry(
            max_attempts=self.policy.max_attempts,
            delay=self.policy.base_delay,
            backoff=self.policy.backoff,
            jitter=self.policy.jitter,
            exceptions=(RateLimitError,),
            on_exhausted=_retries_exhausted,
            sleep=sleep,
            rng=rng,
        )(self.estimator.estimate_rate)

    @log_execution(log_args=True, log_result=True)
    async def fetch_anchor_rate(self, from_code: str, to_code: str) -> float:
        """
        Get the number of ``to_code`` units one ``from_code`` unit buys.

        Raises:
            InvalidArgument: if either code is empty
            RemoteError: on transport/parse failure or when retries run out
        """
        if not from_code or not to_code:
            raise InvalidArgument(f"Currency codes must be non-empty (got {from_code!r}, {to_code!r})")
        if from_code == to_code:
            return 1.0

        rate = await self._estimate_with_retry(from_code, to_code)

        # Series values are kept at 2 dp, so a rate that rounds to 0 is unusable
        if not isinstance(rate, (int, float)) or not math.isfinite(rate) or round(rate, 2) <= 0:
            logger.error(f"Estimator returned unusable rate for {from_code}/{to_code}: {rate!r}")
            raise RemoteError(f"Unusable rate value: {rate!r}", reason="invalid_response")

        return float(rate)
