"""Pytest configuration and fixtures."""
import asyncio
import logging
import random
from datetime import date
from pathlib import Path
import tempfile
from typing import List

import pytest
import yaml

from travel_fx import config as config_module
from travel_fx.data_collection.providers.base import BaseRateEstimator
from travel_fx.utils.errors import RateLimitError


@pytest.fixture
def temp_config_file():
    """Create a temporary config file for testing."""
    config_data = {
        'app': {
            'name': 'Test App',
            'version': '0.1.0',
            'debug': True
        },
        'estimator': {
            'base_url': 'https://example.test/v1beta/',
            'model': 'test-model',
            'timeout': 5,
            'api_key_env': 'TEST_GEMINI_KEY'
        },
        'retry': {
            'max_attempts': 4,
            'base_delay': 0.5,
            'backoff': 3.0,
            'jitter': 0.0
        },
        'simulation': {
            'quote_currency': 'krw',
            'historical': {
                'lower_factor': 0.9,
                'upper_factor': 1.1,
                'step_fraction': 0.01,
                'label_format': '%d.%m'
            }
        },
        'logging': {
            'level': 'DEBUG',
            'format': 'text'
        }
    }

    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(config_data, f)
        config_path = f.name

    yield config_path

    Path(config_path).unlink()


@pytest.fixture(autouse=True)
def clear_global_config():
    """Forget the global configuration and undo logging setup around each test."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    config_module.reset_config()
    yield
    config_module.reset_config()
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    logging.disable(logging.NOTSET)


class SleepRecorder:
    """Stands in for asyncio.sleep and records requested delays."""

    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()


class ScriptedEstimator(BaseRateEstimator):
    """Replays a script of results; exceptions in the script are raised."""

    NAME = "scripted"

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    async def estimate_rate(self, base: str, quote: str) -> float:
        self.calls.append((base, quote))
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class AlwaysRateLimited(BaseRateEstimator):
    NAME = "rate_limited"

    def __init__(self):
        self.calls = 0

    async def estimate_rate(self, base: str, quote: str) -> float:
        self.calls += 1
        raise RateLimitError()


class GatedEstimator(BaseRateEstimator):
    """Blocks each call until the test releases it with a rate or an error."""

    NAME = "gated"

    def __init__(self):
        self.pending = {}

    async def estimate_rate(self, base: str, quote: str) -> float:
        future = asyncio.get_running_loop().create_future()
        self.pending[base] = future
        return await future

    def resolve(self, base: str, rate: float) -> None:
        self.pending[base].set_result(rate)

    def fail(self, base: str, error: Exception) -> None:
        self.pending[base].set_exception(error)


@pytest.fixture
def fixed_today():
    return lambda: date(2024, 3, 15)


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def scripted_estimator():
    """Factory for estimators that replay a fixed list of outcomes."""
    return ScriptedEstimator


@pytest.fixture
def rate_limited_estimator() -> AlwaysRateLimited:
    return AlwaysRateLimited()


@pytest.fixture
def gated_estimator() -> GatedEstimator:
    return GatedEstimator()
