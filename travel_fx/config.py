"""Configuration management for Travel FX."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import yaml
from dotenv import load_dotenv
from travel_fx.simulation.models import HISTORICAL_BOUNDS, PREDICTION_BOUNDS, WalkBounds
from travel_fx.utils.errors import ConfigurationError, InvalidArgument
from travel_fx.utils.logging import setup_logging
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetryPolicy:
    """Backoff schedule for rate-limited remote calls."""
    max_attempts: int = 4
    base_delay: float = 1.0
    backoff: float = 2.0
    jitter: float = 1.0

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'RetryPolicy':
        data = data or {}
        policy = cls(
            max_attempts=int(data.get('max_attempts', cls.max_attempts)),
            base_delay=float(data.get('base_delay', cls.base_delay)),
            backoff=float(data.get('backoff', cls.backoff)),
            jitter=float(data.get('jitter', cls.jitter)),
        )
        if policy.max_attempts < 1:
            raise ConfigurationError("retry.max_attempts must be at least 1")
        return policy


@dataclass(frozen=True)
class EstimatorSettings:
    """Connection settings for the remote rate estimator."""
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    model: str = "gemini-2.5-flash"
    timeout: float = 30.0
    api_key_env: str = "GEMINI_API_KEY"

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'EstimatorSettings':
        data = data or {}
        return cls(
            base_url=str(data.get('base_url', cls.base_url)).rstrip('/'),
            model=str(data.get('model', cls.model)),
            timeout=float(data.get('timeout', cls.timeout)),
            api_key_env=str(data.get('api_key_env', cls.api_key_env)),
        )

    @property
    def api_key(self) -> str:
        return os.getenv(self.api_key_env, "")


@dataclass(frozen=True)
class SeriesSettings:
    bounds: WalkBounds
    label_format: str


@dataclass(frozen=True)
class SimulationSettings:
    """Parameters for the simulated historical and prediction series."""
    quote_currency: str = "KRW"
    default_window_months: int = 1
    window_choices: Tuple[int, ...] = (1, 3, 6, 9, 12)
    days_per_month: int = 30
    historical: SeriesSettings = field(
        default_factory=lambda: SeriesSettings(HISTORICAL_BOUNDS, "%m/%d")
    )
    prediction: SeriesSettings = field(
        default_factory=lambda: SeriesSettings(PREDICTION_BOUNDS, "%Y-%m-%d")
    )

    @classmethod
    def default(cls) -> 'SimulationSettings':
        return cls()

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'SimulationSettings':
        data = data or {}
        defaults = cls.default()
        settings = cls(
            quote_currency=str(data.get('quote_currency', defaults.quote_currency)).upper(),
            default_window_months=int(data.get('default_window_months', defaults.default_window_months)),
            window_choices=tuple(int(m) for m in data.get('window_choices', defaults.window_choices)),
            days_per_month=int(data.get('days_per_month', defaults.days_per_month)),
            historical=_parse_series(data.get('historical'), defaults.historical),
            prediction=_parse_series(data.get('prediction'), defaults.prediction),
        )
        if settings.default_window_months not in settings.window_choices:
            raise ConfigurationError(
                f"simulation.default_window_months={settings.default_window_months} "
                f"is not one of {list(settings.window_choices)}"
            )
        return settings


def _parse_series(data: Optional[Dict[str, Any]], fallback: SeriesSettings) -> SeriesSettings:
    if not data:
        return fallback
    try:
        bounds = WalkBounds(
            lower_factor=float(data.get('lower_factor', fallback.bounds.lower_factor)),
            upper_factor=float(data.get('upper_factor', fallback.bounds.upper_factor)),
            step_fraction=float(data.get('step_fraction', fallback.bounds.step_fraction)),
        )
    except (ValueError, InvalidArgument) as e:
        raise ConfigurationError(f"Invalid series bounds: {e}") from e
    return SeriesSettings(bounds=bounds, label_format=str(data.get('label_format', fallback.label_format)))


class Config:
    """Application configuration."""

    def __init__(self, config_path: str = "config.yaml"):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML configuration file
        """
        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        """Load configuration from YAML and environment."""
        load_dotenv()

        if not self.config_path.exists():
            raise ConfigurationError(f"Config file not found: {self.config_path}")

        with open(self.config_path, 'r') as f:
            self._config = yaml.safe_load(f)

        if not self._config:
            raise ConfigurationError(f"Empty configuration file: {self.config_path}")

        self._validate()

        log_config = self._config.get('logging', {})
        setup_logging(
            level=os.getenv('LOG_LEVEL', log_config.get('level', 'INFO')),
            log_file=log_config.get('file'),
            format_type=log_config.get('format', 'json'),
            enabled=log_config.get('enabled', True)
        )

        logger.info("Configuration loaded successfully")

    def _validate(self) -> None:
        """Validate required configuration sections."""
        required_sections = ['app', 'estimator']

        for section in required_sections:
            if section not in self._config:
                raise ConfigurationError(f"Missing required config section: {section}")

        if 'model' not in (self._config['estimator'] or {}):
            raise ConfigurationError("Missing estimator.model in config")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-separated key.

        Args:
            key: Dot-separated key (e.g., "estimator.model")
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    def require_env(self, key: str) -> str:
        """Get required environment variable or raise error."""
        value = os.getenv(key)
        if value is None:
            raise ConfigurationError(f"Required environment variable not set: {key}")
        return value

    @property
    def app_name(self) -> str:
        return self.get('app.name', 'Travel FX')

    @property
    def app_version(self) -> str:
        return self.get('app.version', '0.1.0')

    @property
    def debug(self) -> bool:
        return self.get('app.debug', False)

    @property
    def estimator(self) -> EstimatorSettings:
        return EstimatorSettings.from_dict(self.get('estimator'))

    @property
    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy.from_dict(self.get('retry'))

    @property
    def simulation(self) -> SimulationSettings:
        return SimulationSettings.from_dict(self.get('simulation'))


# Global config instance
_config: Optional[Config] = None


def load_config(config_path: str = "config.yaml") -> Config:
    """Load and return global configuration instance."""
    global _config
    if _config is None:
        _config = Config(config_path)
    return _config


def get_config() -> Config:
    """Get global configuration instance."""
    if _config is None:
        raise ConfigurationError("Configuration not loaded. Call load_config() first.")
    return _config


def reset_config() -> None:
    """Forget the global configuration so the next load_config() re-reads the file."""
    global _config
    _config = None
