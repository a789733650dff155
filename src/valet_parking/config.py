"""Configuration models and loading utilities."""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, field_validator

from .state.models import Category
from .state.pricing import FeeSchedule


class FacilityConfig(BaseModel):
    """Slot capacities used when the facility is not sized by an input file."""

    car_capacity: int = 0
    motorcycle_capacity: int = 0

    @field_validator("car_capacity", "motorcycle_capacity")
    @classmethod
    def non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("capacity cannot be negative")
        return v


class PricingConfig(BaseModel):
    """Flat hourly rates."""

    car_hourly_rate: int = 2
    motorcycle_hourly_rate: int = 1

    @field_validator("car_hourly_rate", "motorcycle_hourly_rate")
    @classmethod
    def non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("hourly rate cannot be negative")
        return v

    def to_schedule(self) -> FeeSchedule:
        return FeeSchedule(
            {
                Category.CAR: self.car_hourly_rate,
                Category.MOTORCYCLE: self.motorcycle_hourly_rate,
            }
        )


class APIConfig(BaseModel):
    """API server configuration."""

    host: str = "0.0.0.0"
    port: int = 8000


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"

    @field_validator("level", mode="before")
    @classmethod
    def upper_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class AppConfig(BaseModel):
    """Main application configuration."""

    facility: FacilityConfig = FacilityConfig()
    pricing: PricingConfig = PricingConfig()
    api: APIConfig = APIConfig()
    logging: LoggingConfig = LoggingConfig()


def load_config(path: str | Path) -> AppConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the configuration file

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        data = yaml.safe_load(f)

    # An empty file yields None
    return AppConfig(**(data or {}))


def get_config_path() -> Path:
    """Get the configuration file path, honouring VALET_CONFIG."""
    env_path = os.environ.get("VALET_CONFIG")
    if env_path:
        return Path(env_path)

    # Check for config in current directory first
    local_config = Path("config/config.yaml")
    if local_config.exists():
        return local_config

    # Check for config in parent directory (for Docker)
    parent_config = Path("/app/config/config.yaml")
    if parent_config.exists():
        return parent_config

    return local_config  # Return default even if doesn't exist


def load_default_config() -> AppConfig:
    """Load the config file from the default location, or defaults if absent."""
    config_path = get_config_path()
    if config_path.exists() or os.environ.get("VALET_CONFIG"):
        return load_config(config_path)
    return AppConfig()
