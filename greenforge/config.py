"""
Runtime configuration, overridable through environment variables or a .env file
"""
import logging
import os
from dataclasses import dataclass, field
from typing import Optional, Set

from dotenv import load_dotenv

from greenforge.errors import ConfigError


@dataclass
class ForgeConfig:
    """Estimator constants and scanner settings"""
    cpu_power_watts: float = 65.0  # average CPU power draw
    co2_kg_per_kwh: float = 0.5  # global average grid intensity
    base_cpu_time_ms: float = 10.0  # baseline CPU time per analyzed file
    ignore_patterns: Set[str] = field(default_factory=set)  # extra names for the scanner to skip
    log_level: str = 'WARNING'

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> 'ForgeConfig':
        """
        Build a config from FORGE_* environment variables

        Variables already set in the environment win over the .env file.

        Args:
            dotenv_path: Explicit .env file, defaults to searching upward from cwd

        Returns:
            ForgeConfig

        Raises:
            ConfigError: a numeric variable does not parse
        """
        load_dotenv(dotenv_path)

        config = cls()
        config.cpu_power_watts = _float_env('FORGE_CPU_POWER_WATTS', config.cpu_power_watts)
        config.co2_kg_per_kwh = _float_env('FORGE_CO2_KG_PER_KWH', config.co2_kg_per_kwh)
        config.base_cpu_time_ms = _float_env('FORGE_BASE_CPU_TIME_MS', config.base_cpu_time_ms)

        ignore = os.getenv('FORGE_IGNORE')
        if ignore:
            config.ignore_patterns = {p.strip() for p in ignore.split(',') if p.strip()}

        config.log_level = os.getenv('FORGE_LOG_LEVEL', config.log_level).upper()
        if not isinstance(logging.getLevelName(config.log_level), int):
            raise ConfigError(f"FORGE_LOG_LEVEL is not a logging level: {config.log_level!r}")
        return config


def _float_env(name, default):
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return default
    try:
        number = float(value)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {value!r}")
    if number < 0:
        raise ConfigError(f"{name} must not be negative, got {value!r}")
    return number
