"""
Missing Data Simulator Utils - Configuration Management
=======================================================

Configuration loading, parsing, and validation utilities.

Features:
---------
1. YAML Loading
   - Load configuration from YAML files
   - Environment variable substitution

2. Host Settings
   - Connection-string parsing ("DropUniform=true; Puniform=5")
   - Case-insensitive key lookup
   - Channel lists as "PPA:1;PPA:2" or YAML sequences

3. Validation
   - Boolean / numeric parsing
   - Drop probability clamped to [0, 100] %
   - Seed must be a non-negative integer

4. Merging
   - Deep merge of override configs into defaults

Settings:
---------
| Key                  | Default | Effect                                   |
|----------------------|---------|------------------------------------------|
| DropUniform          | false   | Enable independent per-value dropping    |
| Puniform             | 0       | Drop probability in percent              |
| Seed                 | (none)  | Seed for the drop generator              |
| InputMeasurementKeys | (empty) | Ordered input channels                   |
| OutputMeasurements   | (empty) | Ordered output channels                  |

Configuration Structure:
-----------------------
missing_data:
  DropUniform: true
  Puniform: 5
  Seed: ${DROP_SEED:42}
  InputMeasurementKeys: [PPA:1, PPA:2]
  OutputMeasurements: [SIM:1, SIM:2]

Example:
--------
>>> from utils import DropConfig, parse_connection_string
>>>
>>> settings = parse_connection_string(
...     "DropUniform=true; Puniform=5; "
...     "InputMeasurementKeys={PPA:1;PPA:2}; OutputMeasurements={SIM:1;SIM:2}"
... )
>>> config = DropConfig.from_settings(settings)
>>> config.drop_probability
0.05

Author: Missing Data Sim Team
Date: October 19, 2026
"""

import yaml
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional, Tuple, Mapping
import logging

from telemetry.measurement import ChannelKey, Measurement

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


class ConfigError(Exception):
    """Configuration error."""
    pass


@dataclass(frozen=True)
class DropConfig:
    """
    Immutable drop-stage configuration.

    `drop_probability` is a fraction in [0, 1]; `puniform` gives the
    same value as a percentage.
    """

    uniform_drop_enabled: bool = False
    drop_probability: float = 0.0
    seed: Optional[int] = None
    input_channels: Tuple[ChannelKey, ...] = ()
    output_channels: Tuple[Measurement, ...] = ()

    def __post_init__(self):
        probability = parse_float(self.drop_probability, "drop_probability")
        if probability != probability or not 0.0 <= probability <= 1.0:
            clamped = 0.0 if probability != probability else min(max(probability, 0.0), 1.0)
            logger.warning(
                f"drop_probability {probability} outside [0, 1], clamped to {clamped}"
            )
            probability = clamped
        object.__setattr__(self, "drop_probability", probability)
        object.__setattr__(self, "seed", parse_seed(self.seed))
        object.__setattr__(self, "input_channels", tuple(self.input_channels))
        object.__setattr__(self, "output_channels", tuple(self.output_channels))

    @property
    def puniform(self) -> float:
        return self.drop_probability * 100.0

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "DropConfig":
        """
        Build configuration from host settings.

        Args:
            settings: Key/value settings (keys matched case-insensitively)

        Returns:
            DropConfig

        Raises:
            ConfigError: If a value cannot be parsed
        """
        lookup = {str(k).lower(): v for k, v in settings.items()}

        enabled = parse_bool(lookup.get("dropuniform", False), "DropUniform")
        percent = parse_float(lookup.get("puniform", 0.0), "Puniform")

        seed = parse_seed(lookup.get("seed"))

        inputs = parse_channel_list(lookup.get("inputmeasurementkeys"))
        outputs = tuple(
            Measurement(key) for key in
            parse_channel_list(lookup.get("outputmeasurements"))
        )

        return cls(
            uniform_drop_enabled=enabled,
            drop_probability=validate_probability(percent),
            seed=seed,
            input_channels=inputs,
            output_channels=outputs,
        )


def parse_bool(value: Any, name: str = "value") -> bool:
    """Parse a boolean setting."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {value!r}")


def parse_float(value: Any, name: str = "value") -> float:
    """Parse a numeric setting."""
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be numeric, got {value!r}")


def parse_seed(value: Any) -> Optional[int]:
    """
    Parse the optional generator seed.

    Args:
        value: None, "" or a non-negative integer (int or integer text)

    Returns:
        Seed, or None when unset

    Raises:
        ConfigError: For booleans, fractional numbers or negative values
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None

    if isinstance(value, bool):
        raise ConfigError(f"Seed must be an integer, got {value!r}")

    if isinstance(value, float):
        if not value.is_integer():
            raise ConfigError(f"Seed must be an integer, got {value!r}")
        seed = int(value)
    else:
        try:
            seed = int(str(value).strip())
        except ValueError:
            raise ConfigError(f"Seed must be an integer, got {value!r}")

    if seed < 0:
        raise ConfigError(f"Seed must be non-negative, got {seed}")

    return seed


def parse_channel_list(value: Any) -> Tuple[ChannelKey, ...]:
    """
    Parse an ordered channel list.

    Args:
        value: None, "A:1;A:2" (braces optional) or a sequence of keys

    Returns:
        Tuple of ChannelKey

    Raises:
        ConfigError: If a key is malformed
    """
    if value is None:
        return ()

    if isinstance(value, str):
        text = value.strip()
        if text.startswith("{") and text.endswith("}"):
            text = text[1:-1]
        items = [item for item in re.split(r"[;,]", text) if item.strip()]
    else:
        items = list(value)

    keys = []
    for item in items:
        if isinstance(item, ChannelKey):
            keys.append(item)
            continue
        try:
            keys.append(ChannelKey.parse(str(item)))
        except ValueError as e:
            raise ConfigError(str(e))

    return tuple(keys)


def validate_probability(percent: float) -> float:
    """
    Convert a drop percentage to a fraction.

    Values outside [0, 100] are clamped with a warning.

    Args:
        percent: Drop probability [%]

    Returns:
        Drop probability in [0, 1]
    """
    if percent != percent:
        logger.warning("Puniform is NaN, using 0%")
        return 0.0

    if percent < 0.0 or percent > 100.0:
        clamped = min(max(percent, 0.0), 100.0)
        logger.warning(f"Puniform {percent}% outside [0, 100], clamped to {clamped}%")
        percent = clamped

    return percent / 100.0


def parse_connection_string(text: str) -> Dict[str, str]:
    """
    Parse a "key=value; key={a;b}" settings string.

    Braces group values that contain separators; the outer braces are
    stripped.

    Args:
        text: Connection string

    Returns:
        Settings dictionary

    Raises:
        ConfigError: If braces are unbalanced or a pair has no '='
    """
    settings = {}
    parts = []
    depth = 0
    current = []

    for char in text:
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth < 0:
                raise ConfigError(f"Unbalanced braces in: {text!r}")
        if char == ";" and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)

    if depth != 0:
        raise ConfigError(f"Unbalanced braces in: {text!r}")
    parts.append("".join(current))

    for part in parts:
        if not part.strip():
            continue
        key, sep, value = part.partition("=")
        if not sep:
            raise ConfigError(f"Setting without '=': {part.strip()!r}")
        value = value.strip()
        if value.startswith("{") and value.endswith("}"):
            value = value[1:-1].strip()
        settings[key.strip()] = value

    return settings


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Configuration dictionary

    Raises:
        ConfigError: If file not found or invalid YAML
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}")

    if config is None:
        raise ConfigError(f"Empty config file: {config_path}")

    config = _substitute_env_vars(config)

    logger.info(f"Loaded config from {config_path}")

    return config


def load_drop_config(config_path: str,
                     section: str = "missing_data") -> DropConfig:
    """
    Load a DropConfig from the given section of a YAML file.

    Args:
        config_path: Path to YAML config file
        section: Top-level key holding the settings

    Returns:
        DropConfig
    """
    config = load_config(config_path)
    settings = config.get(section)

    if not isinstance(settings, dict):
        raise ConfigError(f"Missing '{section}' section in {config_path}")

    return DropConfig.from_settings(settings)


def _substitute_env_vars(obj: Any) -> Any:
    """
    Recursively substitute environment variables in config.

    Supports format: ${VAR_NAME:default_value}
    """
    if isinstance(obj, dict):
        return {k: _substitute_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_substitute_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        pattern = r'\$\{(\w+)(?::([^}]*))?\}'

        def replace_var(match):
            var_name = match.group(1)
            default = match.group(2) or ""
            return os.environ.get(var_name, default)

        return re.sub(pattern, replace_var, obj)
    else:
        return obj


def merge_configs(base: Dict[str, Any],
                  override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep merge override config into base config.

    Args:
        base: Base configuration
        override: Configuration to merge in (overrides base)

    Returns:
        Merged configuration

    Example:
        >>> merge_configs({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}})
        {'a': 1, 'b': {'c': 2, 'd': 3}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    logger.debug(f"Merged {len(override)} config keys")
    return result
