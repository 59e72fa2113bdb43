"""
Simulator configuration: a dataclass loadable from YAML, JSON or the environment.
"""
import os
import json
import yaml
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict, Optional
from utils.logging_config import get_logger
from utils.exceptions import ConfigurationError
from patterns.factory import list_factories

logger = get_logger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class SimulatorConfig:
    """Configuration for a duck simulator run."""
    factory: str = "counting"  # plain, counting
    include_goose: bool = True
    mallard_flock_size: int = 3
    observe: bool = True
    log_level: str = "INFO"

    def validate(self) -> 'SimulatorConfig':
        """Check value ranges; raises ``ConfigurationError``."""
        if self.factory not in list_factories():
            raise ConfigurationError(
                f"Unknown factory: {self.factory}",
                details={'available_factories': list_factories()}
            )
        if isinstance(self.mallard_flock_size, bool) or not isinstance(self.mallard_flock_size, int) \
                or self.mallard_flock_size < 0:
            raise ConfigurationError(
                "mallard_flock_size must be a non-negative integer",
                details={'mallard_flock_size': self.mallard_flock_size}
            )
        for name in ('include_goose', 'observe'):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"{name} must be true or false",
                    details={name: value}
                )
        if str(self.log_level).upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level: {self.log_level}",
                details={'available_levels': list(LOG_LEVELS)}
            )
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def to_yaml(self, filepath: str):
        """Save config to YAML file."""
        with open(filepath, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)

    def to_json(self, filepath: str):
        """Save config to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    def merged(self, overrides: Dict[str, Any]) -> 'SimulatorConfig':
        """Return a copy with ``overrides`` applied; ``None`` values are ignored."""
        data = self.to_dict()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return SimulatorConfig.from_dict(data)

    @classmethod
    def from_dict(cls, config_dict: Optional[Dict[str, Any]]) -> 'SimulatorConfig':
        """Create config from dictionary."""
        config_dict = config_dict or {}
        if not isinstance(config_dict, dict):
            raise ConfigurationError(
                "Configuration must be a mapping",
                details={'type': type(config_dict).__name__}
            )
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {', '.join(unknown)}",
                details={'unknown_keys': unknown, 'known_keys': sorted(known)}
            )
        return cls(**config_dict).validate()

    @classmethod
    def from_yaml(cls, filepath: str) -> 'SimulatorConfig':
        """Load config from YAML file."""
        with open(filepath, 'r') as f:
            config_dict = yaml.safe_load(f)
        return cls.from_dict(config_dict)

    @classmethod
    def from_json(cls, filepath: str) -> 'SimulatorConfig':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

    @classmethod
    def read_file(cls, filepath: str) -> Dict[str, Any]:
        """
        Read only the settings a YAML or JSON file actually contains.

        The values are validated against the defaults, but the defaults are
        not filled in, so the result can be layered over another config.
        """
        path = Path(filepath)
        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {filepath}",
                details={'filepath': str(path)}
            )
        if path.suffix not in ['.yaml', '.yml', '.json']:
            raise ConfigurationError(
                f"Unsupported file format: {path.suffix}",
                details={'filepath': str(path)}
            )

        try:
            with open(path, 'r') as f:
                if path.suffix == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {filepath}: {e}",
                details={'filepath': str(path), 'error': str(e)}
            ) from e

        data = data or {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Configuration must be a mapping",
                details={'filepath': str(path), 'type': type(data).__name__}
            )
        cls().merged(data)
        logger.info(f"Loaded {len(data)} configuration values from {filepath}")
        return data

    @classmethod
    def from_file(cls, filepath: str) -> 'SimulatorConfig':
        """Load config from a YAML or JSON file, chosen by suffix."""
        return cls.from_dict(cls.read_file(filepath))

    @classmethod
    def from_env(cls, prefix: str = "DUCKPOND_", base: Optional['SimulatorConfig'] = None) -> 'SimulatorConfig':
        """
        Load configuration from environment variables.

        ``DUCKPOND_MALLARD_FLOCK_SIZE=5`` sets ``mallard_flock_size``. Values
        are parsed as JSON when possible, so ``false`` and ``5`` keep their types.

        Args:
            prefix: Prefix for environment variables
            base: Config the variables are applied on top of
        """
        known = {f.name for f in fields(cls)}
        env_config = {}

        for key, value in os.environ.items():
            if not key.startswith(prefix):
                continue
            config_key = key[len(prefix):].lower()
            if config_key not in known:
                continue
            try:
                env_config[config_key] = json.loads(value)
            except json.JSONDecodeError:
                env_config[config_key] = value

        logger.info(f"Loaded {len(env_config)} configuration values from environment")
        return (base or cls()).merged(env_config)
