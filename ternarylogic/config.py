import copy
import os
import yaml
from enum import Enum
from typing import Dict, Any, Optional, Union
import logging

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TERNARYLOGIC_CONFIG"

# Default configuration
DEFAULT_CONFIG = {
    "operators": {
        "empty_operands": "reject"
    },
    "logging": {
        "level": "WARNING"
    }
}


class EmptyOperandsPolicy(str, Enum):
    """
    What the n-ary operators (and_, or_, xor, xnor) do when called without operands.

    - REJECT: raise EmptyOperandsError
    - IDENTITY: return the operator's identity element
    """
    REJECT = "reject"
    IDENTITY = "identity"

    @classmethod
    def get_all_policies(cls) -> list[str]:
        """Return a list of all available policy names."""
        return [policy.value for policy in cls]

    @classmethod
    def is_valid(cls, policy: str) -> bool:
        """Check if a policy name is valid."""
        return policy in [p.value for p in cls]


def configure_logging(level: Union[str, int] = "WARNING") -> logging.Logger:
    """Attach a stream handler to the package logger and set its level."""
    package_logger = logging.getLogger("ternarylogic")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    package_logger.setLevel(level)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('[%(levelname)s] %(message)s')
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
    return package_logger


class Config:
    """Configuration manager for the ternary logic operators."""

    _instance = None
    _config_dict = None
    _config_file = None

    @classmethod
    def get_instance(cls) -> 'Config':
        """Get the singleton instance of Config."""
        if cls._instance is None:
            cls._instance = Config()
            env_file = os.environ.get(CONFIG_ENV_VAR)
            if env_file:
                cls._instance.load_from_file(env_file)
        return cls._instance

    def __init__(self):
        """Initialize with default configuration."""
        if Config._instance is not None:
            raise RuntimeError("Config is a singleton. Use Config.get_instance() instead.")
        self._config_dict = copy.deepcopy(DEFAULT_CONFIG)

    def reset(self) -> None:
        """Restore the default configuration."""
        self._config_dict = copy.deepcopy(DEFAULT_CONFIG)
        self._config_file = None

    def load_from_file(self, config_file: str) -> None:
        """Load configuration from a YAML file.

        Raises:
            ValueError: If the file is not valid YAML or holds invalid values
        """
        if not os.path.exists(config_file):
            logger.warning(f"Config file {config_file} not found. Using default configuration.")
            return

        try:
            with open(config_file, 'r') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Error loading config file {config_file}: {e}")
            raise ValueError(f"Invalid YAML in config file {config_file}: {e}") from e

        if not config:
            logger.warning("Empty config file. Using default configuration.")
            return
        if not isinstance(config, dict):
            raise ValueError(f"Config file {config_file} must contain a mapping, got {type(config).__name__}")

        merged = copy.deepcopy(self._config_dict)
        # Update configuration, maintaining defaults for missing values
        self._update_dict_recursive(merged, config)
        self._validate(merged)
        self._config_dict = merged
        self._config_file = config_file
        self._apply_logging_level()
        logger.info(f"Loaded configuration from {config_file}")

    def _update_dict_recursive(self, target: Dict, source: Dict) -> None:
        """Recursively update a dictionary, preserving keys not in source."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._update_dict_recursive(target[key], value)
            else:
                target[key] = value

    @staticmethod
    def _validate(config_dict: Dict[str, Any]) -> None:
        policy = config_dict.get("operators", {}).get("empty_operands")
        if not EmptyOperandsPolicy.is_valid(policy):
            raise ValueError(
                f"Invalid operators.empty_operands: {policy!r}. "
                f"Available: {EmptyOperandsPolicy.get_all_policies()}"
            )
        level = config_dict.get("logging", {}).get("level")
        if not isinstance(level, str) or level.upper() not in logging.getLevelNamesMapping():
            raise ValueError(f"Invalid logging.level: {level!r}")

    def get(self, path: str, default: Any = None) -> Any:
        """Get configuration value by dot-notation path."""
        parts = path.split('.')
        current = self._config_dict

        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default

        return current

    def set(self, path: str, value: Any) -> None:
        """Set configuration value by dot-notation path."""
        if isinstance(value, Enum):
            value = value.value

        updated = copy.deepcopy(self._config_dict)
        parts = path.split('.')
        current = updated

        # Navigate to the parent of the target
        for part in parts[:-1]:
            if part not in current or not isinstance(current[part], dict):
                current[part] = {}
            current = current[part]

        current[parts[-1]] = value
        self._validate(updated)
        self._config_dict = updated
        if parts[0] == "logging":
            self._apply_logging_level()

    def _apply_logging_level(self) -> None:
        logging.getLogger("ternarylogic").setLevel(self.get_logging_level().upper())

    def get_empty_operands_policy(self) -> EmptyOperandsPolicy:
        """Get the configured policy for n-ary operators called without operands."""
        return EmptyOperandsPolicy(self.get('operators.empty_operands', EmptyOperandsPolicy.REJECT.value))

    def get_logging_level(self) -> str:
        return self.get('logging.level', 'WARNING')

    def save(self, config_file: Optional[str] = None) -> None:
        """Save current configuration to a YAML file."""
        file_path = config_file or self._config_file

        if not file_path:
            logger.warning("No config file specified for saving.")
            return

        with open(file_path, 'w') as f:
            yaml.dump(self._config_dict, f, default_flow_style=False)
        logger.info(f"Saved configuration to {file_path}")


def get_config() -> Config:
    """Get the configuration singleton."""
    return Config.get_instance()


# Singleton instance
config = Config.get_instance()
