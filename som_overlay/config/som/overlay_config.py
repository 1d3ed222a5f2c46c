"""SOM Overlay Configuration Module

Loads overlay settings from som_overlay.yml behind a thread-safe
singleton so every caller sees the same values.
"""

import yaml
import os
from pathlib import Path
from typing import Dict, Any, Optional
import threading
from dataclasses import dataclass


@dataclass
class OverlayConfigValidation:
    """Validation rules for overlay configuration parameters."""
    min_chunk_size: int = 1
    max_chunk_size: int = 1000000
    log_levels: tuple = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class OverlayConfigError(Exception):
    """Exception raised for overlay configuration errors."""
    pass


class OverlayConfig:
    """
    Overlay configuration manager with singleton pattern.

    The file is located through SOM_OVERLAY_CONFIG_PATH, then the packaged
    default next to this module, then the working directory.
    """

    _instance = None
    _lock = threading.RLock()
    _config = None
    _config_path = None
    _validation = OverlayConfigValidation()

    def __new__(cls):
        """Implement thread-safe singleton pattern."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._load_config()
        self._initialized = True

    def _find_config_file(self) -> Path:
        """
        Find the overlay configuration file.

        Raises:
            OverlayConfigError: If configuration file cannot be found
        """
        env_path = os.environ.get('SOM_OVERLAY_CONFIG_PATH')
        if env_path:
            if Path(env_path).exists():
                return Path(env_path)
            raise OverlayConfigError(
                f"SOM_OVERLAY_CONFIG_PATH points to a missing file: {env_path}"
            )

        config_path = Path(__file__).parent / 'som_overlay.yml'
        if config_path.exists():
            return config_path

        for path in (Path.cwd() / 'som_overlay.yml',
                     Path.cwd() / 'config' / 'som_overlay.yml'):
            if path.exists():
                return path

        raise OverlayConfigError(
            "Could not find som_overlay.yml. Searched in:\n" +
            f"  - Module directory: {Path(__file__).parent}\n" +
            f"  - Working directory: {Path.cwd()}"
        )

    def _load_config(self):
        """
        Load and validate configuration from YAML file.

        The current configuration is replaced only once the new file has
        passed validation.

        Raises:
            OverlayConfigError: If configuration is invalid
        """
        config_path = self._find_config_file()

        try:
            with open(config_path, 'r') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise OverlayConfigError(f"Error parsing YAML configuration: {e}")
        except OSError as e:
            raise OverlayConfigError(f"Error reading configuration: {e}")

        if not isinstance(config, dict):
            raise OverlayConfigError(
                f"Configuration file must contain a YAML dictionary, got {type(config)}"
            )

        missing_sections = [s for s in ('assignment_config', 'logging_config')
                            if s not in config]
        if missing_sections:
            raise OverlayConfigError(
                f"Missing required configuration sections: {missing_sections}"
            )

        self._validate_config(config)
        self._config = config
        self._config_path = config_path

    def _validate_config(self, config: Dict[str, Any]):
        """Validate configuration values against defined rules."""
        chunk_size = (config.get('assignment_config') or {}).get('chunk_size', 10000)
        if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or not (
                self._validation.min_chunk_size <= chunk_size <= self._validation.max_chunk_size):
            raise OverlayConfigError(
                f"chunk_size must be an integer between {self._validation.min_chunk_size} "
                f"and {self._validation.max_chunk_size}, got {chunk_size}"
            )

        level = str((config.get('logging_config') or {}).get('level', 'INFO')).upper()
        if level not in self._validation.log_levels:
            raise OverlayConfigError(
                f"logging_config.level must be one of {self._validation.log_levels}, got {level}"
            )

    def reload(self):
        """Reload configuration from file, keeping the current one if loading fails."""
        with self._lock:
            self._load_config()

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation key.

        Args:
            key: Configuration key (e.g., 'assignment_config.chunk_size')
            default: Default value if key not found
        """
        if self._config is None:
            raise OverlayConfigError("Configuration not loaded")

        value = self._config
        for part in key.split('.'):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default
        return value

    def get_assignment_config(self) -> Dict[str, Any]:
        """Get assignment configuration section."""
        return self._config.get('assignment_config', {})

    def get_chunk_size(self) -> int:
        """Get number of data rows assigned per chunk."""
        return self.get_assignment_config().get('chunk_size', 10000)

    @property
    def config_path(self) -> Optional[Path]:
        """Get the path to the loaded configuration file."""
        return self._config_path

    def __repr__(self) -> str:
        return f"OverlayConfig(path={self._config_path}, loaded={self._config is not None})"


def get_overlay_config() -> OverlayConfig:
    """
    Get the singleton overlay configuration instance.

    Returns:
        OverlayConfig: The singleton configuration instance
    """
    return OverlayConfig()
