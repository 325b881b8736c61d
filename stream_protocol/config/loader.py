"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import CodecOptions, DefaultConfig, LoggingParams, get_default_config
from .validation import ConfigValidator

CONFIG_FILENAME = "protocol.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path.cwd() / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from protocol.yaml, empty if the file is absent."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        try:
            with open(config_file) as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Cannot read {config_file}: {e}", source=str(config_file)
            ) from e

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"{config_file} must contain a mapping at the top level",
                source=str(config_file),
            )
        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. protocol.yaml in the config directory
        3. Global defaults (lowest priority)

        Raises:
            ConfigurationError: If the file or overrides fail validation
        """
        file_config = self.load_file_config()
        errors = ConfigValidator.validate_config(file_config)
        if overrides:
            errors.extend(ConfigValidator.validate_config(overrides))
        if errors:
            details = "; ".join(f"{e.field}: {e.message}" for e in errors)
            raise ConfigurationError(
                f"Invalid protocol configuration: {details}",
                source=str(self.config_dir / CONFIG_FILENAME),
                errors=errors,
            )

        config = asdict(self.defaults)
        config = self._deep_merge(config, file_config)
        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """Load the merged configuration as frozen dataclasses."""
        config = self.merge_config(overrides)
        return DefaultConfig(
            codec=CodecOptions(**config["codec"]),
            logging=LoggingParams(**config["logging"]),
        )

    def load_codec_options(self, overrides: Optional[dict[str, Any]] = None) -> CodecOptions:
        """Load only the codec options."""
        return self.load(overrides).codec

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
