"""Configuration service for managing inspector settings."""

import json
from pathlib import Path

import structlog

from ..models import AppConfig, MediaType
from .errors import ConfigurationError

log = structlog.stdlib.get_logger()

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ValidationResult:
    """Result of configuration validation."""

    def __init__(self, is_valid: bool, errors: list[str] | None = None) -> None:
        self.is_valid: bool = is_valid
        self.errors: list[str] = errors or []


class ConfigurationService:
    """Service for managing application configuration."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path: Path = config_path or Path.home() / ".config" / "umd-inspector" / "config.json"
        log.debug("Configuration service initialized", config_path=str(self.config_path))

    def load_config(self) -> AppConfig:
        """Load configuration from file or return default configuration."""
        if not self.config_path.exists():
            log.debug("Configuration file not found, using defaults")
            return self.get_default_config()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data: dict[str, str | int | bool | None] = json.load(f)

            config = self._dict_to_config(data)
            validation_result = self.validate_config(config)

            if not validation_result.is_valid:
                log.warning("Invalid configuration loaded, using defaults", errors=validation_result.errors)
                return self.get_default_config()

            log.info("Configuration loaded successfully", config_path=str(self.config_path))
            return config

        except (json.JSONDecodeError, AttributeError, KeyError, TypeError, ValueError) as e:
            log.error("Failed to load configuration, using defaults", error=str(e))
            return self.get_default_config()

    def save_config(self, config: AppConfig) -> None:
        """Save configuration to file.

        Raises:
            ConfigurationError: If the configuration is invalid
            OSError: If the file cannot be written
        """
        validation_result = self.validate_config(config)
        if not validation_result.is_valid:
            raise ConfigurationError(
                f"Invalid configuration: {', '.join(validation_result.errors)}",
                expected="a configuration that passes validation",
            )

        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(self._config_to_dict(config), f, indent=2, ensure_ascii=False)
            log.info("Configuration saved successfully", config_path=str(self.config_path))
        except OSError as e:
            log.error("Failed to save configuration", error=str(e))
            raise

    def validate_config(self, config: AppConfig) -> ValidationResult:
        """Validate configuration settings."""
        errors = []

        if config.log_level not in VALID_LOG_LEVELS:
            errors.append(f"log_level must be one of: {', '.join(VALID_LOG_LEVELS)}")

        if not isinstance(config.media_type, str):
            errors.append("media_type must be a string")
        else:
            try:
                MediaType.parse(config.media_type)
            except ValueError:
                valid = ", ".join(m.value for m in MediaType)
                errors.append(f"media_type must be one of: {valid}")

        if not isinstance(config.compute_checksums, bool):
            errors.append("compute_checksums must be a boolean")

        if isinstance(config.json_indent, bool) or not isinstance(config.json_indent, int):
            errors.append("json_indent must be an integer")
        elif config.json_indent < 0 or config.json_indent > 8:
            errors.append("json_indent must be between 0 and 8")

        if config.log_dir is not None and not isinstance(config.log_dir, Path):
            errors.append("log_dir must be a Path object or None")

        return ValidationResult(len(errors) == 0, errors)

    def get_default_config(self) -> AppConfig:
        """Get default configuration."""
        return AppConfig(
            log_level="INFO",
            media_type=MediaType.UMD.value,
            compute_checksums=True,
            json_indent=2,
            log_dir=None,
        )

    def _config_to_dict(self, config: AppConfig) -> dict[str, str | int | bool | None]:
        """Convert AppConfig to dictionary for JSON serialization."""
        return {
            "log_level": config.log_level,
            "media_type": config.media_type,
            "compute_checksums": config.compute_checksums,
            "json_indent": config.json_indent,
            "log_dir": str(config.log_dir) if config.log_dir else None,
        }

    def _dict_to_config(self, data: dict[str, str | int | bool | None]) -> AppConfig:
        """Convert dictionary to AppConfig, filling missing keys from defaults."""
        defaults = self.get_default_config()

        log_dir_raw = data.get("log_dir")
        log_dir = Path(str(log_dir_raw)) if log_dir_raw else None

        log_level_raw = data.get("log_level", defaults.log_level)
        media_type_raw = data.get("media_type", defaults.media_type)
        checksums_raw = data.get("compute_checksums", defaults.compute_checksums)
        indent_raw = data.get("json_indent", defaults.json_indent)

        return AppConfig(
            log_level=str(log_level_raw).upper() if isinstance(log_level_raw, str) else defaults.log_level,
            media_type=str(media_type_raw) if isinstance(media_type_raw, str) else defaults.media_type,
            compute_checksums=checksums_raw if isinstance(checksums_raw, bool) else defaults.compute_checksums,
            json_indent=indent_raw if isinstance(indent_raw, int) and not isinstance(indent_raw, bool) else defaults.json_indent,
            log_dir=log_dir,
        )
