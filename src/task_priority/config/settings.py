import functools
import json
import logging
from pathlib import Path
from typing import Union

import structlog
import yaml
from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

from task_priority.core.exception import ConfigurationError
from task_priority.core.priorities import Priority


LOGGER: logging.Logger = logging.getLogger(__name__)


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$", description="Log level")
    format: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s", description="Log format")
    structured: bool = Field(default=False, description="Use structured logging (JSON)")


class PriorityConfig(BaseModel):
    """Priority defaults shared by the components of a program."""
    default: Priority = Field(default=Priority.UTILITY, description="Priority given to work that does not ask for one")
    allow_unknown: bool = Field(default=False, description="Accept Unknown as the default priority")

    @field_validator("default", mode="before")
    @classmethod
    def parse_default(cls, value):
        # Labels only, no numeric encoding is promised
        return Priority.from_label(value)

    @field_serializer("default")
    def serialize_default(self, value: Priority) -> str:
        return value.label

    @model_validator(mode="after")
    def check_unknown(self) -> "PriorityConfig":
        if self.default is Priority.UNKNOWN and not self.allow_unknown:
            raise ValueError("Unknown is not a valid default priority, set allow_unknown to use it")
        return self


class TaskPriorityConfig(BaseSettings):
    """Complete task priority configuration."""
    model_config = SettingsConfigDict(
        env_prefix="TASK_PRIORITY_",  # TASK_PRIORITY_DEBUG, TASK_PRIORITY_ENVIRONMENT
        env_nested_delimiter="__",  # TASK_PRIORITY_PRIORITY__DEFAULT
        case_sensitive=False
    )

    priority: PriorityConfig = Field(default_factory=PriorityConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Environment
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Enable debug mode")

    @classmethod
    def from_env(cls) -> "TaskPriorityConfig":
        """
        Load configuration from environment variables.

            TASK_PRIORITY_PRIORITY__DEFAULT=background
            TASK_PRIORITY_LOGGING__LEVEL=DEBUG
            TASK_PRIORITY_DEBUG=true

        Raises:
            ConfigurationError: If a variable cannot be decoded, e.g. a
                non-JSON TASK_PRIORITY_PRIORITY next to nested keys
            pydantic.ValidationError: If the values are invalid
        """
        try:
            return cls()
        except SettingsError as e:
            LOGGER.exception("Error while reading the environment")
            raise ConfigurationError(f"Invalid environment configuration: {e}") from e

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "TaskPriorityConfig":
        """
        Load configuration from a YAML or JSON file.

        Values from the file take precedence over environment variables.

        Args:
            config_path: Path to a .yaml, .yml or .json file

        Raises:
            ConfigurationError: If the file is missing, unreadable, not
                valid UTF-8, has another suffix or does not hold a mapping
            pydantic.ValidationError: If the values are invalid
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")

        try:
            if config_file.suffix in ['.yaml', '.yml']:
                with open(config_file, encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            elif config_file.suffix == '.json':
                with open(config_file, encoding="utf-8") as f:
                    data = json.load(f)
            else:
                raise ConfigurationError("Config file must be .yaml, .yml, or .json")
        except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            LOGGER.exception("Error while reading %s", config_file)
            raise ConfigurationError(f"Invalid config file {config_path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {config_path} must hold a mapping, not {type(data).__name__}"
            )

        LOGGER.debug("Configuration loaded from %s", config_file)
        return cls(**data)

    def setup_logging(self):
        """Configure logging based on settings."""
        logging.basicConfig(
            level=getattr(logging, self.logging.level),
            format=self.logging.format
        )

        if self.logging.structured:
            # Configure structured logging
            structlog.configure(
                processors=[
                    structlog.processors.TimeStamper(fmt="iso"),
                    structlog.processors.add_log_level,
                    structlog.processors.JSONRenderer()
                ],
                wrapper_class=structlog.stdlib.BoundLogger,
                logger_factory=structlog.stdlib.LoggerFactory(),
            )

    def to_dict(self) -> dict:
        """Export configuration as dictionary, priorities rendered by label."""
        return self.model_dump()

    def validate_production(self) -> list[str]:
        """Validate configuration for production use."""
        issues = []

        if self.environment == "production":
            if self.debug:
                issues.append("Debug mode should be disabled in production")

            if self.logging.level == "DEBUG":
                issues.append("Log level should not be DEBUG in production")

            if not self.priority.default.is_known:
                issues.append("Default priority should not be Unknown in production")

        return issues


@functools.lru_cache(maxsize=None)
def get_config() -> TaskPriorityConfig:
    """
    Return the process-wide configuration, read from the environment on first use.

    Call get_config.cache_clear() to read the environment again.
    """
    return TaskPriorityConfig.from_env()
