"""
Configuration Management for counterapp

Environment-aware configuration for the web server, logging and the counter
itself, plus the logging setup that applies it.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)


class Environment(Enum):
    """Application environments"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


@dataclass
class WebConfig:
    """Web server configuration"""
    host: str = "localhost"
    port: int = 5001
    debug: bool = False
    live: bool = False
    prefix: str = "/counter"
    secret_key: Optional[str] = None


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class CounterConfig:
    """Counter configuration"""
    initial_count: int = 0
    live_queue_size: int = 100


@dataclass
class ApplicationConfig:
    """Complete application configuration"""
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False

    web: WebConfig = field(default_factory=WebConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    counter: CounterConfig = field(default_factory=CounterConfig)

    @classmethod
    def for_environment(cls, environment: Environment) -> 'ApplicationConfig':
        """Create configuration for specific environment"""
        config = cls(environment=environment)

        if environment == Environment.DEVELOPMENT:
            config.debug = True
            config.web.debug = True
            config.web.live = True
            config.logging.level = "DEBUG"

        elif environment == Environment.TESTING:
            config.logging.level = "WARNING"
            config.web.secret_key = "testing"

        elif environment == Environment.PRODUCTION:
            config.web.host = "0.0.0.0"
            config.logging.level = "INFO"

        return config

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ApplicationConfig':
        """Create configuration from dictionary"""
        environment = Environment(config_dict.get("environment", Environment.DEVELOPMENT.value))
        config = cls.for_environment(environment)

        if "debug" in config_dict:
            config.debug = bool(config_dict["debug"])

        for section in ("web", "logging", "counter"):
            target = getattr(config, section)
            for key, value in config_dict.get(section, {}).items():
                if hasattr(target, key):
                    setattr(target, key, value)
                else:
                    logger.warning(f"Ignoring unknown {section} setting: {key}")

        return config

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> 'ApplicationConfig':
        """Load configuration from a JSON file"""
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        if config_path.suffix != '.json':
            raise ValueError(f"Unsupported configuration file format: {config_path.suffix}")

        with open(config_path) as f:
            return cls.from_dict(json.load(f))

    @classmethod
    def from_environment(cls) -> 'ApplicationConfig':
        """Create configuration from environment variables"""
        environment = Environment(os.getenv('COUNTERAPP_ENV', 'development'))
        config = cls.for_environment(environment)

        if os.getenv('COUNTERAPP_DEBUG'):
            config.debug = os.getenv('COUNTERAPP_DEBUG').lower() == 'true'
            config.web.debug = config.debug

        if os.getenv('COUNTERAPP_HOST'):
            config.web.host = os.getenv('COUNTERAPP_HOST')

        if os.getenv('COUNTERAPP_PORT'):
            config.web.port = int(os.getenv('COUNTERAPP_PORT'))

        if os.getenv('COUNTERAPP_SECRET_KEY'):
            config.web.secret_key = os.getenv('COUNTERAPP_SECRET_KEY')

        if os.getenv('COUNTERAPP_LOG_LEVEL'):
            config.logging.level = os.getenv('COUNTERAPP_LOG_LEVEL').upper()

        if os.getenv('COUNTERAPP_INITIAL_COUNT'):
            config.counter.initial_count = int(os.getenv('COUNTERAPP_INITIAL_COUNT'))

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {
            "environment": self.environment.value,
            "debug": self.debug,
            "web": {
                "host": self.web.host,
                "port": self.web.port,
                "debug": self.web.debug,
                "live": self.web.live,
                "prefix": self.web.prefix,
                "secret_key": self.web.secret_key,
            },
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "file_path": self.logging.file_path,
                "max_file_size": self.logging.max_file_size,
                "backup_count": self.logging.backup_count,
            },
            "counter": {
                "initial_count": self.counter.initial_count,
                "live_queue_size": self.counter.live_queue_size,
            },
        }


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """
    Apply a LoggingConfig to the counterapp logger.

    Handlers installed by a previous call are replaced, so calling this
    again with a new config does not duplicate output.
    """
    app_logger = logging.getLogger("counterapp")
    app_logger.setLevel(config.level)

    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    app_logger.addHandler(console)

    if config.file_path:
        Path(config.file_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(formatter)
        app_logger.addHandler(file_handler)

    return app_logger


# Global configuration management
_current_config: Optional[ApplicationConfig] = None

def set_config(config: ApplicationConfig):
    """Set the global configuration"""
    global _current_config
    _current_config = config

def get_config() -> ApplicationConfig:
    """Get the current global configuration, loading it from the environment on first use"""
    global _current_config
    if _current_config is None:
        _current_config = ApplicationConfig.from_environment()
    return _current_config
