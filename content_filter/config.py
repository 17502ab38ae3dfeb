"""
Configuration loader for Content Filter.

Loads settings from YAML config file with sensible defaults.
"""

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from .error_handler import safe_operation
from .profanity.lexicon import Category, Lexicon, load_lexicon
from .profanity.redactor import validate_mask_char

logger = logging.getLogger(__name__)


@dataclass
class ModerationConfig:
    """Configuration for text moderation."""
    custom_wordlist_path: str = ""
    custom_category: str = "general"  # category for custom terms without one
    mask_char: str = "*"
    fail_on_block: bool = False

    def validate(self) -> None:
        validate_mask_char(self.mask_char)
        try:
            Category(self.custom_category)
        except ValueError:
            raise ValueError(f"Unknown custom_category: {self.custom_category!r}") from None


@dataclass
class OutputConfig:
    """Configuration for CLI output."""
    format: str = "text"  # "text" or "json"
    summary_path: str = ""


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    log_file: str = ""
    console: bool = True

    def validate(self) -> None:
        from .logging_config import resolve_level

        resolve_level(self.level)


@dataclass
class Config:
    """Main configuration container."""
    moderation: ModerationConfig = field(default_factory=ModerationConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    @safe_operation("loading configuration")
    def load(cls, config_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from YAML file.

        If no path is provided, uses default values.
        Missing keys in the config file will use defaults.
        """
        config = cls()

        if config_path and Path(config_path).exists():
            logger.info(f"Loading configuration from {config_path}")
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}

            for section in ('moderation', 'output', 'logging'):
                values = data.get(section) or {}
                target = getattr(config, section)
                for key, value in values.items():
                    if hasattr(target, key):
                        setattr(target, key, value)
                    else:
                        logger.warning(f"Ignoring unknown config key: {section}.{key}")

        config.moderation.validate()
        config.logging.validate()
        return config

    # Quoted: inside the class body ``logging`` is the dataclass field
    def setup_logging(self, force: bool = False) -> "logging.Logger":
        """Configure logging based on settings."""
        from .logging_config import setup_logging

        return setup_logging(
            level=self.logging.level,
            log_file=self.logging.log_file or None,
            console=self.logging.console,
            force=force,
        )

    @safe_operation("loading custom word list")
    def build_lexicon(self) -> Lexicon:
        """Lexicon described by this configuration."""
        return load_lexicon(
            self.moderation.custom_wordlist_path,
            category=self.moderation.custom_category,
        )

    def save(self, config_path: Path) -> None:
        """Save configuration to YAML file."""
        data = asdict(self)
        logger.info(f"Saving configuration to {config_path}")

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False)
