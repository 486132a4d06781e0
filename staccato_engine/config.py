"""
Configuration module for staccato_engine.

Handles parser defaults and logging preferences, stored as JSON in the
user's home directory.
"""

import json
import logging
from pathlib import Path
from dataclasses import dataclass, field, asdict
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class ParserConfig:
    """Configuration for Staccato parsing."""
    throw_on_unknown_token: bool = False
    default_key: str = "Cmaj"
    default_time_signature: str = "4/4"


@dataclass
class Config:
    """
    Main configuration class for staccato_engine.

    Handles loading/saving settings.
    """

    parser: ParserConfig = field(default_factory=ParserConfig)
    log_level: str = "WARNING"

    _config_dir: Path = field(default_factory=lambda: Path.home() / ".staccato_engine")

    @property
    def config_file(self) -> Path:
        return self._config_dir / "config.json"

    def save(self) -> None:
        """Save configuration to disk."""
        self._config_dir.mkdir(parents=True, exist_ok=True)
        data = {
            "parser": asdict(self.parser),
            "log_level": self.log_level,
        }

        with open(self.config_file, "w") as f:
            json.dump(data, f, indent=2)

    @classmethod
    def load(cls, config_dir: Optional[Path] = None) -> "Config":
        """Load configuration from disk or create default."""
        config = cls() if config_dir is None else cls(_config_dir=Path(config_dir))

        if config.config_file.exists():
            try:
                with open(config.config_file, "r") as f:
                    data = json.load(f)

                if "parser" in data:
                    config.parser = ParserConfig(**data["parser"])
                config.log_level = data.get("log_level", config.log_level)

            except (json.JSONDecodeError, TypeError, KeyError) as e:
                logger.warning(f"Could not load config file: {e}")

        return config

    @property
    def logging_level(self) -> int:
        """Numeric logging level, falling back to WARNING for unknown names."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config


def reset_config() -> None:
    """Reset the global configuration to defaults."""
    global _config
    _config = Config()
    _config.save()
