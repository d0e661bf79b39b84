"""Configuration management for tagsort."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from tagsort.config.paths import default_config_path
from tagsort.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Transcode settings
    transcode_workers: int = 18
    transcode_bitrate: str = "320k"
    encoder_binary: str = "ffmpeg"
    lossless_extensions: list[str] = field(default_factory=lambda: [".flac", ".m4a"])
    compressed_extension: str = ".mp3"

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file, falling back to defaults.

        Args:
            config_file: Explicit TOML file; defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            tomllib.TOMLDecodeError: If the file exists but is not valid TOML.
        """
        if config_file is None and cls._instance is not None:
            return cls._instance

        target = config_file or default_config_path()

        try:
            if target.exists():
                with open(target, "rb") as f:
                    config_dict = tomllib.load(f)
                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys in %s: %s", target, ", ".join(unknown))
                instance = cls(**{key: value for key, value in config_dict.items() if key in known})
                logger.debug("Configuration loaded from %s", target)
            else:
                instance = cls()
        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        if config_file is None:
            cls._instance = instance
            cls._loaded_from = target
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` re-reads the file."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config"]
