"""
Configuration for InkScript handwriting recognition.

Two layers:
- RecognitionConfig: options that shape the request sent per page
- Settings: credentials and locations, loaded from a YAML file
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from inkscript.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

LANG_EN = "en_US"
LANG_DE = "de_DE"

# Short names accepted on the command line
LANGUAGES = {
    "en": LANG_EN,
    "de": LANG_DE,
}

DEFAULT_HOST = "https://cloud.myscript.com"
CONFIG_FILENAME = "inkscript.yaml"

ENV_CONFIG = "INKSCRIPT_CONFIG"
ENV_APP_KEY = "INKSCRIPT_APP_KEY"
ENV_HMAC_KEY = "INKSCRIPT_HMAC_KEY"
ENV_CACHE_DIR = "INKSCRIPT_CACHE_DIR"


@dataclass
class RecognitionConfig:
    """
    Options for the recognition request of a single page.

    The defaults match what works best for offscreen recognition of
    notebook pages: no guides, word breakdown with bounding boxes.

    Example:
        >>> config = RecognitionConfig(language=LANG_DE, timeout=30.0)
        >>> recognizer = Recognizer(client, cache, config=config)
    """

    language: str = LANG_EN
    guides: bool = False  # recommended off for offscreen usage
    bounding_box: bool = True
    chars: bool = False
    words: bool = True

    # Transport
    timeout: float | None = None  # None = transport default
    max_workers: int | None = None  # None = one worker per page

    def __post_init__(self):
        """Validate configuration."""
        if self.language in LANGUAGES:
            self.language = LANGUAGES[self.language]
        valid_languages = tuple(LANGUAGES.values())
        if self.language not in valid_languages:
            raise ConfigurationError(
                f"language must be one of {valid_languages}, got {self.language!r}"
            )
        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigurationError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError(f"timeout must be > 0, got {self.timeout}")


@dataclass
class Settings:
    """
    Account credentials and local paths.

    An empty cache_dir disables the response cache.
    """

    app_key: str
    hmac_key: str
    cache_dir: Path | None = None
    host: str = DEFAULT_HOST
    recognition: RecognitionConfig = field(default_factory=RecognitionConfig)

    def __post_init__(self):
        """Validate configuration."""
        if not self.app_key or not self.hmac_key:
            raise ConfigurationError(
                "Both an application key and an HMAC key are required "
                f"(set them in {CONFIG_FILENAME} or via {ENV_APP_KEY}/{ENV_HMAC_KEY})"
            )
        if self.cache_dir is not None and not isinstance(self.cache_dir, Path):
            self.cache_dir = Path(self.cache_dir).expanduser()

    @property
    def hwr_cache(self) -> Path | None:
        """Directory holding cached recognition results."""
        if self.cache_dir is None:
            return None
        return self.cache_dir / "hwr"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create settings from a parsed YAML mapping."""
        recognition = data.get("recognition") or {}
        if not isinstance(recognition, dict):
            raise ConfigurationError("'recognition' must be a mapping")
        try:
            recognition_config = RecognitionConfig(**recognition)
        except TypeError as e:
            raise ConfigurationError(f"Invalid recognition options: {e}") from e

        cache_dir = data.get("cache_dir")
        return cls(
            app_key=str(data.get("app_key") or ""),
            hmac_key=str(data.get("hmac_key") or ""),
            cache_dir=Path(cache_dir).expanduser() if cache_dir else None,
            host=data.get("host") or DEFAULT_HOST,
            recognition=recognition_config,
        )


def default_config_path() -> Path:
    """Return the settings file location, honouring $INKSCRIPT_CONFIG."""
    explicit = os.environ.get(ENV_CONFIG)
    if explicit:
        return Path(explicit).expanduser()
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / CONFIG_FILENAME


def load_settings(path: str | Path | None = None) -> Settings:
    """
    Load settings from YAML, with environment overrides.

    A missing settings file is not an error as long as the credentials
    are supplied through the environment.

    Args:
        path: Settings file (defaults to default_config_path()).

    Returns:
        Validated Settings.

    Raises:
        ConfigurationError: If the file is malformed or credentials are missing.
    """
    path = Path(path) if path else default_config_path()
    data: dict[str, Any] = {}

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Cannot parse settings file {path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read settings file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Settings file {path} must contain a mapping")
        logger.debug("Loaded settings from %s", path)
    else:
        logger.debug("No settings file at %s; using environment only", path)

    overrides = {
        "app_key": os.environ.get(ENV_APP_KEY),
        "hmac_key": os.environ.get(ENV_HMAC_KEY),
        "cache_dir": os.environ.get(ENV_CACHE_DIR),
    }
    for key, value in overrides.items():
        if value:
            data[key] = value

    return Settings.from_dict(data)
