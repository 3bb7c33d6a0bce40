#!/usr/bin/env python3
"""
Configuration Management for the Scraping Pipeline
Supports environment variables, a JSON config file and built-in defaults
"""

import os
import json
import logging
from typing import Any, Dict, Optional
from pathlib import Path
from dataclasses import dataclass, asdict, fields

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36'
)
DEFAULT_TRANSLATE_URL = 'https://translate.googleapis.com/translate_a/single'
CONFIG_FILENAME = 'wordfetch.json'
ENV_PREFIX = 'WORDFETCH_'


@dataclass
class ScraperConfig:
    """Scraping pipeline configuration with validation"""
    user_agent: str = DEFAULT_USER_AGENT
    accept: str = 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8'
    accept_language: str = 'en-US,en;q=0.9'
    fetch_timeout: float = 15.0
    translation_timeout: float = 5.0
    pacing_delay: float = 2.0
    max_batch_size: int = 50
    max_senses: int = 3
    max_examples: int = 2
    primary_network_retries: int = 0
    availability_delay: float = 0.5
    availability_timeout: float = 10.0
    accessibility_timeout: float = 5.0
    source_language: str = 'en'
    target_language: str = 'vi'
    translate_url: str = DEFAULT_TRANSLATE_URL
    log_level: str = 'INFO'

    def __post_init__(self):
        """Validate configuration after initialization"""
        if not self.user_agent:
            raise ValueError("User agent is required")
        for name in ('fetch_timeout', 'translation_timeout', 'availability_timeout',
                     'accessibility_timeout'):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.pacing_delay < 0 or self.availability_delay < 0:
            raise ValueError("Delays cannot be negative")
        if self.max_batch_size < 1:
            raise ValueError("max_batch_size must be at least 1")
        if self.max_senses < 1 or self.max_examples < 0:
            raise ValueError("Sense and example caps must be at least 1 and 0")
        if self.primary_network_retries < 0:
            raise ValueError("primary_network_retries cannot be negative")
        if self.log_level.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f"Unknown log level: {self.log_level}")

    def request_headers(self) -> Dict[str, str]:
        """Browser-like identity headers sent with every outbound request"""
        return {
            'User-Agent': self.user_agent,
            'Accept': self.accept,
            'Accept-Language': self.accept_language,
            'Accept-Encoding': 'gzip, deflate',
            'Connection': 'keep-alive',
        }

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _coerce(raw: str, target_type: Any) -> Any:
    """Convert an environment string to the dataclass field type"""
    if target_type is int:
        return int(raw)
    if target_type is float:
        return float(raw)
    return raw


class ConfigManager:
    """Configuration manager with environment variable support"""

    def __init__(self, config_file: Optional[Path] = None):
        self._config: Optional[ScraperConfig] = None
        env_file = os.getenv(f'{ENV_PREFIX}CONFIG_FILE')
        if config_file is not None:
            self._config_file = Path(config_file)
        elif env_file:
            self._config_file = Path(env_file)
        else:
            self._config_file = Path.cwd() / CONFIG_FILENAME

    def get_config(self) -> ScraperConfig:
        """
        Get scraper configuration from multiple sources in priority order:
        1. Environment variables (WORDFETCH_<FIELD>)
        2. JSON config file
        3. Defaults
        """
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def _load_config(self) -> ScraperConfig:
        values: Dict[str, Any] = {}

        if self._config_file.exists():
            logger.info(f"Loading scraper config from {self._config_file}")
            values.update(self._load_from_file())

        env_values = self._load_from_environment()
        if env_values:
            logger.info(f"Applying {len(env_values)} scraper settings from environment variables")
            values.update(env_values)

        return ScraperConfig(**values)

    def _load_from_file(self) -> Dict[str, Any]:
        with open(self._config_file, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Config file {self._config_file} must hold a JSON object")

        section = data.get('scraper', data)
        known = {f.name for f in fields(ScraperConfig)}
        unknown = set(section) - known
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(sorted(unknown))}")
        return {k: v for k, v in section.items() if k in known}

    def _load_from_environment(self) -> Dict[str, Any]:
        values: Dict[str, Any] = {}
        for field_def in fields(ScraperConfig):
            raw = os.getenv(f'{ENV_PREFIX}{field_def.name.upper()}')
            if raw is None or raw == '':
                continue
            try:
                values[field_def.name] = _coerce(raw, field_def.type)
            except ValueError as e:
                raise ValueError(f"Invalid value for {ENV_PREFIX}{field_def.name.upper()}: {raw!r}") from e
        return values


_config_manager: Optional[ConfigManager] = None


def get_scraper_config() -> ScraperConfig:
    """Get the process-wide scraper configuration"""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager.get_config()


def reset_scraper_config() -> None:
    """Forget the cached configuration so the next call reloads it"""
    global _config_manager
    _config_manager = None
