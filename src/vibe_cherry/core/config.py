"""Configuration and settings storage"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)


class Config:
    """Application configuration manager"""

    def __init__(
        self,
        config_file: str = "vibe_cherry_config.json",
        config_dir: Optional[Union[str, Path]] = None,
    ):
        """
        Initialize configuration

        Args:
            config_file: Name of the config file
            config_dir: Directory holding the file (defaults to ~/.vibe_cherry)
        """
        self.config_dir = Path(config_dir) if config_dir else Path.home() / ".vibe_cherry"
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file = self.config_dir / config_file
        self._config: Dict[str, Any] = {}
        self.load()

    def load(self):
        """Load configuration from file, filling in missing defaults"""
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    loaded = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.error("Error loading config: %s", e)
                loaded = {}
            if not isinstance(loaded, dict):
                loaded = {}
            self._config = {**self._default_config(), **loaded}
        else:
            self._config = self._default_config()
            self.save()

    def save(self):
        """Save configuration to file"""
        try:
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            logger.error("Error saving config: %s", e)

    def _default_config(self) -> Dict[str, Any]:
        """Return default configuration"""
        return {
            "runtime_command": "ollama",
            "model": "gemma3:4b",
            "max_concurrent_inferences": 0,
            "inference_timeout": None,
            "event_queue_size": 100,
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set a configuration value"""
        self._config[key] = value
        self.save()

    def __getitem__(self, key: str) -> Any:
        """Allow dict-like access"""
        return self._config.get(key)

    def __setitem__(self, key: str, value: Any):
        """Allow dict-like assignment"""
        self.set(key, value)
