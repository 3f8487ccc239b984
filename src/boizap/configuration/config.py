"""
Persisted CLI preferences.

Preferences live in a small JSON object at ~/.boizap/config.json and only
seed CLI flags; an explicit flag always wins.
"""
import json
import logging
from pathlib import Path
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".boizap" / "config.json"

REGION_KEY = 'default_region'
SPECIES_KEY = 'default_species'


class Config:
    """Remembers the user's preferred region and species between runs"""

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._values: Dict[str, Any] = self._read()

    def _read(self) -> Dict[str, Any]:
        if not self.config_path.exists():
            logger.debug(f"No preferences at {self.config_path}")
            return {}

        try:
            data = json.loads(self.config_path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable preferences file {self.config_path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring preferences file {self.config_path}: expected a JSON object")
            return {}

        logger.debug(f"Read preferences from {self.config_path}")
        return data

    def _write(self):
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            self.config_path.write_text(json.dumps(self._values, indent=2))
        except OSError as e:
            logger.error(f"Could not write preferences to {self.config_path}: {e}")
            raise
        logger.debug(f"Wrote preferences to {self.config_path}")

    def _assign(self, key: str, value: Optional[str]):
        if value is None:
            self._values.pop(key, None)
        else:
            self._values[key] = value
        self._write()

    @property
    def default_region(self) -> Optional[str]:
        """Preferred market region code, e.g. "SP" """
        return self._values.get(REGION_KEY)

    @default_region.setter
    def default_region(self, region: Optional[str]):
        self._assign(REGION_KEY, region)

    @property
    def default_species(self) -> Optional[str]:
        """Preferred species code, e.g. "cattle" """
        return self._values.get(SPECIES_KEY)

    @default_species.setter
    def default_species(self, species: Optional[str]):
        self._assign(SPECIES_KEY, species)

    def clear(self):
        """Forget every stored preference"""
        self._values = {}
        self._write()
        logger.info("Cleared stored preferences")

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._values)


_config: Optional[Config] = None


def get_config() -> Config:
    """Process-wide Config, created on first use"""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config():
    """Drop the cached Config so the next get_config() re-reads the file"""
    global _config
    _config = None
