"""Settings manager for frame monitoring preferences."""

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..constants import MonitorConstants

log = logging.getLogger(__name__)


@dataclass
class MonitorSettings:
    """User settings for the frame rate tracker.

    Values loaded from the settings file override these defaults.
    """

    # Refresh rate the tracker measures against
    refresh_rate_hz: float = MonitorConstants.DEFAULT_REFRESH_RATE_HZ

    # Bad-frame warnings allowed in a row before suppression
    max_consecutive_logs: int = MonitorConstants.MAX_CONSECUTIVE_LOGS

    # Tk scheduling delay used when the refresh rate is unusable
    default_interval_ms: int = MonitorConstants.DEFAULT_INTERVAL_MS

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MonitorSettings":
        """Create settings from dictionary."""
        # Filter out unknown keys
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered_data)


class SettingsManager:
    """Loads monitor settings from a JSON file.

    Settings are read from ~/.framewatch_settings unless another path is
    given. Changes made with update_setting() are kept in memory only.
    """

    def __init__(self, settings_file: Union[str, Path, None] = None):
        """Initialize settings manager.

        Args:
            settings_file: Optional path of the JSON settings file
        """
        if settings_file is None:
            settings_file = Path.home() / ".framewatch_settings"
        self.settings_file = Path(settings_file)
        self.settings = self.load_settings()

    def load_settings(self) -> MonitorSettings:
        """Load settings from file.

        Returns:
            MonitorSettings object with loaded or default values
        """
        if self.settings_file.exists():
            try:
                with open(self.settings_file, "r", encoding="utf-8") as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise TypeError(f"expected a JSON object, got {type(data).__name__}")
                return MonitorSettings.from_dict(data)
            except (OSError, json.JSONDecodeError, TypeError) as e:
                log.warning("Error loading settings from %s: %s", self.settings_file, e)
                log.warning("Using default settings")

        return MonitorSettings()

    def reload(self) -> None:
        """Re-read the settings file."""
        self.settings = self.load_settings()

    def update_setting(self, key: str, value: Any) -> None:
        """Update a single setting.

        Args:
            key: Setting name
            value: New value
        """
        if hasattr(self.settings, key):
            setattr(self.settings, key, value)
        else:
            log.warning("Unknown setting '%s'", key)

    def get_setting(self, key: str, default: Any = None) -> Any:
        """Get a setting value.

        Args:
            key: Setting name
            default: Default value if setting not found

        Returns:
            Setting value or default
        """
        return getattr(self.settings, key, default)
