"""
Settings management for FilterLab.

Handles persistent storage of user preferences in settings.ini.
"""

from configparser import ConfigParser, NoOptionError, NoSectionError
from pathlib import Path
from typing import Optional, Union


class Settings:
    """Manages application settings via settings.ini."""

    # Settings file location (user home)
    SETTINGS_FILE = Path.home() / ".filterlab" / "settings.ini"

    # Section and keys
    SECTION = "preferences"
    KEY_INPUT_DIR = "last_input_dir"
    KEY_OUTPUT_DIR = "last_output_dir"
    KEY_EXPORT_FILENAME = "export_filename"
    KEY_ADJUSTMENTS_DIR = "last_adjustments_dir"

    DEFAULT_EXPORT_FILENAME = "filtered-image.png"

    def __init__(self, settings_file: Optional[Union[str, Path]] = None):
        """Initialize settings from file or create defaults."""
        self.settings_file = Path(settings_file) if settings_file else self.SETTINGS_FILE
        # Paths may contain "%", so no interpolation
        self.config = ConfigParser(interpolation=None)
        self._load()

    def _load(self) -> None:
        """Load settings from file or create defaults."""
        if self.settings_file.exists():
            self.config.read(self.settings_file)
        else:
            # Create default section
            self.config.add_section(self.SECTION)
            self.config.set(self.SECTION, self.KEY_INPUT_DIR, "")
            self.config.set(self.SECTION, self.KEY_OUTPUT_DIR, "")
            self.config.set(self.SECTION, self.KEY_EXPORT_FILENAME, self.DEFAULT_EXPORT_FILENAME)
            self.config.set(self.SECTION, self.KEY_ADJUSTMENTS_DIR, "")
            self._save()

    def _save(self) -> None:
        """Save settings to file."""
        self.settings_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.settings_file, "w") as f:
            self.config.write(f)

    def _get(self, key: str, default: str = "") -> str:
        try:
            return self.config.get(self.SECTION, key)
        except (NoSectionError, NoOptionError):
            return default

    def _set(self, key: str, value: str) -> None:
        if not self.config.has_section(self.SECTION):
            self.config.add_section(self.SECTION)
        self.config.set(self.SECTION, key, value)
        self._save()

    def get_input_dir(self) -> Optional[str]:
        """Get last input directory."""
        return self._get(self.KEY_INPUT_DIR) or None

    def set_input_dir(self, path: str) -> None:
        """Set and save last input directory."""
        self._set(self.KEY_INPUT_DIR, path)

    def get_output_dir(self) -> Optional[str]:
        """Get last output directory."""
        return self._get(self.KEY_OUTPUT_DIR) or None

    def set_output_dir(self, path: str) -> None:
        """Set and save last output directory."""
        self._set(self.KEY_OUTPUT_DIR, path)

    def get_export_filename(self) -> str:
        """Get default export file name (default: 'filtered-image.png')."""
        return self._get(self.KEY_EXPORT_FILENAME) or self.DEFAULT_EXPORT_FILENAME

    def set_export_filename(self, filename: str) -> None:
        """Set and save default export file name."""
        self._set(self.KEY_EXPORT_FILENAME, filename)

    def get_adjustments_dir(self) -> Optional[str]:
        """Get last directory used for adjustment files."""
        return self._get(self.KEY_ADJUSTMENTS_DIR) or None

    def set_adjustments_dir(self, path: str) -> None:
        """Set and save last adjustment file directory."""
        self._set(self.KEY_ADJUSTMENTS_DIR, path)

    def remember_export(self, file_path: str) -> None:
        """Save the directory and file name of the last export."""
        path = Path(file_path)
        self.set_output_dir(str(path.parent))
        self.set_export_filename(path.name)
