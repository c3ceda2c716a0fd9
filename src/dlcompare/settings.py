import os
import tomllib
from pathlib import Path


# Environment variable naming the settings file when --settings is not given
SETTINGS_ENVIRONMENT_VARIABLE = 'DLCOMPARE_SETTINGS'

SETTING_LOGGING_PATH = 'logging.path'
SETTING_LOGGING_LEVEL = 'logging.level'
SETTING_LISTER_CONCURRENCY = 'lister.concurrency'


class SettingsError(ValueError):
    """The settings file cannot be parsed, or holds a value of the wrong kind."""


class CompareSettings:
    """Read-only view of a TOML settings file.

    Values are looked up with dotted keys, e.g. 'logging.path' reads
    settings['logging']['path']. A settings object created without a path, or for
    a path that does not exist, holds no values and every get() returns its default.

    Example:
        settings = CompareSettings.locate(args.settings)
        concurrency = settings.get_int(SETTING_LISTER_CONCURRENCY, minimum=1)
    """

    def __init__(self, settings_file: str | os.PathLike | None = None):
        self._settings_file = None if settings_file is None else Path(settings_file)
        self._settings = {}

        if self._settings_file is not None and self._settings_file.exists():
            with open(self._settings_file, 'rb') as f:
                try:
                    self._settings = tomllib.load(f)
                except tomllib.TOMLDecodeError as e:
                    raise SettingsError(f"Invalid settings file {self._settings_file}: {e}") from e

    @classmethod
    def locate(cls, settings_file: str | os.PathLike | None = None) -> 'CompareSettings':
        """Load settings from settings_file, or from DLCOMPARE_SETTINGS when it is None."""
        if settings_file is None:
            settings_file = os.environ.get(SETTINGS_ENVIRONMENT_VARIABLE) or None
        return cls(settings_file)

    @property
    def settings_file(self) -> Path | None:
        return self._settings_file

    def get(self, key: str, default=None):
        """Get a setting by dotted key, or default when any part of the key is missing.

        Examples:
            >>> settings.get('logging.level', 'INFO')
            'DEBUG'
            >>> settings.get('nonexistent.key', 'fallback')
            'fallback'
        """
        value = self._settings

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_int(self, key: str, default: int | None = None, minimum: int | None = None) -> int | None:
        """Get an integer setting by dotted key, or default when it is missing.

        Raises:
            SettingsError: The value is not an integer, or is below minimum
        """
        value = self.get(key)
        if value is None:
            return default

        if isinstance(value, bool) or not isinstance(value, int):
            raise SettingsError(f"Setting {key} must be an integer; found {value!r}")
        if minimum is not None and value < minimum:
            raise SettingsError(f"Setting {key} must be at least {minimum}; found {value}")

        return value
