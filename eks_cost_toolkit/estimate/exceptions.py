"""
Exceptions for the EKS static cost estimator.
"""


class ConfigurationError(ValueError):
    """Base class for settings that prevent an estimate from running."""


class SettingsFileNotFoundError(ConfigurationError):
    """Raised when the settings file does not exist."""

    def __init__(self, env_path: str):
        super().__init__(f"Settings file not found: {env_path}")
        self.env_path = env_path


class MissingSettingError(ConfigurationError):
    """Raised when a required setting is absent or empty."""

    def __init__(self, name: str):
        super().__init__(f"Missing required variable: {name}")
        self.name = name


class InvalidSettingError(ConfigurationError):
    """Raised when a price or hours setting is not a number."""

    def __init__(self, name: str, value: str):
        super().__init__(f"Invalid numeric value for {name}: {value!r}")
        self.name = name
        self.value = value
