"""Exception types raised while parsing and running a brander configuration"""


class BranderError(Exception):
    """Base class for all brander errors."""


class ConfigError(BranderError, ValueError):
    """Configuration is missing a required field or holds an unsupported value."""


class ProviderNotFoundError(ConfigError):
    """No document provider or task is registered for a declared type."""

    def __init__(self, type_name: str, kind: str = "provider"):
        super().__init__(f"Unable to find {kind} for type: {type_name}")
        self.type_name = type_name
