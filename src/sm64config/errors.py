class ConfigFileError(Exception):
    """Base error for configuration file persistence."""


class DuplicateOptionError(ConfigFileError):
    """Raised when an option name is registered more than once."""


class OptionDecodeError(ConfigFileError):
    """Raised when an option value cannot be decoded from its text form."""

    def __init__(self, name: str, text: str, reason: str) -> None:
        super().__init__(f"invalid value '{text}' for option '{name}': {reason}")
        self.name = name
        self.text = text
        self.reason = reason


class ConfigDirectoryUnavailable(ConfigFileError):
    """Raised when the preferred configuration directory cannot be created."""


class ConfigWriteError(ConfigFileError):
    """Raised when the configuration file cannot be opened or written."""


class OptionEncodeError(ConfigFileError):
    """Raised when an option value has no valid text form."""

    def __init__(self, name: str, value: object, reason: str) -> None:
        super().__init__(f"cannot save value {value!r} for option '{name}': {reason}")
        self.name = name
        self.value = value
        self.reason = reason
