"""
Exceptions raised while resolving configuration and sending messages.

Everything derives from TelegramSendError so the command line entrypoint
can turn any of them into an error message and a non-zero exit code.
"""
from typing import Optional


class TelegramSendError(Exception):
    """Base class for all fatal errors"""


class ConfigError(TelegramSendError):
    pass


class ConfigFileNotFoundError(ConfigError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"config file not found: {path}")


class ConfigKeyError(ConfigError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"config value not found: {path}")


class ValidationError(TelegramSendError):
    pass


class FormatConflictError(ValidationError):
    def __init__(self):
        super().__init__("--html and --md are mutually exclusive")


class EmptyMessageError(TelegramSendError):
    def __init__(self):
        super().__init__("message is empty")


class TransportError(TelegramSendError):
    pass


class NetworkError(TransportError):
    pass


class BadResponseError(TransportError):
    pass


class ApiError(TransportError):
    def __init__(self, description: str, error_code: Optional[int] = None):
        self.description = description
        self.error_code = error_code
        if error_code is not None:
            super().__init__(f"telegram api error {error_code}: {description}")
        else:
            super().__init__(f"telegram api error: {description}")
