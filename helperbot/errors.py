"""Error taxonomy shared by fetch clients, handlers and the transport."""


class HelperBotError(Exception):
    """Base class for all expected application errors."""

    @property
    def user_message(self) -> str:
        """Text safe to show in a chat reply."""
        return str(self)


class ConfigurationError(HelperBotError):
    """A required secret or setting is missing."""


class NetworkError(HelperBotError):
    """Connection failure or timeout reaching an external endpoint."""

    def __init__(self, message: str, timeout: bool = False) -> None:
        super().__init__(message)
        self.timeout = timeout

    @property
    def user_message(self) -> str:
        if self.timeout:
            return "request timed out"
        return "could not reach upstream service"


class HTTPStatusError(HelperBotError):
    """Upstream responded with a non-200 status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"unexpected status code: {status_code}")
        self.status_code = status_code


class DecodeError(HelperBotError):
    """Response body does not match the expected shape."""

    @property
    def user_message(self) -> str:
        return "invalid response from upstream service"


class NotFoundError(HelperBotError):
    """Well-formed response carrying no data for the requested symbol."""


class ValidationError(HelperBotError):
    """Malformed or empty user-supplied argument."""


class TelegramError(HelperBotError):
    """Telegram Bot API call failed."""
