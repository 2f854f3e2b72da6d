"""Exception hierarchy shared by the provider, the session and the CLI."""

UNKNOWN_ERROR = "Unknown error"


class GeminiChatError(Exception):
    """Base class for all geminichat errors."""


class ConfigurationError(GeminiChatError):
    """Raised when required configuration (API key, model) is missing or invalid."""


class GeminiAPIError(GeminiChatError):
    """The API answered with a non-success HTTP status.

    Attributes:
        status_code: HTTP status code of the response
        reason: HTTP reason phrase (may be empty)
        server_message: ``error.message`` from the body, or "Unknown error"
    """

    def __init__(self, status_code: int, reason: str = "", server_message: str | None = None) -> None:
        self.status_code = status_code
        self.reason = reason
        self.server_message = server_message or UNKNOWN_ERROR
        super().__init__(
            f"API request failed: {status_code} {reason} - {self.server_message}"
        )


class UnexpectedResponseError(GeminiChatError):
    """A success body did not carry ``candidates[0].content.parts[0].text``.

    This is a soft failure: the session reports it but records nothing
    in the conversation.
    """

    def __init__(self, message: str = "Unexpected API response structure", body: object = None) -> None:
        super().__init__(message)
        self.body = body
