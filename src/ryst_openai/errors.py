"""Errors raised by the SDK.

Every failure surfaces as exactly one of three ``OpenAIError`` subclasses;
nothing is retried by this layer.
"""


class OpenAIError(Exception):
    """Base class for all SDK errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(OpenAIError):
    """An argument is invalid, locally or according to a 4xx reply from the API."""

    def __init__(self, argument: str, message: str) -> None:
        super().__init__(message)
        self.argument = argument

    def __str__(self) -> str:
        return f"invalid argument '{self.argument}': {self.message}"


class InvalidStateError(OpenAIError):
    """Required configuration is missing or a response could not be parsed."""

    pass


class InternalError(OpenAIError):
    """The API failed with a non-4xx status or the transport itself failed."""

    def __init__(self, message: str, source: BaseException | None = None) -> None:
        super().__init__(message)
        self.source = source

    @classmethod
    def from_source(cls, source: BaseException) -> "InternalError":
        return cls(str(source) or type(source).__name__, source=source)
