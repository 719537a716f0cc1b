"""Exceptions raised by the timedtext service layer."""


class CaptionFetchError(Exception):
    """Base class for every failure while fetching or decoding captions."""


class TransportError(CaptionFetchError):
    """Raised when the caption provider cannot be reached."""


class HTTPStatusError(CaptionFetchError):
    """Raised when the caption provider answers with a non-200 status."""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Response status: {status_code} {reason}")


class DecodeError(CaptionFetchError):
    """Raised when the provider response is not well-formed XML."""


class MissingFieldError(CaptionFetchError):
    """Raised when a caption line lacks a timing attribute."""

    def __init__(self, field: str, index: int):
        self.field = field
        self.index = index
        super().__init__(f"Missing '{field}' attribute on line {index}")


class NumericParseError(CaptionFetchError):
    """Raised when a caption timing attribute is not a number."""
