class PexelsError(Exception):
    """Base exception for all Pexels client errors.

    Two errors are equal when they are the same kind and render the same
    message. Wrapped transport and decode errors are rarely comparable on
    their own, so the rendered text is what gets compared.
    """

    def _key(self) -> tuple:
        return (str(self),)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PexelsError):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self), self._key()))


class _WrappedError(PexelsError):
    prefix = ""

    def __init__(self, cause: object) -> None:
        super().__init__(f"{self.prefix}: {cause}")
        self.cause = cause


class RequestError(_WrappedError):
    """Raised when the HTTP request could not be sent or completed."""

    prefix = "Failed to send HTTP request"


class JsonParseError(_WrappedError):
    """Raised when a response body is not JSON or does not match the model."""

    prefix = "Failed to parse JSON response"


class UrlParseError(_WrappedError):
    prefix = "Failed to parse URL"


class ApiKeyNotFoundError(PexelsError):
    def __init__(self, message: str = "API key not found in environment variables") -> None:
        super().__init__(message)


class HexColorCodeError(PexelsError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid hex color code: {value}")
        self.value = value


class ParseMediaTypeError(PexelsError):
    def __init__(self, value: str = "") -> None:
        super().__init__("Failed to parse media type: invalid value")
        self.value = value


class ParseMediaSortError(PexelsError):
    def __init__(self, value: str = "") -> None:
        super().__init__("Failed to parse media sort: invalid value")
        self.value = value


class ParseOrientationError(PexelsError):
    def __init__(self, value: str = "") -> None:
        super().__init__("Failed to parse orientation: invalid value")
        self.value = value


class ParseSizeError(PexelsError):
    def __init__(self, value: str = "") -> None:
        super().__init__("Failed to parse size: invalid value")
        self.value = value


class ParseLocaleError(PexelsError):
    def __init__(self, value: str = "") -> None:
        super().__init__("Failed to parse locale: invalid value")
        self.value = value


class AuthError(PexelsError):
    """Raised when the API returns 401 Unauthorized."""

    def __init__(self, message: str = "Invalid API key") -> None:
        super().__init__(message)


class RateLimitError(PexelsError):
    """Raised when the API returns 429 Too Many Requests."""

    def __init__(self, message: str = "Rate limit exceeded") -> None:
        super().__init__(message)


class NotFoundError(PexelsError):
    """Raised when the API returns 404 for the requested resource."""


class ApiError(PexelsError):
    """Raised for any other non-200 response."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(message or f"Request failed with status: {status_code}")
        self.status_code = status_code

    def _key(self) -> tuple:
        return (self.status_code, str(self))
