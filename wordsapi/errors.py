from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .response import Response


class WordsApiError(Exception):
    """Base class for everything the client raises."""


class RequestError(WordsApiError):
    """No usable response was obtained from the API.

    Covers transport failures (DNS, refused connections, TLS, malformed URLs)
    and non-2xx statuses. For the latter ``status_code`` and ``response`` are
    set, so the upstream error body can still be read.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Optional["Response"] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class ResultParseError(WordsApiError):
    """The response body does not match the requested record shape."""

    def __init__(self, body: str, detail: str = ""):
        message = "Could not parse result"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.body = body
        self.detail = detail
