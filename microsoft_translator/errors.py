"""Exception hierarchy for translator calls."""


class TranslatorError(Exception):
    """Base class for all errors raised by the client."""


class InvalidLanguageError(TranslatorError, ValueError):
    """A language code outside the supported set was supplied.

    Raised before any request is sent.

    Args:
        code: The rejected language code.
        field: Request field that carried it ("to" or "from").
    """

    def __init__(self, code: str, field: str = "to") -> None:
        self.code = code
        self.field = field
        super().__init__(f"Unsupported language code for '{field}': {code!r}")


class TranslationServiceError(TranslatorError):
    """The service answered with an ``{"error": {...}}`` payload.

    No translation was performed; there is no partial result.

    Args:
        code: Service error code (e.g. 401000).
        message: Service error message.
        status: HTTP status of the response, when known.
    """

    def __init__(self, code: int, message: str, status: int | None = None) -> None:
        self.code = code
        self.message = message
        self.status = status
        super().__init__(f"{code}: {message}")


class TransportError(TranslatorError):
    """The request could not be completed or its response could not be read.

    Covers network failures, timeouts, non-JSON bodies and bodies of an
    unexpected shape.

    Args:
        message: Human readable description.
        cause: Underlying exception, if any.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.cause = cause
        super().__init__(message)
