from google.api_core import exceptions as google_exceptions


class InvalidEntityError(ValueError):
    """Raised when an entity cannot be keyed, e.g. it has no identifier."""


class ErrorCodes:
    SUCCESS = 200
    NO_CONTENT = 204
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504

    @staticmethod
    def get_http_status_code(error: Exception) -> int:
        """Map a backend or validation exception to an HTTP-like status code."""
        if isinstance(error, InvalidEntityError):
            return ErrorCodes.BAD_REQUEST
        if isinstance(error, google_exceptions.GoogleAPICallError) and error.code:
            return int(error.code)
        if isinstance(error, (google_exceptions.RetryError, TimeoutError)):
            return ErrorCodes.GATEWAY_TIMEOUT
        return ErrorCodes.INTERNAL_SERVER_ERROR
