from typing import Any, Optional

from pydantic import BaseModel

from .error_codes import ErrorCodes


class StandardResponse(BaseModel):
    """Outcome of a write against Firestore.

    ``skipped`` is set when the backend is not configured and the call
    did nothing; that case still counts as a success.
    """

    is_success: bool
    code: int = ErrorCodes.SUCCESS
    data: Any = None
    message: Optional[str] = None
    error_message: Optional[str] = None
    skipped: bool = False

    @classmethod
    def success(cls, data: Any = None, message: str = "Success") -> "StandardResponse":
        return cls(is_success=True, code=ErrorCodes.SUCCESS, data=data, message=message)

    @classmethod
    def skipped_response(cls, message: str = "Firebase not configured") -> "StandardResponse":
        return cls(is_success=True, code=ErrorCodes.NO_CONTENT, message=message, skipped=True)

    @classmethod
    def failure(cls, code: int = ErrorCodes.INTERNAL_SERVER_ERROR, error_message: str = "") -> "StandardResponse":
        return cls(is_success=False, code=code, error_message=error_message)

    @classmethod
    def not_found(cls, error_message: str = "Not found") -> "StandardResponse":
        return cls.failure(ErrorCodes.NOT_FOUND, error_message)

    @classmethod
    def bad_request(cls, error_message: str = "Bad request") -> "StandardResponse":
        return cls.failure(ErrorCodes.BAD_REQUEST, error_message)

    @classmethod
    def internal_error(cls, error_message: str = "Internal server error") -> "StandardResponse":
        return cls.failure(ErrorCodes.INTERNAL_SERVER_ERROR, error_message)
