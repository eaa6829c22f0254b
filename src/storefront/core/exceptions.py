from typing import Optional, Dict, Any, List, Never, NoReturn
import traceback
import sys

from pydantic import ValidationError as PydanticValidationError


class StorefrontError(Exception):
    """
    Base error for the storefront.

    message is safe to show to API clients; internal_message carries the
    detail that only belongs in logs.
    """

    status_code = 500

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        internal_message: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.internal_message = internal_message or message
        if status_code is not None:
            self.status_code = status_code
        # StorageError -> STORAGE
        self.error_code = error_code or type(self).__name__.removesuffix("Error").upper()
        self.details = details or {}
        self.traceback = traceback.format_exc() if sys.exc_info()[0] else None

    def to_dict(self) -> Dict[str, Any]:
        """JSON error envelope returned by the API"""
        error = {"code": self.error_code, "message": self.message, "details": self.details}
        return {"success": False, "error": error}


class ValidationError(StorefrontError):
    """Stored, fetched or submitted data failed schema validation"""

    status_code = 400

    def __init__(self, message: str = "Validation failed", field_errors: Optional[List[Dict[str, str]]] = None):
        self.field_errors = list(field_errors or [])
        super().__init__(
            message,
            error_code="VALIDATION_ERROR",
            details={"field_errors": self.field_errors} if self.field_errors else None,
        )

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError, message: str = "Validation failed") -> "ValidationError":
        """Flatten pydantic issues into field/message/code triples"""
        field_errors = [
            {
                "field": ".".join(str(part) for part in error["loc"]) or "__root__",
                "message": error["msg"],
                "code": error["type"],
            }
            for error in exc.errors()
        ]
        return cls(message, field_errors)


class NotFoundError(StorefrontError):
    """A product or other resource is not known"""

    status_code = 404

    def __init__(self, resource: str = "Resource", resource_id: Optional[str] = None):
        message = f'{resource} "{resource_id}" not found' if resource_id else f"{resource} not found"
        super().__init__(message, error_code="NOT_FOUND")


class BusinessLogicError(StorefrontError):
    """A storefront rule (stock, empty checkout) rejected the operation"""

    status_code = 422

    def __init__(self, message: str, rule: Optional[str] = None):
        super().__init__(
            message,
            error_code="BUSINESS_LOGIC_ERROR",
            details={"violated_rule": rule} if rule else None,
        )


class ExternalServiceError(StorefrontError):
    """The catalog API could not be reached or answered with an error"""

    status_code = 503

    def __init__(self, service_name: str, message: str = "External service unavailable"):
        super().__init__(message, error_code="EXTERNAL_SERVICE_ERROR", details={"service": service_name})


class StorageError(StorefrontError):
    """Raised by storage backends; never escapes a KeyValueStorage"""

    def __init__(self, message: str = "Storage operation failed", operation: Optional[str] = None):
        super().__init__(
            "Storage is unavailable.",
            error_code="STORAGE_ERROR",
            details={"operation": operation} if operation else None,
            internal_message=message,
        )


class UnhandledMessageError(StorefrontError):
    """Raised when a reducer receives a message outside its closed set"""

    def __init__(self, msg: Any):
        super().__init__(
            f"Unhandled message: {msg!r}",
            error_code="UNHANDLED_MESSAGE",
            details={"message_type": type(msg).__name__},
        )


def assert_unreachable(msg: Never) -> NoReturn:
    """
    Exhaustiveness guard for reducers.

    Type checkers reject any call site where ``msg`` has not been narrowed to
    ``Never``, so a new message variant without a reducer branch fails the
    type check. At runtime it raises instead of silently dropping the message.
    """
    raise UnhandledMessageError(msg)
