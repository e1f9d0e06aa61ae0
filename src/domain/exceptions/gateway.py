"""Payment gateway domain exceptions."""

from .base import DomainException


class GatewayException(DomainException):
    """
    Raised when the payment gateway rejects or fails a request.

    Carries the gateway's own error fields so callers can classify
    card declines.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        decline_code: str | None = None,
        error_type: str | None = None,
        param: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(
            message=message,
            code="GATEWAY_ERROR",
        )
        self.gateway_code = code
        self.decline_code = decline_code
        self.error_type = error_type
        self.param = param
        self.status_code = status_code


class GatewayTimeoutException(GatewayException):
    """Raised when the payment gateway times out."""

    def __init__(self):
        super().__init__(message="Payment gateway request timed out")
        self.code = "GATEWAY_TIMEOUT"


class ResourceNotFoundException(GatewayException):
    """Raised when the gateway has no object with the requested id."""

    def __init__(self, message: str, param: str | None = None):
        super().__init__(
            message=message,
            code="resource_missing",
            error_type="invalid_request_error",
            param=param,
            status_code=404,
        )
        self.code = "RESOURCE_NOT_FOUND"
