"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class GatewayAPIError(DomainException):
    """Remote payment gateway returned an error or is unavailable"""

    def __init__(self, message: str, status_code: int | None = None, server_message: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        # `message` field of the gateway's error body, shown to users verbatim
        self.server_message = server_message


class InvalidPageRequestError(DomainException):
    """Page index or page size outside the range the gateway accepts"""

    pass
