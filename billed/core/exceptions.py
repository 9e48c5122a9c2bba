"""Error types raised by the bills workflow"""

from typing import Optional


class BilledError(Exception):
    """Base class for every error raised by this package"""


class GatewayError(BilledError):
    """
    The remote bills service could not complete a call.

    status_code is the HTTP status when the server answered, None when the
    request never got a response (connection refused, timeout...).
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @classmethod
    def from_status(cls, status_code: int) -> "GatewayError":
        return cls(f"Erreur {status_code}", status_code=status_code)


class InvalidReceiptError(BilledError):
    """Receipt file name does not carry an accepted image extension"""

    def __init__(self, file_name: str):
        super().__init__(f"Unsupported receipt file: {file_name!r}")
        self.file_name = file_name
