from fastapi import status
from libs.result import Error


class ApiError(Exception):
    """Error raised by a route; rendered as {success: false, error, code}"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)

    def body(self) -> dict:
        return {
            "success": False,
            "error": self.base_error.message,
            "code": self.base_error.code,
        }


class ClientError(ApiError):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(base_error)
        self.status_code = status_code


class ServerError(ApiError):
    pass


MISSING_FIELDS = Error("MISSING_FIELDS", "Missing required fields")
CONFIGURATION_ERROR = Error("CONFIGURATION_ERROR", "Server configuration error")
