"""API error mapping

Use-case errors are raised as ClientError and rendered as
{"error": {"code": ..., "message": ...}}.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from libs.result import Error

NOT_FOUND_CODES = {"CUSTOMER_NOT_FOUND", "TRANSACTION_NOT_FOUND"}
SERVER_ERROR_CODES = {"SAVE_FAILED", "EXPORT_FAILED", "REPORT_FAILED"}


class ClientError(Exception):
    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code


def error_for(error: Error) -> ClientError:
    """ClientError with the HTTP status matching the error code"""
    if error.code in NOT_FOUND_CODES:
        return ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    if error.code in SERVER_ERROR_CODES:
        return ClientError(error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return ClientError(error)


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"code": exc.error.code, "message": exc.error.message}},
    )
