"""
Custom application exceptions.
"""

from fastapi import HTTPException, status


class AppException(HTTPException):
    """Base application exception."""
    
    def __init__(self, detail: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(status_code=status_code, detail=detail)


class BadRequestException(AppException):
    """Bad request exception."""
    
    def __init__(self, detail: str = "Bad request"):
        super().__init__(detail=detail, status_code=status.HTTP_400_BAD_REQUEST)


class UpstreamException(AppException):
    """The weather endpoint failed or reported an error."""
    
    def __init__(self, detail: str = "Weather service error"):
        super().__init__(detail=detail, status_code=status.HTTP_502_BAD_GATEWAY)


class GatewayTimeoutException(AppException):
    """The weather endpoint did not answer in time."""
    
    def __init__(self, detail: str = "Weather service timed out"):
        super().__init__(detail=detail, status_code=status.HTTP_504_GATEWAY_TIMEOUT)
