import logging
from fastapi import HTTPException, status

logger = logging.getLogger(__name__)

class BaseAppException(Exception):
    """Error carrying the HTTP status it maps to"""
    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

class UnauthenticatedException(BaseAppException):
    """Raised when the caller identity cannot be resolved"""
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED)

class ForbiddenException(BaseAppException):
    """Raised when the caller does not own the record"""
    def __init__(self, message: str = "Forbidden"):
        super().__init__(message, status.HTTP_403_FORBIDDEN)

class NotFoundException(BaseAppException):
    """Raised when a record does not exist"""
    def __init__(self, message: str = "Not found"):
        super().__init__(message, status.HTTP_404_NOT_FOUND)

class ConflictException(BaseAppException):
    """Raised when a unique key is already taken"""
    def __init__(self, message: str = "Already exists"):
        super().__init__(message, status.HTTP_409_CONFLICT)

class ValidationException(BaseAppException):
    """Raised for bad input that passes schema validation"""
    def __init__(self, message: str = "Invalid request"):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)

class UpstreamFailureException(BaseAppException):
    """Raised when the metadata provider is unreachable or fails"""
    def __init__(self, message: str = "Metadata provider error"):
        super().__init__(message, status.HTTP_502_BAD_GATEWAY)

class StoreFailureException(BaseAppException):
    """Raised when the persistence layer fails"""
    def __init__(self, message: str = "Database error"):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR)


def handle_exception(e: Exception) -> HTTPException:
    """Handle exceptions and convert to HTTPException"""
    if isinstance(e, HTTPException):
        return e
    if isinstance(e, BaseAppException):
        return HTTPException(
            status_code=e.status_code,
            detail=e.message
        )
    logger.error(f"Unhandled error: {str(e)}", exc_info=e)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An internal server error occurred"
    )
