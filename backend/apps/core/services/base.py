"""
Base service class and result types shared by the service layer.
"""
import logging
from typing import Any, Dict, Optional


class BaseService:
    """
    Base class for services. Gives every service a logger named after the
    class and helpers that attach keyword context to log records.
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def log_info(self, message: str, **kwargs) -> None:
        self.logger.info(message, extra={'context': kwargs})

    def log_warning(self, message: str, **kwargs) -> None:
        self.logger.warning(message, extra={'context': kwargs})

    def log_error(self, message: str, exception: Optional[Exception] = None, **kwargs) -> None:
        """
        Log an error message with optional exception and context.

        Args:
            message: The error message to log
            exception: Optional exception that caused the error
            **kwargs: Additional context to include in the log
        """
        self.logger.error(
            message,
            exc_info=exception,
            extra={'context': kwargs}
        )


class ServiceException(Exception):
    """Base exception for service layer errors."""

    def __init__(self, message: str, code: Optional[str] = None, details: Optional[Dict] = None):
        super().__init__(message)
        self.code = code
        self.details = details or {}


class ServiceResult:
    """
    Outcome of a service call that may fail without raising.
    """

    def __init__(self, success: bool, data: Optional[Any] = None,
                 error: Optional[str] = None, error_code: Optional[str] = None):
        self.success = success
        self.data = data
        self.error = error
        self.error_code = error_code

    @classmethod
    def ok(cls, data: Any = None) -> 'ServiceResult':
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str, error_code: Optional[str] = None) -> 'ServiceResult':
        return cls(success=False, error=error, error_code=error_code)

    def __bool__(self) -> bool:
        return self.success

    def __repr__(self) -> str:
        if self.success:
            return f"<ServiceResult: Success, data={self.data}>"
        return f"<ServiceResult: Failure, error={self.error}, code={self.error_code}>"
