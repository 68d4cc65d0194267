"""
Centralized error handling utilities for consistent error management across services.
"""
from functools import wraps
from typing import Any, Dict, Optional

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError

from src.shared.utils import get_logger


class ServiceError(Exception):
    """Base service error with context"""

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.original_error = original_error
        self.context = context or {}
        super().__init__(self.message)


class ErrorHandler:
    """Centralized error handler for services"""

    def __init__(self, logger_name: str):
        self.logger = get_logger(logger_name)

    def handle_database_error(
        self, error: Exception, operation: str, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log a database failure and re-raise it as a ServiceError"""
        context = context or {}
        self.logger.error(
            f"Database error during {operation}: {str(error)}", extra=context
        )
        raise ServiceError(f"Database operation failed for {operation}", error, context)

    def handle_general_error(
        self, error: Exception, operation: str, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """Handle general errors with proper logging"""
        context = context or {}

        if isinstance(error, ServiceError):
            self.logger.error(
                f"Service error during {operation}: {error.message}", extra=context
            )
            raise error

        self.logger.error(
            f"Unexpected error during {operation}: {str(error)}",
            extra=context,
            exc_info=True,
        )
        raise ServiceError(f"Unexpected error during {operation}", error, context)

    def log_success(self, operation: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Log successful operations"""
        context = context or {}
        self.logger.info(f"Successfully completed {operation}", extra=context)


def handle_service_errors(operation: str):
    """Decorator for handling async service method errors"""

    def decorator(func):
        @wraps(func)
        async def wrapper(self, *args, **kwargs):
            error_handler = getattr(self, "_error_handler", None)
            if not error_handler:
                error_handler = ErrorHandler(self.__class__.__name__)

            try:
                result = await func(self, *args, **kwargs)
                error_handler.log_success(operation, {"method": func.__name__})
                return result
            except HTTPException:
                # Business logic exceptions pass through untouched
                raise
            except SQLAlchemyError as e:
                context = {
                    "method": func.__name__,
                    "function_kwargs": str(kwargs)[:100],
                }
                error_handler.handle_database_error(e, operation, context)
            except Exception as e:
                context = {
                    "method": func.__name__,
                    "function_kwargs": str(kwargs)[:100],
                }
                error_handler.handle_general_error(e, operation, context)

        return wrapper

    return decorator
