"""
Performance utilities for service operations.
"""
import time
from functools import wraps

from src.shared.utils import get_logger

logger = get_logger(__name__)

SLOW_OPERATION_SECONDS = 1.0


def async_timer(operation_name: str):
    """Decorator to log operation timing for performance monitoring"""
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                result = await func(*args, **kwargs)
                execution_time = time.time() - start_time
                if execution_time > SLOW_OPERATION_SECONDS:
                    logger.warning(f"Slow operation {operation_name}: {execution_time:.2f}s")
                else:
                    logger.debug(f"Operation {operation_name}: {execution_time:.3f}s")
                return result
            except Exception as e:
                execution_time = time.time() - start_time
                logger.error(f"Failed operation {operation_name} after {execution_time:.3f}s: {str(e)}")
                raise
        return wrapper
    return decorator
