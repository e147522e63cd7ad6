"""
Decorators for pb-async

This module provides decorators to reduce logging boilerplate in client operations.
"""

import inspect
from functools import wraps
from typing import List, Optional

from pb_async.utils.logging import set_request_context, get_contextual_logger


def logged_operation(
    operation_name: Optional[str] = None,
    log_params: bool = True,
    exclude_params: Optional[List[str]] = None
):
    """
    Decorator for client operations that adds comprehensive logging.

    This decorator automatically handles:
    - Setting request context with the operation name and parameters
    - Starting/ending operation timing
    - Logging operation start/completion/failure
    - Preserving function metadata and signature

    Args:
        operation_name: Override operation name (defaults to function name)
        log_params: Whether to log call parameters (default: True)
        exclude_params: List of parameter names to exclude from logging

    Example:
        @logged_operation("upload", exclude_params=["data"])
        async def upload(self, file_name: str, file_type: str, data: bytes):
            ...

    Requirements:
        - Function must be an async method with a (self, ...) signature

    Side Effects:
        - Sets request context for all subsequent log entries
        - Creates trace_id for request correlation
        - Re-raises all exceptions after logging
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(self, *args, **kwargs):
            op_name = operation_name or func.__name__

            context = {}
            if log_params:
                sig = inspect.signature(func)
                param_names = list(sig.parameters.keys())[1:]  # Skip self
                exclude_set = set(exclude_params or [])

                for name, value in zip(param_names, args):
                    if name not in exclude_set:
                        context[f"param_{name}"] = repr(value)
                for name, value in kwargs.items():
                    if name not in exclude_set:
                        context[f"param_{name}"] = repr(value)

            set_request_context(operation=op_name, **context)

            # Fresh logger per call, operations may run concurrently
            logger = get_contextual_logger(f'{self.__class__.__module__}.{self.__class__.__name__}')
            trace_id = logger.start_operation(op_name)

            try:
                logger.info(f"{op_name} started")
                result = await func(self, *args, **kwargs)
                logger.info(f"{op_name} completed successfully")
                logger.end_operation(trace_id, "completed")
                return result

            except Exception as e:
                logger.error(f"{op_name} failed", error=e)
                logger.end_operation(trace_id, "failed")
                raise

        wrapper.__signature__ = inspect.signature(func)  # type: ignore
        return wrapper
    return decorator
