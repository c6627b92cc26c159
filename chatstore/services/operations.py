"""Decorator shared by the query functions.

Each query function wraps one use case. On failure it logs which operation
failed, with the traceback, and re-raises the original exception. The
operation name is exposed to log formatters through ``operation_var``
while the call runs.
"""

import logging
from functools import wraps

from ..core.logging_config import operation_var


def query_operation(description: str):
    """Log ``Failed to <description>`` and re-raise when the wrapped call fails.

    Example
    -------
    >>> @query_operation("get chat by id")
    ... def get_chat_by_id(db, id):
    ...     return db.chats.find_by_id(id)
    """
    def decorator(func):
        logger = logging.getLogger(func.__module__)

        @wraps(func)
        def wrap_func(*args, **kwargs):
            token = operation_var.set(func.__name__)
            try:
                return func(*args, **kwargs)
            except Exception:
                logger.exception(f"Failed to {description}", extra={"query": func.__name__})
                raise
            finally:
                operation_var.reset(token)

        return wrap_func

    return decorator
