"""
Utility decorators for ledger operations.
"""

import functools
import inspect
import time
import uuid
from collections.abc import Callable
from enum import Enum
from typing import Any, TypeVar

# Arguments worth carrying into the log record
_CONTEXT_PARAMS = ("position", "asset")

F = TypeVar("F", bound=Callable[..., Any])


def _describe(value: Any) -> str:
    return str(value.value) if isinstance(value, Enum) else str(value)


def _call_context(
    func: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]
) -> dict[str, Any]:
    bound = inspect.signature(func).bind(*args, **kwargs)
    bound.apply_defaults()
    context: dict[str, Any] = {"correlation_id": uuid.uuid4().hex[:8]}
    for name in _CONTEXT_PARAMS:
        value = bound.arguments.get(name)
        if value is not None:
            context[name] = _describe(value)
    return context


def _outcome_context(
    context: dict[str, Any], started: float, outcome: Any, failed: bool = False
) -> dict[str, Any]:
    result = {
        **context,
        "success": not failed,
        "execution_time_ms": round((time.perf_counter() - started) * 1000, 2),
    }
    if failed:
        result["error_type"] = type(outcome).__name__
        result["error_message"] = str(outcome)
    else:
        result["result_type"] = type(outcome).__name__
    return result


def log_ledger_operation(func: F) -> F:
    """Decorator to log ledger operations with correlation IDs.

    Emits a debug record on entry, then a success or error record carrying
    the same correlation id. Errors are re-raised unchanged.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        from loguru import logger

        name = func.__qualname__
        context = _call_context(func, args, kwargs)
        logger.debug(f"Ledger operation started: {name}", extra=context)
        started = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(
                f"Ledger operation failed: {name}",
                extra=_outcome_context(context, started, e, failed=True),
            )
            raise
        logger.success(
            f"Ledger operation completed: {name}", extra=_outcome_context(context, started, result)
        )
        return result

    return wrapper  # type: ignore
