"""
Error reporting envelope.

Every recoverable failure is handed to the host's callback exactly once.
The callback's answer becomes a value: Recovered carries the operation's
failure sentinel, Propagate carries the original exception.
"""

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")

# (error) -> handled; may be sync or async
ErrorCallback = Callable[[BaseException], Union[bool, Awaitable[bool]]]


@dataclass(frozen=True)
class Recovered(Generic[T]):
    """Callback handled the error; operation returns its sentinel."""
    error: BaseException
    value: T

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Propagate:
    """Callback declined the error; the original failure re-raises."""
    error: BaseException

    def unwrap(self) -> Any:
        raise self.error


ErrorDecision = Union[Recovered[T], Propagate]


class ErrorReporter:
    """Routes failures through the host callback."""

    def __init__(self, on_error: ErrorCallback):
        self._on_error = on_error

    async def report(self, operation: str, error: BaseException, sentinel: T) -> ErrorDecision:
        """
        Report a failure and decide what the operation does next.

        Args:
            operation: Name of the failing operation (for logs)
            error: The original exception
            sentinel: Value returned if the callback handles the error

        Returns:
            Recovered(sentinel) or Propagate(error)
        """
        logger.warning(f"Session operation {operation} failed: {error!r}")

        handled = self._on_error(error)
        if inspect.isawaitable(handled):
            handled = await handled

        if handled:
            logger.debug(f"Error in {operation} handled by callback")
            return Recovered(error=error, value=sentinel)
        return Propagate(error=error)
