"""
Tagged results for vector operations.

attempt() runs an operation and reports a failure as an ErrorKind instead
of an exception, so callers can branch on the kind:

    result = attempt(a.normalize)
    if result.error is ErrorKind.ZERO_VECTOR:
        ...
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from vectors.errors import ErrorKind, VectorError, error_for


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    """Result of one attempted operation: a value, or an error kind and message."""
    value: Any = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the value, or raise the exception matching the error kind."""
        if self.error is not None:
            raise error_for(self.error)(self.message)
        return self.value


def attempt(operation: Callable[..., Any], *args, **kwargs) -> Outcome:
    """
    Call operation(*args, **kwargs) and wrap the result in an Outcome.

    Only VectorError failures are captured; anything else propagates.
    """
    try:
        return Outcome(value=operation(*args, **kwargs))
    except VectorError as e:
        logger.debug(f"{getattr(operation, '__name__', operation)} failed: {e.kind.value}: {e}")
        return Outcome(error=e.kind, message=str(e))
