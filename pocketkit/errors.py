"""
Exception hierarchy shared by every pocketkit module.

**Conceptual**: Each failure kind gets its own class so callers can catch
exactly what they expect. Every class also inherits from the matching
built-in exception (ValueError, KeyError, TypeError, ...), so code that
already catches the built-in keeps working.

**Taxonomy**:
  - ValidationError: bad arguments (negative precision, chunk size < 1, ...).
    Programmer error, raised synchronously before any work starts.
  - DuplicateKeyError: object_map produced two entries with the same key.
  - TypeGuardError: assert_type found a value that fails its guard.
  - OperationError: a retried operation failed with something that is not
    an Exception; wraps it so observers always receive an Exception.
  - OperationTimeoutError: with_timeout gave up waiting.
  - PocketkitAssertionError: assert_that saw a false condition.

Nothing in pocketkit swallows these; they always reach the immediate caller.
"""

import asyncio


class PocketkitError(Exception):
    """
    Base exception for all pocketkit errors.

    Catch PocketkitError to handle every failure raised by this package, or a
    subclass for fine-grained handling.
    """
    pass


class ValidationError(PocketkitError, ValueError):
    """
    Raised when a helper receives arguments it cannot work with.

    **Recovery**: None. Fix the call site; retrying with the same arguments
    fails the same way.
    """
    pass


class DuplicateKeyError(PocketkitError, KeyError):
    """
    Raised when a key transform maps two entries onto the same output key.

    Attributes:
        key: The first output key seen more than once.
    """

    def __init__(self, key):
        self.key = key
        super().__init__(f"Duplicate keys detected in mapped object: {key!r}")

    def __str__(self) -> str:
        # KeyError.__str__ reprs the message; keep it readable
        return self.args[0]


class TypeGuardError(PocketkitError, TypeError):
    """Raised by assert_type when a value fails its guard."""
    pass


class OperationError(PocketkitError):
    """
    Uniform wrapper for a failure that is not an Exception instance.

    The original failure is kept on ``__cause__`` and as ``failure``.
    """

    def __init__(self, failure: BaseException):
        self.failure = failure
        super().__init__(str(failure) or type(failure).__name__)


class OperationTimeoutError(PocketkitError, TimeoutError):
    """Raised by with_timeout when the awaited operation runs too long."""
    pass


class PocketkitAssertionError(PocketkitError, AssertionError):
    """Raised by assert_that when its condition is false."""
    pass


# The interpreter's own control flow: never retried, wrapped or recorded
CONTROL_FLOW_EXCEPTIONS = (
    KeyboardInterrupt,
    SystemExit,
    GeneratorExit,
    asyncio.CancelledError,
)


def normalize_failure(failure: BaseException) -> Exception:
    """Return ``failure`` if it is an Exception, else wrap it in OperationError."""
    if isinstance(failure, Exception):
        return failure
    wrapped = OperationError(failure)
    wrapped.__cause__ = failure
    return wrapped
