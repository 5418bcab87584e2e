"""Assertion failures raised by action result checks."""


class ActionResultAssertionError(AssertionError):
    """Base class for every failure reported about an action result.

    Attributes:
        message: The fully formatted, human-readable failure message.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CapabilityMismatchError(ActionResultAssertionError):
    """The requested field belongs to a result variant the handle does not hold."""


class ValueMismatchError(ActionResultAssertionError):
    """The expected value differs from the actual one."""


class PredicateFailureError(ActionResultAssertionError):
    """A caller supplied predicate rejected the actual value."""
