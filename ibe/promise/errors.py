# -*- coding: utf-8 -*-


class PromiseError(Exception):
    """Base class for all errors raised by the promise module."""
    pass


class InvalidStateError(PromiseError):
    """A Deferred has been used in a state that doesn't allow the operation.

    It's raised when settling an already settled Deferred, or when reading
    the result (or the error) of a Deferred that is not resolved (or not
    rejected). It's always a programmer error.
    """
    pass


class AggregateError(PromiseError):
    """At least one of the promises passed to `when()` has been rejected."""

    def __init__(self, message='when: one or more promises were rejected'):
        super(AggregateError, self).__init__(message)


class PromiseRejection(PromiseError):
    """Wrap a rejection reason which is not an exception, so it can be raised.

    Attributes:
        reason: the original rejection payload.
    """

    def __init__(self, reason):
        super(PromiseRejection, self).__init__(reason)
        self.reason = reason

    def __str__(self):
        return '%s: %r' % (self.__class__.__name__, self.reason)
