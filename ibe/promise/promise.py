# -*- coding: utf-8 -*-

import logging

_logger = logging.getLogger(__name__)


class Status(object):
    """The status of a Deferred (and of its Promise).

    Initially a Deferred is UNFULFILLED. It may change once, to RESOLVED or
    to REJECTED. After that, its status can't change anymore.
    """

    UNFULFILLED = 'unfulfilled'
    RESOLVED = 'resolved'
    REJECTED = 'rejected'


class Promise(object):
    """It represents an operation expected to be completed in the future.

    A Promise is the "consumer" side of an asynchronous value: the read-only
    view over a `Deferred`. It allows to set callbacks who will be called as
    soon as the value is known, but it can't settle the value itself.

    A Promise has no state of its own. Every read and every callback
    registration is delegated to its Deferred.
    """

    def __init__(self, deferred):
        self._deferred = deferred

    @property
    def status(self):
        return self._deferred.status

    @property
    def result(self):
        """Value of the resolved Promise.

        Raises:
            InvalidStateError: if the Promise is not resolved.
        """
        return self._deferred.result

    @property
    def error(self):
        """Rejection reason of the rejected Promise.

        Raises:
            InvalidStateError: if the Promise is not rejected.
        """
        return self._deferred.error

    @property
    def is_pending(self):
        return self._deferred.status == Status.UNFULFILLED

    @property
    def is_resolved(self):
        return self._deferred.status == Status.RESOLVED

    @property
    def is_rejected(self):
        return self._deferred.status == Status.REJECTED

    def done(self, on_resolved):
        """Register a callback called with the result on resolution.

        If the Promise is already resolved, the callback is called
        immediately, before `done()` returns.

        Returns:
            Promise: self, to chain the calls.
        """
        self._deferred.done(on_resolved)
        return self

    def fail(self, on_rejected):
        """Register a callback called with the error on rejection.

        Returns:
            Promise: self, to chain the calls.
        """
        self._deferred.fail(on_rejected)
        return self

    def always(self, on_settled):
        """Register a callback called when the Promise is settled.

        The callback receives two arguments: `(result, None)` if the Promise
        is resolved, `(None, error)` if it's rejected.

        Returns:
            Promise: self, to chain the calls.
        """
        self._deferred.always(on_settled)
        return self

    def then(self, on_resolved):
        """Create a new promise from a callback called on resolution.

        See `Deferred.then()`.

        Args:
            on_resolved (callable): receives the result. Can return a value,
                or another Promise.
        Returns:
            Promise<*>: new promise depending of self.
        """
        return self._deferred.then(on_resolved)

    def safeguard(self):
        """Catch the rejection and log it with the most details possible.

        This method is aimed to protect the program from unnoticed rejected
        Promises. If no error handler has been set (via fail() or always()),
        errors are silently ignored.
        Calling `safeguard()` after all chains are set will catch these
        errors, and log them as ERROR.

        Returns:
            Promise: self, to chain the calls.
        """
        def guard(error):
            if isinstance(error, BaseException):
                _logger.error("[SAFEGUARD] %r", self,
                              exc_info=(type(error), error,
                                        error.__traceback__))
            else:
                _logger.error("[SAFEGUARD] %r rejected with: %r", self, error)

        return self.fail(guard)

    def __repr__(self):
        return 'Promise(%s)' % self._deferred.describe()
