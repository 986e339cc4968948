# -*- coding: utf-8 -*-

import logging

from .errors import InvalidStateError
from .promise import Promise, Status
from .util import is_promise

_logger = logging.getLogger(__name__)


class Deferred(object):
    """Single-assignment container of a future value.

    A Deferred is the "creator" side of an async task, whereas a Promise
    represents the asynchronous value from the "consumer" side. The producer
    keeps the Deferred, hands out `deferred.promise`, and eventually calls
    `resolve()` or `reject()`, exactly once.

    All callbacks are executed synchronously, in the call stack of the
    `resolve()` or `reject()` call (or of the registration, if the Deferred is
    already settled). There is no thread safety: a Deferred must be used from
    a single thread.

    Attributes:
        promise (Promise): the Promise associated to the Deferred.
    """

    def __init__(self, _name=None, _previous=None):
        """
        Args:
            _name (str, optional): if set, name used when converted to text.
            _previous (Deferred, optional): Deferred this one is chained to.
                Only used when converted to text.
        """
        # Tagged state: (status, result or error). Only replaced by _settle().
        self._state = (Status.UNFULFILLED, None)
        self._name = _name or '???'
        self._previous = _previous

        self._callbacks = []
        self._errbacks = []

        self.promise = Promise(self)

    @property
    def status(self):
        return self._state[0]

    @property
    def result(self):
        status, value = self._state
        if status != Status.RESOLVED:
            raise InvalidStateError('Promise: result not available')
        return value

    @property
    def error(self):
        status, value = self._state
        if status != Status.REJECTED:
            raise InvalidStateError('Promise: rejection reason not available')
        return value

    def _settle(self, status, value):
        """Do the unique transition from UNFULFILLED to a terminal status.

        Returns:
            list of callable: the observers to notify. Both observer lists are
                detached from the Deferred.
        """
        if self._state[0] != Status.UNFULFILLED:
            verb = 'resolve' if status == Status.RESOLVED else 'reject'
            raise InvalidStateError('tried to %s an already settled promise'
                                    ' %r' % (verb, self))
        self._state = (status, value)

        if status == Status.RESOLVED:
            observers = self._callbacks
        else:
            observers = self._errbacks

        # Free the references
        self._callbacks = None
        self._errbacks = None
        return observers

    def resolve(self, result=None):
        """Resolve the Deferred and call the registered `done` callbacks.

        Raises:
            InvalidStateError: if the Deferred is already settled.
        Returns:
            Deferred: self
        """
        for callback in self._settle(Status.RESOLVED, result):
            self._exec_callback(callback, result)
        return self

    def reject(self, error):
        """Reject the Deferred and call the registered `fail` callbacks.

        The error is usually an Exception, but any value is accepted and
        transmitted as is.

        Raises:
            InvalidStateError: if the Deferred is already settled.
        Returns:
            Deferred: self
        """
        for errback in self._settle(Status.REJECTED, error):
            self._exec_callback(errback, error, is_errback=True)
        return self

    def done(self, callback):
        status, value = self._state
        if status == Status.UNFULFILLED:
            self._callbacks.append(callback)
        elif status == Status.RESOLVED:
            self._exec_callback(callback, value)
        return self

    def fail(self, errback):
        status, value = self._state
        if status == Status.UNFULFILLED:
            self._errbacks.append(errback)
        elif status == Status.REJECTED:
            self._exec_callback(errback, value, is_errback=True)
        return self

    def always(self, callback):
        self.done(lambda result: callback(result, None))
        self.fail(lambda error: callback(None, error))
        return self

    def then(self, on_resolved):
        """Create a new promise from a callback called on resolution.

        When self is resolved, `on_resolved` is called with the result, and
        its return value defines the state of the returned Promise:
        - A Promise (see `is_promise()`): the returned Promise follows it, and
            will be resolved or rejected the same way.
        - Any other value: the returned Promise is resolved with it.
        If `on_resolved` raises an exception, the returned Promise is rejected
        with it.

        When self is rejected, `on_resolved` is never called and the returned
        Promise is rejected with the same error.

        Args:
            on_resolved (callable): receives the result of self.
        Returns:
            Promise<*>: new promise depending of self.
        """
        chained = Deferred(_name=getattr(on_resolved, '__name__', '???'),
                           _previous=self)

        def callback(result):
            try:
                new_result = on_resolved(result)
            except InvalidStateError:
                raise
            except Exception as error:
                chained.reject(error)
                return

            if is_promise(new_result):
                new_result.done(chained.resolve)
                new_result.fail(chained.reject)
            else:
                chained.resolve(new_result)

        self.done(callback)
        self.fail(chained.reject)
        return chained.promise

    @staticmethod
    def _exec_callback(callback, value, is_errback=False):
        try:
            callback(value)
        except InvalidStateError:
            raise
        except Exception:
            if is_errback:
                _logger.exception("Promise errback raise an exception!")
            else:
                _logger.exception("Promise callback raise an exception!")

    def describe(self):
        status = self._state[0]
        if status == Status.REJECTED:
            state = 'R'
        elif status == Status.RESOLVED:
            state = 'F'
        else:
            state = 'P'

        if self._previous:
            return '%s -> %s %s' % (self._previous.describe(), self._name,
                                    state)
        return '%s %s' % (self._name, state)

    def __repr__(self):
        return 'Deferred(%s)' % self.describe()


def defer(_name=None):
    """Returns a new Deferred that may be resolved or rejected."""
    return Deferred(_name=_name)


def resolve(value=None):
    """Create a promise already resolved with the selected value.

    Args:
        value: result of the promise. Unlike `then()`, a Promise passed as
            value is not followed: it becomes the result.
    Returns:
        Promise
    """
    return Deferred(_name='RESOLVE').resolve(value).promise


def reject(error):
    """Create a promise already rejected for the reason specified.

    Returns:
        Promise
    """
    return Deferred(_name='REJECT').reject(error).promise
