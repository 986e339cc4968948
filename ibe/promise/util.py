# -*- coding: utf-8 -*-

_PROMISE_METHODS = ('done', 'fail', 'always', 'then')


def is_promise(value):
    """Check if an object can be followed like a Promise.

    The check is done on capabilities, not on the type: any object exposing
    callable `done()`, `fail()`, `always()` and `then()` methods is accepted.
    Objects with only a `then()` method (like the "thenables" of other
    libraries) are not considered as promises, and are treated as plain
    values.

    Returns:
        boolean: True if the value has all the promise methods.
    """
    return all(callable(getattr(value, name, None))
               for name in _PROMISE_METHODS)


class _EndOfSequence(object):
    """Type of the END sentinel. Only one instance exists."""

    def __repr__(self):
        return 'END'

    def __bool__(self):
        return False


END = _EndOfSequence()


def is_end(value):
    """Check if a value is the end-of-sequence sentinel.

    Iterator step functions resolve their promise with `END` to signal there
    is no more value. `None` is a regular value.
    """
    return value is END
