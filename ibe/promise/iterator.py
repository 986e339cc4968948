# -*- coding: utf-8 -*-

from .deferred import Deferred
from .errors import InvalidStateError
from .promise import Status
from .util import is_end


class Iterator(object):
    """Asynchronous iterator, driven by a promise-returning step function.

    Each call to `advance()` calls the step function, and waits for the
    promise it returns. The step function resolves its promise with the
    `END` sentinel when the sequence is over.

    Attributes:
        current: last value produced. None before the first value.
    """

    def __init__(self, step):
        """
        Args:
            step (callable): takes no argument, and returns a
                Promise<value or END>.
        """
        self._step = step
        self.current = None

    def advance(self):
        """Request the next value.

        Returns:
            Promise<bool>: True if a new value is available in `current`;
                False if the sequence is over.
        """
        def store_value(value):
            if is_end(value):
                return False
            self.current = value
            return True

        return self._step().then(store_value)


def iterator(step):
    """Create an Iterator over a step function."""
    return Iterator(step)


def generator(factory):
    """Create an iterator factory.

    Args:
        factory (callable): takes no argument, and returns a new step
            function each time it's called.
    Returns:
        callable: takes no argument, and returns a new independent Iterator
            each time it's called.
    """
    return lambda: iterator(factory())


def each(generator_factory, f):
    """Call `f` on each element of a sequence, one after the other.

    A new iterator is created from the generator factory, then advanced until
    the end of the sequence. An element is requested only when the previous
    `advance()` is settled and `f` has been called.

    Args:
        generator_factory (callable): returns a new Iterator (see
            `generator()`).
        f (callable): called with each element.
    Returns:
        Promise<None>: resolved at the end of the sequence. Rejected as soon
            as an `advance()` is rejected (or if `f` raises an exception); in
            this case the iteration is stopped.
    """
    fin = Deferred(_name='EACH')
    _each_core(fin, generator_factory(), f)
    return fin.promise


def _each_core(fin, it, f):
    # Synchronously settled steps are consumed in this loop. The function
    # returns as soon as it has to wait for a pending step.
    while True:
        try:
            advanced = it.advance()
        except InvalidStateError:
            raise
        except Exception as error:
            fin.reject(error)
            return

        if advanced.status == Status.UNFULFILLED:
            def on_advanced(has_value):
                if _call_element(fin, it, f, has_value):
                    _each_core(fin, it, f)

            advanced.done(on_advanced).fail(fin.reject)
            return

        if advanced.status == Status.REJECTED:
            fin.reject(advanced.error)
            return

        if not _call_element(fin, it, f, advanced.result):
            return


def _call_element(fin, it, f, has_value):
    """Process the result of one `advance()`.

    Returns:
        bool: True if the iteration must continue.
    """
    if not has_value:
        fin.resolve(None)
        return False
    try:
        f(it.current)
    except InvalidStateError:
        raise
    except Exception as error:
        fin.reject(error)
        return False
    return True
