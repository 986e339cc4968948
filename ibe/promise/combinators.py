# -*- coding: utf-8 -*-

import collections
from functools import partial

from .deferred import Deferred
from .errors import AggregateError, InvalidStateError
from .promise import Status


Step = collections.namedtuple('Step', ['promise', 'next'])
Step.__doc__ = """One element produced by an `unfold()` unspool function.

Attributes:
    promise (Promise): asynchronous value of the element.
    next: seed passed to the next call of the unspool function. None if this
        element is the last one.
"""
Step.__new__.__defaults__ = (None,)


def when(*promises):
    """Create a Promise who waits for a list of promises to be all resolved.

    The resulting Promise resolves when all of the promises in the list are
    resolved, with a list of all the resulting values, keeping the order of
    the arguments (not the order of completion).

    As soon as one promise is rejected, the resulting promise is rejected
    with an `AggregateError`; the original error is not transmitted. Other
    promises are not stopped: their results are ignored.

    If no promises are provided, the resulting promise is resolved
    immediately with an empty list.

    Args:
        *promises (Promise)
    Returns:
        Promise<list>
    """
    all_done = Deferred(_name='WHEN')
    if not promises:
        return all_done.resolve([]).promise

    results = [None] * len(promises)
    resolved = [0]

    def resolve_one_promise(index, value):
        results[index] = value
        resolved[0] += 1
        if (resolved[0] == len(promises) and
                all_done.status == Status.UNFULFILLED):
            all_done.resolve(results)

    def reject_one_promise(_error):
        if all_done.status == Status.UNFULFILLED:
            all_done.reject(AggregateError())

    for index, p in enumerate(promises):
        p.done(partial(resolve_one_promise, index))
        p.fail(reject_one_promise)

    return all_done.promise


def unfold(unspool, seed):
    """Build a list asynchronously, by expanding a seed value step by step.

    `unspool(seed)` is called, and returns either None (there is no more
    element) or a `Step(promise, next)`. The value of `promise` is appended to
    the list, then `unspool(next)` is called, and so on. A step without next
    seed is the last one.

    Elements whose promise is already resolved are consumed immediately, in a
    loop. On the first pending promise, the process continues when this
    promise resolves.

    Note there is no timeout: if one of the promises is never settled, the
    resulting promise is never settled either.

    Args:
        unspool (callable): takes a seed, returns a Step or None.
        seed: first value passed to `unspool`.
    Returns:
        Promise<list>: resolved with all the values, in the order of the
            seeds. Rejected with the same error as soon as one of the
            element's promises is rejected, or with the exception raised by
            `unspool`.
    """
    deferred = Deferred(_name='UNFOLD')
    _unfold_core([], deferred, unspool, seed)
    return deferred.promise


def _unfold_core(elements, deferred, unspool, seed):
    try:
        step = unspool(seed)
        while (step is not None and step.next is not None and
               getattr(step.promise, 'status', None) == Status.RESOLVED):
            elements.append(step.promise.result)
            step = unspool(step.next)
    except InvalidStateError:
        raise
    except Exception as error:
        deferred.reject(error)
        return

    if step is None:
        deferred.resolve(elements)
        return

    def on_resolved(value):
        elements.append(value)
        if step.next is None:
            deferred.resolve(elements)
        else:
            _unfold_core(elements, deferred, unspool, step.next)

    step.promise.done(on_resolved)
    step.promise.fail(deferred.reject)
