# -*- coding: utf-8 -*-
"""Generic promises.

A producer creates a `Deferred`, hands out its `Promise`, and settles it
exactly once with `resolve()` or `reject()`. Consumers observe the Promise
with `done()`, `fail()`, `always()` and `then()`. Everything runs in the
caller's thread: callbacks are called synchronously when the Deferred is
settled.

Combinators build a Promise from several others: `when()` (fan-in),
`unfold()` (sequence built from a seed), and `each()` (sequential iteration
over an asynchronous `Iterator`).
"""

from .combinators import Step, unfold, when
from .decorators import wrap_promise
from .deferred import Deferred, defer, reject, resolve
from .errors import (AggregateError, InvalidStateError, PromiseError,
                     PromiseRejection)
from .iterator import Iterator, each, generator, iterator
from .promise import Promise, Status
from .reduce_coroutine import reduce_coroutine
from .util import END, is_end, is_promise

__all__ = ['AggregateError', 'Deferred', 'END', 'InvalidStateError',
           'Iterator', 'Promise', 'PromiseError', 'PromiseRejection',
           'Status', 'Step', 'defer', 'each', 'generator', 'is_end',
           'is_promise', 'iterator', 'reduce_coroutine', 'reject', 'resolve',
           'unfold', 'when', 'wrap_promise']
