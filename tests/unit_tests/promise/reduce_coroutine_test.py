# -*- coding: utf-8 -*-

import pytest
from foreign_promise import ForeignPromise

from ibe import promise


class Err(Exception):
    pass


class TestReduceCoroutine(object):

    def test_reduce_two_promises_coroutine(self):
        """Use @reduce_coroutine on a generator of two fulfilled promises.

        The last promise yielded contains the "result" value.
        """

        @promise.reduce_coroutine()
        def generator():
            first_value = yield promise.resolve(1)
            assert first_value
            yield promise.resolve(2)

        p = generator()
        assert isinstance(p, promise.Promise)
        assert p.result == 2

    def test_reduce_direct_value_coroutine(self):
        """The first non-promise value yielded is the "return" value."""

        @promise.reduce_coroutine()
        def generator():
            first_value = yield promise.resolve(1)
            assert first_value
            second_value = yield promise.resolve(2)
            assert second_value == 2
            yield 3

        p = generator()
        assert p.result == 3

    def test_reduce_pending_promises(self):
        """The coroutine is resumed when the yielded promise resolves."""
        df1 = promise.Deferred()
        df2 = promise.Deferred()

        @promise.reduce_coroutine()
        def generator():
            a = yield df1.promise
            b = yield df2.promise
            yield a + b

        p = generator()
        assert p.is_pending
        df1.resolve(2)
        assert p.is_pending
        df2.resolve(3)
        assert p.result == 5

    def test_reduce_coroutine_with_failed_promise(self):
        """If not caught, the error is transmitted to the resulting Promise."""

        @promise.reduce_coroutine()
        def generator():
            first_value = yield promise.resolve(1)
            assert first_value
            yield promise.reject(Err())

        p = generator()
        assert isinstance(p.error, Err)

    def test_reduce_coroutine_with_non_exception_reason(self):
        """A rejection reason who isn't an exception is raised wrapped."""
        caught = []

        @promise.reduce_coroutine()
        def generator():
            try:
                yield promise.reject('bad reason')
            except promise.PromiseRejection as error:
                caught.append(error.reason)
                yield 'recovered'

        p = generator()
        assert p.result == 'recovered'
        assert caught == ['bad reason']

    def test_reduce_coroutine_uncaught_non_exception_reason(self):
        @promise.reduce_coroutine()
        def generator():
            yield promise.reject('bad reason')

        p = generator()
        assert p.error == 'bad reason'

    def test_reduce_coroutine_raising_exception(self):
        @promise.reduce_coroutine()
        def generator():
            first_value = yield promise.resolve(1)
            assert first_value
            raise Err()

        p = generator()
        assert isinstance(p.error, Err)

    def test_reduce_one_step_coroutine(self):
        @promise.reduce_coroutine()
        def generator():
            yield 'direct_result'

        p = generator()
        assert p.result == 'direct_result'

    def test_reduce_coroutine_raising_exception_at_initialization(self):
        """Use @reduce_coroutine on a generator raising error before any yield.

        A typical example is the coroutine raising due to missing call
        preconditions.
        """
        @promise.reduce_coroutine()
        def generator():
            raise Err()
            yield None

        p = generator()
        assert isinstance(p.error, Err)

    def test_reduce_coroutine_catching_exception(self):
        """The coroutine uses a try/except block on a yielded Promise."""

        @promise.reduce_coroutine()
        def generator():
            try:
                yield promise.reject(Err())
            except Err:
                yield 'fixed_result'
            yield 'never_yielded'

        p = generator()
        assert p.result == 'fixed_result'

    def test_reduce_coroutine_catching_exception_then_returning(self):
        @promise.reduce_coroutine()
        def generator():
            try:
                yield promise.reject(Err())
            except Err:
                return 'returned'

        p = generator()
        assert p.result == 'returned'

    def test_reduce_coroutine_close_generator(self):
        """The generator is closed once it has yielded the final result.

        Closing the generator allows it to clean its resources.
        """
        is_generator_closed = []

        @promise.reduce_coroutine()
        def generator():
            try:
                yield 'RESULT'
            except GeneratorExit:
                is_generator_closed.append(True)

        p = generator()
        assert p.result == 'RESULT'
        assert is_generator_closed

    def test_coroutine_empty_coroutine(self):
        """Use a coroutine who never yield (it returns directly)."""

        @promise.reduce_coroutine()
        def generator():
            return
            yield

        p = generator()
        assert p.result is None

    @pytest.fixture
    def replace_safeguard(self, monkeypatch):
        context = {'flag': False}

        def raise_flag(*args):
            context['flag'] = True
        monkeypatch.setattr(promise.Promise, 'safeguard', raise_flag)
        return context

    def test_use_safeguard(self, replace_safeguard):
        @promise.reduce_coroutine(safeguard=True)
        def generator():
            raise Err()
            yield None

        p = generator()
        assert isinstance(p.error, Err)
        assert replace_safeguard['flag']

    def test_yield_foreign_promise(self):
        """A promise of another library is waited for like a Promise."""
        foreign = ForeignPromise()

        @promise.reduce_coroutine()
        def generator():
            try:
                yield foreign
            except Err:
                yield 'caught'

        p = generator()
        assert p.is_pending
        foreign.reject(Err())
        assert p.result == 'caught'
