# -*- coding: utf-8 -*-

from ibe.promise import END, Deferred, Iterator, each, generator, is_end, \
    iterator, reject, resolve


class Err(Exception):
    pass


def list_factory(values):
    """Generator factory producing the values of a list, synchronously."""

    def factory():
        remaining = list(values)

        def step():
            if not remaining:
                return resolve(END)
            return resolve(remaining.pop(0))

        return step

    return generator(factory)


class TestIterator(object):

    def test_advance(self):
        it = iterator(lambda: resolve('value'))
        assert isinstance(it, Iterator)
        assert it.current is None

        p = it.advance()
        assert p.result is True
        assert it.current == 'value'

    def test_advance_end_of_sequence(self):
        it = iterator(lambda: resolve(END))
        assert it.advance().result is False
        assert it.current is None

    def test_none_is_a_value(self):
        it = iterator(lambda: resolve(None))
        assert it.advance().result is True

    def test_advance_rejected(self):
        error = Err()
        it = iterator(lambda: reject(error))
        assert it.advance().error is error

    def test_end_sentinel(self):
        assert is_end(END)
        assert not is_end(None)
        assert not END
        assert repr(END) == 'END'

    def test_generator_creates_independent_iterators(self):
        gen = list_factory([1, 2])
        it1 = gen()
        it2 = gen()

        it1.advance()
        it1.advance()
        it2.advance()
        assert it1.current == 2
        assert it2.current == 1


class TestEach(object):

    def test_each_synchronous_sequence(self):
        elements = []
        p = each(list_factory(['a', 'b', 'c']), elements.append)
        assert p.is_resolved
        assert p.result is None
        assert elements == ['a', 'b', 'c']

    def test_each_empty_sequence(self):
        elements = []
        p = each(list_factory([]), elements.append)
        assert p.is_resolved
        assert elements == []

    def test_each_long_sequence(self):
        """A long synchronous sequence doesn't exhaust the stack."""
        count = [0]

        def inc(value):
            count[0] += 1

        p = each(list_factory(range(5000)), inc)
        assert p.is_resolved
        assert count[0] == 5000

    def test_each_asynchronous_sequence(self):
        deferreds = []

        def factory():
            def step():
                df = Deferred()
                deferreds.append(df)
                return df.promise
            return step

        elements = []
        p = each(generator(factory), elements.append)
        assert len(deferreds) == 1

        deferreds[0].resolve(1)
        assert elements == [1]
        assert len(deferreds) == 2

        deferreds[1].resolve(2)
        deferreds[2].resolve(END)
        assert elements == [1, 2]
        assert p.is_resolved

    def test_each_rejected_advance(self):
        """The iteration stops on the first rejected advance()."""
        error = Err()
        calls = [0]

        def factory():
            def step():
                calls[0] += 1
                if calls[0] == 3:
                    return reject(error)
                return resolve(calls[0])
            return step

        elements = []
        p = each(generator(factory), elements.append)
        assert elements == [1, 2]
        assert p.error is error
        assert calls[0] == 3

    def test_each_function_raising_error(self):
        def f(value):
            if value == 2:
                raise Err()

        p = each(list_factory([1, 2, 3]), f)
        assert isinstance(p.error, Err)

    def test_each_step_raising_error(self):
        def factory():
            def step():
                raise Err()
            return step

        p = each(generator(factory), lambda v: None)
        assert isinstance(p.error, Err)
