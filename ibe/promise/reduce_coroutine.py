# -*- coding: utf-8 -*-

from functools import wraps

from .deferred import Deferred
from .errors import PromiseRejection
from .util import is_promise


def reduce_coroutine(safeguard=False):
    """Decorator who converts a coroutine of promises into a single promise.

    The greatest interest is the ability to write a function in an
    synchronous-like style, using many asynchronous Promises.
    Whatever is the number of Promises or async calls used, the result will
    always be an unique Promise wrapping the whole process.

    Each Promise yielded is waited for. Its result is sent back into the
    generator, or its error is raised at the `yield` expression. A rejection
    reason which is not an exception is raised wrapped in a
    `PromiseRejection`.

    The first non-Promise value yielded is the result of the coroutine. If the
    generator ends after a Promise, the result of this last Promise is used.

    Args:
        safeguard (boolean): if true, use `Promise.safeguard()` on the
            resulting promise.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            """
            Args:
                *args
                **kwargs
            Returns:
                Promise<*>
            """
            df = Deferred(_name='COROUTINE %s' % func.__name__)
            if safeguard:
                df.promise.safeguard()

            try:
                # Create generator; Initialization phase
                gen = func(*args, **kwargs)
            except Exception as error:
                df.reject(error)
                return df.promise

            def _call_next_or_set_result(value):
                if is_promise(value):
                    value.done(iter_next)
                    value.fail(iter_error)
                else:
                    gen.close()
                    df.resolve(value)

            def iter_next(yielded_value):
                try:
                    next_value = gen.send(yielded_value)
                except StopIteration:
                    df.resolve(yielded_value)
                    return
                except Exception as error:
                    df.reject(error)
                    return
                _call_next_or_set_result(next_value)

            def iter_error(reason):
                if isinstance(reason, BaseException):
                    exc = reason
                else:
                    exc = PromiseRejection(reason)
                try:
                    next_value = gen.throw(exc)
                except StopIteration as stop:
                    # The generator has caught the error, then ended.
                    df.resolve(stop.value)
                    return
                except Exception as error:
                    df.reject(reason if error is exc else error)
                    return
                _call_next_or_set_result(next_value)

            # Start and resolve loop.
            try:
                first_value = next(gen)
            except StopIteration:
                df.resolve(None)
                return df.promise
            except Exception as error:
                df.reject(error)
                return df.promise
            _call_next_or_set_result(first_value)

            return df.promise

        return wrapper
    return decorator
