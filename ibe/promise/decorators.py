# -*- coding: utf-8 -*-

from functools import wraps

from .deferred import reject, resolve
from .util import is_promise


def wrap_promise(f):
    """Decorator who converts the result in a Promise object.

    If the function decorated returns a Promise, it's transmitted as is.
    Else, a new Promise is created with the returned value as result. If the
    function raises an exception, the Promise returned is rejected with it.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            value = f(*args, **kwargs)
        except Exception as error:
            return reject(error)
        if is_promise(value):
            return value
        return resolve(value)

    return wrapper
