# -*- coding: utf-8 -*-
"""This module defines all errors which can occur in the http module.

requests exceptions can be converted to ibe.http errors using the
``handler`` decorator.

IBE errors have a human-readable message, ready to be displayed.
They are also more verbose when displayed using 'repr()`.
"""

import requests.exceptions


class NetworkError(Exception):
    """Base class for ibe.http errors.

    Attributes:
        message (str): Human readable message, describing the error.
        reason (Exception): internal exception which've produced this error. It
            exposes the inner mechanisms of the http module, and should not
            be used outside of the http module. Can be None.
    """

    def __init__(self, reason=None, message=None, msg_args=None):
        """
        Args:
            reason (Exception, optional): base error
            message (str, optional): User-friendly message.
            msg_args (any, optional): Optional arguments used when formatting
                the message with the '%' operator.
        """
        self.reason = reason
        self._message = message or "A network error has occurred."
        self._msg_args = msg_args
        Exception.__init__(self)

    @property
    def message(self):
        if self._msg_args is not None:
            return self._message % self._msg_args
        return self._message

    def __repr__(self):
        return '%s("%s")' % (self.__class__.__name__, self.message)

    def __str__(self):
        return self.message


class ConnectionError(NetworkError):
    def __init__(self, error):
        NetworkError.__init__(self, error,
                              "Unable to connect to the IBE server.")


class TimeoutError(NetworkError):
    def __init__(self, error):
        NetworkError.__init__(self, error,
                              "The server did not respond on time.")


class ProxyError(NetworkError):
    def __init__(self, error, message=None):
        if not message:
            message = 'Proxy error'
        NetworkError.__init__(self, error, message)


class HTTPError(NetworkError):
    """Base class for HTTP errors.

    The class can be displayed for debug, using ``repr(error)``.

    Attributes:
        code (int): HTTP status code
        status_text (str): HTTP status text
        request (str): representation of the request.
        response (dict or text): If the response content was in json, the
            corresponding dict, else the content as text.
        err_message (str): If the response is a standard IBE error, the
            content of its "ErrorMessage" field.
    """

    def __init__(self, error, message=None, msg_args=None):
        """
        Args:
            error (requests.exceptions.HTTPError): base error.
        """
        if not message:
            message = ("The server has returned an HTTP error: "
                       "%(code)s %(reason)s")
            msg_args = {"code": error.response.status_code,
                        "reason": error.response.reason}

        NetworkError.__init__(self, error, message, msg_args)

        self.code = error.response.status_code
        self.status_text = error.response.reason
        self.request = '%s %s' % (error.request.method, error.request.url)
        self.err_message = None

        try:
            self.response = error.response.json()
        except ValueError:
            self.response = error.response.text
        else:
            if isinstance(self.response, dict):
                self.err_message = self.response.get('ErrorMessage')

    def __repr__(self):
        if self.err_message:
            response = '\tResponse:\n\t\tErrorMessage: "%s"' % self.err_message
        else:
            response = '\tResponse: %s' % self.response

        return '\n'.join(("HTTP Error: %s %s" % (self.code, self.status_text),
                          "\tRequest: %s" % self.request,
                          response))


class HTTPBadRequestError(HTTPError):
    def __init__(self, error):
        message = ("The HTTP request is invalid. This is a bug, "
                   "either in the client or in the server.")
        HTTPError.__init__(self, error, message)


class HTTPUnauthorizedError(HTTPError):
    def __init__(self, error):
        message = "Authentication is required, or the token has expired."
        HTTPError.__init__(self, error, message)


class HTTPForbiddenError(HTTPError):
    def __init__(self, error):
        message = ("You don't have the permission to do this "
                   "operation.")
        HTTPError.__init__(self, error, message)


class HTTPNotFoundError(HTTPError):
    def __init__(self, error):
        message = "The element you're looking for has not been found."
        HTTPError.__init__(self, error, message)


class HTTPEntityTooLargeError(HTTPError):
    def __init__(self, error):
        message = "The request body is too large for the server."
        HTTPError.__init__(self, error, message)


class HTTPInternalServerError(HTTPError):
    def __init__(self, error):
        message = "The IBE server has encountered an unexpected error."
        HTTPError.__init__(self, error, message)


class HTTPNotImplementedError(HTTPError):
    def __init__(self, error):
        message = ("The IBE server does not understand or "
                   "does not support this function.")
        HTTPError.__init__(self, error, message)


class HTTPServiceUnavailableError(HTTPError):
    def __init__(self, error):
        message = ("The IBE server is temporarily unavailable. "
                   "Please try again later.")
        HTTPError.__init__(self, error, message)


_code2error = {
    400: HTTPBadRequestError,
    401: HTTPUnauthorizedError,
    403: HTTPForbiddenError,
    404: HTTPNotFoundError,
    413: HTTPEntityTooLargeError,
    500: HTTPInternalServerError,
    501: HTTPNotImplementedError,
    503: HTTPServiceUnavailableError
}


def handler(func):
    """Decorator who handles errors of the requests.

    Converts requests.exceptions.* into ibe.http errors.
    """

    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except requests.exceptions.ProxyError as error:
            raise ProxyError(error)
        except requests.exceptions.ConnectionError as error:
            raise ConnectionError(error)
        except requests.exceptions.Timeout as error:
            raise TimeoutError(error)
        except requests.exceptions.HTTPError as error:
            err_class = _code2error.get(error.response.status_code, HTTPError)
            raise err_class(error)
        except requests.exceptions.RequestException as error:
            raise NetworkError(error)

    return wrapper
