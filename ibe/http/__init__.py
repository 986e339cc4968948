# -*- coding: utf-8 -*-
"""HTTP module

This module builds and executes the HTTP requests sent to the IBE server.

A request is described by an `HttpRequest` (method, `Uri`, headers, body),
then executed by a `Transport`, which returns a Promise of the decoded
response. `RequestsTransport` uses the `requests` library;
`RecordingTransport` keeps the requests for inspection, without network.

In case of error, the promise is rejected with a `NetworkError`, whose message
is human-readable.

Examples:

    >>> with create_transport('http://localhost:8080') as transport:
    ...     request = HttpRequest(Uri('/api/Folders/'))
    ...     transport.exec(request).done(print)
"""

from . import errors  # noqa
from .request import ContentType, HttpHeader, HttpMethod, HttpRequest, \
    QueryParameters, Uri
from .transport import RecordingTransport, RequestsTransport, Transport, \
    create_transport

__all__ = ['ContentType', 'HttpHeader', 'HttpMethod', 'HttpRequest',
           'QueryParameters', 'RecordingTransport', 'RequestsTransport',
           'Transport', 'Uri', 'create_transport', 'errors']
