# -*- coding: utf-8 -*-

import collections
from urllib.parse import quote, urlencode


class HttpMethod(object):
    GET = 'GET'
    POST = 'POST'
    PUT = 'PUT'
    DELETE = 'DELETE'


class ContentType(object):
    """How the body of a request is encoded, and its response decoded."""
    JSON = 'JSON'
    BINARY = 'BINARY'


class QueryParameters(collections.OrderedDict):
    """Parameters of the query part of an URL.

    Parameters keep their insertion order. Converted to str, they give the
    query string, with a leading '?', keys and values percent-encoded:

        >>> params = QueryParameters()
        >>> params = params.add('state', 'New York').add('limit', 10)
        >>> str(params)
        '?state=New+York&limit=10'
    """

    def add(self, key, value):
        """Add (or replace) a parameter.

        Returns:
            QueryParameters: self, to chain the calls.
        """
        self[key] = value
        return self

    def __str__(self):
        if not self:
            return ''
        return '?' + urlencode(list(self.items()))


class Uri(object):
    """URL of a request, built piece by piece.

    If no host is set, the URL is relative (path and query only) and the
    transport will prepend its base URL.

    Attributes:
        is_https (bool): use https scheme instead of http. Default to False.
        host (str): empty for a relative URL.
        port (int): 0 for a relative URL.
        path (list of str): segments of the path.
        query (QueryParameters)
    """

    def __init__(self, path=None):
        self.is_https = False
        self.host = ''
        self.port = 0
        self.path = []
        self.query = QueryParameters()

        self.set_path(path)

    def set_path(self, path):
        """Set the path segments, from a path string.

        The leading '/', if any, is removed.
        """
        if not path:
            return
        if path.startswith('/'):
            path = path[1:]
        self.path = path.split('/')

    @property
    def is_absolute(self):
        return bool(self.host)

    def __str__(self):
        if bool(self.host) != bool(self.port):
            raise ValueError("Either set the host and port or don't. Don't "
                             "set one without setting the other.")

        base = ''
        path = ''
        query = ''

        if self.host:
            scheme = 'https' if self.is_https else 'http'
            base = '%s://%s:%s' % (scheme, self.host, self.port)

        if self.path:
            path = '/' + '/'.join(quote(str(segment))
                                  for segment in self.path)

        if self.query:
            query = str(self.query)

        return base + path + query

    def __repr__(self):
        return 'Uri(%r)' % str(self)


HttpHeader = collections.namedtuple('HttpHeader', ['key', 'value'])


class HttpRequest(object):
    """Represents a request waiting to be executed.

    Attributes:
        url (Uri): URL of the request.
        method (str): one of the HttpMethod values.
        headers (list of HttpHeader): headers, in the order they've been
            added.
        body: content of the request. Encoded in JSON if `content_type` is
            JSON; sent as is if it's BINARY.
        content_type (str): one of the ContentType values. Default to JSON.
    """

    def __init__(self, url=None, method=HttpMethod.GET, body=None,
                 content_type=ContentType.JSON):
        self.url = url
        self.method = method
        self.headers = []
        self.body = body
        self.content_type = content_type

    def add_header(self, key, value):
        """Add an HTTP header.

        Returns:
            HttpRequest: self, to chain the calls.
        """
        self.headers.append(HttpHeader(key, value))
        return self

    def get_header(self, key):
        """Returns the value of the last header named `key`, or None."""
        for header in reversed(self.headers):
            if header.key.lower() == key.lower():
                return header.value
        return None

    def __str__(self):
        return '%s (%s) %s' % (self.method, self.content_type, self.url)
